from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from plunder.domain.models.item import Item


@dataclass
class ActionResult:
    messages: List[str] = field(default_factory=list)
    game_over: bool = False
    accepted: bool = True


@dataclass(frozen=True)
class PlayerTurn:
    """What the player wants to do this round. ``item`` switches weapons before acting."""

    action: str
    item: Optional[Item] = None


class LootOutcome(str, Enum):
    LOOTED = "looted"
    FLED = "fled"
    DEFEATED = "defeated"


class StashStatus(str, Enum):
    APPLIED = "applied"
    ALREADY_OWNED = "already_owned"


@dataclass
class StashReport:
    kind: str
    status: StashStatus = StashStatus.APPLIED
    amount: int = 0
    item: Optional[Item] = None


@dataclass
class LootReport:
    location_name: str
    outcome: LootOutcome
    messages: List[str] = field(default_factory=list)
    obstacles_triggered: List[str] = field(default_factory=list)
    adversaries_defeated: List[str] = field(default_factory=list)
    treasure_found: int = 0
    stash: Optional[StashReport] = None


@dataclass
class PlayerView:
    name: str
    health: int
    treasure: int
    equipped: str
    items: List[str] = field(default_factory=list)


@dataclass
class LocationView:
    index: int
    name: str
    total_treasure: int
    minimum_to_loot: int
    status: str = ""


@dataclass
class LevelView:
    number: int
    level_count: int
    locations: List[LocationView] = field(default_factory=list)


@dataclass
class ItemOptionView:
    index: int
    label: str
    damage: int
    accuracy_percent: int
    equipped: bool = False


@dataclass
class BattleView:
    round_no: int
    player_health: int
    adversary_name: str
    adversary_health: int
    equipped: str


@dataclass
class SessionSummaryView:
    player_name: str
    state: str
    treasure: int
    levels_cleared: int
    level_count: int
    stats: List[tuple] = field(default_factory=list)
