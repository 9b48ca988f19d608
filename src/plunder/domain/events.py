from dataclasses import dataclass


@dataclass
class ObstacleTriggered:
    location_name: str
    obstacle_name: str
    damage: int
    health_after: int


@dataclass
class EncounterResolved:
    location_name: str
    adversary_name: str
    outcome: str
    rounds: int
    player_health: int
    adversary_health: int


@dataclass
class TreasureLooted:
    location_name: str
    amount: int
    treasure_total: int


@dataclass
class HiddenStashFound:
    location_name: str
    kind: str
    status: str
    amount: int = 0
    item_name: str = ""


@dataclass
class ItemAcquired:
    item_name: str
    source: str


@dataclass
class LevelCompleted:
    level_number: int
    final: bool


@dataclass
class SessionEnded:
    player_name: str
    state: str
    treasure: int
