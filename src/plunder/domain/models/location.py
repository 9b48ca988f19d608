from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from plunder.domain.models.adversary import Adversary, AdversaryTemplate
from plunder.domain.models.player import Player


@dataclass(frozen=True)
class Obstacle:
    name: str
    damage: int

    def __post_init__(self) -> None:
        if self.damage < 0:
            raise ValueError(f"{self.name}: damage must be >= 0")


@dataclass
class Location:
    name: str
    total_treasure: int
    minimum_to_loot: int
    obstacles: List[Obstacle] = field(default_factory=list)
    adversaries: List[AdversaryTemplate] = field(default_factory=list)
    looted_so_far: int = 0

    def __post_init__(self) -> None:
        if self.minimum_to_loot < 0:
            raise ValueError(f"{self.name}: minimum_to_loot must be >= 0")
        if self.minimum_to_loot > self.total_treasure:
            raise ValueError(f"{self.name}: minimum_to_loot cannot exceed total_treasure")

    @property
    def sufficiently_looted(self) -> bool:
        return self.looted_so_far >= self.minimum_to_loot

    def spawn_adversaries(self) -> List[Adversary]:
        return [template.spawn() for template in self.adversaries]


@dataclass
class Level:
    number: int
    locations: List[Location] = field(default_factory=list)

    def remaining(self, player: Player) -> List[Location]:
        return [loc for loc in self.locations if not (player.has_visited(loc.name) and loc.sufficiently_looted)]

    def is_complete(self, player: Player) -> bool:
        return not self.remaining(player)
