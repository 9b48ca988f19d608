from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Set

from plunder.domain.models.item import DEFAULT_ITEM, Item

MAX_HEALTH = 100
DEFAULT_PLAYER_NAME = "Captain Fearless"


def normalize_player_name(raw: str | None) -> str:
    name = str(raw or "").strip()
    return name or DEFAULT_PLAYER_NAME


@dataclass
class Player:
    name: str
    health: int = MAX_HEALTH
    treasure: int = 0
    equipped: Item = DEFAULT_ITEM
    owned_items: Set[Item] = field(default_factory=lambda: {DEFAULT_ITEM})
    visited_locations: Set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        self.name = normalize_player_name(self.name)
        self.health = max(0, min(MAX_HEALTH, int(self.health)))
        if self.treasure < 0:
            raise ValueError("treasure must be >= 0")
        self.owned_items = set(self.owned_items)
        self.owned_items.add(DEFAULT_ITEM)
        if self.equipped not in self.owned_items:
            self.owned_items.add(self.equipped)

    @property
    def alive(self) -> bool:
        return self.health > 0

    def take_damage(self, amount: int) -> int:
        """Apply damage and return the health left. Health floors at 0."""
        if amount < 0:
            raise ValueError("damage must be >= 0")
        self.health = max(0, self.health - amount)
        return self.health

    def heal(self, amount: int) -> int:
        if amount < 0:
            raise ValueError("healing must be >= 0")
        self.health = min(MAX_HEALTH, self.health + amount)
        return self.health

    def add_treasure(self, amount: int) -> int:
        if amount < 0:
            raise ValueError("treasure can only grow")
        self.treasure += amount
        return self.treasure

    def owns(self, item: Item) -> bool:
        return item in self.owned_items

    def acquire_item(self, item: Item) -> bool:
        if item in self.owned_items:
            return False
        self.owned_items.add(item)
        return True

    def equip(self, item: Item) -> bool:
        if item not in self.owned_items:
            return False
        self.equipped = item
        return True

    def owned_in_catalog_order(self) -> List[Item]:
        return [item for item in Item if item in self.owned_items]

    def missing_items(self, catalog: Iterable[Item]) -> List[Item]:
        return [item for item in catalog if item not in self.owned_items]

    def mark_visited(self, location_name: str) -> None:
        self.visited_locations.add(location_name)

    def has_visited(self, location_name: str) -> bool:
        return location_name in self.visited_locations
