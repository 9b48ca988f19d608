from __future__ import annotations

from enum import Enum
from typing import List


class Item(Enum):
    """Weapons the pirate can carry. Shared by every session and never copied."""

    CUTLASS = ("cutlass", 15, 0.75)
    PISTOL = ("pistol", 30, 0.65)
    BLUNDERBUSS = ("blunderbuss", 50, 0.45)
    CANNON = ("cannon", 100, 0.25)

    def __init__(self, label: str, damage: int, accuracy: float) -> None:
        self.label = label
        self.damage = damage
        self.accuracy = accuracy

    @property
    def accuracy_percent(self) -> int:
        return int(round(self.accuracy * 100))


DEFAULT_ITEM = Item.CUTLASS


def item_catalog() -> List[Item]:
    return list(Item)
