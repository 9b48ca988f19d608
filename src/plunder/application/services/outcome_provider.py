from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Optional, Sequence

from plunder.application.services.balance_tables import FLEE_CHANCE, HIDDEN_STASH_CHANCE
from plunder.domain.models.item import Item

logger = logging.getLogger(__name__)


class StashKind(str, Enum):
    HEALTH_POTION = "health_potion"
    ITEM = "item"
    GOLD = "gold"


class OutcomeProvider:
    """Every probability draw of a session goes through one instance of this class.

    Pass a seed (or a ready ``random.Random``) to make a session replayable.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        self.seed = seed

    def _chance(self, name: str, probability: float) -> bool:
        roll = self.rng.random()
        success = roll < probability
        logger.debug("%s draw %.4f vs %.2f -> %s", name, roll, probability, success)
        return success

    def hit_roll(self, accuracy: float) -> bool:
        return self._chance("hit", accuracy)

    def critical_roll(self, chance: float) -> bool:
        return self._chance("critical", chance)

    def flee_roll(self, chance: float = FLEE_CHANCE) -> bool:
        return self._chance("flee", chance)

    def stash_roll(self, chance: float = HIDDEN_STASH_CHANCE) -> bool:
        return self._chance("stash", chance)

    def treasure_amount(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError(f"treasure range is empty: [{low}, {high}]")
        amount = self.rng.randint(low, high)
        logger.debug("treasure draw in [%d, %d] -> %d", low, high, amount)
        return amount

    def stash_kind(self) -> StashKind:
        kind = self.rng.choice(list(StashKind))
        logger.debug("stash kind -> %s", kind.value)
        return kind

    def item_pick(self, items: Sequence[Item]) -> Item:
        if not items:
            raise ValueError("item_pick requires at least one item")
        item = self.rng.choice(list(items))
        logger.debug("item pick among %d -> %s", len(items), item.label)
        return item
