from __future__ import annotations

FLEE_CHANCE = 0.40

HIDDEN_STASH_CHANCE = 0.40
STASH_HEAL_AMOUNT = 30
STASH_GOLD_MIN = 50
STASH_GOLD_MAX = 100

LEVEL_CLEAR_HEAL_AMOUNT = 50

WOUNDED_WARNING_THRESHOLD = 50


def is_badly_wounded(health: int) -> bool:
    return 0 < health < WOUNDED_WARNING_THRESHOLD
