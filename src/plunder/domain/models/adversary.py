from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ELITE_CRITICAL_CHANCE = 0.20
ELITE_CRITICAL_MULTIPLIER = 2


class AdversaryVariant(str, Enum):
    BASIC = "basic"
    ELITE = "elite"


@dataclass(frozen=True)
class AdversaryTemplate:
    """Read-only content row. Every encounter fights a spawned copy."""

    name: str
    health: int
    damage: int
    accuracy: float
    variant: AdversaryVariant = AdversaryVariant.BASIC
    critical_chance: float | None = None
    critical_multiplier: int | None = None

    def __post_init__(self) -> None:
        if self.health < 0:
            raise ValueError(f"{self.name}: health must be >= 0")
        if self.damage < 0:
            raise ValueError(f"{self.name}: damage must be >= 0")
        if not 0.0 <= self.accuracy <= 1.0:
            raise ValueError(f"{self.name}: accuracy must be within [0, 1]")
        elite = self.variant == AdversaryVariant.ELITE
        if self.critical_chance is None:
            object.__setattr__(self, "critical_chance", ELITE_CRITICAL_CHANCE if elite else 0.0)
        if self.critical_multiplier is None:
            object.__setattr__(self, "critical_multiplier", ELITE_CRITICAL_MULTIPLIER if elite else 1)

    def spawn(self) -> "Adversary":
        return Adversary(
            name=self.name,
            health=self.health,
            damage=self.damage,
            accuracy=self.accuracy,
            variant=self.variant,
            critical_chance=float(self.critical_chance or 0.0),
            critical_multiplier=int(self.critical_multiplier or 1),
        )


def soldier(name: str, health: int, damage: int, accuracy: float) -> AdversaryTemplate:
    return AdversaryTemplate(name, health, damage, accuracy, AdversaryVariant.BASIC)


def mercenary(name: str, health: int, damage: int, accuracy: float) -> AdversaryTemplate:
    return AdversaryTemplate(name, health, damage, accuracy, AdversaryVariant.ELITE)


@dataclass
class Adversary:
    name: str
    health: int
    damage: int
    accuracy: float
    variant: AdversaryVariant = AdversaryVariant.BASIC
    critical_chance: float = 0.0
    critical_multiplier: int = 1

    @property
    def alive(self) -> bool:
        return self.health > 0

    @property
    def is_elite(self) -> bool:
        return self.variant == AdversaryVariant.ELITE

    def take_damage(self, amount: int) -> int:
        if amount < 0:
            raise ValueError("damage must be >= 0")
        self.health = max(0, self.health - amount)
        return self.health
