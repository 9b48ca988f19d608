from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from plunder.application.dtos import PlayerTurn
from plunder.application.services.balance_tables import FLEE_CHANCE
from plunder.application.services.outcome_provider import OutcomeProvider
from plunder.domain.events import EncounterResolved
from plunder.domain.models.adversary import Adversary
from plunder.domain.models.player import Player

logger = logging.getLogger(__name__)

ChooseAction = Callable[[Player, Adversary, int], PlayerTurn]


class EncounterOutcome(str, Enum):
    PLAYER_WON = "player_won"
    PLAYER_FLED = "player_fled"
    PLAYER_DEFEATED = "player_defeated"


class BattleAction(str, Enum):
    ATTACK = "attack"
    FLEE = "flee"


_ACTION_ALIASES = {
    "1": BattleAction.ATTACK,
    "a": BattleAction.ATTACK,
    "attack": BattleAction.ATTACK,
    "2": BattleAction.FLEE,
    "f": BattleAction.FLEE,
    "flee": BattleAction.FLEE,
}


def normalize_battle_action(raw: object) -> Optional[BattleAction]:
    if isinstance(raw, BattleAction):
        return raw
    return _ACTION_ALIASES.get(str(raw or "").strip().lower())


@dataclass
class CombatLogEntry:
    text: str


@dataclass
class CombatResult:
    player: Player
    adversary: Adversary
    outcome: EncounterOutcome
    log: List[CombatLogEntry] = field(default_factory=list)
    rounds: int = 0

    @property
    def player_won(self) -> bool:
        return self.outcome == EncounterOutcome.PLAYER_WON

    @property
    def fled(self) -> bool:
        return self.outcome == EncounterOutcome.PLAYER_FLED


class CombatService:
    def __init__(
        self,
        outcomes: OutcomeProvider,
        verbosity: str = "compact",
        event_publisher: Optional[Callable[[object], None]] = None,
    ) -> None:
        self.outcomes = outcomes
        self.verbosity = verbosity  # compact | normal | debug
        self.event_publisher = event_publisher

    def _log(self, log: List[CombatLogEntry], text: str, level: str = "compact") -> None:
        order = {"compact": 0, "normal": 1, "debug": 2}
        current = order.get(self.verbosity, 0)
        needed = order.get(level, 0)
        if current >= needed:
            log.append(CombatLogEntry(text))

    def _apply_item_choice(self, player: Player, turn: PlayerTurn, log: List[CombatLogEntry]) -> None:
        if turn.item is None or turn.item == player.equipped:
            return
        if player.equip(turn.item):
            self._log(log, f"You switch to your {turn.item.label}.", level="compact")
        else:
            self._log(log, f"You don't own a {turn.item.label}. Keeping your {player.equipped.label}.", level="compact")

    def player_attack(self, player: Player, adversary: Adversary, log: List[CombatLogEntry]) -> bool:
        item = player.equipped
        if not self.outcomes.hit_roll(item.accuracy):
            self._log(log, "Your attack missed!", level="compact")
            return False
        adversary.take_damage(item.damage)
        self._log(
            log,
            f"You dealt {item.damage} damage to the {adversary.name}! Its health is now {adversary.health}.",
            level="compact",
        )
        return True

    def adversary_attack(self, adversary: Adversary, player: Player, log: List[CombatLogEntry]) -> int:
        """Resolve the adversary's swing and return the damage actually applied."""
        self._log(log, f"{adversary.name}'s turn!", level="normal")
        if not self.outcomes.hit_roll(adversary.accuracy):
            self._log(log, f"{adversary.name}'s attack missed!", level="compact")
            return 0

        damage = adversary.damage
        if adversary.is_elite and self.outcomes.critical_roll(adversary.critical_chance):
            damage *= adversary.critical_multiplier
            self._log(log, f"The {adversary.name} lands a critical hit!", level="compact")

        player.take_damage(damage)
        self._log(
            log,
            f"{adversary.name} dealt {damage} damage to you! Your health is now {player.health}.",
            level="compact",
        )
        return damage

    def resolve_encounter(
        self,
        player: Player,
        adversary: Adversary,
        choose_action: ChooseAction,
        location_name: str = "",
    ) -> CombatResult:
        log: List[CombatLogEntry] = []
        round_no = 0

        while player.alive and adversary.alive:
            round_no += 1
            self._log(log, f"-- Round {round_no} --", level="debug")

            turn = choose_action(player, adversary, round_no)
            self._apply_item_choice(player, turn, log)
            action = normalize_battle_action(turn.action)

            if action == BattleAction.ATTACK:
                self.player_attack(player, adversary, log)
            elif action == BattleAction.FLEE:
                if self.outcomes.flee_roll(FLEE_CHANCE):
                    self._log(log, "You successfully fled from the battle!", level="compact")
                    return self._finish(player, adversary, EncounterOutcome.PLAYER_FLED, log, round_no, location_name)
                self._log(log, "You failed to flee!", level="compact")
            else:
                self._log(log, "Invalid choice. You hesitate and do nothing.", level="compact")

            if not adversary.alive:
                break

            self.adversary_attack(adversary, player, log)

        if player.alive and not adversary.alive:
            outcome = EncounterOutcome.PLAYER_WON
        else:
            outcome = EncounterOutcome.PLAYER_DEFEATED
        return self._finish(player, adversary, outcome, log, round_no, location_name)

    def _finish(
        self,
        player: Player,
        adversary: Adversary,
        outcome: EncounterOutcome,
        log: List[CombatLogEntry],
        rounds: int,
        location_name: str,
    ) -> CombatResult:
        logger.info("Encounter with %s ended: %s after %d rounds", adversary.name, outcome.value, rounds)
        if self.event_publisher is not None:
            self.event_publisher(
                EncounterResolved(
                    location_name=location_name,
                    adversary_name=adversary.name,
                    outcome=outcome.value,
                    rounds=rounds,
                    player_health=player.health,
                    adversary_health=adversary.health,
                )
            )
        return CombatResult(player=player, adversary=adversary, outcome=outcome, log=log, rounds=rounds)
