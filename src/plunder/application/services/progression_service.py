from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from plunder.application.dtos import ActionResult, LootOutcome
from plunder.application.services.balance_tables import LEVEL_CLEAR_HEAL_AMOUNT
from plunder.application.services.combat_service import ChooseAction
from plunder.application.services.looting_service import LootingService
from plunder.application.services.outcome_provider import OutcomeProvider
from plunder.application.services.session_chronicle import SessionChronicle
from plunder.domain.events import ItemAcquired, LevelCompleted, SessionEnded
from plunder.domain.models.item import item_catalog
from plunder.domain.models.location import Level, Location
from plunder.domain.models.player import Player

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    IN_PROGRESS = "in_progress"
    VICTORY = "victory"
    DEFEAT = "defeat"


@dataclass(eq=False)
class GameSession:
    """Everything one playthrough mutates. Built by the caller, passed to every operation."""

    player: Player
    levels: List[Level]
    outcomes: OutcomeProvider
    level_index: int = 0
    state: SessionState = SessionState.IN_PROGRESS
    levels_cleared: int = 0
    chronicle: SessionChronicle = field(default_factory=SessionChronicle)
    ended_published: bool = field(default=False, repr=False)

    @property
    def current_level(self) -> Optional[Level]:
        if 0 <= self.level_index < len(self.levels):
            return self.levels[self.level_index]
        return None

    @property
    def is_over(self) -> bool:
        return self.state != SessionState.IN_PROGRESS


def parse_menu_index(raw: object, count: int) -> Optional[int]:
    """Turn a 1-based menu entry into a 0-based index, or None when it is not a valid choice."""
    text = str(raw if raw is not None else "").strip()
    if not text.lstrip("-").isdigit():
        return None
    number = int(text)
    if 1 <= number <= count:
        return number - 1
    return None


class ProgressionService:
    def __init__(
        self,
        looting: LootingService,
        event_publisher: Optional[Callable[[object], None]] = None,
    ) -> None:
        self.looting = looting
        self.event_publisher = event_publisher

    def _publish(self, event: object) -> None:
        if self.event_publisher is not None:
            self.event_publisher(event)

    @staticmethod
    def is_relootable(player: Player, location: Location) -> bool:
        return not (player.has_visited(location.name) and location.sufficiently_looted)

    def start(self, session: GameSession) -> ActionResult:
        result = ActionResult()
        self._settle(session, result)
        return result

    def select_location(self, session: GameSession, raw_choice: object, choose_action: ChooseAction) -> ActionResult:
        if session.is_over:
            return ActionResult(messages=["The voyage is already over."], game_over=True, accepted=False)

        level = session.current_level
        if level is None:
            return ActionResult(messages=["There are no more towns to plunder."], game_over=True, accepted=False)

        index = parse_menu_index(raw_choice, len(level.locations))
        if index is None:
            return ActionResult(messages=["Invalid choice. Please enter a valid number."], accepted=False)

        location = level.locations[index]
        if not self.is_relootable(session.player, location):
            return ActionResult(messages=[f"You've already sufficiently looted {location.name}!"], accepted=False)

        report = self.looting.loot_location(session.player, location, choose_action)
        result = ActionResult(messages=list(report.messages))
        if report.outcome == LootOutcome.FLED:
            logger.info("Player fled from %s", location.name)

        self._settle(session, result)
        return result

    def _settle(self, session: GameSession, result: ActionResult) -> None:
        while not session.is_over:
            if not session.player.alive:
                self._end(session, SessionState.DEFEAT, result)
                break
            level = session.current_level
            if level is None:
                self._end(session, SessionState.VICTORY, result)
                break
            if not level.is_complete(session.player):
                break
            self._advance(session, level, result)
        result.game_over = session.is_over

    def _advance(self, session: GameSession, level: Level, result: ActionResult) -> None:
        final = session.level_index >= len(session.levels) - 1
        session.levels_cleared += 1
        result.messages.append(f"Congratulations! You've conquered Level {level.number}!")
        logger.info("Level %d complete (final=%s)", level.number, final)
        self._publish(LevelCompleted(level_number=level.number, final=final))

        if final:
            session.level_index += 1
            state = SessionState.VICTORY if session.player.alive else SessionState.DEFEAT
            self._end(session, state, result)
            return

        self.grant_level_reward(session, result)
        session.level_index += 1
        next_level = session.current_level
        if next_level is not None:
            result.messages.append(f"--- Entering Level {next_level.number} ---")

    def grant_level_reward(self, session: GameSession, result: ActionResult) -> None:
        player = session.player
        result.messages.append("You found a treasure map to a hidden weapon cache!")
        missing = player.missing_items(item_catalog())
        if missing:
            item = session.outcomes.item_pick(missing)
            player.acquire_item(item)
            result.messages.append(f"You've acquired a {item.label}!")
            self._publish(ItemAcquired(item_name=item.label, source="level_reward"))
        else:
            result.messages.append("...but it seems you already have all the weapons from it.")
        player.heal(LEVEL_CLEAR_HEAL_AMOUNT)
        result.messages.append(f"You also rest and recover your health. Health is now {player.health}.")

    def _end(self, session: GameSession, state: SessionState, result: ActionResult) -> None:
        session.state = state
        player = session.player
        if state == SessionState.VICTORY:
            result.messages.append(
                "You have conquered all the levels and become the most feared pirate on the seven seas!"
            )
        else:
            result.messages.append(f"Captain {player.name}, you have been defeated!")
        result.messages.append(f"Final Treasure: {player.treasure}")
        logger.info("Session ended: %s with %d treasure", state.value, player.treasure)
        if not session.ended_published:
            session.ended_published = True
            self._publish(SessionEnded(player_name=player.name, state=state.value, treasure=player.treasure))
