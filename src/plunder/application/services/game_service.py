from __future__ import annotations

import logging
import weakref
from typing import Callable, Optional

from plunder.application.dtos import ActionResult, BattleView, ItemOptionView, LevelView, PlayerView, SessionSummaryView
from plunder.application.mappers.game_service_mapper import (
    to_battle_view,
    to_item_option_views,
    to_level_view,
    to_player_view,
)
from plunder.application.services.combat_service import ChooseAction, CombatService
from plunder.application.services.event_bus import EventBus
from plunder.application.services.looting_service import LootingService
from plunder.application.services.outcome_provider import OutcomeProvider
from plunder.application.services.progression_service import GameSession, ProgressionService, parse_menu_index
from plunder.application.services.seed_policy import session_seed
from plunder.application.services.session_chronicle import register_chronicle_handlers
from plunder.domain.models.adversary import Adversary
from plunder.domain.models.item import Item
from plunder.domain.models.player import Player, normalize_player_name
from plunder.domain.repositories import LevelRepository

logger = logging.getLogger(__name__)


class GameService:
    def __init__(
        self,
        level_repo: LevelRepository,
        event_bus: Optional[EventBus] = None,
        base_seed: Optional[int] = None,
        verbosity: str = "compact",
        outcome_factory: Optional[Callable[[Optional[int]], OutcomeProvider]] = None,
    ) -> None:
        self.level_repo = level_repo
        self.event_bus = event_bus or EventBus()
        self.base_seed = base_seed
        self.verbosity = verbosity
        self.outcome_factory = outcome_factory or (lambda seed: OutcomeProvider(seed=seed))
        self._sessions_started = 0
        self._progressions: "weakref.WeakKeyDictionary[GameSession, ProgressionService]" = weakref.WeakKeyDictionary()

    def _session_bus(self, session: GameSession) -> EventBus:
        """Events of one session feed its own chronicle, then reach the shared bus."""
        bus = EventBus()
        register_chronicle_handlers(bus, session.chronicle)
        bus.subscribe_all(self.event_bus.publish, priority=1000)
        return bus

    def _build_progression(self, session: GameSession) -> ProgressionService:
        publish = self._session_bus(session).publish
        outcomes = session.outcomes
        combat = CombatService(outcomes, verbosity=self.verbosity, event_publisher=publish)
        looting = LootingService(combat, outcomes, event_publisher=publish)
        return ProgressionService(looting, event_publisher=publish)

    def _progression_for(self, session: GameSession) -> ProgressionService:
        progression = self._progressions.get(session)
        if progression is None:
            progression = self._build_progression(session)
            self._progressions[session] = progression
        return progression

    # --- commands -----------------------------------------------------------

    def new_session(self, name: str | None) -> tuple[GameSession, ActionResult]:
        self._sessions_started += 1
        seed = session_seed(self.base_seed, self._sessions_started)
        outcomes = self.outcome_factory(seed)
        player = Player(name=normalize_player_name(name))
        session = GameSession(player=player, levels=self.level_repo.list_levels(), outcomes=outcomes)
        logger.info("New session for %s (seed=%s, levels=%d)", player.name, seed, len(session.levels))

        result = self._progression_for(session).start(session)
        result.messages.insert(0, f"Welcome, Captain {player.name}!")
        return session, result

    def choose_location_intent(self, session: GameSession, raw_choice: object, choose_action: ChooseAction) -> ActionResult:
        return self._progression_for(session).select_location(session, raw_choice, choose_action)

    def resolve_item_choice_intent(self, session: GameSession, raw_choice: object) -> tuple[Optional[Item], str]:
        """Map a menu entry to an owned item. ``None`` means keep the current one."""
        player = session.player
        owned = player.owned_in_catalog_order()
        index = parse_menu_index(raw_choice, len(owned))
        if index is None:
            return None, f"Invalid choice. Keeping your {player.equipped.label}."
        item = owned[index]
        return item, f"You've switched weapons to {item.label}."

    # --- queries ------------------------------------------------------------

    def get_player_view(self, session: GameSession) -> PlayerView:
        return to_player_view(session.player)

    def get_level_view(self, session: GameSession) -> Optional[LevelView]:
        level = session.current_level
        if level is None:
            return None
        return to_level_view(level, len(session.levels), session.player)

    def list_item_options(self, session: GameSession) -> list[ItemOptionView]:
        return to_item_option_views(session.player)

    def battle_view_intent(self, round_no: int, player: Player, adversary: Adversary) -> BattleView:
        return to_battle_view(round_no, player, adversary)

    def get_session_summary(self, session: GameSession) -> SessionSummaryView:
        return SessionSummaryView(
            player_name=session.player.name,
            state=session.state.value,
            treasure=session.player.treasure,
            levels_cleared=session.levels_cleared,
            level_count=len(session.levels),
            stats=session.chronicle.rows(),
        )
