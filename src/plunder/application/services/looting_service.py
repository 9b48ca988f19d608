from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Optional

from plunder.application.dtos import LootOutcome, LootReport, StashReport, StashStatus
from plunder.application.services.balance_tables import (
    HIDDEN_STASH_CHANCE,
    STASH_GOLD_MAX,
    STASH_GOLD_MIN,
    STASH_HEAL_AMOUNT,
    is_badly_wounded,
)
from plunder.application.services.combat_service import ChooseAction, CombatService, EncounterOutcome
from plunder.application.services.outcome_provider import OutcomeProvider, StashKind
from plunder.domain.events import HiddenStashFound, ItemAcquired, ObstacleTriggered, TreasureLooted
from plunder.domain.models.item import item_catalog
from plunder.domain.models.location import Location
from plunder.domain.models.player import Player

logger = logging.getLogger(__name__)


class LootingService:
    """Runs one visit to a location: obstacles, then battles, then the reward."""

    def __init__(
        self,
        combat: CombatService,
        outcomes: OutcomeProvider,
        event_publisher: Optional[Callable[[object], None]] = None,
    ) -> None:
        self.combat = combat
        self.outcomes = outcomes
        self.event_publisher = event_publisher

    def _publish(self, event: object) -> None:
        if self.event_publisher is not None:
            self.event_publisher(event)

    def loot_location(self, player: Player, location: Location, choose_action: ChooseAction) -> LootReport:
        report = LootReport(location_name=location.name, outcome=LootOutcome.DEFEATED)
        report.messages.append(f"--- Sailing to the town of {location.name} ---")
        report.messages.append(
            f"This town is rumored to hold {location.total_treasure} gold pieces. "
            f"You must collect at least {location.minimum_to_loot} to consider it properly looted."
        )
        player.mark_visited(location.name)

        self._trigger_obstacles(player, location, report)
        if not player.alive:
            report.messages.append(f"You succumbed to the dangers of {location.name}...")
            logger.info("Player fell to obstacles at %s", location.name)
            return report

        queue = deque(location.spawn_adversaries())
        while queue:
            adversary = queue[0]
            report.messages.append(f"A wild {adversary.name} appears! (Health: {adversary.health})")
            result = self.combat.resolve_encounter(player, adversary, choose_action, location_name=location.name)
            report.messages.extend(entry.text for entry in result.log)

            if result.outcome == EncounterOutcome.PLAYER_FLED:
                report.outcome = LootOutcome.FLED
                report.messages.append(f"You escaped {location.name} without its treasure.")
                return report
            if result.outcome == EncounterOutcome.PLAYER_DEFEATED:
                report.outcome = LootOutcome.DEFEATED
                report.messages.append(f"You were defeated in battle by the forces in {location.name}...")
                return report

            queue.popleft()
            report.adversaries_defeated.append(adversary.name)
            report.messages.append(f"You defeated the {adversary.name}!")

        report.outcome = LootOutcome.LOOTED
        self._collect_treasure(player, location, report)
        self._search_hidden_stash(player, location, report)
        return report

    def _trigger_obstacles(self, player: Player, location: Location, report: LootReport) -> None:
        for obstacle in location.obstacles:
            if not player.alive:
                break
            player.take_damage(obstacle.damage)
            report.obstacles_triggered.append(obstacle.name)
            report.messages.append(
                f"Watch out! You've encountered a {obstacle.name}! "
                f"You took {obstacle.damage} damage! Your health is now {player.health}."
            )
            if is_badly_wounded(player.health):
                report.messages.append("You're badly wounded! You should search for a health potion before fighting.")
            self._publish(
                ObstacleTriggered(
                    location_name=location.name,
                    obstacle_name=obstacle.name,
                    damage=obstacle.damage,
                    health_after=player.health,
                )
            )

    def _collect_treasure(self, player: Player, location: Location, report: LootReport) -> None:
        found = self.outcomes.treasure_amount(location.minimum_to_loot, location.total_treasure)
        # The last successful visit decides the looted amount.
        location.looted_so_far = found
        player.add_treasure(found)
        report.treasure_found = found
        report.messages.append(f"You looted {found} gold pieces from {location.name}!")
        report.messages.append(f"Your total treasure is now {player.treasure} gold pieces.")
        logger.info("Looted %d gold at %s (total %d)", found, location.name, player.treasure)
        self._publish(TreasureLooted(location_name=location.name, amount=found, treasure_total=player.treasure))

    def _search_hidden_stash(self, player: Player, location: Location, report: LootReport) -> None:
        if not self.outcomes.stash_roll(HIDDEN_STASH_CHANCE):
            return
        report.messages.append("You found a hidden stash!")
        kind = self.outcomes.stash_kind()

        if kind == StashKind.HEALTH_POTION:
            player.heal(STASH_HEAL_AMOUNT)
            stash = StashReport(kind=kind.value, amount=STASH_HEAL_AMOUNT)
            report.messages.append("It's a health potion! You feel invigorated.")
        elif kind == StashKind.ITEM:
            item = self.outcomes.item_pick(item_catalog())
            if player.acquire_item(item):
                stash = StashReport(kind=kind.value, item=item)
                report.messages.append(f"You've acquired a {item.label}!")
                self._publish(ItemAcquired(item_name=item.label, source="hidden_stash"))
            else:
                stash = StashReport(kind=kind.value, status=StashStatus.ALREADY_OWNED, item=item)
                report.messages.append(f"You already have a {item.label}! You can't acquire it again.")
        else:
            extra = self.outcomes.treasure_amount(STASH_GOLD_MIN, STASH_GOLD_MAX)
            player.add_treasure(extra)
            stash = StashReport(kind=kind.value, amount=extra)
            report.messages.append(f"It's a bag of gold! You found {extra} gold pieces!")
            report.messages.append(f"Your total treasure is now {player.treasure} gold pieces.")

        report.stash = stash
        self._publish(
            HiddenStashFound(
                location_name=location.name,
                kind=stash.kind,
                status=stash.status.value,
                amount=stash.amount,
                item_name=stash.item.label if stash.item is not None else "",
            )
        )
