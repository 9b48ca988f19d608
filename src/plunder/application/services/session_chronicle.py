from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

from plunder.application.services.combat_service import EncounterOutcome
from plunder.application.services.event_bus import EventBus
from plunder.domain.events import (
    EncounterResolved,
    HiddenStashFound,
    ItemAcquired,
    ObstacleTriggered,
    TreasureLooted,
)

logger = logging.getLogger(__name__)


@dataclass
class SessionChronicle:
    obstacles_survived: int = 0
    adversaries_defeated: int = 0
    encounters_fled: int = 0
    locations_looted: int = 0
    stashes_found: int = 0
    items_acquired: int = 0

    def rows(self) -> list[tuple[str, int]]:
        return [
            ("Obstacles survived", self.obstacles_survived),
            ("Adversaries defeated", self.adversaries_defeated),
            ("Battles fled", self.encounters_fled),
            ("Towns looted", self.locations_looted),
            ("Hidden stashes", self.stashes_found),
            ("Weapons acquired", self.items_acquired),
        ]


def register_chronicle_handlers(event_bus: EventBus, chronicle: SessionChronicle) -> None:
    def _on_obstacle(event: ObstacleTriggered) -> None:
        if event.health_after > 0:
            chronicle.obstacles_survived += 1

    def _on_encounter(event: EncounterResolved) -> None:
        if event.outcome == EncounterOutcome.PLAYER_WON:
            chronicle.adversaries_defeated += 1
        elif event.outcome == EncounterOutcome.PLAYER_FLED:
            chronicle.encounters_fled += 1

    def _on_looted(_event: TreasureLooted) -> None:
        chronicle.locations_looted += 1

    def _on_stash(_event: HiddenStashFound) -> None:
        chronicle.stashes_found += 1

    def _on_item(_event: ItemAcquired) -> None:
        chronicle.items_acquired += 1

    event_bus.subscribe(ObstacleTriggered, _on_obstacle)
    event_bus.subscribe(EncounterResolved, _on_encounter)
    event_bus.subscribe(TreasureLooted, _on_looted)
    event_bus.subscribe(HiddenStashFound, _on_stash)
    event_bus.subscribe(ItemAcquired, _on_item)


def register_event_logging(event_bus: EventBus) -> None:
    def _log_event(event: object) -> None:
        logger.info("%s %s", type(event).__name__, asdict(event))

    event_bus.subscribe_all(_log_event, priority=0)
