import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from plunder.application.services.combat_service import EncounterOutcome
from plunder.application.services.event_bus import EventBus
from plunder.application.services.session_chronicle import (
    SessionChronicle,
    register_chronicle_handlers,
    register_event_logging,
)
from plunder.domain.events import (
    EncounterResolved,
    HiddenStashFound,
    ItemAcquired,
    ObstacleTriggered,
    SessionEnded,
    TreasureLooted,
)


def _encounter(outcome: EncounterOutcome) -> EncounterResolved:
    return EncounterResolved(
        location_name="Port Blossom",
        adversary_name="Town Guard",
        outcome=outcome.value,
        rounds=2,
        player_health=80,
        adversary_health=0,
    )


class SessionChronicleTests(unittest.TestCase):
    def test_counters_follow_published_events(self) -> None:
        bus = EventBus()
        chronicle = SessionChronicle()
        register_chronicle_handlers(bus, chronicle)

        bus.publish(ObstacleTriggered("Port Blossom", "Quicksand", 5, 95))
        bus.publish(ObstacleTriggered("Volcano's Heart", "Lava Geyser", 50, 0))
        bus.publish(_encounter(EncounterOutcome.PLAYER_WON))
        bus.publish(_encounter(EncounterOutcome.PLAYER_FLED))
        bus.publish(_encounter(EncounterOutcome.PLAYER_DEFEATED))
        bus.publish(TreasureLooted("Port Blossom", 50, 50))
        bus.publish(HiddenStashFound("Port Blossom", kind="gold", status="applied", amount=70))
        bus.publish(ItemAcquired(item_name="pistol", source="hidden_stash"))

        self.assertEqual(1, chronicle.obstacles_survived)
        self.assertEqual(1, chronicle.adversaries_defeated)
        self.assertEqual(1, chronicle.encounters_fled)
        self.assertEqual(1, chronicle.locations_looted)
        self.assertEqual(1, chronicle.stashes_found)
        self.assertEqual(1, chronicle.items_acquired)

    def test_new_chronicle_starts_at_zero(self) -> None:
        rows = SessionChronicle().rows()

        self.assertEqual(6, len(rows))
        self.assertTrue(all(value == 0 for _, value in rows))

    def test_event_logging_records_every_event(self) -> None:
        bus = EventBus()
        register_event_logging(bus)

        with self.assertLogs("plunder.application.services.session_chronicle", level="INFO") as captured:
            bus.publish(SessionEnded(player_name="Anne", state="victory", treasure=420))

        self.assertIn("SessionEnded", captured.output[0])
        self.assertIn("420", captured.output[0])


if __name__ == "__main__":
    unittest.main()
