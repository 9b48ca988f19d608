import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from plunder.domain.models.item import DEFAULT_ITEM, Item, item_catalog
from plunder.domain.models.player import DEFAULT_PLAYER_NAME, MAX_HEALTH, Player


class PlayerModelTests(unittest.TestCase):
    def test_new_player_starts_with_full_health_and_default_item(self) -> None:
        player = Player(name="Anne")

        self.assertEqual(MAX_HEALTH, player.health)
        self.assertEqual(0, player.treasure)
        self.assertIs(DEFAULT_ITEM, player.equipped)
        self.assertEqual({Item.CUTLASS}, player.owned_items)
        self.assertEqual(set(), player.visited_locations)

    def test_blank_name_falls_back_to_default(self) -> None:
        self.assertEqual(DEFAULT_PLAYER_NAME, Player(name="   ").name)
        self.assertEqual(DEFAULT_PLAYER_NAME, Player(name="").name)

    def test_take_damage_clamps_at_zero(self) -> None:
        for damage in (0, 1, 37, 99, 100, 101, 150, 10_000):
            player = Player(name="Anne", health=100)
            player.take_damage(damage)
            self.assertEqual(max(0, 100 - damage), player.health)
            self.assertGreaterEqual(player.health, 0)

    def test_health_reaching_zero_means_dead(self) -> None:
        player = Player(name="Anne", health=10)
        player.take_damage(10)

        self.assertEqual(0, player.health)
        self.assertFalse(player.alive)

    def test_negative_damage_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Player(name="Anne").take_damage(-5)

    def test_heal_never_exceeds_max_health(self) -> None:
        player = Player(name="Anne", health=90)
        player.heal(30)
        self.assertEqual(MAX_HEALTH, player.health)

        player = Player(name="Anne", health=20)
        player.heal(30)
        self.assertEqual(50, player.health)

    def test_treasure_only_grows(self) -> None:
        player = Player(name="Anne")
        seen = [player.treasure]
        for amount in (0, 50, 73, 100):
            player.add_treasure(amount)
            seen.append(player.treasure)

        self.assertEqual(sorted(seen), seen)
        with self.assertRaises(ValueError):
            player.add_treasure(-1)
        self.assertEqual(223, player.treasure)

    def test_acquiring_an_owned_item_reports_false_and_changes_nothing(self) -> None:
        player = Player(name="Anne")

        self.assertTrue(player.acquire_item(Item.PISTOL))
        self.assertFalse(player.acquire_item(Item.PISTOL))
        self.assertFalse(player.acquire_item(Item.CUTLASS))
        self.assertEqual({Item.CUTLASS, Item.PISTOL}, player.owned_items)

    def test_only_owned_items_can_be_equipped(self) -> None:
        player = Player(name="Anne")

        self.assertFalse(player.equip(Item.CANNON))
        self.assertIs(Item.CUTLASS, player.equipped)

        player.acquire_item(Item.CANNON)
        self.assertTrue(player.equip(Item.CANNON))
        self.assertIs(Item.CANNON, player.equipped)

    def test_missing_items_follow_catalog_order(self) -> None:
        player = Player(name="Anne")
        player.acquire_item(Item.BLUNDERBUSS)

        self.assertEqual([Item.PISTOL, Item.CANNON], player.missing_items(item_catalog()))
        self.assertEqual([Item.CUTLASS, Item.BLUNDERBUSS], player.owned_in_catalog_order())

    def test_visiting_is_idempotent(self) -> None:
        player = Player(name="Anne")
        player.mark_visited("Port Blossom")
        player.mark_visited("Port Blossom")

        self.assertTrue(player.has_visited("Port Blossom"))
        self.assertEqual({"Port Blossom"}, player.visited_locations)

    def test_item_catalog_matches_weapon_table(self) -> None:
        self.assertEqual([Item.CUTLASS, Item.PISTOL, Item.BLUNDERBUSS, Item.CANNON], item_catalog())
        self.assertEqual((15, 0.75), (Item.CUTLASS.damage, Item.CUTLASS.accuracy))
        self.assertEqual((100, 0.25), (Item.CANNON.damage, Item.CANNON.accuracy))
        self.assertEqual(65, Item.PISTOL.accuracy_percent)


if __name__ == "__main__":
    unittest.main()
