import io
import sys
from pathlib import Path
import unittest
from unittest import mock

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from plunder.presentation import menu_controls


class MenuControlTests(unittest.TestCase):
    def test_decorate_title_falls_back_to_menu(self) -> None:
        self.assertEqual("[bold yellow]Menu[/bold yellow]", menu_controls.decorate_title("  "))
        self.assertEqual("[bold yellow]Level 1[/bold yellow]", menu_controls.decorate_title("Level 1"))

    def test_numbered_menu_renders_one_based_entries(self) -> None:
        with mock.patch("sys.stdout", new_callable=io.StringIO) as output:
            menu_controls.numbered_menu("Level 1", ["Port Blossom", "Sandy Creek"], footer_hint="Loot them all.")

        text = output.getvalue()
        self.assertIn("1. Port Blossom", text)
        self.assertIn("2. Sandy Creek", text)
        self.assertIn("Loot them all.", text)

    def test_numbered_menu_rejects_empty_options(self) -> None:
        with self.assertRaises(ValueError):
            menu_controls.numbered_menu("Empty", [])

    def test_prompt_returns_raw_input(self) -> None:
        with mock.patch("builtins.input", return_value=" 2 "), mock.patch("sys.stdout", new_callable=io.StringIO):
            self.assertEqual(" 2 ", menu_controls.prompt("Choose:"))

    def test_prompt_lets_end_of_input_propagate(self) -> None:
        with mock.patch("builtins.input", side_effect=EOFError), mock.patch("sys.stdout", new_callable=io.StringIO):
            with self.assertRaises(EOFError):
                menu_controls.prompt("Choose:")

    def test_message_panel_shows_placeholder_when_empty(self) -> None:
        with mock.patch("sys.stdout", new_callable=io.StringIO) as output:
            menu_controls.show_message_panel("Voyage log", ["", "   "])

        self.assertIn("Nothing happens.", output.getvalue())


if __name__ == "__main__":
    unittest.main()
