from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from plunder.application.services.game_service import GameService
from plunder.application.services.progression_service import GameSession, parse_menu_index
from plunder.presentation.game_loop import run_game_loop
from plunder.presentation.menu_controls import decorate_title, numbered_menu, prompt, show_message_panel


_CONSOLE = Console()
_SPLASH_BORDER = "yellow"
_HELP_BORDER = "yellow"
_VICTORY_BORDER = "green"
_DEFEAT_BORDER = "red"
_EXIT_BORDER = "magenta"

_HELP_LINES = [
    "[bold]How to plunder[/bold]",
    "- Pick a town by number. Obstacles strike first, then its defenders attack one by one.",
    "- In battle: 1 attacks with your weapon, 2 tries to flee (40% chance).",
    "- Fleeing leaves the town unlooted; come back later to try again.",
    "- Clear every town in a level to find a weapon cache and rest.",
    "- Set PLUNDER_SEED for a replayable voyage.",
]


def _show_main_splash() -> None:
    _CONSOLE.print(
        Panel.fit(
            "[bold yellow]PIRATE'S LOOT[/bold yellow]",
            border_style=_SPLASH_BORDER,
            title=decorate_title("Main Menu"),
        )
    )


def render_session_summary(game_service: GameService, session: GameSession) -> None:
    summary = game_service.get_session_summary(session)
    victory = summary.state == "victory"
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold yellow", justify="right")
    table.add_column()
    table.add_row("Captain", escape(summary.player_name))
    table.add_row("Levels cleared", f"{summary.levels_cleared}/{summary.level_count}")
    table.add_row("Final Treasure", str(summary.treasure))
    for label, value in summary.stats:
        table.add_row(label, str(value))
    _CONSOLE.print(
        Panel.fit(
            table,
            title=decorate_title("VICTORY" if victory else "GAME OVER"),
            border_style=_VICTORY_BORDER if victory else _DEFEAT_BORDER,
        )
    )


def start_new_game(game_service: GameService) -> GameSession:
    name = prompt("Enter your pirate's name:")
    session, result = game_service.new_session(name)
    show_message_panel("Welcome aboard", [escape(line) for line in result.messages])
    run_game_loop(game_service, session)
    render_session_summary(game_service, session)
    return session


def main_menu(game_service: GameService) -> None:
    options = ["New Voyage", "Help", "Quit"]
    _show_main_splash()

    while True:
        numbered_menu("Pirate's Loot", options)
        choice_idx = parse_menu_index(prompt("Choose an option:"), len(options))

        if choice_idx == 0:
            start_new_game(game_service)

        elif choice_idx == 1:
            _CONSOLE.print(
                Panel.fit(
                    "\n".join(_HELP_LINES),
                    title=decorate_title("Guidance"),
                    border_style=_HELP_BORDER,
                )
            )

        elif choice_idx == 2:
            _CONSOLE.print(
                Panel.fit(
                    "[bold magenta]Fair winds, Captain![/bold magenta]",
                    title=decorate_title("Farewell"),
                    border_style=_EXIT_BORDER,
                )
            )
            break

        else:
            _CONSOLE.print("[yellow]Invalid choice. Please enter a valid number.[/yellow]")
