from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from plunder.application.dtos import PlayerTurn
from plunder.application.services.game_service import GameService
from plunder.application.services.progression_service import GameSession
from plunder.presentation.menu_controls import decorate_title, numbered_menu, prompt, show_message_panel

_CONSOLE = Console()
_BORDER_LEVEL = "yellow"
_BORDER_BATTLE = "red"
_BORDER_LOOT = "green"
_BORDER_REJECTED = "magenta"


def _render_status(game_service: GameService, session: GameSession) -> None:
    view = game_service.get_player_view(session)
    level = game_service.get_level_view(session)
    header = Table.grid(padding=(0, 1))
    header.add_column(style="bold yellow", justify="right")
    header.add_column(style="white")
    header.add_row("Captain", escape(view.name))
    if level is not None:
        header.add_row("Level", f"{level.number}/{level.level_count}")
    header.add_row("Health", str(view.health))
    header.add_row("Treasure", str(view.treasure))
    header.add_row("Weapon", view.equipped)
    _CONSOLE.print(
        Panel.fit(header, title=decorate_title("Your stats"), border_style=_BORDER_LEVEL)
    )


def _render_towns(game_service: GameService, session: GameSession) -> int:
    level = game_service.get_level_view(session)
    if level is None:
        return 0
    options = []
    for loc in level.locations:
        status = f" [dim]{escape(loc.status)}[/dim]" if loc.status else ""
        options.append(f"{escape(loc.name)} ({loc.minimum_to_loot}-{loc.total_treasure} gold){status}")
    numbered_menu(f"Level {level.number}", options, footer_hint="Loot every town to sail on.")
    return len(options)


def _make_battle_prompt(game_service: GameService, session: GameSession):
    def _choose(player, adversary, round_no: int) -> PlayerTurn:
        battle = game_service.battle_view_intent(round_no, player, adversary)
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Your health", str(battle.player_health))
        table.add_row(f"{escape(battle.adversary_name)}'s health", str(battle.adversary_health))
        _CONSOLE.print(
            Panel.fit(table, title=decorate_title(f"Battle - Round {battle.round_no}"), border_style=_BORDER_BATTLE)
        )

        item = None
        options = game_service.list_item_options(session)
        if len(options) > 1:
            numbered_menu(
                "Choose your weapon",
                [
                    f"{opt.label} (Damage: {opt.damage}, Accuracy: {opt.accuracy_percent}%)"
                    + (" [dim]equipped[/dim]" if opt.equipped else "")
                    for opt in options
                ],
            )
            item, feedback = game_service.resolve_item_choice_intent(session, prompt("Enter weapon number:"))
            _CONSOLE.print(feedback)

        weapon = item.label if item is not None else battle.equipped
        numbered_menu("Your turn! What do you do?", [f"Attack with {weapon}", "Try to flee"])
        return PlayerTurn(action=prompt("Enter your choice:"), item=item)

    return _choose


def run_game_loop(game_service: GameService, session: GameSession) -> None:
    choose_action = _make_battle_prompt(game_service, session)

    while not session.is_over:
        _render_status(game_service, session)
        _render_towns(game_service, session)
        choice = prompt("Choose a town to loot (enter number):")
        result = game_service.choose_location_intent(session, choice, choose_action)

        if not result.accepted:
            show_message_panel("Hold fast", [escape(line) for line in result.messages], border_style=_BORDER_REJECTED)
            continue
        show_message_panel("Voyage log", [escape(line) for line in result.messages], border_style=_BORDER_LOOT)
