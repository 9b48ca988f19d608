from rich.console import Console
from rich.panel import Panel


_CONSOLE = Console()
_MENU_BORDER = "yellow"


def decorate_title(title: str) -> str:
    core = str(title or "").strip()
    if not core:
        core = "Menu"
    return f"[bold yellow]{core}[/bold yellow]"


def prompt(message: str) -> str:
    return _CONSOLE.input(f"[bold]{message}[/bold] ")


def numbered_menu(
    title: str,
    options: list[str],
    footer_hint: str | None = None,
    border_style: str = _MENU_BORDER,
) -> None:
    """Render options as a 1-based numbered list inside a panel."""

    if not options:
        raise ValueError("numbered_menu requires at least one option")

    body_lines = [f"[yellow]{idx}.[/yellow] {option}" for idx, option in enumerate(options, start=1)]
    if footer_hint:
        body_lines.append("")
        body_lines.append(f"[dim]{footer_hint}[/dim]")
    _CONSOLE.print(
        Panel.fit(
            "\n".join(body_lines),
            title=decorate_title(title),
            border_style=border_style,
            padding=(0, 1),
        )
    )


def show_message_panel(title: str, lines: list[str], *, border_style: str = _MENU_BORDER) -> None:
    rows = [str(line) for line in lines if str(line).strip()]
    body = "\n".join(rows) if rows else "Nothing happens."
    _CONSOLE.print(Panel.fit(body, title=decorate_title(title), border_style=border_style))
