"""Panel rendering helpers."""

from __future__ import annotations

from rich.panel import Panel
from rich.text import Text

BOARD_TITLE = "KANBARS - JIRA Board (press 'q' to quit)"

STATUS_BORDER = {
    "ok": "cyan",
    "error": "red",
}


def border_for(status: str) -> str:
    return STATUS_BORDER.get(status, "cyan")


def empty_panel(title: str, message: str = "No data") -> Panel:
    return Panel(Text(message, style="dim"), title=f"[bold]{title}[/bold]", border_style="cyan")


def error_suffix(errors: list[str]) -> str:
    if not errors:
        return ""
    return f" ({'; '.join(errors[:1])})"
