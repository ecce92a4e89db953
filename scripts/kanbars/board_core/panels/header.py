"""Header renderer."""

from __future__ import annotations

from datetime import datetime

from rich.markup import escape
from rich.panel import Panel

from board_core.formatting import compact_relative_age
from board_core.panels import BOARD_TITLE, border_for, error_suffix


def render(
    jql: str,
    total: int,
    layout_kind: str,
    refresh_seconds: int,
    updated_at: datetime | None = None,
    paused: bool = False,
    errors: list[str] | None = None,
    now: datetime | None = None,
) -> Panel:
    if updated_at is None:
        updated = "never"
    else:
        age = ((now or datetime.now()) - updated_at).total_seconds()
        updated = f"{updated_at.strftime('%H:%M:%S')} ({compact_relative_age(age)})"
    refresh = "[bold yellow]PAUSED[/bold yellow]" if paused else f"every {refresh_seconds}s"
    text = (
        f"Tickets: [bold]{total}[/bold]   "
        f"Updated: [bold]{updated}[/bold]   "
        f"Refresh: [bold]{refresh}[/bold]   "
        f"Layout: [bold]{layout_kind}[/bold]\n"
        f"[dim]{escape(jql)}[/dim]"
    )
    status = "ok"
    if errors:
        status = "error"
        text += f"\n[red]Last refresh failed{escape(error_suffix(errors))}[/red]"
    text += "\n[dim]q quit  r refresh  p pause[/dim]"
    return Panel(text, title=f"[bold]{BOARD_TITLE}[/bold]", border_style=border_for(status))
