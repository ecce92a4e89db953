"""Plain-text board output for one-shot mode (e.g. under `watch`)."""

from __future__ import annotations

from board_core.formatting import glyph_for
from board_core.models import Board


def render(board: Board) -> str:
    if not board.columns:
        return "No tickets"

    lines: list[str] = []
    for lane, tickets in board.columns:
        if lines:
            lines.append("")
        lines.append(f"{lane.display_name} ({len(tickets)})")
        for ticket in tickets:
            line = f"  {glyph_for(ticket.ticket_type)} {ticket.key} - {ticket.summary}"
            if ticket.assignee:
                line += f" ({ticket.assignee})"
            lines.append(line)
    return "\n".join(lines)
