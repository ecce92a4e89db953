"""Ticket text rendering and shared formatting helpers."""

from __future__ import annotations

from typing import NamedTuple

from rich.cells import cell_len, get_character_cell_size

from board_core.models import Ticket, TicketType

TYPE_GLYPHS = {
    TicketType.BUG: "🐛",
    TicketType.STORY: "📖",
    TicketType.TASK: "✓",
    TicketType.EPIC: "🎯",
    TicketType.UNKNOWN: "•",
}

ELLIPSIS = "..."
SUMMARY_MARGIN = 2


class TicketBlock(NamedTuple):
    title: str
    summary: str


EMPTY_BLOCK = TicketBlock("", "")


def glyph_for(ticket_type: TicketType) -> str:
    return TYPE_GLYPHS.get(ticket_type, TYPE_GLYPHS[TicketType.UNKNOWN])


def crop_cells(text: str, max_cells: int) -> str:
    """Longest prefix of ``text`` that fits in ``max_cells`` terminal cells."""
    if max_cells <= 0:
        return ""
    if cell_len(text) <= max_cells:
        return text
    kept: list[str] = []
    used = 0
    for char in text:
        size = get_character_cell_size(char)
        if used + size > max_cells:
            break
        kept.append(char)
        used += size
    return "".join(kept)


def truncate(text: str, max_cells: int) -> str:
    if cell_len(text) <= max_cells:
        return text
    if max_cells <= len(ELLIPSIS):
        return ELLIPSIS[: max(0, max_cells)]
    return crop_cells(text, max_cells - len(ELLIPSIS)) + ELLIPSIS


def render_ticket(ticket: Ticket, width: int) -> TicketBlock:
    available = max(0, width - SUMMARY_MARGIN)
    title = f"{glyph_for(ticket.ticket_type)} {ticket.key}"
    return TicketBlock(
        title=crop_cells(title, max(0, width)),
        summary=truncate(ticket.summary, available),
    )


def compact_relative_age(age_seconds: float | int | None) -> str:
    if age_seconds is None:
        return "n/a"

    seconds = max(0, int(age_seconds))
    if seconds < 60:
        return f"{seconds}s ago"
    if seconds < 3600:
        return f"{seconds // 60}m ago"
    if seconds < 86400:
        return f"{seconds // 3600}h ago"
    return f"{seconds // 86400}d ago"
