"""Board assembly into rectangular, row-aligned cell grids."""

from __future__ import annotations

from dataclasses import dataclass

from board_core.formatting import EMPTY_BLOCK, TicketBlock, render_ticket
from board_core.models import Board, Lane, Layout


@dataclass(frozen=True)
class GridSection:
    lanes: tuple[Lane, ...]
    rows: tuple[tuple[TicketBlock, ...], ...]

    @property
    def headers(self) -> list[str]:
        return [lane.display_name for lane in self.lanes]


@dataclass(frozen=True)
class BoardGrid:
    layout: Layout
    sections: tuple[GridSection, ...] = ()

    @property
    def headers(self) -> list[str]:
        return [header for section in self.sections for header in section.headers]


def group_lanes(lanes: list[Lane], column_count: int) -> list[tuple[Lane, ...]]:
    """Split lanes in board order into groups of ``column_count``; the last may be short."""
    size = max(1, column_count)
    return [tuple(lanes[i:i + size]) for i in range(0, len(lanes), size)]


def _section(board: Board, lanes: tuple[Lane, ...], width: int) -> GridSection:
    columns = [board.tickets(lane) for lane in lanes]
    row_count = max((len(tickets) for tickets in columns), default=0)
    rows = []
    for index in range(row_count):
        rows.append(
            tuple(
                render_ticket(tickets[index], width) if index < len(tickets) else EMPTY_BLOCK
                for tickets in columns
            )
        )
    return GridSection(lanes=lanes, rows=tuple(rows))


def assemble(board: Board, layout: Layout) -> BoardGrid:
    if layout.is_degenerate:
        return BoardGrid(layout=layout)
    sections = tuple(
        _section(board, lanes, layout.column_width)
        for lanes in group_lanes(board.lanes, layout.column_count)
    )
    return BoardGrid(layout=layout, sections=sections)
