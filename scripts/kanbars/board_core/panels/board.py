"""Kanban board renderer."""

from __future__ import annotations

from rich import box
from rich.console import Group
from rich.table import Table
from rich.text import Text

from board_core.formatting import EMPTY_BLOCK, TicketBlock
from board_core.grid import BoardGrid, GridSection
from board_core.panels import BOARD_TITLE, empty_panel


def _cell(block: TicketBlock) -> Text:
    if block == EMPTY_BLOCK:
        return Text("\n")
    glyph, _, key = block.title.partition(" ")
    text = Text(no_wrap=True, overflow="crop")
    text.append(glyph)
    if key:
        text.append(" ")
        text.append(key, style="bold")
    text.append("\n")
    text.append(block.summary)
    return text


def _section_table(section: GridSection, width: int) -> Table:
    table = Table(
        title=" / ".join(section.headers),
        title_style="bold",
        box=box.SQUARE,
        show_lines=True,
        padding=(0, 0),
        pad_edge=False,
        expand=False,
    )
    for lane in section.lanes:
        table.add_column(
            lane.display_name,
            header_style=f"bold {lane.color}",
            width=width,
            no_wrap=True,
            overflow="crop",
        )
    for row in section.rows:
        table.add_row(*[_cell(block) for block in row])
    return table


def render(grid: BoardGrid):
    if grid.layout.is_degenerate:
        return Text("")
    if not grid.sections:
        return empty_panel(BOARD_TITLE, "No tickets")
    width = grid.layout.column_width
    return Group(*[_section_table(section, width) for section in grid.sections])
