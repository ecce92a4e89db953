"""Responsive board layout selection by terminal width."""

from __future__ import annotations

from dataclasses import dataclass

from board_core.models import Layout, LayoutKind

STRATEGY_MAX_COLUMNS = {
    LayoutKind.VERTICAL: 1,
    LayoutKind.TWO_COLUMN: 2,
    LayoutKind.FOUR_COLUMN: 4,
}


@dataclass(frozen=True)
class Breakpoints:
    two_column: int = 80
    four_column: int = 120


DEFAULT_BREAKPOINTS = Breakpoints()


def select_layout_kind(width: int, breakpoints: Breakpoints = DEFAULT_BREAKPOINTS) -> LayoutKind:
    if width < breakpoints.two_column:
        return LayoutKind.VERTICAL
    if width < breakpoints.four_column:
        return LayoutKind.TWO_COLUMN
    return LayoutKind.FOUR_COLUMN


def column_width_for(width: int, column_count: int) -> int:
    # One border glyph left of every column plus the closing one.
    return (width - (column_count + 1)) // column_count


def select_layout(
    width: int,
    lane_count: int,
    breakpoints: Breakpoints = DEFAULT_BREAKPOINTS,
) -> Layout:
    kind = select_layout_kind(width, breakpoints)
    count = max(1, min(STRATEGY_MAX_COLUMNS[kind], lane_count))
    col_width = column_width_for(width, count)
    if col_width > 0:
        return Layout(kind=kind, column_count=count, column_width=col_width)

    vertical_width = column_width_for(width, 1)
    return Layout(kind=LayoutKind.VERTICAL, column_count=1, column_width=max(0, vertical_width))
