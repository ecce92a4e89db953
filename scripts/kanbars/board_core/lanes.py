"""Status categorisation and lane aggregation."""

from __future__ import annotations

from typing import Iterable

from board_core.models import LANE_ORDER, Board, Lane, Ticket

LANE_STATUSES: dict[Lane, tuple[str, ...]] = {
    Lane.TODO: ("To Do", "Open", "Ready for Development", "Backlog"),
    Lane.IN_PROGRESS: ("In Progress", "Development"),
    Lane.REVIEW: ("Peer Review", "Code Review", "QA Review", "Product Review", "Testing"),
    Lane.DONE: ("Done", "Shipped", "Closed", "Resolved"),
}

STATUS_TO_LANE: dict[str, Lane] = {
    status: lane for lane, statuses in LANE_STATUSES.items() for status in statuses
}

# Unrecognised workflow states stay visible in the first lane.
FALLBACK_LANE = Lane.TODO


def categorize_status(status: str) -> Lane:
    return STATUS_TO_LANE.get(status, FALLBACK_LANE)


def build_board(tickets: Iterable[Ticket]) -> Board:
    buckets: dict[Lane, list[Ticket]] = {lane: [] for lane in LANE_ORDER}
    for ticket in tickets:
        buckets[categorize_status(ticket.status)].append(ticket)
    return Board(
        columns=tuple((lane, tuple(buckets[lane])) for lane in LANE_ORDER if buckets[lane])
    )
