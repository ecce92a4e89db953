"""Shared model contracts for the board pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TicketType(Enum):
    BUG = "Bug"
    STORY = "Story"
    TASK = "Task"
    EPIC = "Epic"
    UNKNOWN = "Unknown"

    @classmethod
    def from_token(cls, token: str) -> "TicketType":
        for member in cls:
            if member is not cls.UNKNOWN and member.value == token:
                return member
        return cls.UNKNOWN


class Lane(Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    DONE = "done"

    @property
    def display_name(self) -> str:
        return LANE_DISPLAY_NAMES[self]

    @property
    def color(self) -> str:
        return LANE_COLORS[self]


LANE_ORDER: tuple[Lane, ...] = (Lane.TODO, Lane.IN_PROGRESS, Lane.REVIEW, Lane.DONE)

LANE_DISPLAY_NAMES = {
    Lane.TODO: "TO DO",
    Lane.IN_PROGRESS: "IN PROGRESS",
    Lane.REVIEW: "REVIEW",
    Lane.DONE: "DONE",
}

LANE_COLORS = {
    Lane.TODO: "cyan",
    Lane.IN_PROGRESS: "yellow",
    Lane.REVIEW: "magenta",
    Lane.DONE: "green",
}


@dataclass(frozen=True)
class Ticket:
    key: str
    ticket_type: TicketType
    summary: str
    status: str
    assignee: str = ""
    priority: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "type": self.ticket_type.value,
            "summary": self.summary,
            "status": self.status,
            "assignee": self.assignee,
            "priority": self.priority,
        }


@dataclass(frozen=True)
class Board:
    """Visible lanes in fixed lane order, each with its tickets in arrival order."""

    columns: tuple[tuple[Lane, tuple[Ticket, ...]], ...] = ()

    @property
    def lanes(self) -> list[Lane]:
        return [lane for lane, _ in self.columns]

    @property
    def total(self) -> int:
        return sum(len(tickets) for _, tickets in self.columns)

    def tickets(self, lane: Lane) -> tuple[Ticket, ...]:
        for candidate, tickets in self.columns:
            if candidate is lane:
                return tickets
        return ()

    def max_ticket_count(self) -> int:
        return max((len(tickets) for _, tickets in self.columns), default=0)


class LayoutKind(Enum):
    VERTICAL = "vertical"
    TWO_COLUMN = "two-column"
    FOUR_COLUMN = "four-column"


@dataclass(frozen=True)
class Layout:
    kind: LayoutKind
    column_count: int
    column_width: int

    @property
    def is_degenerate(self) -> bool:
        return self.column_width <= 0


@dataclass
class FetchResult:
    source: str
    status: str = "ok"
    tickets: list[Ticket] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status != "error"

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "status": self.status,
            "tickets": [ticket.to_dict() for ticket in self.tickets],
            "meta": self.meta,
            "errors": self.errors,
        }
