"""Ticket parsing from fixed-width tabular text and REST issue records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from board_core.logging import get_logger
from board_core.models import Ticket, TicketType

log = get_logger("parsing")

TYPE_TOKENS = ("Story", "Bug", "Task", "Epic")


@dataclass(frozen=True)
class Column:
    name: str
    start: int
    end: int | None = None


DEFAULT_SCHEME: tuple[Column, ...] = (
    Column("type", 0, 20),
    Column("key", 20, 40),
    Column("assignee", 40, 69),
    Column("priority", 69, 89),
    Column("status", 89, 108),
    Column("summary", 108, None),
)


@dataclass
class ParseReport:
    tickets: list[Ticket] = field(default_factory=list)
    parsed: int = 0
    rejected: int = 0


def min_line_length(scheme: tuple[Column, ...] = DEFAULT_SCHEME) -> int:
    """Shortest line that still reaches the start of the summary field."""
    for column in scheme:
        if column.name == "summary":
            return column.start
    return max(column.start for column in scheme)


def extract_fields(line: str, scheme: tuple[Column, ...] = DEFAULT_SCHEME) -> dict[str, str]:
    return {column.name: line[column.start:column.end].strip() for column in scheme}


def parse_line(line: str, scheme: tuple[Column, ...] = DEFAULT_SCHEME) -> Ticket | None:
    if not line.startswith(TYPE_TOKENS):
        return None

    text = line.rstrip("\r\n")
    if len(text) < min_line_length(scheme):
        return None

    fields = extract_fields(text, scheme)
    key = fields.get("key", "")
    if not key:
        return None

    return Ticket(
        key=key,
        ticket_type=TicketType.from_token(fields.get("type", "")),
        summary=fields.get("summary", ""),
        status=fields.get("status", ""),
        assignee=fields.get("assignee", ""),
        priority=fields.get("priority", ""),
    )


def parse_lines(lines: Iterable[str], scheme: tuple[Column, ...] = DEFAULT_SCHEME) -> ParseReport:
    report = ParseReport()
    for line in lines:
        ticket = parse_line(line, scheme)
        if ticket is None:
            report.rejected += 1
            continue
        report.tickets.append(ticket)
        report.parsed += 1
    log.debug("parsed %d ticket lines, skipped %d", report.parsed, report.rejected)
    return report


def _name_of(value: Any) -> str:
    if isinstance(value, dict):
        name = value.get("name")
        return name.strip() if isinstance(name, str) else ""
    return ""


def _person(value: Any) -> str:
    if not isinstance(value, dict):
        return ""
    for attr in ("displayName", "emailAddress"):
        candidate = value.get(attr)
        if isinstance(candidate, str) and candidate.strip():
            return candidate.strip()
    return ""


def ticket_from_record(record: Any) -> Ticket | None:
    if not isinstance(record, dict):
        return None

    key = record.get("key")
    if not isinstance(key, str) or not key.strip():
        return None

    fields = record.get("fields")
    if not isinstance(fields, dict):
        fields = {}

    # REST type names vary in case ("bug", "BUG"); the tabular feed does not.
    type_name = _name_of(fields.get("issuetype")).lower().capitalize()
    summary = fields.get("summary")

    return Ticket(
        key=key.strip(),
        ticket_type=TicketType.from_token(type_name),
        summary=summary.strip() if isinstance(summary, str) else "",
        status=_name_of(fields.get("status")),
        assignee=_person(fields.get("assignee")) or "unassigned",
        priority=_name_of(fields.get("priority")),
    )
