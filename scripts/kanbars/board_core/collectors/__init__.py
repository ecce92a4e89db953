"""Collector helpers shared by the ticket sources.

Collectors are fail-soft: problems are reported in ``FetchResult.errors``
instead of raised.
"""

from __future__ import annotations

from board_core.logging import get_logger
from board_core.models import FetchResult

log = get_logger("collectors")


def failed(source: str, message: str, **meta) -> FetchResult:
    log.warning("%s fetch failed: %s", source, message)
    return FetchResult(
        source=source,
        status="error",
        tickets=[],
        meta={"tickets": 0, **meta},
        errors=[message],
    )


def first_line(text: str, fallback: str) -> str:
    lines = (text or "").strip().splitlines()
    return lines[0].strip() if lines else fallback
