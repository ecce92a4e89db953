"""Atlassian CLI collector: tabular work item search output (fail-soft)."""

from __future__ import annotations

import subprocess

from board_core.collectors import failed, first_line, log
from board_core.models import FetchResult
from board_core.parsing import DEFAULT_SCHEME, Column, parse_lines

SOURCE = "acli"


def collect(jql: str, limit: int = 100, scheme: tuple[Column, ...] = DEFAULT_SCHEME) -> FetchResult:
    cmd = [
        "acli",
        "jira",
        "workitem",
        "search",
        "--jql",
        jql,
        "--limit",
        str(limit),
    ]

    try:
        proc = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=30,
            check=False,
        )
    except FileNotFoundError:
        return failed(SOURCE, "acli not installed")
    except subprocess.TimeoutExpired:
        return failed(SOURCE, "acli search timed out")

    if proc.returncode != 0:
        return failed(SOURCE, first_line(proc.stderr or proc.stdout, "acli search failed"))

    report = parse_lines(proc.stdout.splitlines(), scheme)
    log.info("acli returned %d tickets (%d lines skipped)", report.parsed, report.rejected)
    return FetchResult(
        source=SOURCE,
        status="ok",
        tickets=report.tickets,
        meta={"tickets": report.parsed, "skipped_lines": report.rejected},
        errors=[],
    )
