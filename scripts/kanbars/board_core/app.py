"""Terminal kanban board entrypoint for kanbars."""

from __future__ import annotations

import argparse
import json
import sys
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from rich.console import Console, Group
from rich.live import Live

from board_core.collectors.acli import collect as collect_acli
from board_core.collectors.jira_api import collect as collect_api
from board_core.config import (
    SOURCES,
    Config,
    ConfigError,
    build_jql,
    default_config_path,
    load_config,
    write_sample_config,
)
from board_core.grid import assemble
from board_core.lanes import build_board
from board_core.layout import select_layout
from board_core.logging import get_logger, setup_logging
from board_core.models import Board, FetchResult
from board_core.panels.board import render as render_board
from board_core.panels.header import render as render_header
from board_core.panels.simple import render as render_simple
from board_core.terminal import CTRL_C, keyboard

log = get_logger("app")

KEY_POLL_SECONDS = 0.1


@dataclass
class BoardState:
    jql: str
    board: Board = field(default_factory=Board)
    updated_at: datetime | None = None
    errors: list[str] = field(default_factory=list)
    paused: bool = False

    def apply(self, result: FetchResult) -> None:
        """Replace the board on success; on failure keep the last good board."""
        if not result.ok:
            self.errors = list(result.errors)
            return
        self.board = build_board(result.tickets)
        self.updated_at = datetime.now()
        self.errors = []


def fetch(config: Config, jql: str) -> FetchResult:
    if config.source == "acli":
        return collect_acli(jql)
    return collect_api(config.jira, jql)


def _render_screen(state: BoardState, config: Config, width: int):
    layout = select_layout(width, len(state.board.lanes), config.breakpoints)
    header = render_header(
        jql=state.jql,
        total=state.board.total,
        layout_kind=layout.kind.value,
        refresh_seconds=config.refresh_seconds,
        updated_at=state.updated_at,
        paused=state.paused,
        errors=state.errors,
        now=datetime.now(),
    )
    return Group(header, render_board(assemble(state.board, layout)))


def _refresh(state: BoardState, config: Config) -> None:
    result = fetch(config, state.jql)
    state.apply(result)
    if result.ok:
        log.info("board refreshed: %d tickets in %d lanes", state.board.total, len(state.board.lanes))
    else:
        log.error("refresh failed, keeping previous board: %s", "; ".join(result.errors))


def run_live(console: Console, state: BoardState, config: Config) -> int:
    with keyboard() as keys:
        with Live(
            _render_screen(state, config, console.size.width),
            console=console,
            screen=True,
            auto_refresh=False,
        ) as live:
            last_refresh = time.monotonic()
            last_width = console.size.width
            try:
                while True:
                    redraw = False
                    if keys.enabled:
                        ch = keys.poll(KEY_POLL_SECONDS)
                    else:
                        time.sleep(KEY_POLL_SECONDS)
                        ch = None

                    if ch in ("q", CTRL_C):
                        return 0
                    if ch == "r":
                        _refresh(state, config)
                        last_refresh = time.monotonic()
                        redraw = True
                    elif ch == "p":
                        state.paused = not state.paused
                        redraw = True

                    if not state.paused and time.monotonic() - last_refresh >= config.refresh_seconds:
                        _refresh(state, config)
                        # The timer restarts even when the fetch failed.
                        last_refresh = time.monotonic()
                        redraw = True

                    width = console.size.width
                    if width != last_width:
                        last_width = width
                        redraw = True

                    if redraw:
                        live.update(_render_screen(state, config, width), refresh=True)
            except KeyboardInterrupt:
                return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="kanbars", description="Lightweight terminal kanban for JIRA")
    parser.add_argument("--jql", help="Custom JQL query")
    parser.add_argument("--epic", help="Filter by epic")
    parser.add_argument("--assignee", help="Show tickets for a specific assignee")
    parser.add_argument("--url", help="JIRA instance URL (overrides config)")
    parser.add_argument("--init", action="store_true", help="Generate a sample config file")
    parser.add_argument("-r", "--refresh", type=int, help="Auto-refresh interval in seconds (default: 60)")
    parser.add_argument("--once", action="store_true", help="Display once and exit (useful with watch)")
    parser.add_argument("--json", action="store_true", help="Emit fetched tickets as JSON")
    parser.add_argument("--config", help="Path to JSON config file")
    parser.add_argument("--source", choices=SOURCES, help="Ticket source override")
    parser.add_argument("--log-level", help="DEBUG|INFO|WARNING|ERROR")
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level)

    if args.init:
        path = Path(args.config).expanduser() if args.config else default_config_path()
        try:
            write_sample_config(path)
        except ConfigError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
        print(f"Config file created at {path}. Edit it and add your JIRA credentials.")
        return 0

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.url:
        config.jira.url = args.url
    if args.source:
        config.source = args.source
    if args.refresh is not None:
        config.refresh_seconds = max(1, args.refresh)

    jql = build_jql(config.jql, jql=args.jql, epic=args.epic, assignee=args.assignee)
    log.info("starting (source=%s, jql=%s)", config.source, jql)

    if args.json:
        result = fetch(config, jql)
        print(json.dumps(result.to_dict(), indent=2))
        return 0 if result.ok else 1

    console = Console()
    state = BoardState(jql=jql)
    _refresh(state, config)

    if args.once:
        if state.errors:
            print(f"error: {'; '.join(state.errors)}", file=sys.stderr)
            return 1
        console.print("KANBARS - JIRA Board\n", style="bold", highlight=False)
        console.print(render_simple(state.board), markup=False, highlight=False)
        return 0

    return run_live(console, state, config)


if __name__ == "__main__":
    raise SystemExit(main())
