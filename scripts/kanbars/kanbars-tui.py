#!/usr/bin/env python3
"""Thin script entrypoint for the kanbars terminal board."""

from __future__ import annotations

from board_core.app import main


if __name__ == "__main__":
    raise SystemExit(main())
