"""Keyboard input for the live board.

Uses termios non-canonical mode (ICANON/ECHO off, VMIN=0/VTIME=0) instead of
tty.setraw() so Rich Live's alternate screen keeps rendering normally.
"""

from __future__ import annotations

import os
import select
import sys
from contextlib import contextmanager
from typing import Iterator

try:
    import termios
except ImportError:  # Windows: the board still renders, keys are ignored.
    termios = None

CTRL_C = "\x03"


class Keyboard:
    def __init__(self, fd: int | None):
        self.fd = fd

    @property
    def enabled(self) -> bool:
        return self.fd is not None

    def poll(self, timeout: float = 0.0) -> str | None:
        """Single-char read, waiting at most ``timeout`` seconds."""
        if self.fd is None:
            return None
        ready, _, _ = select.select([self.fd], [], [], max(0.0, timeout))
        if not ready:
            return None
        try:
            return os.read(self.fd, 1).decode("utf-8", errors="ignore") or None
        except OSError:
            return None


@contextmanager
def keyboard(stream=None) -> Iterator[Keyboard]:
    """Put the terminal in non-canonical mode and always restore it on exit."""
    stream = stream if stream is not None else sys.stdin
    if termios is None or not stream.isatty():
        yield Keyboard(None)
        return

    fd = stream.fileno()
    try:
        old_settings = termios.tcgetattr(fd)
    except termios.error:
        yield Keyboard(None)
        return

    new = termios.tcgetattr(fd)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    new[6][termios.VMIN] = 0
    new[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSADRAIN, new)
    try:
        yield Keyboard(fd)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
