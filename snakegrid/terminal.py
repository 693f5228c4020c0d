"""Terminal helpers for driving a game: pauses, key input and screen size."""

from __future__ import annotations

import asyncio
import os
import signal
import sys
from typing import Optional, TextIO

try:
    import termios
except ImportError:  # not available on this platform
    termios = None  # type: ignore[assignment]

_STDOUT_FD = 1
_DEFAULT_COLUMNS = 80
_DEFAULT_ROWS = 24
_CTRL_C = "\x03"


async def sleep(ms: int) -> None:
    """Wait for ``ms`` milliseconds."""
    await asyncio.sleep(max(0, ms) / 1000)


def _read_key(stream: TextIO) -> Optional[str]:
    """Read one key press from a terminal with echo and line buffering off."""
    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ICANON | termios.ECHO)
    raw[6][termios.VMIN] = 1
    raw[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    try:
        data = os.read(fd, 1)
    except OSError:
        data = b""
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)
    if len(data) != 1:
        return None
    key = data.decode("utf-8", errors="replace")
    if key == _CTRL_C:
        signal.raise_signal(signal.SIGINT)
        return None
    return key


def _read_text_line(stream: TextIO) -> Optional[str]:
    """Read a line, without its line ending; None at end of input or on error."""
    try:
        line = stream.readline()
    except (OSError, ValueError):
        return None
    if not line:
        return None
    return line.rstrip("\n").rstrip("\r")


def _is_tty(stream: TextIO) -> bool:
    try:
        return bool(stream.isatty())
    except (OSError, ValueError, AttributeError):
        return False


def _read_input() -> Optional[str]:
    stream = sys.stdin
    if termios is not None and _is_tty(stream):
        return _read_key(stream)
    return _read_text_line(stream)


async def read_line() -> Optional[str]:
    """Read input from standard input without blocking the event loop.

    On a terminal this returns a single key press as soon as it is made;
    Ctrl+C raises SIGINT and yields None. Otherwise it returns the next
    line without its line ending, or None at end of input.
    """
    return await asyncio.to_thread(_read_input)


def _terminal_size() -> Optional[os.terminal_size]:
    try:
        return os.get_terminal_size(_STDOUT_FD)
    except (OSError, ValueError):
        return None


def terminal_columns() -> int:
    """Return the width of the terminal on standard output, or 80 if unknown."""
    size = _terminal_size()
    return size.columns if size is not None else _DEFAULT_COLUMNS


def terminal_rows() -> int:
    """Return the height of the terminal on standard output, or 24 if unknown."""
    size = _terminal_size()
    return size.lines if size is not None else _DEFAULT_ROWS