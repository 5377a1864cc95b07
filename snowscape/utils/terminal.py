"""Terminal collaborators: size query, screen clearing and frame output."""

import os
import sys
from typing import Optional, TextIO

from snowscape.types import GridSize


CSI = "\x1b["
CLEAR_SCREEN = CSI + "2J" + CSI + "H"
HIDE_CURSOR = CSI + "?25l"
SHOW_CURSOR = CSI + "?25h"


def terminal_size(stream: Optional[TextIO] = None) -> GridSize:
    """Return ``(columns, lines)`` of the terminal behind ``stream``.

    There is no fallback size: if ``stream`` is not a terminal the
    ``OSError`` from the query propagates.
    """
    size = os.get_terminal_size((stream or sys.stdout).fileno())
    return size.columns, size.lines


def clear_screen(stream: TextIO) -> None:
    stream.write(CLEAR_SCREEN)


def write_frame(stream: TextIO, frame: str) -> None:
    """Write a whole frame in one call and flush it."""
    stream.write(frame)
    stream.flush()
