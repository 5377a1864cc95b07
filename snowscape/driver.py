"""Driver loop.

Each tick: read the terminal size and advance every layer, clear the screen,
write the frame in one piece, then sleep. The loop runs until interrupted
unless a tick count is given.
"""

import logging
import sys
import time
from typing import Callable, Optional, TextIO

from rich.console import Console

from snowscape.compositor import Compositor
from snowscape.config import SceneConfig
from snowscape.layers import build_layers
from snowscape.utils.style import resolve_color_system
from snowscape.utils.terminal import (
    HIDE_CURSOR,
    SHOW_CURSOR,
    clear_screen,
    terminal_size,
    write_frame,
)


logger = logging.getLogger(__name__)


def make_compositor(config: SceneConfig, stream: TextIO) -> Compositor:
    """Build the configured layer stack bound to the terminal behind ``stream``."""
    color_system = resolve_color_system(config.color_system, Console(file=stream))
    return Compositor(
        build_layers(config),
        size_fn=lambda: terminal_size(stream),
        color_system=color_system,
    )


def tick(compositor: Compositor, stream: TextIO) -> None:
    """Run one update, clear and render cycle."""
    compositor.update()
    clear_screen(stream)
    write_frame(stream, compositor.frame())


def run(
    config: SceneConfig,
    compositor: Optional[Compositor] = None,
    stream: Optional[TextIO] = None,
    sleep: Callable[[float], None] = time.sleep,
    ticks: Optional[int] = None,
) -> int:
    """Animate the scene and return the number of frames drawn.

    Args:
        config: Scene settings; ``tick_ms`` sets the sleep between frames.
        compositor: Prebuilt compositor, built from ``config`` if omitted.
        stream: Output terminal, stdout by default.
        sleep: Called with the delay in seconds after every frame.
        ticks: Stop after this many frames; None runs until interrupted.

    Raises:
        OSError: If the terminal size cannot be determined.
    """
    stream = stream or sys.stdout
    compositor = compositor or make_compositor(config, stream)
    logger.info(
        "Starting scene with layers %s, tick %d ms", ", ".join(config.layers), config.tick_ms
    )

    frames = 0
    stream.write(HIDE_CURSOR)
    try:
        while ticks is None or frames < ticks:
            tick(compositor, stream)
            frames += 1
            sleep(config.tick_ms / 1000)
    except OSError:
        logger.exception("Terminal unavailable after %d frame(s)", frames)
        raise
    finally:
        stream.write(SHOW_CURSOR)
        stream.flush()
    return frames
