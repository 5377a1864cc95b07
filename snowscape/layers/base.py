"""Layer capability.

A layer owns its animation state and answers per-cell queries for the grid
it was last updated with. The compositor drives every layer with the same
two calls each tick:

* ``update(screen_width, screen_height)`` - advance one frame. A change in
  either dimension (or the very first call) is a hard reset: per-row and
  per-cell storage is rebuilt for the new size and animation restarts from
  its initial state. Stale state is never reinterpreted across sizes.
* ``get_content(x, y)`` - pure query for ``0 <= x < width`` and
  ``0 <= y < height``. Always preceded by at least one ``update``.

Subclasses implement :meth:`Layer.reset`, :meth:`Layer.advance` and
:meth:`Layer.get_content`; the size bookkeeping lives here.
"""

import logging
from abc import ABC, abstractmethod

from snowscape.content import Content


logger = logging.getLogger(__name__)


class Layer(ABC):
    """Independently stateful source of per-cell content.

    Attributes:
        width: Grid width seen by the last ``update``.
        height: Grid height seen by the last ``update``.
    """

    width: int
    height: int

    def __init__(self) -> None:
        self.width = 0
        self.height = 0
        self._sized = False

    def update(self, screen_width: int, screen_height: int) -> None:
        """Advance one frame, resetting first if the grid size changed."""
        if (
            not self._sized
            or screen_width != self.width
            or screen_height != self.height
        ):
            logger.debug(
                "%s reset to %dx%d (was %dx%d)",
                type(self).__name__,
                screen_width,
                screen_height,
                self.width,
                self.height,
            )
            self.width = screen_width
            self.height = screen_height
            self._sized = True
            self.reset()
        else:
            self.advance()

    @abstractmethod
    def reset(self) -> None:
        """Rebuild state for the current ``width`` / ``height``."""

    @abstractmethod
    def advance(self) -> None:
        """Step the animation one frame at an unchanged size."""

    @abstractmethod
    def get_content(self, x: int, y: int) -> Content:
        """Return what this layer draws at column ``x`` of row ``y``."""

    def check_bounds(self, x: int, y: int) -> None:
        """Raise ``IndexError`` if ``(x, y)`` is outside the current grid."""
        if not self._sized:
            raise IndexError(f"{type(self).__name__} queried before first update")
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"({x}, {y}) outside {self.width}x{self.height} grid of "
                f"{type(self).__name__}"
            )
