"""Falling snow layer.

History is a ``height x width`` boolean matrix, one row of snowflakes per
visible row. ``cursor`` names the physical row shown as logical row 0. Each
frame moves the cursor back by one, so the previous top row becomes row 1,
and refills the row now under the cursor. Content scrolls down one row per
frame without copying any data.
"""

from typing import Optional, Set

import numpy as np
from numpy.typing import NDArray

from snowscape.content import TRANSPARENT, Content, glyph
from snowscape.layers.base import Layer


DEFAULT_SNOW_PROBABILITY = 1 / 21
SNOWFLAKE = glyph("o", "white")


class SnowLayer(Layer):
    """Particle layer of snowflakes drifting down one row per frame.

    Attributes:
        probability: Chance that a column of the new top row gets a flake.
        cursor: Physical history row displayed as logical row 0.
        rows: Snow history, ``rows[r, x]`` is True where a flake sits.
    """

    probability: float
    cursor: int
    rows: NDArray[np.bool_]

    def __init__(
        self,
        probability: float = DEFAULT_SNOW_PROBABILITY,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        super().__init__()
        self.probability = probability
        self.rng = rng if rng is not None else np.random.default_rng()
        self.cursor = 0
        self.rows = np.zeros((0, 0), dtype=bool)

    def reset(self) -> None:
        self.cursor = 0
        self.rows = np.zeros((self.height, self.width), dtype=bool)
        self._spawn()

    def advance(self) -> None:
        if self.height == 0:
            return
        self.cursor = (self.cursor - 1) % self.height
        self._spawn()

    def _spawn(self) -> None:
        if self.height == 0:
            return
        self.rows[self.cursor] = self.rng.random(self.width) < self.probability

    def row_index(self, y: int) -> int:
        """Map logical row ``y`` to its physical history row."""
        return (self.cursor + y) % self.height

    def active_columns(self, y: int) -> Set[int]:
        """Return the columns holding a flake on logical row ``y``."""
        return set(np.flatnonzero(self.rows[self.row_index(y)]).tolist())

    def get_content(self, x: int, y: int) -> Content:
        self.check_bounds(x, y)
        if self.rows[self.row_index(y), x]:
            return SNOWFLAKE
        return TRANSPARENT
