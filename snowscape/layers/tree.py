"""Decorated tree layer.

The figure is a block of bands stacked top to bottom and centered vertically
in the grid as a whole:

========  =====  ===========================================
band      rows   content
========  =====  ===========================================
leaves    10     row ``i`` spans ``2 * i + 1`` columns
trunk     2      ``"mWm"`` in brown
blank     1      nothing
caption   1      the caption text in red
========  =====  ===========================================

Each band centers its own width horizontally. Leaf cells are re-rolled on
every ``update``: usually a green ``*``, sometimes an ``o`` ornament in one
of six colors. Rolling happens in ``update`` so that ``get_content`` stays a
pure lookup.

A grid smaller than the figure simply crops it; offsets may go negative.
"""

from typing import Optional, Sequence

import numpy as np
from pyrsistent import pvector
from pyrsistent.typing import PVector

from snowscape.content import (
    TRANSPARENT,
    Content,
    Glyph,
    check_sequence,
    glyph,
    text_to_contents,
)
from snowscape.layers.base import Layer


LEAF_HEIGHT = 10
TRUNK_HEIGHT = 2
BLANK_HEIGHT = 1
CAPTION_HEIGHT = 1
FIGURE_HEIGHT = LEAF_HEIGHT + TRUNK_HEIGHT + BLANK_HEIGHT + CAPTION_HEIGHT

DEFAULT_CAPTION = "2024 聖誕快樂"
DEFAULT_ORNAMENT_PROBABILITY = 1 / 11

TRUNK_TEXT = "mWm"
TRUNK_COLOR = "#8b4513"
CAPTION_COLOR = "red"

LEAF = glyph("*", "green")
ORNAMENT_COLORS = ("red", "green", "yellow", "blue", "magenta", "cyan")
ORNAMENTS = tuple(glyph("o", color) for color in ORNAMENT_COLORS)


class TreeLayer(Layer):
    """Static tree with blinking ornaments and a caption underneath."""

    leaves: PVector[PVector[Glyph]]

    def __init__(
        self,
        caption: str = DEFAULT_CAPTION,
        ornament_probability: float = DEFAULT_ORNAMENT_PROBABILITY,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        super().__init__()
        self.ornament_probability = ornament_probability
        self.rng = rng if rng is not None else np.random.default_rng()
        self.trunk = text_to_contents(TRUNK_TEXT, TRUNK_COLOR)
        self.caption = text_to_contents(caption, CAPTION_COLOR)
        check_sequence(self.trunk)
        check_sequence(self.caption)
        self.leaves = pvector()

    def reset(self) -> None:
        self._roll_leaves()

    def advance(self) -> None:
        self._roll_leaves()

    def _roll_leaves(self) -> None:
        rows = []
        for i in range(LEAF_HEIGHT):
            span = 2 * i + 1
            ornament = self.rng.random(span) < self.ornament_probability
            colors = self.rng.integers(len(ORNAMENTS), size=span)
            rows.append(
                pvector(
                    ORNAMENTS[color] if is_ornament else LEAF
                    for is_ornament, color in zip(ornament, colors)
                )
            )
        self.leaves = pvector(rows)

    @property
    def y_offset(self) -> int:
        """Grid row of the figure's first leaf row."""
        return (self.height - FIGURE_HEIGHT) // 2

    def get_content(self, x: int, y: int) -> Content:
        self.check_bounds(x, y)
        row = y - self.y_offset
        if row < 0 or row >= FIGURE_HEIGHT:
            return TRANSPARENT

        if row < LEAF_HEIGHT:
            return self._centered(self.leaves[row], x)
        row -= LEAF_HEIGHT

        if row < TRUNK_HEIGHT:
            return self._centered(self.trunk, x)
        row -= TRUNK_HEIGHT

        if row < BLANK_HEIGHT:
            return TRANSPARENT

        return self._centered(self.caption, x)

    def _centered(self, contents: Sequence[Content], x: int) -> Content:
        offset = (self.width - len(contents)) // 2
        if x < offset or x >= offset + len(contents):
            return TRANSPARENT
        return contents[x - offset]
