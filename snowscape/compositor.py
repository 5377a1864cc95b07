"""Layer compositor.

Merges an ordered stack of layers into one block of styled text per tick.

Per row, columns are scanned left to right. At each column the layers are
asked front to back and the first :class:`~snowscape.content.Glyph` wins;
``Transparent`` and ``Continuation`` answers let the next layer speak. The
winning glyph is emitted and the scan jumps ahead by its width, so the
second column of a wide glyph is never queried. If nothing is opaque a
single blank is emitted. A wide glyph that would spill past the right edge
is replaced by a blank, keeping every row exactly ``width`` columns.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from rich.color import ColorSystem

from snowscape.content import Glyph, is_opaque
from snowscape.layers.base import Layer
from snowscape.types import SizeFn
from snowscape.utils.style import styled
from snowscape.utils.terminal import terminal_size


logger = logging.getLogger(__name__)

BLANK = " "


def resolve_cell(layers: Sequence[Layer], x: int, y: int) -> Optional[Glyph]:
    """Return the front-most glyph at ``(x, y)``, or None if all see through."""
    for layer in layers:
        content = layer.get_content(x, y)
        if is_opaque(content):
            return content
    return None


def render_row(
    layers: Sequence[Layer],
    y: int,
    width: int,
    color_system: Optional[ColorSystem] = None,
) -> str:
    """Composite row ``y`` into a string covering ``width`` columns.

    Raises:
        ValueError: If a layer returns a glyph narrower than one column.
    """
    parts: List[str] = []
    x = 0
    while x < width:
        cell = resolve_cell(layers, x, y)
        if cell is not None and cell.width < 1:
            raise ValueError(f"Glyph {cell!r} at ({x}, {y}) has no width")
        if cell is None or x + cell.width > width:
            parts.append(BLANK)
            x += 1
        else:
            parts.append(styled(cell.text, cell.color, color_system))
            x += cell.width
    return "".join(parts)


class Compositor:
    """Owns the layer stack and the last observed grid size.

    Attributes:
        layers: Layers front to back; earlier layers cover later ones.
        width: Grid width from the last update.
        height: Grid height from the last update.
        size_fn: Grid size source queried by :meth:`update`.
        color_system: Styling target, ``None`` for plain text.
    """

    layers: Tuple[Layer, ...]
    width: int
    height: int
    size_fn: SizeFn
    color_system: Optional[ColorSystem]

    def __init__(
        self,
        layers: Sequence[Layer],
        size_fn: SizeFn = terminal_size,
        color_system: Optional[ColorSystem] = None,
    ):
        self.layers = tuple(layers)
        self.width = 0
        self.height = 0
        self.size_fn = size_fn
        self.color_system = color_system

    def update(self) -> None:
        """Query the grid size and advance every layer one frame."""
        width, height = self.size_fn()
        self.update_size(width, height)

    def update_size(self, width: int, height: int) -> None:
        if (width, height) != (self.width, self.height):
            logger.info("Grid size %dx%d", width, height)
        self.width = width
        self.height = height
        for layer in self.layers:
            layer.update(width, height)

    def render(self) -> List[str]:
        """Return the composited rows, top to bottom."""
        return [
            render_row(self.layers, y, self.width, self.color_system)
            for y in range(self.height)
        ]

    def frame(self) -> str:
        """Return the rendered rows joined by line breaks."""
        return "\n".join(self.render())
