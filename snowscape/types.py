"""Common type aliases.

``SizeFn`` and ``LayerFactory`` are the extension points used by the
compositor and the layer registry.
"""

from typing import Callable, Optional, Tuple, TYPE_CHECKING

import numpy as np


# Forward declarations to avoid circular imports:
if TYPE_CHECKING:
    from snowscape.config import SceneConfig
    from snowscape.layers.base import Layer

Color = Optional[str]
"""Color name understood by :mod:`rich.color` (``"red"``, ``"#8b4513"``) or
``None`` for the terminal default."""

GridSize = Tuple[int, int]

SizeFn = Callable[[], GridSize]
LayerFactory = Callable[["SceneConfig", np.random.Generator], "Layer"]
