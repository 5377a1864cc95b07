"""Layer implementations and the name -> factory registry.

The set of layers is closed: a scene is configured by listing registry names
front to back, e.g. ``("tree", "snow")`` draws the tree over the snow.
"""

from typing import Dict, List, TYPE_CHECKING

import numpy as np

from .base import Layer
from .snow import SnowLayer
from .tree import TreeLayer
from snowscape.types import LayerFactory

if TYPE_CHECKING:
    from snowscape.config import SceneConfig


def make_tree_layer(config: "SceneConfig", rng: np.random.Generator) -> Layer:
    return TreeLayer(
        caption=config.caption,
        ornament_probability=config.ornament_probability,
        rng=rng,
    )


def make_snow_layer(config: "SceneConfig", rng: np.random.Generator) -> Layer:
    return SnowLayer(probability=config.snow_probability, rng=rng)


LAYER_REGISTRY: Dict[str, LayerFactory] = {
    "tree": make_tree_layer,
    "snow": make_snow_layer,
}
"""Name -> layer factory mapping used by :func:`build_layers`."""


def build_layers(config: "SceneConfig") -> List[Layer]:
    """Instantiate ``config.layers`` in order, front layer first.

    Every layer gets its own generator spawned from ``config.seed`` so no two
    layers share random state.

    Raises:
        ValueError: If a layer name is not in :data:`LAYER_REGISTRY`.
    """
    unknown = [name for name in config.layers if name not in LAYER_REGISTRY]
    if unknown:
        raise ValueError(f"Unknown layer(s) {unknown}; known: {sorted(LAYER_REGISTRY)}")
    seeds = np.random.SeedSequence(config.seed).spawn(len(config.layers))
    return [
        LAYER_REGISTRY[name](config, np.random.default_rng(seed))
        for name, seed in zip(config.layers, seeds)
    ]


__all__ = [
    "Layer",
    "SnowLayer",
    "TreeLayer",
    "LAYER_REGISTRY",
    "build_layers",
    "make_snow_layer",
    "make_tree_layer",
]
