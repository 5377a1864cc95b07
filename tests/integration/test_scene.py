from dataclasses import replace

import pytest

from snowscape.compositor import Compositor
from snowscape.config import SceneConfig
from snowscape.content import Glyph, text_width
from snowscape.layers import LAYER_REGISTRY, SnowLayer, TreeLayer, build_layers
from tests.test_utils import fixed_size


def test_build_layers_in_configured_order() -> None:
    layers = build_layers(SceneConfig(seed=1))
    assert [type(layer) for layer in layers] == [TreeLayer, SnowLayer]

    layers = build_layers(SceneConfig(layers=("snow",), seed=1))
    assert [type(layer) for layer in layers] == [SnowLayer]


def test_build_layers_passes_settings() -> None:
    config = SceneConfig(snow_probability=0.5, ornament_probability=0.25, caption="Yo")
    tree, snow = build_layers(config)
    assert isinstance(tree, TreeLayer) and isinstance(snow, SnowLayer)
    assert snow.probability == 0.5
    assert tree.ornament_probability == 0.25
    assert len(tree.caption) == 2


def test_build_layers_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        build_layers(SceneConfig(layers=("tree", "fireworks")))


def test_registry_is_closed() -> None:
    assert sorted(LAYER_REGISTRY) == ["snow", "tree"]


def test_layers_do_not_share_random_state() -> None:
    config = SceneConfig(layers=("snow", "snow"), seed=5, snow_probability=0.5)
    first, second = build_layers(config)
    first.update(40, 3)
    second.update(40, 3)
    assert first.active_columns(0) != second.active_columns(0)


def make_scene(seed: int, width: int, height: int) -> Compositor:
    compositor = Compositor(
        build_layers(SceneConfig(seed=seed)), size_fn=fixed_size(width, height)
    )
    compositor.update()
    return compositor


def test_seeded_scene_is_reproducible() -> None:
    a = make_scene(11, 40, 20)
    b = make_scene(11, 40, 20)
    for _ in range(3):
        assert a.frame() == b.frame()
        a.update()
        b.update()


@pytest.mark.parametrize("width, height", [(40, 20), (13, 14), (1, 1), (80, 3)])
def test_scene_rows_match_grid_width(width: int, height: int) -> None:
    compositor = make_scene(2, width, height)
    for _ in range(3):
        rows = compositor.render()
        assert len(rows) == height
        assert all(text_width(row) == width for row in rows)
        compositor.update()


def test_tree_stays_in_front_of_snow() -> None:
    config = replace(SceneConfig(seed=0), snow_probability=1.0)
    compositor = Compositor(build_layers(config), size_fn=fixed_size(21, 14))
    # one update per row fills the whole snow history
    for _ in range(14):
        compositor.update()

    assert compositor.render()[13] == "oooo2024 聖誕快樂oooo"
    assert compositor.render()[12] == "o" * 21
    tree = compositor.layers[0]
    assert isinstance(tree.get_content(10, 0), Glyph)


def test_live_resize_keeps_scene_consistent() -> None:
    sizes = iter([(30, 16), (30, 16), (12, 5), (50, 18)])
    compositor = Compositor(build_layers(SceneConfig(seed=9)), size_fn=lambda: next(sizes))
    for width, height in [(30, 16), (30, 16), (12, 5), (50, 18)]:
        compositor.update()
        rows = compositor.render()
        assert len(rows) == height
        assert all(text_width(row) == width for row in rows)
