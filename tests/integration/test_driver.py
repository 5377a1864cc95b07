from io import StringIO
from typing import List, Tuple

import pytest

from snowscape.compositor import Compositor
from snowscape.config import SceneConfig
from snowscape.content import glyph
from snowscape.driver import make_compositor, run, tick
from snowscape.layers import SnowLayer, TreeLayer
from snowscape.utils.terminal import CLEAR_SCREEN, HIDE_CURSOR, SHOW_CURSOR
from tests.test_utils import StubLayer, fixed_size


def test_tick_clears_then_writes_frame() -> None:
    stream = StringIO()
    compositor = Compositor([StubLayer({(1, 0): glyph("*")})], size_fn=fixed_size(3, 2))

    tick(compositor, stream)

    assert stream.getvalue() == CLEAR_SCREEN + " * \n   "


def test_run_draws_requested_frames_and_sleeps_between() -> None:
    stream = StringIO()
    sleeps: List[float] = []
    layer = StubLayer(default=glyph("o"))
    compositor = Compositor([layer], size_fn=fixed_size(2, 1))

    frames = run(
        SceneConfig(tick_ms=250),
        compositor=compositor,
        stream=stream,
        sleep=sleeps.append,
        ticks=3,
    )

    output = stream.getvalue()
    assert frames == 3
    assert sleeps == [0.25, 0.25, 0.25]
    assert output.startswith(HIDE_CURSOR)
    assert output.endswith(SHOW_CURSOR)
    assert output.count(CLEAR_SCREEN + "oo") == 3
    assert (layer.resets, layer.advances) == (1, 2)


def test_run_follows_terminal_resize() -> None:
    sizes: List[Tuple[int, int]] = [(4, 1), (2, 2)]
    compositor = Compositor([StubLayer(default=glyph("#"))], size_fn=lambda: sizes.pop(0))
    stream = StringIO()

    run(SceneConfig(), compositor=compositor, stream=stream, sleep=lambda _: None, ticks=2)

    assert CLEAR_SCREEN + "####" in stream.getvalue()
    assert CLEAR_SCREEN + "##\n##" in stream.getvalue()


def test_unavailable_terminal_size_is_fatal() -> None:
    def no_terminal() -> Tuple[int, int]:
        raise OSError("not a terminal")

    stream = StringIO()
    compositor = Compositor([StubLayer()], size_fn=no_terminal)

    with pytest.raises(OSError):
        run(SceneConfig(), compositor=compositor, stream=stream, sleep=lambda _: None)
    assert stream.getvalue() == HIDE_CURSOR + SHOW_CURSOR


def test_default_size_query_rejects_non_terminal_stream() -> None:
    with pytest.raises(OSError):
        run(SceneConfig(color_system="none"), stream=StringIO(), sleep=lambda _: None)


def test_make_compositor_builds_configured_stack() -> None:
    compositor = make_compositor(SceneConfig(color_system="none", seed=4), StringIO())

    assert [type(layer) for layer in compositor.layers] == [TreeLayer, SnowLayer]
    assert compositor.color_system is None
