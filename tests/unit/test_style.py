from io import StringIO

import pytest
from rich.color import ColorSystem
from rich.console import Console

from snowscape.utils.style import resolve_color_system, styled


@pytest.mark.parametrize(
    "name, expected",
    [
        ("none", None),
        ("standard", ColorSystem.STANDARD),
        ("256", ColorSystem.EIGHT_BIT),
        ("truecolor", ColorSystem.TRUECOLOR),
    ],
)
def test_resolve_named_color_system(name: str, expected) -> None:
    assert resolve_color_system(name) is expected


def test_resolve_auto_asks_console() -> None:
    console = Console(file=StringIO(), color_system="256")
    assert resolve_color_system("auto", console) is ColorSystem.EIGHT_BIT


def test_resolve_unknown_color_system() -> None:
    with pytest.raises(ValueError):
        resolve_color_system("cga")


def test_styled_plain_without_color_or_system() -> None:
    assert styled("*", None, ColorSystem.TRUECOLOR) == "*"
    assert styled("*", "green", None) == "*"


def test_styled_truecolor_passthrough() -> None:
    assert styled("m", "#8b4513", ColorSystem.TRUECOLOR) == "\x1b[38;2;139;69;19mm\x1b[0m"


def test_styled_depends_on_color_system() -> None:
    standard = styled("o", "red", ColorSystem.STANDARD)
    eight_bit = styled("o", "#ff0000", ColorSystem.EIGHT_BIT)
    assert standard == "\x1b[31mo\x1b[0m"
    assert eight_bit.startswith("\x1b[38;5;")
