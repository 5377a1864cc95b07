"""ANSI styling of glyph text.

Colors are passed through to :mod:`rich`, which downgrades true-color values
to the 256 or 16 color palettes when the terminal asks for it. A color system
of ``None`` produces plain text, which is what tests compare against.
"""

from functools import lru_cache
from typing import Dict, Optional

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style

from snowscape.types import Color


COLOR_SYSTEMS: Dict[str, Optional[ColorSystem]] = {
    "none": None,
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "windows": ColorSystem.WINDOWS,
}
COLOR_SYSTEM_CHOICES = ("auto", "none", "standard", "256", "truecolor")


def resolve_color_system(
    name: str, console: Optional[Console] = None
) -> Optional[ColorSystem]:
    """Turn a configured color system name into a rich ``ColorSystem``.

    ``"auto"`` asks ``console`` (a fresh :class:`rich.console.Console` if not
    given) what the attached terminal supports; ``None`` means no color.

    Raises:
        ValueError: If ``name`` is not a known color system.
    """
    if name == "auto":
        detected = (console or Console()).color_system
        return COLOR_SYSTEMS[detected] if detected is not None else None
    if name not in COLOR_SYSTEMS:
        raise ValueError(
            f"Unknown color system {name!r}; choose from {COLOR_SYSTEM_CHOICES}"
        )
    return COLOR_SYSTEMS[name]


@lru_cache(maxsize=1024)
def styled(text: str, color: Color, color_system: Optional[ColorSystem]) -> str:
    """Return ``text`` wrapped in the SGR codes for ``color``."""
    if color is None or color_system is None:
        return text
    # A fresh Style per entry: rich caches the ANSI codes on the instance.
    return Style(color=color).render(text, color_system=color_system)
