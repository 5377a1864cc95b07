"""Cell content model.

Every layer answers a cell query with one of three values:

* :class:`Transparent` - nothing to draw, lower layers show through.
* :class:`Glyph` - an opaque character with a color and a display width.
* :class:`Continuation` - the second column of a width-2 glyph inside a
  content sequence built by a layer (e.g. a line of text).

Display width follows the common East-Asian convention used by terminals:
ASCII characters take one column, everything else takes two. A sequence
built by :func:`text_to_contents` therefore has exactly
``text_width(text)`` entries, one per column, so a layer can index it with
``x - offset`` directly.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, TypeGuard, Union

from pyrsistent import pvector
from pyrsistent.typing import PVector

from snowscape.types import Color


@dataclass(frozen=True)
class Transparent:
    """Nothing to draw at this cell."""


@dataclass(frozen=True)
class Glyph:
    """Opaque renderable unit.

    Attributes:
        text: The character(s) to print.
        color: Foreground color name, ``None`` for the terminal default.
        width: Terminal columns covered by ``text``.
    """

    text: str
    color: Color = None
    width: int = 1


@dataclass(frozen=True)
class Continuation:
    """Column already covered by the preceding width-2 glyph."""


Content = Union[Transparent, Glyph, Continuation]

TRANSPARENT = Transparent()
CONTINUATION = Continuation()


def char_width(char: str) -> int:
    """Return the display width of a single character."""
    return 1 if char.isascii() else 2


def text_width(text: str) -> int:
    """Return the display width of ``text``."""
    return sum(char_width(char) for char in text)


def glyph(text: str, color: Color = None) -> Glyph:
    """Build a :class:`Glyph` with its width computed from ``text``."""
    return Glyph(text=text, color=color, width=text_width(text))


def is_opaque(content: Content) -> TypeGuard[Glyph]:
    """Return True if ``content`` hides the layers behind it.

    ``Continuation`` is not opaque: when the compositor reaches one by a
    direct query it is handled like ``Transparent``.
    """
    return isinstance(content, Glyph)


def text_to_contents(text: str, color: Color = None) -> PVector[Content]:
    """Expand ``text`` into one content entry per terminal column.

    Each character becomes a :class:`Glyph`; a wide character is followed by
    one :class:`Continuation` per extra column it covers.
    """
    contents = []
    for char in text:
        item = glyph(char, color)
        contents.append(item)
        contents.extend([CONTINUATION] * (item.width - 1))
    return pvector(contents)


def check_sequence(contents: Iterable[Content]) -> None:
    """Validate the continuation invariant of a content sequence.

    Raises:
        ValueError: If a ``Continuation`` does not follow a wide glyph, or a
            wide glyph is not followed by all of its continuations.
    """
    pending = 0
    owner: Optional[Glyph] = None
    for index, content in enumerate(contents):
        if isinstance(content, Continuation):
            if pending == 0:
                raise ValueError(
                    f"Continuation at index {index} does not follow a wide glyph"
                )
            pending -= 1
            continue
        if pending > 0:
            raise ValueError(
                f"Glyph {owner!r} is missing {pending} continuation(s) at index {index}"
            )
        if isinstance(content, Glyph):
            owner = content
            pending = content.width - 1
    if pending > 0:
        raise ValueError(f"Sequence ends inside wide glyph {owner!r}")
