"""Terminal display-width measurement for plain (unstyled) text.

Widths are computed per code point, not per grapheme cluster.
Wide/fullwidth characters take two cells and zero-width marks take none.
"""

from __future__ import annotations

import unicodedata

_ZERO_WIDTH_CATEGORIES = frozenset({"Mn", "Me", "Cf", "Cc"})


def char_width(ch: str) -> int:
    """Return terminal cell width for one code point.

    Combining marks, format characters and control characters consume no
    columns, East Asian wide/fullwidth characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.category(ch) in _ZERO_WIDTH_CATEGORIES:
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def str_width(text: str) -> int:
    """Return the summed display width of ``text``."""
    return sum(char_width(ch) for ch in text)


def joined_width(values: list[str] | tuple[str, ...], separator_width: int) -> int:
    """Return display width of ``values`` joined by a separator of given width."""
    if not values:
        return 0
    return sum(str_width(value) for value in values) + separator_width * (len(values) - 1)
