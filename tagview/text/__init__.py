"""Display-width text fitting for table cells.

This package contains pure text primitives:
- per-code-point display width measurement
- single-value fitting to an exact cell budget with ellipsis placement
- multi-value layout that elides only at true overflow
"""

from __future__ import annotations

from .figments import Figment, FigmentKind, MultiFigments, render_multi_value
from .fit import UNTRIMMED, TrimOutput, TrimStatus, fit_text
from .width import char_width, joined_width, str_width

__all__ = [
    "char_width",
    "str_width",
    "joined_width",
    "TrimStatus",
    "TrimOutput",
    "UNTRIMMED",
    "fit_text",
    "Figment",
    "FigmentKind",
    "MultiFigments",
    "render_multi_value",
]
