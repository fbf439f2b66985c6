"""Fit one string into an exact terminal-cell budget.

The fitter trims on display width rather than character count, reserving
room for an ellipsis glyph and reporting how many blank cells are needed
when the cut lands inside a wide character.
"""

from __future__ import annotations

from dataclasses import dataclass

from .width import char_width, str_width


@dataclass(frozen=True)
class TrimStatus:
    """Outcome of a fit: untouched, or trimmed with padding/ellipsis details.

    ``padding`` is the count of blank cells (0 or 1) between the trimmed text
    and the ellipsis column, left over when a wide character straddled the
    cut-off point.
    """

    trimmed: bool
    padding: int = 0
    emit_ellipsis: bool = False

    @classmethod
    def untrimmed(cls) -> TrimStatus:
        return cls(trimmed=False)

    @classmethod
    def trimmed_with(cls, padding: int, emit_ellipsis: bool) -> TrimStatus:
        return cls(trimmed=True, padding=padding, emit_ellipsis=emit_ellipsis)


UNTRIMMED = TrimStatus.untrimmed()


@dataclass(frozen=True)
class TrimOutput:
    """Fitted text plus the bookkeeping callers need to place an ellipsis."""

    display: str
    output_width: int
    full_real_width: int
    status: TrimStatus

    @property
    def is_trimmed(self) -> bool:
        return self.status.trimmed

    @property
    def padding(self) -> int:
        return self.status.padding

    @property
    def emit_ellipsis(self) -> bool:
        return self.status.emit_ellipsis

    def ellipsis_offset(self) -> int:
        """Return the column, relative to the text start, where the ellipsis goes."""
        return self.output_width + self.status.padding


def fit_text(text: str, target_width: int, ellipsis_width: int) -> TrimOutput:
    """Trim ``text`` so it plus an optional ellipsis fits ``target_width`` cells.

    When the ellipsis itself is wider than the target, elision is disabled and
    the text is cut hard at ``target_width``. Text that already fits is
    returned unchanged with ``UNTRIMMED`` status.
    """
    if target_width < 0 or ellipsis_width < 0:
        raise ValueError("target_width and ellipsis_width must be >= 0")

    effective_ellipsis_width = ellipsis_width if ellipsis_width <= target_width else 0
    elided_width = target_width - effective_ellipsis_width

    elision_index = 0
    elision_width = 0
    running_width = 0
    for idx, ch in enumerate(text):
        running_width += char_width(ch)
        if running_width > target_width:
            full_real_width = running_width + str_width(text[idx + 1 :])
            padding = elided_width - elision_width
            assert 0 <= padding <= 1, "trim padding exceeds one cell"
            return TrimOutput(
                display=text[:elision_index],
                output_width=elision_width,
                full_real_width=full_real_width,
                status=TrimStatus.trimmed_with(padding, effective_ellipsis_width > 0),
            )
        if running_width <= elided_width:
            elision_index = idx + 1
            elision_width = running_width

    return TrimOutput(
        display=text,
        output_width=running_width,
        full_real_width=running_width,
        status=UNTRIMMED,
    )
