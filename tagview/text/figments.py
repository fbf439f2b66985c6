"""Lay out several field values, joined by a separator, in a fixed width.

Produces positioned fragments ("figments") rather than one string so the
renderer can style separators apart from values. Elision happens only where
the combined sequence truly overflows: a value that overflows the space left
before the ellipsis is kept whole when everything after it still fits.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum
from typing import NamedTuple

from .fit import fit_text
from .width import str_width


class FigmentKind(Enum):
    VALUE = "value"
    SEPARATOR = "separator"
    PADDING = "padding"
    ELLIPSIS = "ellipsis"


class Figment(NamedTuple):
    """One positioned fragment; ``offset`` is in cells from the field start."""

    offset: int
    text: str
    kind: FigmentKind

    def is_separator(self) -> bool:
        return self.kind is FigmentKind.SEPARATOR


class _Phase(Enum):
    HEAD = "head"
    TAIL = "tail"
    ELLIPSIS = "ellipsis"
    DONE = "done"


class MultiFigments:
    """Restartable lazy sequence of figments for one multi-valued field.

    Each ``iter()`` starts a fresh pass; a single iterator is consumed once.
    """

    def __init__(
        self,
        values: Iterable[str],
        target_width: int,
        separator: str,
        ellipsis: str,
    ) -> None:
        if target_width < 0:
            raise ValueError("target_width must be >= 0")
        self.values = tuple(values)
        self.target_width = target_width
        self.separator = separator
        self.ellipsis = ellipsis
        ellipsis_width = str_width(ellipsis)
        self.ellipsis_width = ellipsis_width if ellipsis_width <= target_width else 0

    def __iter__(self) -> Iterator[Figment]:
        return self._figments()

    def _pieces(self) -> list[tuple[str, FigmentKind]]:
        pieces: list[tuple[str, FigmentKind]] = []
        for idx, value in enumerate(self.values):
            if idx > 0:
                pieces.append((self.separator, FigmentKind.SEPARATOR))
            pieces.append((value, FigmentKind.VALUE))
        return pieces

    def _figments(self) -> Iterator[Figment]:
        pieces = self._pieces()
        uncontested_width = self.target_width - self.ellipsis_width
        phase = _Phase.HEAD
        offset = 0
        padding = 0
        idx = 0

        while phase is not _Phase.DONE:
            if phase is _Phase.HEAD:
                if idx >= len(pieces):
                    phase = _Phase.DONE
                    continue
                text, kind = pieces[idx]
                idx += 1
                trial = fit_text(text, max(0, uncontested_width - offset), 0)
                if not trial.is_trimmed:
                    if text:
                        yield Figment(offset, text, kind)
                    offset += trial.output_width
                    continue

                # Speculative trim: confirm against everything still to come.
                forward_width = offset + trial.full_real_width
                forward_width += sum(str_width(rest) for rest, _ in pieces[idx:])
                if forward_width > self.target_width:
                    if trial.display:
                        yield Figment(offset, trial.display, kind)
                    offset += trial.output_width
                    padding = trial.padding
                    phase = _Phase.ELLIPSIS
                else:
                    yield Figment(offset, text, kind)
                    offset += trial.full_real_width
                    phase = _Phase.TAIL

            elif phase is _Phase.TAIL:
                for text, kind in pieces[idx:]:
                    if text:
                        yield Figment(offset, text, kind)
                    offset += str_width(text)
                idx = len(pieces)
                phase = _Phase.DONE

            elif phase is _Phase.ELLIPSIS:
                for _ in range(padding):
                    yield Figment(offset, " ", FigmentKind.PADDING)
                    offset += 1
                if self.ellipsis_width > 0:
                    yield Figment(offset, self.ellipsis, FigmentKind.ELLIPSIS)
                phase = _Phase.DONE


def render_multi_value(
    values: Iterable[str],
    target_width: int,
    separator: str,
    ellipsis: str,
) -> MultiFigments:
    """Return the figment sequence for ``values`` fitted into ``target_width`` cells."""
    return MultiFigments(values, target_width, separator, ellipsis)
