"""Domain datatypes for tabular record sets: columns, sizing and records."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Auto:
    """Width is the widest of the header title and every field in the column."""

    needs_content = True

    def resolve(self, content_width: int) -> int:
        return content_width


@dataclass(frozen=True)
class Fixed:
    width: int

    needs_content = False

    def resolve(self, content_width: int) -> int:
        return self.width


@dataclass(frozen=True)
class Lower:
    """Auto width floored at ``min_width``."""

    min_width: int

    needs_content = True

    def resolve(self, content_width: int) -> int:
        return max(content_width, self.min_width)


@dataclass(frozen=True)
class Upper:
    """Auto width capped at ``max_width``."""

    max_width: int

    needs_content = True

    def resolve(self, content_width: int) -> int:
        return min(content_width, self.max_width)


@dataclass(frozen=True)
class Bound:
    """Auto width clamped to ``[min_width, max_width]``.

    A reversed pair collapses to ``(min_width, min_width)``.
    """

    min_width: int
    max_width: int

    needs_content = True

    def __post_init__(self) -> None:
        if self.min_width > self.max_width:
            logger.warning(
                "sizing bound min %d exceeds max %d; using (%d, %d)",
                self.min_width,
                self.max_width,
                self.min_width,
                self.min_width,
            )
            object.__setattr__(self, "max_width", self.min_width)

    def resolve(self, content_width: int) -> int:
        return min(max(content_width, self.min_width), self.max_width)


Sizing = Auto | Fixed | Lower | Upper | Bound


def _sizing_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"sizing widths must be non-negative integers, got {value!r}")
    return value


def sizing_from_json(raw: object) -> Sizing:
    """Decode a sizing value from its JSON form.

    ``null`` is auto, ``[w]`` fixed, ``[min, null]`` lower, ``[null, max]``
    upper and ``[min, max]`` bound.
    """
    if raw is None:
        return Auto()
    if not isinstance(raw, list) or len(raw) not in (1, 2):
        raise ValueError(f"unrecognized sizing value: {raw!r}")
    if len(raw) == 1:
        return Fixed(_sizing_int(raw[0]))
    low, high = raw
    if low is None and high is None:
        raise ValueError("sizing pair needs at least one bound")
    if high is None:
        return Lower(_sizing_int(low))
    if low is None:
        return Upper(_sizing_int(high))
    return Bound(_sizing_int(low), _sizing_int(high))


class InfoKind(Enum):
    FILE_NAME = "file_name"
    FILE_PATH = "file_path"


@dataclass(frozen=True)
class MetaKey:
    """Column key reading a metadata entry by name."""

    name: str


@dataclass(frozen=True)
class InfoKey:
    """Column key deriving a value from the record's file path."""

    kind: InfoKind


ColumnKey = MetaKey | InfoKey


@dataclass
class Column:
    key: ColumnKey
    title: str
    sizing: Sizing = field(default_factory=Auto)


FieldValue = tuple[str, ...]


def _normalize_values(value: str | Sequence[str]) -> FieldValue:
    if isinstance(value, str):
        return (value,)
    return tuple(str(item) for item in value)


@dataclass
class Record:
    """One row: metadata values keyed by name plus the source file path.

    Every metadata entry holds one or more strings; entries with no values
    are dropped so they read as absent. An empty path is stored as ``None``.
    """

    metadata: dict[str, FieldValue] = field(default_factory=dict)
    file_path: Path | None = None

    def __post_init__(self) -> None:
        normalized: dict[str, FieldValue] = {}
        for key, value in self.metadata.items():
            values = _normalize_values(value)
            if values:
                normalized[key] = values
        self.metadata = normalized
        if self.file_path is not None and not self.file_path.parts:
            self.file_path = None

    @classmethod
    def from_mapping(
        cls,
        metadata: Mapping[str, str | Sequence[str]],
        file_path: Path | str | None = None,
    ) -> Record:
        path = Path(file_path) if file_path else None
        return cls(metadata=dict(metadata), file_path=path)

    def get_meta(self, name: str) -> FieldValue | None:
        return self.metadata.get(name)

    def get_info(self, kind: InfoKind) -> FieldValue | None:
        if self.file_path is None:
            return None
        if kind is InfoKind.FILE_NAME:
            name = self.file_path.name
            return (name,) if name else None
        return (str(self.file_path),)

    def get(self, key: ColumnKey) -> FieldValue | None:
        """Return the field for ``key``, or ``None`` when absent."""
        if isinstance(key, MetaKey):
            return self.get_meta(key.name)
        return self.get_info(key.kind)


__all__ = [
    "Auto",
    "Fixed",
    "Lower",
    "Upper",
    "Bound",
    "Sizing",
    "sizing_from_json",
    "InfoKind",
    "MetaKey",
    "InfoKey",
    "ColumnKey",
    "Column",
    "FieldValue",
    "Record",
]
