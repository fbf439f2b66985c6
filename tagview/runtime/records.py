"""Build the initial record set from a directory or a JSON records document.

Directory scans give one record per regular file with empty metadata, so
path-derived columns are populated. Records documents carry metadata maps.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ..table_model import Record

logger = logging.getLogger(__name__)


class RecordsError(ValueError):
    """Raised when a records document is unreadable or malformed."""


def scan_directory(directory: Path, show_hidden: bool = False) -> list[Record]:
    """Return one record per regular file directly inside ``directory``, by name."""
    records: list[Record] = []
    for child in sorted(directory.iterdir(), key=lambda p: p.name):
        if not show_hidden and child.name.startswith("."):
            continue
        if not child.is_file():
            continue
        records.append(Record(file_path=child))
    logger.debug("scanned %d records from %s", len(records), directory)
    return records


def _parse_metadata(raw: object, index: int) -> dict[str, tuple[str, ...]]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise RecordsError(f"record {index}: metadata must be an object")
    metadata: dict[str, tuple[str, ...]] = {}
    for key, value in raw.items():
        if isinstance(value, str):
            metadata[key] = (value,)
        elif isinstance(value, list) and all(isinstance(item, str) for item in value):
            metadata[key] = tuple(value)
        else:
            raise RecordsError(f"record {index}: value for {key!r} must be a string or list of strings")
    return metadata


def parse_records(data: object, base_dir: Path | None = None) -> list[Record]:
    """Decode a records document; relative paths resolve against ``base_dir``."""
    if isinstance(data, dict):
        data = data.get("records")
    if not isinstance(data, list):
        raise RecordsError('records document must be a list or an object with a "records" list')

    records: list[Record] = []
    for index, raw in enumerate(data):
        if not isinstance(raw, dict):
            raise RecordsError(f"record {index}: must be an object")
        raw_path = raw.get("path")
        if raw_path is not None and not isinstance(raw_path, str):
            raise RecordsError(f"record {index}: path must be a string")
        file_path = Path(raw_path) if raw_path else None
        if file_path is not None and base_dir is not None and not file_path.is_absolute():
            file_path = base_dir / file_path
        records.append(Record(metadata=_parse_metadata(raw.get("metadata"), index), file_path=file_path))
    return records


def load_records_file(path: Path) -> list[Record]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RecordsError(f"cannot read records {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RecordsError(f"invalid JSON in records {path}: {exc}") from exc
    return parse_records(data, base_dir=path.parent)


def load_records(path: Path, show_hidden: bool = False) -> list[Record]:
    """Load records from a directory scan or a ``.json`` records document."""
    if path.is_dir():
        return scan_directory(path, show_hidden=show_hidden)
    if path.suffix.lower() == ".json":
        return load_records_file(path)
    raise RecordsError(f"expected a directory or a .json records file: {path}")
