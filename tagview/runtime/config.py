"""Column definitions and persisted UI preferences.

The columns file is user-authored and parsed strictly: a malformed file is a
``ConfigError``. UI preferences are read defensively; missing or malformed
data falls back to defaults and write failures are ignored.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from ..table_model import Column, ColumnKey, InfoKey, InfoKind, MetaKey, sizing_from_json

logger = logging.getLogger(__name__)

APP_NAME = "tagview"
CONFIG_DIR = Path(user_config_dir(APP_NAME, appauthor=False))
CONFIG_PATH = CONFIG_DIR / "config.json"
COLUMNS_PATH = CONFIG_DIR / "columns.json"


class ConfigError(ValueError):
    """Raised when a columns config file cannot be used."""


def default_columns() -> list[Column]:
    return [
        Column(MetaKey("ARTIST"), "Artist"),
        Column(MetaKey("TITLE"), "Title"),
        Column(MetaKey("ALBUM"), "Album"),
        Column(InfoKey(InfoKind.FILE_NAME), "File Name"),
    ]


def _info_kind(value: object) -> InfoKind:
    try:
        return InfoKind(value)
    except ValueError:
        raise ConfigError(f"unknown info key: {value!r}") from None


def _column_key(raw: dict[str, object]) -> ColumnKey:
    """Decode a column key from either ``{"key": {...}}`` or flattened form."""
    key = raw.get("key")
    if isinstance(key, dict):
        kind = key.get("kind")
        if kind == "meta" and isinstance(key.get("name"), str):
            return MetaKey(key["name"])
        if kind == "info":
            return InfoKey(_info_kind(key.get("value")))
        raise ConfigError(f"invalid column key: {key!r}")
    if isinstance(raw.get("meta"), str):
        return MetaKey(raw["meta"])
    if "info" in raw:
        return InfoKey(_info_kind(raw["info"]))
    raise ConfigError(f"column has no key: {raw!r}")


def parse_column(raw: object) -> Column:
    if not isinstance(raw, dict):
        raise ConfigError(f"column entry must be an object, got {raw!r}")
    key = _column_key(raw)
    title = raw.get("title")
    if not isinstance(title, str):
        raise ConfigError(f"column title must be a string, got {title!r}")
    try:
        sizing = sizing_from_json(raw.get("sizing"))
    except ValueError as exc:
        raise ConfigError(f"column {title!r}: {exc}") from exc
    return Column(key=key, title=title, sizing=sizing)


def parse_columns(data: object) -> list[Column]:
    """Decode the ``columns`` list of a config document, keeping its order."""
    if not isinstance(data, dict) or not isinstance(data.get("columns"), list):
        raise ConfigError('config must be an object with a "columns" list')
    return [parse_column(raw) for raw in data["columns"]]


def load_columns(path: Path | None = None) -> list[Column]:
    """Load column definitions.

    An explicit ``path`` must exist and parse. Without one, the user config
    directory's columns file is used when present, else built-in defaults.
    """
    if path is None:
        if not COLUMNS_PATH.exists():
            logger.debug("no columns file at %s; using defaults", COLUMNS_PATH)
            return default_columns()
        path = COLUMNS_PATH
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"cannot read config {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config {path}: {exc}") from exc
    return parse_columns(data)


def load_config() -> dict[str, object]:
    """Load the persisted JSON preferences object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist preferences as pretty-printed JSON, ignoring write failures."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.debug("could not save config %s: %s", CONFIG_PATH, exc)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)
