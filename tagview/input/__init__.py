"""Keyboard input: raw key decoding and key-to-action bindings."""

from __future__ import annotations

from .keymap import DEFAULT_BINDINGS, KeyBinding, KeyMap, TableAction
from .keys import read_key

__all__ = [
    "DEFAULT_BINDINGS",
    "KeyBinding",
    "KeyMap",
    "TableAction",
    "read_key",
]
