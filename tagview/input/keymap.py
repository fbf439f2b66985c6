"""Key-token to table-action bindings.

Bindings translate tokens produced by ``read_key`` into ``TableAction``
values; what an action does to the model is up to the app.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum


class TableAction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    SORT_ASCENDING = "sort_ascending"
    SORT_DESCENDING = "sort_descending"
    QUIT = "quit"


@dataclass(frozen=True)
class KeyBinding:
    """One or more key tokens triggering a single action."""

    keys: tuple[str, ...]
    action: TableAction


DEFAULT_BINDINGS: tuple[KeyBinding, ...] = (
    KeyBinding(("UP", "k"), TableAction.UP),
    KeyBinding(("DOWN", "j"), TableAction.DOWN),
    KeyBinding(("LEFT", "h"), TableAction.LEFT),
    KeyBinding(("RIGHT", "l"), TableAction.RIGHT),
    KeyBinding(("PAGE_UP",), TableAction.PAGE_UP),
    KeyBinding(("PAGE_DOWN",), TableAction.PAGE_DOWN),
    KeyBinding(("ALT_A",), TableAction.SORT_ASCENDING),
    KeyBinding(("ALT_D",), TableAction.SORT_DESCENDING),
    KeyBinding(("q", "CTRL_C"), TableAction.QUIT),
)


class KeyMap:
    """Lookup table from key tokens to actions, with optional normalization.

    Binding a key again replaces its previous action.
    """

    def __init__(
        self,
        bindings: Iterable[KeyBinding] = DEFAULT_BINDINGS,
        normalize: Callable[[str], str] | None = None,
    ) -> None:
        self._normalize = normalize if normalize is not None else str
        self._actions: dict[str, TableAction] = {}
        self.bind_all(*bindings)

    def bind(self, binding: KeyBinding) -> KeyMap:
        for key in binding.keys:
            self._actions[self._normalize(key)] = binding.action
        return self

    def bind_all(self, *bindings: KeyBinding) -> KeyMap:
        for binding in bindings:
            self.bind(binding)
        return self

    def action_for(self, key: str) -> TableAction | None:
        """Return the action bound to ``key``, or ``None`` when unbound."""
        return self._actions.get(self._normalize(key))
