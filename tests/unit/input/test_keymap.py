"""Tests for key-token to table-action bindings."""

import unittest

from tagview.input import KeyBinding, KeyMap, TableAction


class KeyMapTests(unittest.TestCase):
    def test_default_bindings(self) -> None:
        keymap = KeyMap()
        expected = {
            "UP": TableAction.UP,
            "k": TableAction.UP,
            "j": TableAction.DOWN,
            "LEFT": TableAction.LEFT,
            "l": TableAction.RIGHT,
            "PAGE_DOWN": TableAction.PAGE_DOWN,
            "ALT_A": TableAction.SORT_ASCENDING,
            "ALT_D": TableAction.SORT_DESCENDING,
            "q": TableAction.QUIT,
            "CTRL_C": TableAction.QUIT,
        }
        for key, action in expected.items():
            with self.subTest(key=key):
                self.assertIs(keymap.action_for(key), action)

    def test_unbound_key_has_no_action(self) -> None:
        self.assertIsNone(KeyMap().action_for("x"))
        self.assertIsNone(KeyMap(bindings=()).action_for("q"))

    def test_later_binding_overrides_earlier(self) -> None:
        keymap = KeyMap().bind(KeyBinding(("q",), TableAction.SORT_ASCENDING))
        self.assertIs(keymap.action_for("q"), TableAction.SORT_ASCENDING)
        self.assertIs(keymap.action_for("CTRL_C"), TableAction.QUIT)

    def test_normalizer_applies_to_bindings_and_lookups(self) -> None:
        keymap = KeyMap(bindings=(KeyBinding(("alt_a",), TableAction.SORT_ASCENDING),), normalize=str.upper)
        self.assertIs(keymap.action_for("Alt_A"), TableAction.SORT_ASCENDING)


if __name__ == "__main__":
    unittest.main()
