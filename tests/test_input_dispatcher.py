"""
Tests for the key and button dispatcher.
"""
import pytest

from calculator_engine import Operation
from input_dispatcher import (
    KeyDispatcher,
    action_for_key,
    button_action_for_key,
    normalize_key,
)


class TestKeyMapping:
    """Tests for key → action translation."""

    @pytest.mark.parametrize("key, expected", [
        ("7", "digit:7"),
        ("+", "add"),
        ("-", "subtract"),
        ("*", "multiply"),
        ("x", "multiply"),
        ("X", "multiply"),
        ("/", "divide"),
        ("Enter", "equals"),
        ("=", "equals"),
        (".", "decimal"),
        ("%", "percent"),
        ("Escape", "clear-all"),
        ("Backspace", "backspace"),
    ])
    def test_browser_keys(self, key, expected):
        assert action_for_key(key) == expected

    @pytest.mark.parametrize("keysym, expected", [
        ("Return", "Enter"),
        ("KP_Enter", "Enter"),
        ("BackSpace", "Backspace"),
        ("KP_Add", "+"),
        ("KP_7", "7"),
        ("slash", "/"),
    ])
    def test_tk_keysyms(self, keysym, expected):
        assert normalize_key(keysym) == expected

    def test_unknown_key(self):
        assert action_for_key("F1") is None
        assert action_for_key("a") is None

    def test_backspace_highlights_clear_entry(self):
        assert button_action_for_key("BackSpace") == "clear-entry"
        assert button_action_for_key("5") == "digit:5"


class TestKeyDispatcher:
    """Tests for KeyDispatcher."""

    def test_handle_key_drives_engine(self, engine):
        dispatcher = KeyDispatcher(engine)
        for key in ["1", "2", "KP_Add", "8", "Return"]:
            assert dispatcher.handle_key(key)
        assert engine.display_text == "20"

    def test_unhandled_key_returns_false(self, engine):
        dispatcher = KeyDispatcher(engine)
        assert dispatcher.handle_key("Tab") is False
        assert engine.entry == "0"

    def test_button_actions(self, engine):
        dispatcher = KeyDispatcher(engine)
        for action in ["digit:9", "toggle-sign", "multiply", "digit:3", "equals"]:
            dispatcher.dispatch_action(action)
        assert engine.display_text == "-27"
        dispatcher.dispatch_action("clear-all")
        assert engine.formula_text == ""

    def test_clear_entry_action(self, engine):
        dispatcher = KeyDispatcher(engine)
        for action in ["digit:4", "divide", "digit:8", "clear-entry"]:
            dispatcher.dispatch_action(action)
        assert engine.entry == "0"
        assert engine.pending_operator is Operation.DIVIDE

    def test_digit_actions_append(self, engine):
        dispatcher = KeyDispatcher(engine)
        for action in ["digit:1", "digit:0", "digit:0"]:
            dispatcher.dispatch_action(action)
        assert engine.entry == "100"

    def test_unknown_action_raises(self, engine):
        dispatcher = KeyDispatcher(engine)
        with pytest.raises(ValueError):
            dispatcher.dispatch_action("power")


class TestOperation:
    """Tests for the Operation enum."""

    def test_from_name(self):
        assert Operation.from_name("subtract") is Operation.SUBTRACT

    def test_symbols(self):
        assert [op.symbol for op in Operation] == ["+", "−", "×", "÷"]

    def test_divide_by_zero_is_nan(self):
        result = Operation.DIVIDE.apply(1.0, 0.0)
        assert result != result
