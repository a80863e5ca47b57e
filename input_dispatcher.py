"""Traducción de teclas y botones del teclado a operaciones del motor."""

from __future__ import annotations

import logging

from calculator_engine import CalculatorEngine, Operation


logger = logging.getLogger(__name__)


# Keysyms de tkinter → nombre de tecla equivalente del navegador.
TK_KEYSYMS = {
    "Return": "Enter",
    "KP_Enter": "Enter",
    "BackSpace": "Backspace",
    "plus": "+",
    "KP_Add": "+",
    "minus": "-",
    "KP_Subtract": "-",
    "asterisk": "*",
    "KP_Multiply": "*",
    "slash": "/",
    "KP_Divide": "/",
    "period": ".",
    "KP_Decimal": ".",
    "percent": "%",
    "equal": "=",
}

# Tecla → acción del teclado en pantalla.
KEY_ACTIONS = {
    "+": "add",
    "-": "subtract",
    "*": "multiply",
    "x": "multiply",
    "X": "multiply",
    "/": "divide",
    "Enter": "equals",
    "=": "equals",
    ".": "decimal",
    "%": "percent",
    "Escape": "clear-all",
    "Backspace": "backspace",
}

# Backspace no tiene botón propio en el diseño clásico; se resalta CE.
_HIGHLIGHT_OVERRIDES = {
    "Backspace": "clear-entry",
}


def normalize_key(key: str) -> str:
    if key.startswith("KP_") and key[3:].isdigit():
        return key[3:]
    return TK_KEYSYMS.get(key, key)


def action_for_key(key: str) -> str | None:
    key = normalize_key(key)
    if len(key) == 1 and key.isdigit():
        return f"digit:{key}"
    return KEY_ACTIONS.get(key)


def button_action_for_key(key: str) -> str | None:
    """Acción del botón que debe resaltarse al pulsar la tecla."""
    key = normalize_key(key)
    if key in _HIGHLIGHT_OVERRIDES:
        return _HIGHLIGHT_OVERRIDES[key]
    return action_for_key(key)


class KeyDispatcher:
    """Despacha eventos de entrada hacia un CalculatorEngine."""

    def __init__(self, engine: CalculatorEngine):
        self.engine = engine
        self._simple_actions = {
            "decimal": engine.input_decimal,
            "equals": engine.compute,
            "clear-all": engine.reset,
            "clear-entry": engine.clear_entry,
            "toggle-sign": engine.toggle_sign,
            "percent": engine.percent,
            "backspace": engine.backspace,
        }

    def dispatch_action(self, action: str):
        """Ejecuta una acción de botón.

        Raises:
            ValueError: acción que no existe en el teclado.
        """
        if action.startswith("digit:"):
            _, _, digit = action.partition(":")
            self.engine.input_digit(digit)
            return

        handler = self._simple_actions.get(action)
        if handler is not None:
            handler()
            return

        self.engine.set_operation(Operation.from_name(action))

    def handle_key(self, key: str) -> bool:
        """Procesa una tecla física. Devuelve False si no le corresponde."""
        action = action_for_key(key)
        if action is None:
            logger.debug("Tecla sin acción: %r", key)
            return False

        self.dispatch_action(action)
        return True
