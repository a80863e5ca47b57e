"""
Motor aritmético de la calculadora de entrada inmediata.

La clase CalculatorEngine recibe eventos discretos del teclado (dígitos,
operadores, porcentaje, signo, borrado, igual) y mantiene el estado de
una sesión. No conoce la interfaz: el renderizador lee las salidas
después de cada llamada.

Contrato de interfaz:
    - input_digit(d), input_decimal(), toggle_sign(), percent()
    - set_operation(op: Operation), compute()
    - backspace(), clear_entry(), reset()
    - display_text, formula_text, updated, errored: propiedades de lectura
"""

from __future__ import annotations

import logging
import operator
from enum import Enum

from number_format import (
    NAN_TEXT,
    format_entry,
    format_number,
    is_finite_number,
    is_sentinel,
    normalize,
    parse_number,
)


logger = logging.getLogger(__name__)

MAX_ENTRY_DIGITS = 15
ERROR_FORMULA = "Error"


def _divide(a: float, b: float) -> float:
    # Convención de calculadora: dividir entre cero no da ±infinito.
    if b == 0:
        return float("nan")
    return a / b


class Operation(Enum):
    """Operadores binarios disponibles en el teclado."""

    ADD = ("add", "+", operator.add)
    SUBTRACT = ("subtract", "−", operator.sub)
    MULTIPLY = ("multiply", "×", operator.mul)
    DIVIDE = ("divide", "÷", _divide)

    def __init__(self, action: str, symbol: str, fn):
        self.action = action
        self.symbol = symbol
        self._fn = fn

    def apply(self, a: float, b: float) -> float:
        return self._fn(a, b)

    @classmethod
    def from_name(cls, name: str) -> "Operation":
        for op in cls:
            if op.action == name:
                return op
        raise ValueError(f"Operación desconocida: {name!r}")


class CalculatorEngine:
    """Estado aritmético de una sesión, mutado en sitio por cada evento."""

    def __init__(self):
        self.reset()

    # ── Salidas ──────────────────────────────────────────────────

    @property
    def display_text(self) -> str:
        return format_entry(self.entry)

    @property
    def formula_text(self) -> str:
        if self._errored:
            return ERROR_FORMULA

        if self.pending_operator is not None and self.stored_operand is not None:
            return f"{format_number(self.stored_operand)} {self.pending_operator.symbol}"

        if (
            self.last_operator is not None
            and self.last_operand is not None
        ):
            left = self.last_left_operand
            if left is None:
                left = parse_number(self.entry)
            return (
                f"{format_number(left)} {self.last_operator.symbol} "
                f"{format_number(self.last_operand)}"
            )

        return ""

    @property
    def updated(self) -> bool:
        """True si la última llamada fue una evaluación (anima el resultado)."""
        return self._updated

    @property
    def errored(self) -> bool:
        return self._errored

    # ── Borrado ──────────────────────────────────────────────────

    def reset(self):
        self.entry = "0"
        self.stored_operand: float | None = None
        self.pending_operator: Operation | None = None
        self.last_operand: float | None = None
        self.last_operator: Operation | None = None
        self.last_left_operand: float | None = None
        self.awaiting_fresh_entry = False
        self._errored = False
        self._updated = False

    def clear_entry(self):
        self._updated = False
        self.entry = "0"
        self.awaiting_fresh_entry = False

    def backspace(self):
        self._updated = False
        if self.awaiting_fresh_entry:
            return

        current = self.entry
        if (
            is_sentinel(current)
            or len(current) <= 1
            or (len(current) == 2 and current.startswith("-"))
        ):
            self.entry = "0"
        else:
            self.entry = current[:-1]

    # ── Entrada ──────────────────────────────────────────────────

    def input_digit(self, digit: str):
        self._updated = False
        if len(digit) != 1 or not digit.isdigit():
            logger.debug("Dígito ignorado: %r", digit)
            return

        if self.awaiting_fresh_entry or is_sentinel(self.entry):
            self.entry = digit
            self.awaiting_fresh_entry = False
            return

        if self.entry in ("0", "-0"):
            self.entry = self.entry[:-1] + digit
        elif self._digit_count(self.entry) < MAX_ENTRY_DIGITS:
            self.entry += digit

    def input_decimal(self):
        self._updated = False
        if self.awaiting_fresh_entry or is_sentinel(self.entry):
            self.entry = "0."
            self.awaiting_fresh_entry = False
            return

        if "." not in self.entry:
            self.entry += "."

    def toggle_sign(self):
        self._updated = False
        if self.entry in ("0", NAN_TEXT):
            return
        if self.entry.startswith("-"):
            self.entry = self.entry[1:]
        else:
            self.entry = f"-{self.entry}"

    def percent(self):
        self._updated = False
        value = parse_number(self.entry)
        if not is_finite_number(value):
            return

        if self.stored_operand is not None and self.pending_operator is not None:
            # Porcentaje relativo al operando izquierdo: 200 + 10% → 20
            self.entry = normalize(self.stored_operand * (value / 100))
        else:
            self.entry = normalize(value / 100)

    @staticmethod
    def _digit_count(text: str) -> int:
        return sum(1 for c in text if c.isdigit())

    # ── Operadores ───────────────────────────────────────────────

    def set_operation(self, op: Operation):
        self._updated = False
        if self.pending_operator is not None and not self.awaiting_fresh_entry:
            # Encadenado izquierda a derecha: 5 + 3 × evalúa 5 + 3 primero.
            self.compute()

        value = parse_number(self.entry)
        if not is_finite_number(value):
            logger.debug("Operador %s ignorado: entrada %r", op.action, self.entry)
            return

        self.stored_operand = value
        self.pending_operator = op
        self.last_operand = None
        self.last_operator = None
        self.awaiting_fresh_entry = True
        self._errored = False

    def compute(self):
        self._updated = False

        if self.pending_operator is None:
            if not self._has_last_evaluation():
                return
            self._rearm_repeat_equals()

        self._updated = True

        op = self.pending_operator
        a = self.stored_operand
        if a is None:
            a = parse_number(self.entry)
        b = self._right_operand(op, a)

        if not (is_finite_number(a) and is_finite_number(b)):
            self._fail_evaluation(f"operando no numérico ({a!r} {op.symbol} {b!r})")
            return

        result = normalize(op.apply(a, b))
        if result == NAN_TEXT:
            self._fail_evaluation(f"{a!r} {op.symbol} {b!r} no tiene resultado")
            return

        self.last_operand = b
        self.last_operator = op
        self.last_left_operand = a
        self.entry = result
        self.stored_operand = None
        self.pending_operator = None
        self.awaiting_fresh_entry = is_sentinel(result)
        self._errored = False

    def _has_last_evaluation(self) -> bool:
        return self.last_operand is not None and self.last_operator is not None

    def _rearm_repeat_equals(self):
        self.pending_operator = self.last_operator
        self.stored_operand = parse_number(self.entry)

    def _right_operand(self, op: Operation, a: float) -> float:
        if self.awaiting_fresh_entry:
            # "=" justo después del operador: reutiliza el último operando o a.
            return self.last_operand if self.last_operand is not None else a

        if self._is_repeat_equals(op):
            return self.last_operand

        return parse_number(self.entry)

    def _is_repeat_equals(self, op: Operation) -> bool:
        return (
            self.last_operand is not None
            and op is self.last_operator
            and self.stored_operand is not None
        )

    def _fail_evaluation(self, reason: str):
        logger.debug("Evaluación inválida: %s", reason)
        self.entry = NAN_TEXT
        self.stored_operand = None
        self.pending_operator = None
        self.awaiting_fresh_entry = True
        self._errored = True
