"""
Conversión entre texto de pantalla y valores numéricos.

El motor guarda la entrada como texto y opera con floats; este módulo
concentra las reglas que unen ambos mundos:

    - parse_number(text) -> float   (NaN si el texto no es un numeral)
    - normalize(value) -> str       (12 decimales, 15 cifras o centinela)
    - format_entry(text) -> str     (agrupación de miles para la pantalla)
    - format_number(value) -> str   (operandos de la fórmula)
"""

from __future__ import annotations

import math
import re
from decimal import Decimal


RESULT_DECIMALS = 12
SIGNIFICANT_DIGITS = 15

NAN_TEXT = "NaN"
INF_TEXT = "∞"
NEG_INF_TEXT = "-∞"
SENTINELS = (NAN_TEXT, INF_TEXT, NEG_INF_TEXT)

_NUMERAL_RE = re.compile(
    r"^(?P<sign>-?)(?P<int>\d+)(?P<dot>\.)?(?P<frac>\d*)$"
)


# ── Lectura ──────────────────────────────────────────────────────

def is_sentinel(text: str) -> bool:
    return text in SENTINELS


def parse_number(text: str) -> float:
    """Interpreta un numeral de la entrada.

    Solo acepta la forma que produce el teclado (signo opcional, dígitos,
    un punto). Los centinelas y cualquier otro texto devuelven NaN, igual
    que un parseo fallido; nunca se lanza excepción.
    """
    if not text or _NUMERAL_RE.fullmatch(text) is None:
        return math.nan
    return float(text)


def is_finite_number(value) -> bool:
    return value is not None and math.isfinite(value)


# ── Normalización ────────────────────────────────────────────────

def number_to_text(value: float) -> str:
    """Texto decimal plano (sin exponente) del float más corto equivalente."""
    if value == 0:
        return "0"
    return format(Decimal(repr(value)).normalize(), "f")


def normalize(value: float) -> str:
    if math.isnan(value):
        return NAN_TEXT
    if math.isinf(value):
        return INF_TEXT if value > 0 else NEG_INF_TEXT
    rounded = round(value, RESULT_DECIMALS)
    return number_to_text(float(f"{rounded:.{SIGNIFICANT_DIGITS}g}"))


# ── Formato de pantalla ──────────────────────────────────────────

def group_thousands(digits: str) -> str:
    return f"{int(digits or '0'):,}"


def format_entry(text: str) -> str:
    """Agrupa la parte entera; la fracción se muestra tal cual se tecleó."""
    if is_sentinel(text):
        return text

    match = _NUMERAL_RE.fullmatch(text)
    if match is None:
        return text

    result = match.group("sign") + group_thousands(match.group("int"))
    if match.group("dot"):
        result += "." + match.group("frac")
    return result


def format_number(value: float) -> str:
    if math.isnan(value):
        return NAN_TEXT
    if math.isinf(value):
        return INF_TEXT if value > 0 else NEG_INF_TEXT
    return format_entry(number_to_text(value))
