"""Key bindings: raw key names → engine intents.

Key names follow keyboard event names ('Enter', 'Escape', 'Backspace')
plus the labels printed on the keypad ('×', '÷', '±', 'AC', '⌫').
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from calcpad.models import (
    BACKSPACE,
    CLEAR,
    DECIMAL,
    EQUALS,
    PERCENT,
    TOGGLE_SIGN,
    Intent,
    Operator,
)


@dataclass(frozen=True)
class Binding:
    """One row of the key reference table."""

    keys: tuple[str, ...]
    action: str


_OPERATOR_KEYS: dict[str, Operator] = {
    "+": Operator.ADD,
    "-": Operator.SUBTRACT,
    "−": Operator.SUBTRACT,
    "*": Operator.MULTIPLY,
    "×": Operator.MULTIPLY,
    "/": Operator.DIVIDE,
    "÷": Operator.DIVIDE,
}

_ACTION_KEYS: dict[str, Intent] = {
    ".": DECIMAL,
    "=": EQUALS,
    "Enter": EQUALS,
    "Escape": CLEAR,
    "AC": CLEAR,
    "Backspace": BACKSPACE,
    "⌫": BACKSPACE,
    "%": PERCENT,
    "±": TOGGLE_SIGN,
}

# Multi-character key names; everything else is read one character at a time
NAMED_KEYS = frozenset(k for k in _ACTION_KEYS if len(k) > 1)

BINDINGS: list[Binding] = [
    Binding(("0-9",), "Digit"),
    Binding((".",), "Decimal point"),
    Binding(("+",), "Add"),
    Binding(("-", "−"), "Subtract"),
    Binding(("*", "×"), "Multiply"),
    Binding(("/", "÷"), "Divide"),
    Binding(("Enter", "="), "Equals"),
    Binding(("Escape", "AC"), "Clear"),
    Binding(("Backspace", "⌫"), "Backspace"),
    Binding(("±",), "Toggle sign"),
    Binding(("%",), "Percent"),
]


def resolve_key(key: str) -> Optional[Intent]:
    """Map a single key name to its intent.

    Returns None for keys with no binding; the caller decides whether that
    is worth reporting.
    """
    if len(key) == 1 and "0" <= key <= "9":
        return Intent.of_digit(int(key))
    if key in _OPERATOR_KEYS:
        return Intent.of_operator(_OPERATOR_KEYS[key])
    return _ACTION_KEYS.get(key)


def tokenize(line: str) -> list[str]:
    """Split typed input into key names.

    Whitespace separates words; named keys ('Enter', 'AC', ...) stay
    whole and any other word is read one character per key, so '12+3='
    is six keys.
    """
    keys: list[str] = []
    for word in line.split():
        if word in NAMED_KEYS:
            keys.append(word)
        else:
            keys.extend(word)
    return keys
