"""Data models for the calcpad engine.

Operator enum, History queue, CalculatorState and the Intent variant: all
the typed structures that flow through keymap → engine → render.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

HISTORY_CAPACITY = 5
HISTORY_DELIMITER = "  |  "


class Operator(str, Enum):
    """Binary operators. The value is the symbol shown to the user."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @property
    def symbol(self) -> str:
        return self.value


class History:
    """Fixed-capacity FIFO of completed operations, oldest first."""

    def __init__(self, capacity: int = HISTORY_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"history capacity must be positive, got {capacity}")
        self._entries: deque[str] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    def append(self, entry: str) -> None:
        """Add an entry, evicting the oldest one when full."""
        self._entries.append(entry)

    def entries(self) -> list[str]:
        return list(self._entries)

    def joined(self, delimiter: str = HISTORY_DELIMITER) -> str:
        return delimiter.join(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, History):
            return self.entries() == other.entries()
        if isinstance(other, list):
            return self.entries() == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"History({self.entries()!r}, capacity={self.capacity})"


@dataclass
class CalculatorState:
    """Everything the engine knows about one calculator session.

    ``awaiting_new_operand`` is set right after an operator or equals press;
    the next digit then replaces ``display`` instead of extending it.
    """

    display: str = "0"
    previous_value: Optional[float] = None
    pending_operator: Optional[Operator] = None
    awaiting_new_operand: bool = False
    history: History = field(default_factory=History)

    @property
    def operation_in_progress(self) -> bool:
        return self.previous_value is not None


class IntentKind(str, Enum):
    """Discrete user actions the engine understands."""

    DIGIT = "digit"
    DECIMAL = "decimal"
    OPERATOR = "operator"
    EQUALS = "equals"
    CLEAR = "clear"
    BACKSPACE = "backspace"
    TOGGLE_SIGN = "toggle-sign"
    PERCENT = "percent"


@dataclass(frozen=True)
class Intent:
    """One user action. ``digit`` and ``operator`` carry the payload for
    DIGIT and OPERATOR intents and are None otherwise."""

    kind: IntentKind
    digit: Optional[int] = None
    operator: Optional[Operator] = None

    @classmethod
    def of_digit(cls, digit: int) -> Intent:
        return cls(IntentKind.DIGIT, digit=digit)

    @classmethod
    def of_operator(cls, operator: Operator) -> Intent:
        return cls(IntentKind.OPERATOR, operator=operator)

    def describe(self) -> str:
        if self.kind == IntentKind.DIGIT:
            return f"digit {self.digit}"
        if self.kind == IntentKind.OPERATOR and self.operator is not None:
            return f"operator {self.operator.symbol}"
        return self.kind.value


# Payload-free intents, shared.
DECIMAL = Intent(IntentKind.DECIMAL)
EQUALS = Intent(IntentKind.EQUALS)
CLEAR = Intent(IntentKind.CLEAR)
BACKSPACE = Intent(IntentKind.BACKSPACE)
TOGGLE_SIGN = Intent(IntentKind.TOGGLE_SIGN)
PERCENT = Intent(IntentKind.PERCENT)
