"""Calculator engine: transition functions over a CalculatorState.

Each transition mutates the state in place and returns it, so calls can be
chained or fed one intent at a time through dispatch(). Evaluation is
immediate and strictly left-to-right: pressing an operator settles whatever
operation was pending before it.

Two modes:
- entering-operand: digits, decimal point, backspace, sign and percent
  edit ``display`` directly
- awaiting-new-operand: the next digit or decimal point starts a fresh
  operand; the other edits are no-ops

Only apply_operator() (and equals(), which delegates to it) moves between
the modes or touches previous_value, pending_operator and history.
"""

from __future__ import annotations

import logging
import math
import re
from decimal import Decimal
from typing import Optional

from calcpad.models import CalculatorState, Intent, IntentKind, Operator

logger = logging.getLogger(__name__)

# A digit boundary followed by whole groups of three digits up to the end
# of the digit run. Never matches right after a leading minus sign.
_GROUPING_RE = re.compile(r"\B(?=(\d{3})+(?!\d))")

# An operand as typed: optional sign, digits, optional fraction in progress.
_NUMERAL_RE = re.compile(r"-?\d+(\.\d*)?")

# Plain notation is used for magnitudes in [1e-6, 1e21).
_MAX_PLAIN_EXPONENT = 21
_MIN_PLAIN_EXPONENT = -6


def _shortest_digits(value: float) -> tuple[str, int]:
    """Split a positive finite float into (digits, exponent).

    ``digits`` is the shortest round-trip digit string without trailing
    zeros, so that value == int(digits) * 10 ** exponent.
    """
    _, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    return stripped, exponent


def format_number(value: float) -> str:
    """Render a number the way the display shows it.

    '10' rather than '10.0', 'Infinity'/'-Infinity'/'NaN' for special
    values, and exponent notation only for very large or very small
    magnitudes ('1e+21', '1e-7').
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    digits, exponent = _shortest_digits(abs(value))
    k = len(digits)
    n = exponent + k  # position of the decimal point relative to digits

    if k <= n <= _MAX_PLAIN_EXPONENT:
        body = digits + "0" * (n - k)
    elif 0 < n <= _MAX_PLAIN_EXPONENT:
        body = f"{digits[:n]}.{digits[n:]}"
    elif _MIN_PLAIN_EXPONENT < n <= 0:
        body = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + body


def format_for_display(text: str) -> str:
    """Insert thousands separators into a display string.

    '1234567.5' → '1,234,567.5'. The fractional part is left untouched.
    Anything that is not a plain numeral ('Infinity', 'NaN', '1e+21',
    '1_000', junk) comes back unchanged.
    """
    if not _NUMERAL_RE.fullmatch(text):
        return text

    integer, point, fraction = text.partition(".")
    return _GROUPING_RE.sub(",", integer) + point + fraction


def _divide(a: float, b: float) -> float:
    """a / b with IEEE-754 results instead of ZeroDivisionError."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def combine(a: float, operator: Operator, b: float) -> float:
    """Apply a binary operator to two operands."""
    if operator == Operator.ADD:
        return a + b
    if operator == Operator.SUBTRACT:
        return a - b
    if operator == Operator.MULTIPLY:
        return a * b
    if operator == Operator.DIVIDE:
        return _divide(a, b)
    raise ValueError(f"Unknown operator: {operator!r}")


# --- Operand editing ---


def input_digit(state: CalculatorState, digit: int) -> CalculatorState:
    """Type a digit, starting a new operand if one is awaited."""
    if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
        raise ValueError(f"Digit must be an integer 0-9, got {digit!r}")

    if state.awaiting_new_operand:
        state.display = str(digit)
        state.awaiting_new_operand = False
    elif state.display == "0":
        state.display = str(digit)
    else:
        state.display += str(digit)
    return state


def input_decimal_point(state: CalculatorState) -> CalculatorState:
    """Type a decimal point. A second one in the same operand is ignored."""
    if state.awaiting_new_operand:
        state.display = "0."
        state.awaiting_new_operand = False
    elif "." not in state.display:
        state.display += "."
    return state


def toggle_sign(state: CalculatorState) -> CalculatorState:
    if state.awaiting_new_operand:
        return state
    if state.display.startswith("-"):
        state.display = state.display[1:]
    else:
        state.display = "-" + state.display
    return state


def backspace(state: CalculatorState) -> CalculatorState:
    """Drop the last typed character; an emptied display reads '0'."""
    if state.awaiting_new_operand:
        return state
    trimmed = state.display[:-1]
    # A lone sign is not a number
    state.display = trimmed if trimmed not in ("", "-") else "0"
    return state


def _plain_numeral(value: float) -> str:
    """Render a finite float without exponent notation ('0.0000001')."""
    if value == 0:
        return "0"
    return format(Decimal(repr(value)).normalize(), "f")


def percent(state: CalculatorState) -> CalculatorState:
    """Divide the operand by 100.

    The result stays editable, so it is written out in full rather than in
    exponent form. An overflowing operand yields a special value, which
    ends the operand like any other result.
    """
    if state.awaiting_new_operand:
        return state
    value = float(state.display) / 100
    if math.isfinite(value):
        state.display = _plain_numeral(value)
    else:
        state.display = format_number(value)
        state.awaiting_new_operand = True
    return state


def clear_all(state: CalculatorState) -> CalculatorState:
    """Reset the operand and pending operation. History is kept."""
    state.display = "0"
    state.previous_value = None
    state.pending_operator = None
    state.awaiting_new_operand = False
    logger.debug("Cleared (history kept: %d entries)", len(state.history))
    return state


# --- Operations ---


def apply_operator(state: CalculatorState, next_operator: Optional[Operator]) -> CalculatorState:
    """Settle the pending operation (if any) and arm ``next_operator``.

    The first operator press only captures the operand. Later presses
    combine previous_value with the display, show the result and log it to
    history. ``next_operator`` of None is what equals() uses.
    """
    # display is always a number here; float() raising means a broken state
    input_value = float(state.display)

    if state.previous_value is None:
        state.previous_value = input_value
    elif state.pending_operator is not None:
        current = state.previous_value
        result = combine(current, state.pending_operator, input_value)
        entry = (
            f"{format_number(current)} {state.pending_operator.symbol} "
            f"{format_number(input_value)} = {format_number(result)}"
        )
        state.previous_value = result
        state.display = format_number(result)
        state.history.append(entry)
        logger.debug("Computed %s", entry)

    state.awaiting_new_operand = True
    state.pending_operator = next_operator
    return state


def equals(state: CalculatorState) -> CalculatorState:
    """Finish the pending operation.

    Does nothing unless an operator is pending and a second operand has
    been typed since; repeated presses do not repeat the last operation.
    """
    if state.pending_operator is None or state.awaiting_new_operand:
        return state
    return apply_operator(state, None)


def dispatch(state: CalculatorState, intent: Intent) -> CalculatorState:
    """Route a single intent to its transition."""
    logger.debug("Intent: %s", intent.describe())
    kind = intent.kind

    if kind == IntentKind.DIGIT:
        if intent.digit is None:
            raise ValueError("DIGIT intent without a digit")
        return input_digit(state, intent.digit)
    if kind == IntentKind.DECIMAL:
        return input_decimal_point(state)
    if kind == IntentKind.OPERATOR:
        if intent.operator is None:
            raise ValueError("OPERATOR intent without an operator")
        return apply_operator(state, intent.operator)
    if kind == IntentKind.EQUALS:
        return equals(state)
    if kind == IntentKind.CLEAR:
        return clear_all(state)
    if kind == IntentKind.BACKSPACE:
        return backspace(state)
    if kind == IntentKind.TOGGLE_SIGN:
        return toggle_sign(state)
    if kind == IntentKind.PERCENT:
        return percent(state)
    raise ValueError(f"Unknown intent kind: {kind!r}")


def press(state: CalculatorState, *intents: Intent) -> CalculatorState:
    """Apply several intents in order."""
    for intent in intents:
        dispatch(state, intent)
    return state
