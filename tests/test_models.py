"""Tests for the calcpad data models: History queue, state defaults, intents."""

import pytest

from calcpad.models import (
    HISTORY_CAPACITY,
    CalculatorState,
    History,
    Intent,
    IntentKind,
    Operator,
)


# --- History ---

def test_history_starts_empty():
    history = History()
    assert len(history) == 0
    assert history.entries() == []
    assert history.joined() == ""


def test_history_keeps_insertion_order():
    history = History()
    for entry in ("a", "b", "c"):
        history.append(entry)
    assert history.entries() == ["a", "b", "c"]
    assert list(history) == ["a", "b", "c"]


def test_history_evicts_oldest_first():
    history = History(capacity=5)
    for i in range(6):
        history.append(f"entry {i}")
    assert len(history) == 5
    assert history.entries() == [f"entry {i}" for i in range(1, 6)]


def test_history_joined_uses_delimiter():
    history = History()
    history.append("1 + 1 = 2")
    history.append("2 × 3 = 6")
    assert history.joined() == "1 + 1 = 2  |  2 × 3 = 6"
    assert history.joined(", ") == "1 + 1 = 2, 2 × 3 = 6"


def test_history_entries_is_a_copy():
    history = History()
    history.append("x")
    history.entries().append("y")
    assert history.entries() == ["x"]


def test_history_rejects_non_positive_capacity():
    with pytest.raises(ValueError):
        History(capacity=0)


def test_history_compares_to_list():
    history = History()
    history.append("7 + 3 = 10")
    assert history == ["7 + 3 = 10"]


# --- CalculatorState ---

def test_initial_state():
    state = CalculatorState()
    assert state.display == "0"
    assert state.previous_value is None
    assert state.pending_operator is None
    assert state.awaiting_new_operand is False
    assert state.history == []
    assert state.history.capacity == HISTORY_CAPACITY == 5


def test_states_do_not_share_history():
    a = CalculatorState()
    b = CalculatorState()
    a.history.append("1 + 1 = 2")
    assert len(b.history) == 0


# --- Intents ---

def test_operator_symbols():
    assert [op.symbol for op in Operator] == ["+", "-", "×", "÷"]


def test_intent_constructors():
    assert Intent.of_digit(7) == Intent(IntentKind.DIGIT, digit=7)
    assert Intent.of_operator(Operator.DIVIDE).operator is Operator.DIVIDE


def test_intent_describe():
    assert Intent.of_digit(3).describe() == "digit 3"
    assert Intent.of_operator(Operator.MULTIPLY).describe() == "operator ×"
    assert Intent(IntentKind.TOGGLE_SIGN).describe() == "toggle-sign"
