"""Tests for key name resolution and line tokenizing."""

import pytest

from calcpad.keymap import BINDINGS, NAMED_KEYS, resolve_key, tokenize
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


@pytest.mark.parametrize("key", list("0123456789"))
def test_digit_keys(key):
    assert resolve_key(key) == Intent.of_digit(int(key))


@pytest.mark.parametrize(
    "key, operator",
    [
        ("+", Operator.ADD),
        ("-", Operator.SUBTRACT),
        ("−", Operator.SUBTRACT),
        ("*", Operator.MULTIPLY),
        ("×", Operator.MULTIPLY),
        ("/", Operator.DIVIDE),
        ("÷", Operator.DIVIDE),
    ],
)
def test_operator_keys(key, operator):
    assert resolve_key(key) == Intent.of_operator(operator)


def test_action_keys():
    assert resolve_key(".") == DECIMAL
    assert resolve_key("=") == EQUALS
    assert resolve_key("Enter") == EQUALS
    assert resolve_key("Escape") == CLEAR
    assert resolve_key("AC") == CLEAR
    assert resolve_key("Backspace") == BACKSPACE
    assert resolve_key("⌫") == BACKSPACE
    assert resolve_key("%") == PERCENT
    assert resolve_key("±") == TOGGLE_SIGN


@pytest.mark.parametrize("key", ["x", "q", "enter", "12", "", " "])
def test_unbound_keys(key):
    assert resolve_key(key) is None


def test_tokenize_splits_characters():
    assert tokenize("12+3=") == ["1", "2", "+", "3", "="]


def test_tokenize_keeps_named_keys_whole():
    assert tokenize("5 Backspace 7 Enter") == ["5", "Backspace", "7", "Enter"]
    assert tokenize("AC") == ["AC"]


def test_tokenize_ignores_whitespace():
    assert tokenize("  7  +   3 ") == ["7", "+", "3"]
    assert tokenize("") == []


def test_every_named_key_is_bound():
    for key in NAMED_KEYS:
        assert resolve_key(key) is not None


def test_binding_table_covers_documented_keys():
    listed = {key for binding in BINDINGS for key in binding.keys}
    for key in (".", "+", "-", "*", "/", "Enter", "=", "Escape", "Backspace"):
        assert key in listed
