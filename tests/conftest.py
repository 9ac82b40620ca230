import pytest

from calcpad.engine import dispatch
from calcpad.keymap import resolve_key, tokenize
from calcpad.models import CalculatorState


@pytest.fixture
def state():
    """A fresh calculator, as at session start."""
    return CalculatorState()


@pytest.fixture
def press_keys():
    """Apply a typed key string ('7+3=') to a state, one key at a time."""

    def _press(state: CalculatorState, line: str) -> CalculatorState:
        for key in tokenize(line):
            intent = resolve_key(key)
            assert intent is not None, f"unbound key in test input: {key!r}"
            dispatch(state, intent)
        return state

    return _press
