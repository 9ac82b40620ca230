"""Calcpad session: serializes key presses into a single engine state.

Data flow per key:
1. Resolve the key name to an Intent (keymap)
2. Dispatch the intent against the session's state (engine)
3. Report unbound keys back to the caller instead of failing

Keys are applied one at a time, in the order given.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from calcpad.engine import dispatch
from calcpad.keymap import resolve_key, tokenize
from calcpad.models import HISTORY_DELIMITER, CalculatorState, Intent
from calcpad.render import CalculatorView, build_view

logger = logging.getLogger(__name__)


@dataclass
class FeedResult:
    """Outcome of feeding a batch of keys."""

    applied: list[Intent] = field(default_factory=list)
    ignored: list[str] = field(default_factory=list)


@dataclass
class Session:
    """One calculator session: a state plus the delimiter used to show history."""

    state: CalculatorState = field(default_factory=CalculatorState)
    delimiter: str = HISTORY_DELIMITER

    def feed(self, key: str) -> Optional[Intent]:
        """Apply one key. Returns the intent, or None if the key is unbound."""
        intent = resolve_key(key)
        if intent is None:
            logger.info("Ignoring unbound key %r", key)
            return None
        dispatch(self.state, intent)
        return intent

    def feed_keys(
        self,
        keys: Iterable[str],
        on_key: Optional[Callable[[str, Intent], None]] = None,
    ) -> FeedResult:
        """Apply keys in order.

        ``on_key`` is called with the key and its intent after each bound
        key has been applied.
        """
        result = FeedResult()
        for key in keys:
            intent = self.feed(key)
            if intent is None:
                result.ignored.append(key)
                continue
            result.applied.append(intent)
            if on_key is not None:
                on_key(key, intent)
        return result

    def feed_line(self, line: str) -> FeedResult:
        """Tokenize a typed line and apply every key in it."""
        return self.feed_keys(tokenize(line))

    def view(self) -> CalculatorView:
        return build_view(self.state, self.delimiter)
