"""Calcpad rendering: read-only views of a CalculatorState as Rich output.

build_view() derives the three lines a calculator screen shows (history,
pending operation, main display); render_view() and render_bindings() draw
them on a Rich console.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from calcpad.engine import format_for_display, format_number
from calcpad.keymap import BINDINGS
from calcpad.models import HISTORY_DELIMITER, CalculatorState


@dataclass(frozen=True)
class CalculatorView:
    """What the screen shows for one state."""

    display: str
    pending: str
    history: str

    def to_dict(self) -> dict:
        return {
            "display": self.display,
            "pending": self.pending,
            "history": self.history,
        }


def _pending_line(state: CalculatorState) -> str:
    """'1,200 ×' while an operation is in progress, '' otherwise."""
    if state.previous_value is None:
        return ""
    value = format_for_display(format_number(state.previous_value))
    if state.pending_operator is None:
        return value
    return f"{value} {state.pending_operator.symbol}"


def build_view(state: CalculatorState, delimiter: str = HISTORY_DELIMITER) -> CalculatorView:
    return CalculatorView(
        display=format_for_display(state.display),
        pending=_pending_line(state),
        history=state.history.joined(delimiter),
    )


def render_view(view: CalculatorView, console: Console, title: str = "calcpad") -> None:
    """Draw a view as a right-aligned calculator screen."""
    lines = Group(
        Text(view.history or " ", style="dim", justify="right", no_wrap=True),
        Text(view.pending or " ", style="dim", justify="right"),
        Text(view.display, style="bold white", justify="right", no_wrap=True),
    )
    console.print(Panel(lines, title=title, border_style="blue", width=48))


def render_bindings(console: Console) -> None:
    table = Table(title="Key Bindings", show_header=True, header_style="bold")
    table.add_column("Keys", style="green", min_width=15)
    table.add_column("Action", min_width=15)

    for binding in BINDINGS:
        table.add_row("  ".join(binding.keys), binding.action)

    console.print()
    console.print(table)
    console.print()
