"""CLI for the calcpad calculator.

Usage:
    python -m calcpad keys                     # Show key bindings
    python -m calcpad press 7 + 3 =            # Replay keys, show the screen
    python -m calcpad press 12+3= --trace      # Show the screen after every key
    python -m calcpad press 9-4-2= --json      # Print the final screen as JSON
    python -m calcpad repl                     # Type keys interactively
"""

from __future__ import annotations

import json
import logging
from typing import List

import typer
from rich.console import Console
from rich.logging import RichHandler

from calcpad.keymap import tokenize
from calcpad.models import HISTORY_DELIMITER, Intent
from calcpad.render import render_bindings, render_view
from calcpad.session import Session

app = typer.Typer(
    name="calcpad",
    help="Immediate-execution keypad calculator",
    no_args_is_help=True,
)
console = Console(stderr=True)

_QUIT_WORDS = ("q", "quit", "exit")


def setup_logging(level: str) -> None:
    """Route log records through Rich on stderr."""
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        console.print(f"[red]Invalid log level: {level}[/red]. Choose: DEBUG, INFO, WARNING, ERROR")
        raise typer.Exit(1)
    logging.basicConfig(
        level=numeric,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING", "--log-level", "-l", envvar="CALCPAD_LOG_LEVEL", help="DEBUG shows every transition"
    ),
) -> None:
    setup_logging(log_level)


@app.command("keys")
def cmd_keys() -> None:
    """Show key bindings."""
    render_bindings(console)


@app.command("press")
def cmd_press(
    keys: List[str] = typer.Argument(help="Keys to press, e.g. '7 + 3 =' or '12+3='"),
    trace: bool = typer.Option(False, "--trace", "-t", help="Show the screen after every key"),
    as_json: bool = typer.Option(False, "--json", help="Print the final screen as JSON on stdout"),
    delimiter: str = typer.Option(
        HISTORY_DELIMITER, "--delimiter", envvar="CALCPAD_DELIMITER", help="Separator between history entries"
    ),
) -> None:
    """Replay a sequence of keys and show the result."""
    session = Session(delimiter=delimiter)

    def _trace(key: str, intent: Intent) -> None:
        render_view(session.view(), console, title=f"after {key}")

    result = session.feed_keys(tokenize(" ".join(keys)), on_key=_trace if trace else None)
    if result.ignored:
        console.print(f"[yellow]Ignored unbound keys: {' '.join(result.ignored)}[/yellow]")

    view = session.view()
    if as_json:
        typer.echo(json.dumps(view.to_dict(), ensure_ascii=False))
    elif not trace:
        render_view(view, console)


@app.command("repl")
def cmd_repl(
    delimiter: str = typer.Option(
        HISTORY_DELIMITER, "--delimiter", envvar="CALCPAD_DELIMITER", help="Separator between history entries"
    ),
) -> None:
    """Type keys line by line; 'q' quits."""
    session = Session(delimiter=delimiter)
    console.print("[dim]Type keys (e.g. 12+3=, Enter, Escape, Backspace). 'q' quits.[/dim]")
    render_view(session.view(), console)

    while True:
        try:
            line = console.input("[bold]> [/bold]")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if line.strip().lower() in _QUIT_WORDS:
            break

        result = session.feed_line(line)
        if result.ignored:
            console.print(f"[yellow]Ignored unbound keys: {' '.join(result.ignored)}[/yellow]")
        render_view(session.view(), console)


if __name__ == "__main__":
    app()
