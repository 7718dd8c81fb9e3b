"""
Console interaction for drill sessions.

Prompts are timed around the blocking read only, so the measured
duration is the user's response time.
"""

from __future__ import annotations

import time

from rich.console import Console
from rich.markup import escape


class ConsoleIO:
    """Line-based prompt/response over a rich console."""

    def __init__(self, console: Console | None = None, err_console: Console | None = None):
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)

    def ask(self, prompt: str) -> tuple[str, float]:
        """Show prompt, read one line. Returns (text, elapsed seconds)."""
        started = time.perf_counter()
        text = self.console.input(escape(prompt))
        return text, time.perf_counter() - started

    def congratulate(self, message: str) -> None:
        self.console.print(f"[bold green]{escape(message)}[/]")

    def warn(self, message: str) -> None:
        self.err_console.print(f"[yellow]{escape(message)}[/]")

    def error(self, message: str) -> None:
        self.err_console.print(f"[red]{escape(message)}[/]")
