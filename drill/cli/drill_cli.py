"""
Drill CLI - adaptive timed drills in the terminal.

Usage:
    drill <name>           # Start or resume the session stored in <name>.json

Environment (see config.Settings):
    DRILL_STATE_DIR        # Where session files live (default: .)
    DRILL_ECHO_LOG=1       # Echo diagnostics as '// <message>'
    DRILL_SEED=42          # Reproducible question order
"""

from __future__ import annotations

import random
import sys
from typing import Annotated

import click
import typer
from loguru import logger
from pydantic import ValidationError

from config import Settings, get_settings
from drill.trainer.console_io import ConsoleIO
from drill.trainer.session import DrillSession
from drill.trainer.state_store import StateFormatError, StateStore

EXIT_USAGE = 1
EXIT_CONFIG = 1
EXIT_CORRUPT_STATE = 2
EXIT_INTERRUPTED = 130

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="drill",
    help="Adaptive timed drills: practise until every answer is fast and stable.",
    add_completion=False,
)


def configure_logging(settings: Settings) -> None:
    """Route loguru to stderr; diagnostics only when echo_log is on."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level.upper(),
        format="<level>{message}</level>",
        filter=lambda record: not record["extra"].get("diagnostic"),
    )
    if settings.echo_log:
        logger.add(
            sys.stderr,
            level="DEBUG",
            format="// {message}",
            filter=lambda record: bool(record["extra"].get("diagnostic")),
        )


# =============================================================================
# Commands
# =============================================================================


@app.command()
def start(
    name: Annotated[str, typer.Argument(help="Session name, stored as <name>.json")],
) -> None:
    """
    Start or resume a drill session.

    Runs until the target time moves, then exits with code 0.
    """
    io = ConsoleIO()
    try:
        settings = get_settings()
    except ValidationError as e:
        io.error(f"Invalid DRILL_* settings: {e}")
        raise typer.Exit(EXIT_CONFIG)
    configure_logging(settings)

    session = DrillSession(
        name=name,
        store=StateStore(settings.state_dir),
        io=io,
        rng=random.Random(settings.seed),
        working_set_size=settings.working_set_size,
        bank_range=(settings.bank_min, settings.bank_max),
        skip_first_answer=settings.skip_first_answer,
    )

    try:
        session.load_state()
    except StateFormatError as e:
        io.error(str(e))
        raise typer.Exit(EXIT_CORRUPT_STATE)
    except ValueError as e:
        io.error(f"Can't start session: {e}")
        raise typer.Exit(EXIT_CONFIG)

    try:
        code = session.run()
    except (KeyboardInterrupt, EOFError):
        io.warn("\nInterrupted. Progress is saved up to the last answered question.")
        raise typer.Exit(EXIT_INTERRUPTED)

    raise typer.Exit(code)


# =============================================================================
# Entry Point
# =============================================================================


def run() -> None:
    """Console script entry point. Usage errors exit with code 1."""
    try:
        code = app(standalone_mode=False)
    except click.UsageError as e:
        e.show()
        sys.exit(EXIT_USAGE)
    sys.exit(code or 0)


if __name__ == "__main__":
    run()
