"""Exit handling utilities for the CLI."""

from typing import NoReturn

import typer

from dumpsplit.cli.common.output import out
from dumpsplit.core.errors import DumpSplitError


def ok_exit(msg: str | None = None) -> NoReturn:
    """Exit successfully with an optional informational message."""
    if msg:
        out.success(msg)
    raise typer.Exit(0)


def exit_from_exc(exc: DumpSplitError) -> NoReturn:
    """
    Print a fatal dump error and exit with the code it carries.

    Exists to keep the cause chained on the raised typer.Exit.
    """
    out.error(str(exc))
    raise typer.Exit(exc.exit_code) from exc


def warn_exit(msg: str, code: int = 0) -> NoReturn:
    """Exit with a warning message and optional exit code."""
    out.warn(msg)
    raise typer.Exit(code)
