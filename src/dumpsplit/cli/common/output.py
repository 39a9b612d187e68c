"""Output formatting utilities for the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterable, Mapping

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

_THEME = Theme(
    {
        "ok": "bold green",
        "warn": "bright_yellow",
        "err": "bold bright_red",
        "title": "bold cyan",
        "meta": "dim",
    }
)

console = Console(theme=_THEME)

RAW_ENCODING = "utf-8"


class Severity(IntEnum):
    """Ordered message severities."""

    INFO = 0
    WARNING = 1
    ERROR = 2


class Verbosity(IntEnum):
    """
    Console verbosity levels.

    Values:
        ERRORS: Only errors.
        WARNINGS: Errors and warnings.
        ALL: Everything, including progress information.
    """

    ERRORS = 0
    WARNINGS = 1
    ALL = 2


def is_visible(severity: Severity, verbosity: int) -> bool:
    """Return True if a message of `severity` passes the verbosity floor."""
    return severity >= Severity.ERROR - verbosity


@dataclass
class Out:
    """Output formatter for CLI messages and tables."""

    verbosity: int = Verbosity.ALL

    def _emit(self, severity: Severity, line: str) -> None:
        if is_visible(severity, self.verbosity):
            console.print(line)

    def info(self, msg: str) -> None:
        """Print an info message."""
        self._emit(Severity.INFO, f"[title]›[/] [ok]{escape(msg)}[/]")

    def success(self, msg: str) -> None:
        """Print a success message."""
        self._emit(Severity.INFO, f"[ok]✓[/] {escape(msg)}")

    def warn(self, msg: str) -> None:
        """Print a warning message."""
        self._emit(Severity.WARNING, f"[warn]⚠ {escape(msg)}[/]")

    def error(self, msg: str) -> None:
        """Print an error message."""
        self._emit(Severity.ERROR, f"[err]✗ {escape(msg)}[/]")

    def raw(self, text: str) -> None:
        """
        Write captured dump text unchanged, at info level.

        Skips rich rendering entirely (no markup, emoji, highlighting or
        wrapping). Text decoded with "surrogateescape" gets its original
        bytes back when the stream exposes a binary buffer.
        """
        if not is_visible(Severity.INFO, self.verbosity):
            return
        if not text.endswith("\n"):
            text += "\n"
        data = text.encode(RAW_ENCODING, "surrogateescape")

        stream = console.file
        buffer = getattr(stream, "buffer", None)
        if buffer is None:
            stream.write(data.decode(RAW_ENCODING, "replace"))
        else:
            stream.flush()
            buffer.write(data)
            buffer.flush()

    def header(self, title: str) -> None:
        """Print a header message."""
        self._emit(Severity.INFO, f"[title]{escape(title)}[/]")

    def kv(self, items: Mapping[str, Any]) -> None:
        """Print key-value pairs."""
        for k, v in items.items():
            self._emit(Severity.INFO, f"[meta]{escape(str(k))}[/]: {escape(str(v))}")

    def plans_table(self, database_plans: Iterable[Any], title: str = "Planned dumps") -> None:
        """
        Render the invocation plans of one or more databases.

        Expects objects with `.database.name`, `.decision` and `.plans`
        (like dumpsplit.core.orchestrator.DatabasePlan).
        """
        t = Table(title=title, show_lines=False)
        t.add_column("Database", style="ok", no_wrap=True)
        t.add_column("Decision", style="meta")
        t.add_column("Tag")
        t.add_column("Rows", style="meta")
        t.add_column("Output")

        for dp in database_plans:
            for plan in dp.plans:
                window = plan.window
                rows = f"{window.offset}+{window.limit}" if window else ""
                target = str(plan.output_file) if plan.output_file else "stdout"
                t.add_row(
                    escape(dp.database.name),
                    dp.decision.value,
                    escape(plan.tag),
                    rows,
                    escape(target),
                )

        console.print(t)

    def results_table(self, results: Iterable[Any], title: str = "Dump results") -> None:
        """
        Expects objects with .database .decision .table_count .row_count
        .invocations (like dumpsplit.core.orchestrator.DatabaseDumpResult)
        """
        t = Table(title=title, show_lines=False)
        t.add_column("Database", style="ok", no_wrap=True)
        t.add_column("Decision", style="meta")
        t.add_column("Tables")
        t.add_column("Rows")
        t.add_column("Files")

        for r in results:
            t.add_row(
                escape(r.database),
                r.decision.value,
                str(r.table_count),
                str(r.row_count),
                str(r.invocations),
            )

        console.print(t)


out = Out()
