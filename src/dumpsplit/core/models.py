"""Core domain models for split mysqldump backups.

This module defines the data structures that flow through the dump pipeline:
catalog tables, the database unit of work, the partition decision, row
windows and the per-file mysqldump invocation plan. These models are
intentionally simple, immutable, and free of any infrastructure or
presentation concerns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class Table:
    """
    Represents a table as reported by the catalog.

    Attributes:
        name: Table name inside its database.
        row_count: Row count reported by the catalog at fetch time.
    """

    name: str
    row_count: int


@dataclass(frozen=True)
class DatabaseUnit:
    """
    Represents one database to back up, together with its tables.

    Attributes:
        name: Database (schema) name.
        tables: Tables in catalog order.
    """

    name: str
    tables: tuple[Table, ...] = ()

    @property
    def row_count(self) -> int:
        """Aggregate row count over all tables."""
        return sum(t.row_count for t in self.tables)


class PartitionDecision(str, Enum):
    """
    Output-file shape chosen for one database.

    Values:
        WHOLE: A single file with schema and data.
        SCHEMA_PLUS_DATA: One schema-only file and one data-only file.
        SCHEMA_PLUS_TABLE_BATCHES: One schema file plus row-range batch
            files for every table.
    """

    WHOLE = "WHOLE"
    SCHEMA_PLUS_DATA = "SCHEMA_PLUS_DATA"
    SCHEMA_PLUS_TABLE_BATCHES = "SCHEMA_PLUS_TABLE_BATCHES"


@dataclass(frozen=True)
class BatchWindow:
    """A row range `[offset, offset + limit)` requested from mysqldump."""

    offset: int
    limit: int

    def where_clause(self) -> str:
        """Return the mysqldump `--where` expression selecting this window."""
        return f"1=1 LIMIT {self.offset}, {self.limit}"


@dataclass(frozen=True)
class InvocationPlan:
    """
    Fully specified mysqldump run producing one output artifact.

    Attributes:
        command_path: Path of the mysqldump binary.
        arguments: Discrete argument tokens, in order.
        tag: File tag (ALL, SCHEMA, DATA or <table><index>).
        output_file: Target file when mysqldump writes it directly,
                     None when the result is read from stdout.
        window: Row window for per-table batch plans.
    """

    command_path: str
    arguments: tuple[str, ...]
    tag: str
    output_file: Path | None = None
    window: BatchWindow | None = None

    def command_line(self) -> list[str]:
        """Return the full command, binary first, as passed to the OS."""
        return [self.command_path, *self.arguments]
