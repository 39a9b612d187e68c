"""Catalog lookups used by the dump pipeline."""

from __future__ import annotations

from typing import Protocol

from dumpsplit.core.models import DatabaseUnit, Table


class TableCatalog(Protocol):
    """Interface for reading per-table row counts of a database."""

    def list_tables(self, database: str) -> list[Table]:
        """Return the tables of `database` with their row counts."""
        ...


def load_database(catalog: TableCatalog, database: str) -> DatabaseUnit:
    """Fetch a snapshot of `database` as a DatabaseUnit."""
    return DatabaseUnit(name=database, tables=tuple(catalog.list_tables(database)))
