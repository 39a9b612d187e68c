"""MySQL INFORMATION_SCHEMA adapter for the table catalog."""

from __future__ import annotations

import mysql.connector

from dumpsplit.core.errors import CatalogError
from dumpsplit.core.models import Table

_TABLES_QUERY = (
    "SELECT table_name, table_rows FROM INFORMATION_SCHEMA.TABLES "
    "WHERE table_schema = %s"
)


class MySQLCatalogAdapter:
    """Adapter reading table row counts from MySQL INFORMATION_SCHEMA."""

    def __init__(
        self,
        hostname: str,
        username: str,
        password: str,
        *,
        port: int = 3306,
    ) -> None:
        self.hostname = hostname
        self.username = username
        self.password = password
        self.port = port

    def _connect(self, database: str):
        return mysql.connector.connect(
            host=self.hostname,
            port=self.port,
            user=self.username,
            password=self.password,
            database=database,
        )

    def list_tables(self, database: str) -> list[Table]:
        """Return the tables of `database` with their estimated row counts."""
        try:
            conn = self._connect(database)
        except mysql.connector.Error as exc:
            raise CatalogError(
                f"Can not connect to database '{database}': {exc}"
            ) from exc

        try:
            cursor = conn.cursor()
            try:
                cursor.execute(_TABLES_QUERY, (database,))
                records = cursor.fetchall()
            finally:
                cursor.close()
        except mysql.connector.Error as exc:
            raise CatalogError(
                f"Can not read tables of database '{database}': {exc}"
            ) from exc
        finally:
            conn.close()

        # views report NULL table_rows
        return [
            Table(name=_as_text(name), row_count=int(row_count or 0))
            for name, row_count in records
        ]


def _as_text(value: object) -> str:
    """Decode identifiers returned as bytes by some server/driver versions."""
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8")
    return str(value)
