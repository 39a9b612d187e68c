"""Threshold policy deciding how a database backup is partitioned."""

from __future__ import annotations

from dumpsplit.core.models import PartitionDecision


def decide(
    aggregate_row_count: int,
    table_count: int,
    database_threshold: int,
    force_split: bool,
) -> PartitionDecision:
    """
    Select the partition strategy for one database.

    Rules, in order of precedence:
      1) not forced and rows <= threshold  -> WHOLE
      2) forced and rows <= threshold      -> SCHEMA_PLUS_DATA
      3) rows > threshold                  -> SCHEMA_PLUS_TABLE_BATCHES

    A database without tables has zero rows, so it is dumped whole unless
    a split is forced, in which case an (empty) data file is still produced.

    Args:
        aggregate_row_count: Sum of the row counts of all tables.
        table_count: Number of tables (not used by the rules).
        database_threshold: Database-level row threshold (inclusive).
        force_split: Split schema and data even below the threshold.

    Returns:
        The PartitionDecision for the database.
    """
    if aggregate_row_count <= database_threshold:
        if force_split:
            return PartitionDecision.SCHEMA_PLUS_DATA
        return PartitionDecision.WHOLE
    return PartitionDecision.SCHEMA_PLUS_TABLE_BATCHES
