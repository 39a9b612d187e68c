"""Build mysqldump invocations for a partition decision.

Each output file maps to exactly one InvocationPlan. Building is pure: no
directories are created and nothing is executed here (see runner.py).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from dumpsplit.core.batches import plan_batches
from dumpsplit.core.models import BatchWindow, InvocationPlan, PartitionDecision, Table

TAG_ALL = "ALL"
TAG_SCHEMA = "SCHEMA"
TAG_DATA = "DATA"

SCHEMA_ONLY_FLAGS = ("--no-data",)
DATA_ONLY_FLAGS = ("--no-create-db", "--skip-triggers", "--no-create-info")

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


@dataclass(frozen=True)
class DumpContext:
    """
    Naming and credential context shared by all invocations of a run.

    Attributes:
        command_path: mysqldump binary.
        defaults_file: Credentials file passed via --defaults-extra-file.
        hostname: MySQL server host.
        username: MySQL user.
        output_dir: Root directory for dump files.
        started_at: Run start time, used in every file name.
        batch_size: Rows per batch file.
        additional_args: Raw user arguments, split on whitespace.
        result_file: Let mysqldump write the file itself (--result-file).
    """

    command_path: str
    defaults_file: Path
    hostname: str
    username: str
    output_dir: Path
    started_at: datetime
    batch_size: int
    additional_args: str = ""
    result_file: bool = False

    @property
    def timestamp(self) -> str:
        return self.started_at.strftime(TIMESTAMP_FORMAT)

    def extra_arguments(self) -> list[str]:
        return self.additional_args.split()

    def output_path(self, database: str, tag: str) -> Path:
        """Return `<output_dir>/<db>/<db>_<tag>_<timestamp>.sql`."""
        return self.output_dir / database / f"{database}_{tag}_{self.timestamp}.sql"


def _build_plan(
    context: DumpContext,
    database: str,
    tag: str,
    flags: Iterable[str] = (),
    *,
    table: str | None = None,
    window: BatchWindow | None = None,
) -> InvocationPlan:
    args = [
        f"--defaults-extra-file={context.defaults_file}",
        f"-h{context.hostname}",
        f"-u{context.username}",
    ]
    args.extend(flags)
    args.extend(context.extra_arguments())

    output_file = None
    if context.result_file:
        output_file = context.output_path(database, tag)
        args.append(f"--result-file={output_file}")

    if window is not None:
        args.append(f"--where={window.where_clause()}")

    args.append(database)
    if table is not None:
        args.append(table)

    return InvocationPlan(
        command_path=context.command_path,
        arguments=tuple(args),
        tag=tag,
        output_file=output_file,
        window=window,
    )


def whole_plan(context: DumpContext, database: str) -> InvocationPlan:
    """Schema and data of the whole database in one file."""
    return _build_plan(context, database, TAG_ALL)


def schema_plan(context: DumpContext, database: str) -> InvocationPlan:
    """Schema-only dump of the database."""
    return _build_plan(context, database, TAG_SCHEMA, SCHEMA_ONLY_FLAGS)


def data_plan(context: DumpContext, database: str) -> InvocationPlan:
    """Data-only dump of the whole database."""
    return _build_plan(context, database, TAG_DATA, DATA_ONLY_FLAGS)


def table_batch_plans(
    context: DumpContext, database: str, table: Table
) -> list[InvocationPlan]:
    """One data-only plan per row window of `table`, tagged `<table><n>`."""
    return [
        _build_plan(
            context,
            database,
            f"{table.name}{index}",
            DATA_ONLY_FLAGS,
            table=table.name,
            window=window,
        )
        for index, window in enumerate(
            plan_batches(table.row_count, context.batch_size), start=1
        )
    ]


def build_plans(
    decision: PartitionDecision,
    database: str,
    tables: Iterable[Table],
    context: DumpContext,
) -> list[InvocationPlan]:
    """
    Build the ordered invocation plans realizing `decision` for a database.

    Args:
        decision: Partition strategy chosen by the threshold policy.
        database: Database name.
        tables: Tables in catalog order (only used for table batches).
        context: Naming and credential context of the run.

    Returns:
        A list with one InvocationPlan per output file.
    """
    if decision is PartitionDecision.WHOLE:
        return [whole_plan(context, database)]

    if decision is PartitionDecision.SCHEMA_PLUS_DATA:
        return [schema_plan(context, database), data_plan(context, database)]

    plans = [schema_plan(context, database)]
    for table in tables:
        plans.extend(table_batch_plans(context, database, table))
    return plans
