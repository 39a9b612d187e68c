"""Per-database dump orchestration.

For every configured database, in configuration order:
  fetch tables -> aggregate rows -> threshold policy -> build plans -> run

Databases share no state. The first error aborts the run and the remaining
databases are not attempted. The orchestrator reports progress through a
Reporter and never prints or exits by itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from dumpsplit.core.catalog import TableCatalog, load_database
from dumpsplit.core.invocations import build_plans
from dumpsplit.core.models import DatabaseUnit, InvocationPlan, PartitionDecision
from dumpsplit.core.options import DumpOptions
from dumpsplit.core.policy import decide


class Reporter(Protocol):
    """Sink for leveled progress messages."""

    def info(self, msg: str) -> None: ...

    def warn(self, msg: str) -> None: ...

    def error(self, msg: str) -> None: ...

    def raw(self, text: str) -> None: ...


class PlanRunner(Protocol):
    """Executes one invocation plan and returns its captured stdout."""

    def run(self, plan: InvocationPlan) -> str: ...


@dataclass(frozen=True)
class DatabasePlan:
    """Partition decision and invocation plans for one database."""

    database: DatabaseUnit
    decision: PartitionDecision
    plans: list[InvocationPlan] = field(default_factory=list)


@dataclass(frozen=True)
class DatabaseDumpResult:
    """Outcome of a completed database dump."""

    database: str
    decision: PartitionDecision
    table_count: int
    row_count: int
    invocations: int
    files: tuple[Path, ...] = ()


class DumpOrchestrator:
    """Drives the dump pipeline over all configured databases."""

    def __init__(
        self,
        options: DumpOptions,
        catalog: TableCatalog,
        runner: PlanRunner,
        reporter: Reporter,
    ) -> None:
        self.options = options
        self.catalog = catalog
        self.runner = runner
        self.reporter = reporter
        self._context = options.dump_context()

    def plan_database(self, name: str) -> DatabasePlan:
        """Fetch table metadata for `name` and build its invocation plans."""
        self.reporter.info(f"Getting tables for database : {name}")
        unit = load_database(self.catalog, name)
        self.reporter.info(f"{len(unit.tables)} tables retrieved : {name}")
        if not unit.tables:
            self.reporter.warn(f"Database {name} has no tables")

        decision = decide(
            unit.row_count,
            len(unit.tables),
            self.options.db_threshold,
            self.options.force_split,
        )
        self.reporter.info(
            f"forcesplit={self.options.force_split} rows={unit.row_count} "
            f"dbthreshold={self.options.db_threshold} -> {decision.value}"
        )
        plans = build_plans(decision, unit.name, unit.tables, self._context)
        return DatabasePlan(database=unit, decision=decision, plans=plans)

    def dump_database(self, name: str) -> DatabaseDumpResult:
        """Plan and execute the dump of one database, one file at a time."""
        self.reporter.info(f"Processing Database : {name}")
        planned = self.plan_database(name)

        for plan in planned.plans:
            self.reporter.info(
                "mysqldump is being executed with parameters : "
                + " ".join(plan.command_line())
            )
            output = self.runner.run(plan)
            if output:
                self.reporter.info("mysqldump output is :")
                self.reporter.raw(output)

        self.reporter.info(f"Processing done for database : {name}")
        return DatabaseDumpResult(
            database=name,
            decision=planned.decision,
            table_count=len(planned.database.tables),
            row_count=planned.database.row_count,
            invocations=len(planned.plans),
            files=tuple(p.output_file for p in planned.plans if p.output_file),
        )

    def plan(self) -> list[DatabasePlan]:
        """Build the plans of every configured database without running them."""
        return [self.plan_database(name) for name in self.options.databases]

    def run(self) -> list[DatabaseDumpResult]:
        """
        Dump every configured database in configuration order.

        Raises:
            ExecutionError: On the first failing mysqldump invocation.
            CatalogError: If table metadata cannot be read.
        """
        return [self.dump_database(name) for name in self.options.databases]
