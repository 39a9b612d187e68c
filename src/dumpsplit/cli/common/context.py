"""Application context management for the CLI."""

from dataclasses import dataclass

from dumpsplit.cli.common.exits import exit_from_exc
from dumpsplit.cli.common.output import out
from dumpsplit.core.adapters.mysqlcatalog import MySQLCatalogAdapter
from dumpsplit.core.errors import ConfigurationError
from dumpsplit.core.options import DumpOptions
from dumpsplit.core.orchestrator import DumpOrchestrator
from dumpsplit.core.runner import InvocationRunner


@dataclass
class DumpAppContext:
    """Application context holding the run options, catalog adapter and orchestrator."""

    options: DumpOptions
    catalog: MySQLCatalogAdapter
    orchestrator: DumpOrchestrator


def build_dump_context(options: DumpOptions) -> DumpAppContext:
    """Validate the options and build the application context.

    Args:
        options: Run configuration built from the command line.

    Returns:
        DumpAppContext: Context with configured catalog adapter and orchestrator.
    """
    try:
        options.validate()
    except ConfigurationError as exc:
        exit_from_exc(exc)
    catalog = MySQLCatalogAdapter(options.hostname, options.username, options.password)
    orchestrator = DumpOrchestrator(options, catalog, InvocationRunner(), out)
    return DumpAppContext(options=options, catalog=catalog, orchestrator=orchestrator)
