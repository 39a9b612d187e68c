"""CLI application for split mysqldump backups."""

import sys

import typer

from dumpsplit.cli.common.context import build_dump_context
from dumpsplit.cli.common.exits import exit_from_exc, ok_exit, warn_exit
from dumpsplit.cli.common.options import (
    AdditionalsOpt,
    BatchSizeOpt,
    DatabasesOpt,
    DbThresholdOpt,
    DefaultsFileOpt,
    DryRunOpt,
    ForceSplitOpt,
    HostnameOpt,
    MysqldumpPathOpt,
    OutputDirOpt,
    PasswordOpt,
    ResultFileOpt,
    TableThresholdOpt,
    UsernameOpt,
    VerbosityOpt,
)
from dumpsplit.cli.common.output import Verbosity, out
from dumpsplit.core.credentials import credentials_file
from dumpsplit.core.errors import DumpSplitError
from dumpsplit.core.options import DumpOptions

app = typer.Typer(
    help="mysqldump-split - split mysqldump backups into schema, data and row batches",
    add_completion=False,
)


@app.command()
def dump(
    hostname: str = HostnameOpt,
    username: str = UsernameOpt,
    password: str = PasswordOpt,
    databases: str = DatabasesOpt,
    dbthreshold: int = DbThresholdOpt,
    tablethreshold: int = TableThresholdOpt,
    batchsize: int = BatchSizeOpt,
    forcesplit: bool = ForceSplitOpt,
    additionals: str = AdditionalsOpt,
    verbosity: int = VerbosityOpt,
    mysqldump_path: str | None = MysqldumpPathOpt,
    output_dir: str | None = OutputDirOpt,
    defaults_file: str | None = DefaultsFileOpt,
    result_file: bool = ResultFileOpt,
    dry_run: bool = DryRunOpt,
):
    """
    Dump the configured databases, splitting large ones into batch files.
    """
    out.verbosity = verbosity

    options = DumpOptions.create(
        hostname=hostname,
        username=username,
        password=password,
        databases=databases,
        db_threshold=dbthreshold,
        table_threshold=tablethreshold,
        batch_size=batchsize,
        force_split=forcesplit,
        additional_args=additionals,
        verbosity=verbosity,
        mysqldump_path=mysqldump_path,
        output_dir=output_dir,
        defaults_file=defaults_file,
        result_file=result_file,
    )
    appctx = build_dump_context(options)

    out.header("Running with parameters")
    out.kv(options.summary())
    out.info(f"Running on operating system : {sys.platform}")

    if not options.databases:
        warn_exit("No databases to dump, use --databases", code=0)

    if dry_run:
        try:
            planned = appctx.orchestrator.plan()
        except DumpSplitError as exc:
            exit_from_exc(exc)
        out.plans_table(planned)
        ok_exit("Dry-run enabled: mysqldump was not executed")

    try:
        with credentials_file(options):
            results = appctx.orchestrator.run()
    except DumpSplitError as exc:
        exit_from_exc(exc)

    if out.verbosity >= Verbosity.ALL:
        out.results_table(results)
    out.success(f"Backup finished: {len(results)} database(s)")


if __name__ == "__main__":
    app()
