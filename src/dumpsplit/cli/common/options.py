"""Common CLI options for the CLI."""

import typer

from dumpsplit.core.options import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_DB_THRESHOLD,
    DEFAULT_HOSTNAME,
    DEFAULT_TABLE_THRESHOLD,
    DEFAULT_VERBOSITY,
    is_windows,
)

HostnameOpt = typer.Option(
    DEFAULT_HOSTNAME,
    "--hostname",
    help="Hostname of the mysql server to connect to",
)

UsernameOpt = typer.Option(
    "",
    "--username",
    help="username of the mysql server to connect to",
)

PasswordOpt = typer.Option(
    "",
    "--password",
    envvar="MYSQLDUMP_SPLIT_PASSWORD",
    help="password of the mysql server to connect to",
    show_default=False,
)

DatabasesOpt = typer.Option(
    "",
    "--databases",
    help="list of databases as comma separated values to dump",
)

DbThresholdOpt = typer.Option(
    DEFAULT_DB_THRESHOLD,
    "--dbthreshold",
    help="do not split mysqldumps if the total rowcount of the database is at most this value",
)

TableThresholdOpt = typer.Option(
    DEFAULT_TABLE_THRESHOLD,
    "--tablethreshold",
    help="table level rowcount threshold (reported only, not used for splitting)",
)

BatchSizeOpt = typer.Option(
    DEFAULT_BATCH_SIZE,
    "--batchsize",
    help="number of records in each table batch file",
)

ForceSplitOpt = typer.Option(
    False,
    "--forcesplit",
    help="split schema and data dumps even if the database is below dbthreshold",
)

AdditionalsOpt = typer.Option(
    "",
    "--additionals",
    help="Additional parameters that will be appended to the mysqldump command",
)

VerbosityOpt = typer.Option(
    DEFAULT_VERBOSITY,
    "--verbosity",
    min=0,
    max=2,
    clamp=True,
    help="0 = only errors, 1 = errors and warnings, 2 = all",
)

MysqldumpPathOpt = typer.Option(
    None,
    "--mysqldump-path",
    help="Path of the mysqldump executable (default: /usr/bin/mysqldump on linux, "
    "c:\\tools\\mysql\\current\\bin\\mysqldump.exe on windows)",
)

OutputDirOpt = typer.Option(
    None,
    "--output-dir",
    help="Backup files are written to "
    "<output-dir>/<DATABASE>/<DATABASE>_<TABLE|SCHEMA|DATA|ALL>_<TIMESTAMP>.sql "
    "(default: current directory)",
)

DefaultsFileOpt = typer.Option(
    None,
    "--defaults-file",
    help="mysqldump credentials file (default: pwd.cnf in output-dir, generated and removed)",
)

ResultFileOpt = typer.Option(
    is_windows(),
    "--result-file/--stdout",
    help="Let mysqldump write the files itself, or capture its standard output",
)

DryRunOpt = typer.Option(
    False,
    "--dry-run",
    help="Show which dump files would be produced, but don't run mysqldump",
)
