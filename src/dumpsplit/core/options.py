"""Run configuration for split mysqldump backups.

`DumpOptions` is built once from user input, resolves platform defaults,
captures the run start time and is then passed by value to everything that
needs it. Nothing in here touches the database.
"""

from __future__ import annotations

import shutil
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable

from dumpsplit.core.errors import ConfigurationError
from dumpsplit.core.invocations import DumpContext

DEFAULT_HOSTNAME = "localhost"
DEFAULT_DB_THRESHOLD = 10_000_000
DEFAULT_TABLE_THRESHOLD = 5_000_000
DEFAULT_BATCH_SIZE = 1_000_000
DEFAULT_VERBOSITY = 2
DEFAULT_DEFAULTS_FILENAME = "pwd.cnf"

_LINUX_MYSQLDUMP = "/usr/bin/mysqldump"
_WINDOWS_MYSQLDUMP = "c:\\tools\\mysql\\current\\bin\\mysqldump.exe"


def is_windows() -> bool:
    return sys.platform.startswith("win")


def default_mysqldump_path() -> str:
    """Return the platform default location of the mysqldump binary."""
    if is_windows():
        return _WINDOWS_MYSQLDUMP
    if sys.platform.startswith("linux"):
        return _LINUX_MYSQLDUMP
    return shutil.which("mysqldump") or "mysqldump"


def parse_database_list(raw: str | Iterable[str]) -> tuple[str, ...]:
    """
    Normalize a comma-separated database list.

    Whitespace around names is dropped, empty entries are skipped and
    duplicates are removed keeping the first occurrence.
    """
    parts = raw.split(",") if isinstance(raw, str) else raw
    seen: dict[str, None] = {}
    for part in parts:
        name = part.strip()
        if name:
            seen.setdefault(name, None)
    return tuple(seen)


@dataclass(frozen=True)
class DumpOptions:
    """Immutable configuration of one backup run."""

    hostname: str = DEFAULT_HOSTNAME
    username: str = ""
    password: str = field(default="", repr=False)
    databases: tuple[str, ...] = ()
    db_threshold: int = DEFAULT_DB_THRESHOLD
    # read and reported, not used by the partition policy
    table_threshold: int = DEFAULT_TABLE_THRESHOLD
    batch_size: int = DEFAULT_BATCH_SIZE
    force_split: bool = False
    additional_args: str = ""
    verbosity: int = DEFAULT_VERBOSITY
    mysqldump_path: str = field(default_factory=default_mysqldump_path)
    output_dir: Path = field(default_factory=Path.cwd)
    defaults_file: Path = Path(DEFAULT_DEFAULTS_FILENAME)
    defaults_provided_by_user: bool = False
    result_file: bool = field(default_factory=is_windows)
    started_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def create(
        cls,
        *,
        databases: str | Iterable[str] = "",
        mysqldump_path: str | None = None,
        output_dir: str | Path | None = None,
        defaults_file: str | Path | None = None,
        result_file: bool | None = None,
        **kwargs: Any,
    ) -> DumpOptions:
        """
        Build options from raw user input, filling in platform defaults.

        Args:
            databases: Comma-separated list (or iterable) of database names.
            mysqldump_path: mysqldump binary, platform default when empty.
            output_dir: Output root, current directory when empty.
            defaults_file: User credentials file; when empty, `pwd.cnf` in
                           the output directory is generated for the run.
            result_file: Let mysqldump write files directly, platform
                         default (Windows only) when None.
            **kwargs: Remaining DumpOptions fields.
        """
        out_dir = Path(output_dir) if output_dir else Path.cwd()
        provided = bool(defaults_file)
        return cls(
            databases=parse_database_list(databases),
            mysqldump_path=mysqldump_path or default_mysqldump_path(),
            output_dir=out_dir,
            defaults_file=Path(defaults_file) if provided else out_dir / DEFAULT_DEFAULTS_FILENAME,
            defaults_provided_by_user=provided,
            result_file=is_windows() if result_file is None else result_file,
            **kwargs,
        )

    def validate(self) -> None:
        """
        Check the configuration before any database is touched.

        Raises:
            ConfigurationError: If the batch size is not positive or the
                                mysqldump binary does not exist.
        """
        if self.batch_size <= 0:
            raise ConfigurationError(
                f"batchsize must be greater than zero (got {self.batch_size})"
            )
        if not Path(self.mysqldump_path).exists():
            raise ConfigurationError(
                "mysqldump binary can not be found, please specify correct "
                "value for mysqldump-path parameter"
            )

    def dump_context(self) -> DumpContext:
        """Return the naming/credential context used to build invocations."""
        return DumpContext(
            command_path=self.mysqldump_path,
            defaults_file=self.defaults_file,
            hostname=self.hostname,
            username=self.username,
            output_dir=self.output_dir,
            started_at=self.started_at,
            batch_size=self.batch_size,
            additional_args=self.additional_args,
            result_file=self.result_file,
        )

    def summary(self) -> dict[str, Any]:
        """Display mapping of the run parameters, password masked."""
        return {
            "hostname": self.hostname,
            "username": self.username,
            "password": "****" if self.password else "",
            "databases": ", ".join(self.databases),
            "dbthreshold": self.db_threshold,
            "tablethreshold": self.table_threshold,
            "batchsize": self.batch_size,
            "forcesplit": self.force_split,
            "additionals": self.additional_args,
            "verbosity": self.verbosity,
            "mysqldump-path": self.mysqldump_path,
            "output-dir": str(self.output_dir),
            "defaults-file": str(self.defaults_file),
            "defaults provided by user": self.defaults_provided_by_user,
            "result-file": self.result_file,
            "started at": self.started_at.isoformat(timespec="seconds"),
        }
