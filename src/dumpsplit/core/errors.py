"""Error taxonomy for the dump pipeline.

Core modules raise these exceptions; only the CLI turns them into process
exit codes (see `exit_code`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dumpsplit.core.models import InvocationPlan


class DumpSplitError(RuntimeError):
    """Base class for all fatal dump errors."""

    exit_code = 1


class ConfigurationError(DumpSplitError):
    """Raised when the run configuration is invalid (batch size, binary path)."""

    exit_code = 1


class CredentialsFileError(DumpSplitError):
    """Raised when the generated credentials file cannot be created or written."""

    CREATE_FAILED = 2
    WRITE_FAILED = 3

    def __init__(self, message: str, *, exit_code: int = CREATE_FAILED) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class ExecutionError(DumpSplitError):
    """Raised when mysqldump cannot be started or reports an error."""

    exit_code = 4

    def __init__(
        self,
        message: str,
        *,
        plan: InvocationPlan | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.plan = plan
        self.stderr = stderr


class CatalogError(DumpSplitError):
    """Raised when table metadata cannot be read from the catalog."""

    exit_code = 5
