"""Scoped credentials file for mysqldump.

mysqldump reads user and password from a `--defaults-extra-file`, which keeps
the password off the command line. When the user supplies no file, one is
generated before the first database is processed and removed afterwards.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from dumpsplit.core.errors import CredentialsFileError
from dumpsplit.core.options import DumpOptions

_TEMPLATE = "[mysqldump]\nuser={user}\npassword={password}"


def render_credentials(username: str, password: str) -> str:
    """Return the option-file block holding the mysqldump credentials."""
    return _TEMPLATE.format(user=username, password=password)


def write_credentials_file(path: Path, username: str, password: str) -> None:
    """
    Create `path` (mode 0600) and write the credentials block to it.

    Raises:
        CredentialsFileError: With exit code 2 when the file cannot be
                              created, 3 when it cannot be written.
    """
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    except OSError as exc:
        raise CredentialsFileError(
            f"Can not create password file : {exc}",
            exit_code=CredentialsFileError.CREATE_FAILED,
        ) from exc

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(render_credentials(username, password))
    except OSError as exc:
        raise CredentialsFileError(
            f"Can not write to password file : {exc}",
            exit_code=CredentialsFileError.WRITE_FAILED,
        ) from exc


@contextmanager
def credentials_file(options: DumpOptions) -> Iterator[Path]:
    """
    Provide the credentials file for the duration of a run.

    A user-supplied file is yielded untouched. Otherwise the file is written
    to `options.defaults_file` and removed on exit, whether the run
    succeeded or not.
    """
    if options.defaults_provided_by_user:
        yield options.defaults_file
        return

    write_credentials_file(options.defaults_file, options.username, options.password)
    try:
        yield options.defaults_file
    finally:
        options.defaults_file.unlink(missing_ok=True)
