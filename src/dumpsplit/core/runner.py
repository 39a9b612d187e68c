"""Sequential execution of mysqldump invocation plans.

A plan runs to completion (both output streams drained and the process
reaped) before the next one starts. Any output on stderr is treated as a
fatal error for the whole run.
"""

from __future__ import annotations

import subprocess

from dumpsplit.core.errors import ExecutionError
from dumpsplit.core.models import InvocationPlan


class InvocationRunner:
    """Runs InvocationPlans as blocking subprocesses."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def run(self, plan: InvocationPlan) -> str:
        """
        Execute one plan and return its captured stdout.

        The parent directory of the plan's output file is created first when
        mysqldump writes the file itself. There is no timeout: a hanging
        mysqldump blocks the run. Undecodable stdout bytes are kept as lone
        surrogates so they can be written back unchanged.

        Raises:
            ExecutionError: If the output directory cannot be created, the
                            process cannot be started, or it writes
                            anything to stderr.
        """
        if plan.output_file is not None:
            try:
                plan.output_file.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise ExecutionError(
                    f"Can not create output directory {plan.output_file.parent} : {exc}",
                    plan=plan,
                ) from exc

        try:
            # communicate() drains stdout and stderr together, so a full pipe
            # buffer on either side cannot stall the wait
            completed = subprocess.run(
                plan.command_line(),
                capture_output=True,
                check=False,
            )
        except OSError as exc:
            raise ExecutionError(
                f"mysqldump could not be started: {exc}", plan=plan
            ) from exc

        stderr = completed.stderr.decode(self.encoding, errors="replace")
        if stderr:
            raise ExecutionError(
                f"mysqldump error is : {stderr.strip()}",
                plan=plan,
                stderr=stderr,
            )

        return completed.stdout.decode(self.encoding, errors="surrogateescape")
