from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Ensure tests always import the local src tree, not an older installed wheel.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from dumpsplit.core.invocations import DumpContext  # noqa: E402

STARTED_AT = datetime(2017, 6, 22, 8, 0, 21)


@pytest.fixture
def dump_context(tmp_path: Path) -> DumpContext:
    return DumpContext(
        command_path="/usr/bin/mysqldump",
        defaults_file=tmp_path / "pwd.cnf",
        hostname="db.example.com",
        username="backup",
        output_dir=tmp_path / "out",
        started_at=STARTED_AT,
        batch_size=1_000_000,
    )
