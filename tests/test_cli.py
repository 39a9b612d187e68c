import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from dumpsplit.cli.cli import app
from dumpsplit.core.errors import CatalogError
from dumpsplit.core.models import Table

pytestmark = pytest.mark.skipif(
    sys.platform.startswith("win"), reason="uses a /bin/sh stand-in for mysqldump"
)

runner = CliRunner()


class _Catalog:
    tables = {"shop": [Table("orders", 10), Table("users", 5)]}

    def __init__(self, hostname: str, username: str, password: str):
        self.hostname = hostname

    def list_tables(self, database: str) -> list[Table]:
        if database == "broken":
            raise CatalogError(f"Can not connect to database '{database}': refused")
        return self.tables.get(database, [])


@pytest.fixture(autouse=True)
def _stub_catalog(monkeypatch):
    monkeypatch.setattr("dumpsplit.cli.common.context.MySQLCatalogAdapter", _Catalog)


def _fake_mysqldump(
    tmp_path: Path, *, stderr: str = "", stdout: str = ""
) -> tuple[Path, Path]:
    log = tmp_path / "calls.log"
    script = tmp_path / "mysqldump"
    body = f'#!/bin/sh\nprintf "%s\\n" "$*" >> "{log}"\n'
    if stdout:
        body += f"printf '%s\\n' '{stdout}'\n"
    if stderr:
        body += f'echo "{stderr}" >&2\n'
    script.write_text(body)
    script.chmod(0o755)
    return script, log


def _args(tmp_path: Path, script: Path, *extra: str) -> list[str]:
    return [
        "--mysqldump-path",
        str(script),
        "--output-dir",
        str(tmp_path),
        "--username",
        "backup",
        "--password",
        "pw",
        *extra,
    ]


def test_missing_binary_exits_with_code_1(tmp_path: Path):
    result = runner.invoke(
        app, ["--mysqldump-path", str(tmp_path / "nope"), "--databases", "shop"]
    )

    assert result.exit_code == 1


def test_small_database_produces_single_all_dump(tmp_path: Path):
    script, log = _fake_mysqldump(tmp_path)

    result = runner.invoke(
        app, _args(tmp_path, script, "--databases", "shop", "--result-file")
    )

    assert result.exit_code == 0, result.output
    calls = log.read_text().splitlines()
    assert len(calls) == 1
    assert "shop_ALL_" in calls[0]
    assert calls[0].endswith(" shop")
    assert not (tmp_path / "pwd.cnf").exists()


def test_forcesplit_produces_schema_and_data_dumps(tmp_path: Path):
    script, log = _fake_mysqldump(tmp_path)

    result = runner.invoke(
        app,
        _args(tmp_path, script, "--databases", "shop, shop", "--forcesplit", "--stdout"),
    )

    assert result.exit_code == 0, result.output
    calls = log.read_text().splitlines()
    assert len(calls) == 2
    assert "--no-data" in calls[0]
    assert "--no-create-info" in calls[1]


def test_mysqldump_error_exits_with_code_4(tmp_path: Path):
    script, log = _fake_mysqldump(tmp_path, stderr="mysqldump: Got error: 1045")

    result = runner.invoke(
        app, _args(tmp_path, script, "--databases", "shop,other", "--forcesplit")
    )

    assert result.exit_code == 4
    assert len(log.read_text().splitlines()) == 1


def test_dry_run_does_not_execute_mysqldump(tmp_path: Path):
    script, log = _fake_mysqldump(tmp_path)

    result = runner.invoke(
        app, _args(tmp_path, script, "--databases", "shop", "--dry-run")
    )

    assert result.exit_code == 0, result.output
    assert not log.exists()
    assert not (tmp_path / "pwd.cnf").exists()


def test_no_databases_is_a_warning_not_an_error(tmp_path: Path):
    script, log = _fake_mysqldump(tmp_path)

    result = runner.invoke(app, _args(tmp_path, script, "--verbosity", "1"))

    assert result.exit_code == 0
    assert not log.exists()


def test_stdout_mode_prints_dump_text_unchanged(tmp_path: Path):
    line = "INSERT INTO `orders` VALUES " + ",".join(
        f'({i},"x :smile: [b]")' for i in range(40)
    )
    script, log = _fake_mysqldump(tmp_path, stdout=line)

    result = runner.invoke(
        app, _args(tmp_path, script, "--databases", "shop", "--stdout")
    )

    assert result.exit_code == 0, result.output
    assert line + "\n" in result.output


def test_unusable_output_directory_exits_with_code_4(tmp_path: Path):
    script, log = _fake_mysqldump(tmp_path)
    (tmp_path / "shop").write_text("not a directory")

    result = runner.invoke(
        app, _args(tmp_path, script, "--databases", "shop", "--result-file")
    )

    assert result.exit_code == 4
    assert "Can not create output directory" in result.output
    assert not log.exists()
    assert not (tmp_path / "pwd.cnf").exists()


def test_catalog_failure_exits_with_code_5(tmp_path: Path):
    script, log = _fake_mysqldump(tmp_path)

    result = runner.invoke(app, _args(tmp_path, script, "--databases", "broken,shop"))

    assert result.exit_code == 5
    assert "refused" in result.output
    assert not log.exists()
    assert not (tmp_path / "pwd.cnf").exists()


def test_credentials_file_create_failure_exits_with_code_2(tmp_path: Path):
    script, log = _fake_mysqldump(tmp_path)

    result = runner.invoke(
        app,
        [
            "--mysqldump-path",
            str(script),
            "--output-dir",
            str(tmp_path / "missing"),
            "--databases",
            "shop",
        ],
    )

    assert result.exit_code == 2
    assert not log.exists()
