import pytest

from dumpsplit.cli.common.output import Out, Severity, Verbosity, is_visible


@pytest.mark.parametrize(
    ("verbosity", "visible"),
    [
        (Verbosity.ALL, {Severity.INFO, Severity.WARNING, Severity.ERROR}),
        (Verbosity.WARNINGS, {Severity.WARNING, Severity.ERROR}),
        (Verbosity.ERRORS, {Severity.ERROR}),
    ],
)
def test_is_visible_filters_below_verbosity_floor(verbosity, visible):
    assert {s for s in Severity if is_visible(s, verbosity)} == visible


def test_out_suppresses_info_but_not_errors(capsys):
    quiet = Out(verbosity=Verbosity.ERRORS)

    quiet.info("Processing Database : shop")
    quiet.error("mysqldump error is : boom")

    captured = capsys.readouterr().out
    assert "Processing" not in captured
    assert "boom" in captured


def test_raw_writes_dump_text_unchanged(capsys):
    line = "INSERT INTO `orders` VALUES " + ",".join(
        f"({i},'x :smile: [b]')" for i in range(40)
    )

    Out().raw(line)

    assert capsys.readouterr().out == line + "\n"


def test_raw_respects_verbosity(capsys):
    Out(verbosity=Verbosity.WARNINGS).raw("-- MySQL dump")

    assert capsys.readouterr().out == ""
