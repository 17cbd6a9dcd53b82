"""Smoke tests verifying CLI entry points load without the repo virtualenv."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from statement_cli.csv_parse.main import main


@pytest.mark.parametrize("args", [["--help"], ["parse", "--help"], ["detect", "--help"]])
def test_cli_entrypoint_help(args: list[str]) -> None:
    runner = CliRunner()
    result = runner.invoke(main, args, prog_name="csv-parse")

    assert result.exit_code == 0, result.output
    assert "Usage" in result.output
