from __future__ import annotations

import csv
import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from statement_cli.csv_parse.main import main

MILLENNIUM_HEADER = (
    '"Numer rachunku/karty","Data transakcji","Data rozliczenia","Rodzaj transakcji",'
    '"Na konto/Z konta","Odbiorca/Zleceniodawca","Opis","Obciążenia","Uznania","Saldo","Waluta"'
)
PURCHASE = '"123","2024-01-15","2024-01-15","ZAKUP KARTĄ","","BIEDRONKA","Zakupy","-50.00","","950.00","PLN"'
TRANSFER = '"123","2024-01-16","2024-01-16","PRZELEW WEWNĘTRZNY","","JAN","Transfer","-100.00","","850.00","PLN"'


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("STATEMENTCLI_CONFIG_DIR", str(tmp_path / "config"))


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _write_statement(tmp_path: Path, *rows: str, encoding: str = "utf-8") -> Path:
    path = tmp_path / "statement.csv"
    path.write_bytes("\n".join([MILLENNIUM_HEADER, *rows]).encode(encoding))
    return path


def test_parse_writes_json(runner: CliRunner, tmp_path: Path) -> None:
    statement = _write_statement(tmp_path, PURCHASE, TRANSFER)
    output = tmp_path / "out" / "result.json"

    result = runner.invoke(
        main, ["parse", str(statement), "--format", "json", "--output", str(output)]
    )

    assert result.exit_code == 0, result.output
    assert "Transactions: 1" in result.output
    assert "Pominięto 1 transakcji" in result.output
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["bank"] == "millennium"
    assert payload["transactions"][0]["merchant"] == "Biedronka"
    assert payload["transactions"][0]["amount"] == "50.00"
    assert payload["skipped"] == {"count": 1, "reasons": {"internal_transfer": 1}}


def test_parse_writes_csv(runner: CliRunner, tmp_path: Path) -> None:
    statement = _write_statement(tmp_path, PURCHASE)
    output = tmp_path / "result.csv"

    result = runner.invoke(main, ["parse", str(statement), "--format", "csv", "--output", str(output)])

    assert result.exit_code == 0, result.output
    with output.open(newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert rows[0] == ["date", "merchant", "amount", "forced_category", "description"]
    assert rows[1] == ["2024-01-15", "Biedronka", "50.00", "", "ZAKUP KARTĄ Zakupy"]


def test_parse_renders_table(runner: CliRunner, tmp_path: Path) -> None:
    statement = _write_statement(tmp_path, PURCHASE)

    result = runner.invoke(main, ["parse", str(statement)])

    assert result.exit_code == 0, result.output
    assert "Biedronka" in result.output
    assert "50.00" in result.output
    assert "Total: 50.00" in result.output


def test_parse_reads_cp1250_files(runner: CliRunner, tmp_path: Path) -> None:
    statement = _write_statement(tmp_path, PURCHASE, encoding="cp1250")
    output = tmp_path / "result.json"

    result = runner.invoke(main, ["parse", str(statement), "--format", "json", "--output", str(output)])

    assert result.exit_code == 0, result.output
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["transactions"][0]["description"] == "ZAKUP KARTĄ Zakupy"


def test_parse_fails_without_transactions(runner: CliRunner, tmp_path: Path) -> None:
    statement = _write_statement(tmp_path, TRANSFER)

    result = runner.invoke(main, ["parse", str(statement)])

    assert result.exit_code == 1
    assert "No transactions found" in result.output


def test_parse_strict_rejects_unknown_format(runner: CliRunner, tmp_path: Path) -> None:
    statement = tmp_path / "other.csv"
    statement.write_text("Date,Merchant,Amount\n2024-01-15,BIEDRONKA,-50.00\n", encoding="utf-8")

    lenient = runner.invoke(main, ["parse", str(statement), "--format", "json", "--output", str(tmp_path / "o.json")])
    strict = runner.invoke(main, ["parse", str(statement), "--strict"])

    assert lenient.exit_code == 0, lenient.output
    assert strict.exit_code == 1
    assert "Unsupported statement format" in strict.output


def test_parse_table_with_output_is_usage_error(runner: CliRunner, tmp_path: Path) -> None:
    statement = _write_statement(tmp_path, PURCHASE)

    result = runner.invoke(
        main, ["parse", str(statement), "--format", "table", "--output", str(tmp_path / "x")]
    )

    assert result.exit_code == 2


def test_parse_missing_file(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(main, ["parse", str(tmp_path / "missing.csv")])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_detect_prints_format(runner: CliRunner, tmp_path: Path) -> None:
    statement = _write_statement(tmp_path, PURCHASE)

    result = runner.invoke(main, ["detect", str(statement)])

    assert result.exit_code == 0, result.output
    assert "millennium" in result.output


def test_output_format_from_config(runner: CliRunner, tmp_path: Path) -> None:
    statement = _write_statement(tmp_path, PURCHASE)
    config = tmp_path / "config.yaml"
    config.write_text("output:\n  format: csv\n  show_skipped: false\n", encoding="utf-8")
    output = tmp_path / "result.csv"

    result = runner.invoke(main, ["--config", str(config), "parse", str(statement), "--output", str(output)])

    assert result.exit_code == 0, result.output
    assert output.read_text(encoding="utf-8").startswith("date,merchant,amount")
