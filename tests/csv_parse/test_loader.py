from __future__ import annotations

from pathlib import Path

import pytest

from statement_cli.csv_parse.loader import decode_statement, load_statement_text
from statement_cli.shared.exceptions import InputError

ENCODINGS = ("utf-8-sig", "cp1250")


def test_decode_statement_strips_utf8_bom() -> None:
    text, encoding = decode_statement("\ufeffOpis;Kwota".encode("utf-8"), ENCODINGS)
    assert text == "Opis;Kwota"
    assert encoding == "utf-8-sig"


def test_decode_statement_falls_back_to_cp1250() -> None:
    text, encoding = decode_statement("ŻABKA Obciążenia".encode("cp1250"), ENCODINGS)
    assert text == "ŻABKA Obciążenia"
    assert encoding == "cp1250"


def test_decode_statement_reports_failure() -> None:
    with pytest.raises(InputError):
        decode_statement("ŻABKA".encode("cp1250"), ("utf-8",))


def test_load_statement_text_checks_file(tmp_path: Path) -> None:
    with pytest.raises(InputError):
        load_statement_text(tmp_path / "missing.csv", encodings=ENCODINGS, max_file_size=100)

    big = tmp_path / "big.csv"
    big.write_text("x" * 200, encoding="utf-8")
    with pytest.raises(InputError) as excinfo:
        load_statement_text(big, encodings=ENCODINGS, max_file_size=100)
    assert "too large" in str(excinfo.value)


def test_load_statement_text_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "statement.csv"
    path.write_bytes("Data;Opis\n".encode("utf-8"))
    assert load_statement_text(path, encodings=ENCODINGS, max_file_size=100) == (
        "Data;Opis\n",
        "utf-8-sig",
    )


def test_decode_statement_rejects_unknown_encoding() -> None:
    with pytest.raises(InputError) as excinfo:
        decode_statement(b"abc", ("no-such-codec",))
    assert "no-such-codec" in str(excinfo.value)
