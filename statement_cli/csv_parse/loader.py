"""Read statement files from disk and decode them to text."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from statement_cli.shared.exceptions import InputError


def decode_statement(data: bytes, encodings: Sequence[str]) -> tuple[str, str]:
    """Decode ``data`` with the first encoding that accepts it.

    Returns ``(text, encoding)``. Exports come as UTF-8 (often with a BOM) or
    Windows-1250, so the usual order is ``utf-8-sig`` then ``cp1250``.
    """

    for encoding in encodings:
        try:
            return data.decode(encoding), encoding
        except UnicodeDecodeError:
            continue
        except LookupError as exc:
            raise InputError(f"Unknown encoding '{encoding}'") from exc
    raise InputError(f"Could not decode file with any of: {', '.join(encodings)}")


def load_statement_text(
    path: str | Path,
    *,
    encodings: Sequence[str],
    max_file_size: int,
) -> tuple[str, str]:
    """Read and decode a statement file, enforcing the configured size limit."""

    file_path = Path(path).expanduser()
    if not file_path.is_file():
        raise InputError(f"Statement file not found: {file_path}")
    size = file_path.stat().st_size
    if size > max_file_size:
        raise InputError(
            f"Statement file {file_path} is too large ({size} bytes, limit {max_file_size})."
        )
    return decode_statement(file_path.read_bytes(), encodings)
