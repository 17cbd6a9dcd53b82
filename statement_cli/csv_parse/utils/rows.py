"""Line and cell splitting helpers built on the csv module."""

from __future__ import annotations

import csv
from collections.abc import Iterator

BOM = "\ufeff"


def iter_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, stripped_line)`` pairs, dropping a leading BOM.

    Line numbers are 1-based. Blank lines are yielded too so callers can keep
    their own position bookkeeping; they are simply empty strings.
    """

    for number, line in enumerate((text or "").lstrip(BOM).splitlines(), start=1):
        yield number, line.strip()


def split_row(line: str, delimiter: str = ",") -> list[str]:
    """Split a single CSV line honouring double quotes, stripping each cell."""

    try:
        cells = next(csv.reader([line], delimiter=delimiter, skipinitialspace=True))
    except (csv.Error, StopIteration):
        return []
    return [cell.strip() for cell in cells]
