"""Reading and writing gradebook CSV files."""

from __future__ import annotations

import os
from typing import Iterable, Sequence

_BOM = "\ufeff"
_SPECIAL = (",", '"', "\n")


def parse_line(line: str) -> list[str]:
    """Split one CSV line into cells, honouring quotes and doubled quotes."""
    cells: list[str] = []
    cell: list[str] = []
    inside_quote = False
    chars = iter(enumerate(line))
    for index, char in chars:
        if char == '"':
            if inside_quote and line[index + 1:index + 2] == '"':
                cell.append('"')
                next(chars)
            else:
                inside_quote = not inside_quote
        elif char == "," and not inside_quote:
            cells.append("".join(cell))
            cell = []
        else:
            cell.append(char)
    cells.append("".join(cell))
    return cells


def load_csv(path: str | os.PathLike[str]) -> list[list[str]]:
    """Read all rows of a CSV file; a file that cannot be opened gives no rows."""
    try:
        handle = open(path, encoding="utf-8")
    except OSError:
        return []
    with handle:
        rows = []
        for line in handle:
            line = line.removesuffix("\n")
            if line.startswith(_BOM):
                line = line[len(_BOM):]
            rows.append(parse_line(line))
        return rows


def _quote(cell: str) -> str:
    if any(char in cell for char in _SPECIAL):
        return '"' + cell.replace('"', '""') + '"'
    return cell


def save_csv(path: str | os.PathLike[str], rows: Iterable[Sequence[str]]) -> None:
    """Write rows as UTF-8 CSV with a byte order mark and LF line ends."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(_BOM)
        for row in rows:
            handle.write(",".join(_quote(cell) for cell in row))
            handle.write("\n")


def file_type(path: str | os.PathLike[str]) -> str:
    """Lower-cased text after the last dot, or "" if there is none."""
    text = os.fspath(path)
    head, dot, extension = text.rpartition(".")
    if not dot:
        return ""
    return extension.lower()