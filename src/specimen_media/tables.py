"""
CSV table I/O.

Tables are read whole into memory: a header (column order preserved) plus one
dict per data row.  No schema is assumed beyond what callers check with
``require_columns``.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from pathlib import Path

from specimen_media.errors import MissingInputError, SchemaError

# Darwin Core column names
ID = "id"
CORE_ID = "coreid"
CATALOG_NUMBER = "catalogNumber"
ACCESS_URI = "accessURI"


@dataclass
class Table:
    """A CSV table: ordered header plus rows keyed by column name."""

    header: list[str]
    rows: list[dict[str, str]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)


def strip_quotes(value: str) -> str:
    """Remove surrounding whitespace and double quotes from a cell or list entry.

    Applied identically to catalog list lines and table cells.
    """
    return value.strip().strip('"').strip()


def require_file(path: Path, label: str) -> None:
    """Raise MissingInputError if ``path`` is not an existing file."""
    if not path.is_file():
        raise MissingInputError(label, path)


def require_columns(table: Table, *columns: str, name: str = "table") -> None:
    """Raise SchemaError if any of ``columns`` is not in the header (case-sensitive)."""
    missing = [c for c in columns if c not in table.header]
    if missing:
        raise SchemaError(name, missing)


def read_table(path: Path, label: str = "Table file") -> Table:
    """Read a comma-separated file with a header row.

    Short rows are padded with empty strings; cells beyond the header are
    dropped.
    """
    require_file(path, label)
    with path.open(newline="", encoding="utf-8-sig") as f:
        reader = csv.reader(f)
        header = next(reader, [])
        rows: list[dict[str, str]] = []
        for raw in reader:
            if not raw:
                continue
            padded = raw + [""] * (len(header) - len(raw))
            rows.append(dict(zip(header, padded, strict=False)))
    return Table(header=header, rows=rows)


def write_table(table: Table, path: Path) -> Path:
    """Write header then rows, in order.  Returns ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(table.header)
        for row in table.rows:
            writer.writerow([row.get(col, "") for col in table.header])
    return path


def read_catalog_ids(path: Path) -> set[str]:
    """Read a newline-delimited list of catalog numbers (quotes optional)."""
    require_file(path, "Catalog numbers file")
    ids: set[str] = set()
    with path.open(encoding="utf-8-sig") as f:
        for line in f:
            value = strip_quotes(line)
            if value:
                ids.add(value)
    return ids
