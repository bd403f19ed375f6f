"""
Fatal error kinds.

These abort a pipeline before any rows are processed.  Per-image failures are
not exceptions; they are recorded as ``TaskOutcome`` values (see schemas.py).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class SpecimenMediaError(Exception):
    """Base class for errors that stop a pipeline."""


class MissingInputError(SpecimenMediaError):
    """A required input file does not exist."""

    def __init__(self, label: str, path: Path) -> None:
        self.label = label
        self.path = path
        super().__init__(f"{label} '{path}' does not exist.")


class SchemaError(SpecimenMediaError):
    """A required column is absent from a table's header."""

    def __init__(self, table: str, missing: list[str]) -> None:
        self.table = table
        self.missing = missing
        columns = ", ".join(repr(c) for c in missing)
        super().__init__(f"{table} is missing required column(s): {columns}")
