"""
Catalog Filter: keep occurrence rows whose catalogNumber is in a given list.

``matches_catalog`` is the one membership test used everywhere, so the
filter here and the filter stage of join.resolve_targets always select the
same rows.
"""

from __future__ import annotations

from collections.abc import Collection

from specimen_media.tables import CATALOG_NUMBER, Table, require_columns, strip_quotes


def matches_catalog(value: str, catalog_ids: Collection[str]) -> bool:
    """Exact membership test for a catalogNumber cell, normalized by strip_quotes."""
    return strip_quotes(value) in catalog_ids


def filter_occurrences(table: Table, catalog_ids: Collection[str]) -> Table:
    """
    Return the rows of ``table`` whose catalogNumber is in ``catalog_ids``.

    The header is returned unchanged and row order is preserved.

    Raises:
        SchemaError: ``catalogNumber`` is not a column of ``table``.
    """
    require_columns(table, CATALOG_NUMBER, name="Occurrences table")
    rows = [row for row in table.rows if matches_catalog(row[CATALOG_NUMBER], catalog_ids)]
    return Table(header=list(table.header), rows=rows)

