"""
Join & filter stage of the image fetcher.

occurrences ⋈ multimedia on ``id == coreid`` (inner, one-to-many), filtered
by catalogNumber, projected to (catalogNumber, accessURI) and numbered.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Collection, Iterator

from specimen_media.catalog import matches_catalog
from specimen_media.schemas import DownloadTask
from specimen_media.tables import (
    ACCESS_URI,
    CATALOG_NUMBER,
    CORE_ID,
    ID,
    Table,
    require_columns,
    strip_quotes,
)

Row = dict[str, str]


def inner_join(
    left: Table, right: Table, left_key: str, right_key: str
) -> Iterator[tuple[Row, Row]]:
    """
    Yield every (left_row, right_row) pair with ``left[left_key] == right[right_key]``.

    The right table is indexed by key; the left table is streamed.  Pairs come
    out in left input order, and within one left row in right input order.
    Rows without a partner are dropped.
    """
    index: defaultdict[str, list[Row]] = defaultdict(list)
    for row in right.rows:
        index[row[right_key]].append(row)

    for row in left.rows:
        for match in index.get(row[left_key], ()):
            yield row, match


def resolve_targets(
    occurrences: Table, multimedia: Table, catalog_ids: Collection[str]
) -> list[DownloadTask]:
    """
    Build the ordered download list for the catalog numbers in ``catalog_ids``.

    Raises:
        SchemaError: a required column is missing from either table.
    """
    require_columns(occurrences, ID, CATALOG_NUMBER, name="Occurrences table")
    require_columns(multimedia, CORE_ID, ACCESS_URI, name="Multimedia table")

    tasks: list[DownloadTask] = []
    for occurrence, media in inner_join(occurrences, multimedia, ID, CORE_ID):
        if not matches_catalog(occurrence[CATALOG_NUMBER], catalog_ids):
            continue
        tasks.append(
            DownloadTask(
                sequence_number=len(tasks) + 1,
                catalog_number=strip_quotes(occurrence[CATALOG_NUMBER]),
                access_uri=strip_quotes(media[ACCESS_URI]),
            )
        )
    return tasks
