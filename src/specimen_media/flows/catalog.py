"""
Prefect flow for the Catalog Filter.

Run locally (paths from settings):
    python -m specimen_media.flows.catalog
"""

from __future__ import annotations

from pathlib import Path

from prefect import flow, task

from specimen_media import catalog, tables
from specimen_media.config import get_settings


@task(name="load-occurrences")
def load_occurrences(path: Path) -> tables.Table:
    """Read the occurrences table."""
    return tables.read_table(path, label="Occurrences file")


@task(name="load-catalog-ids")
def load_catalog_ids(path: Path) -> set[str]:
    """Read the catalog number list."""
    return tables.read_catalog_ids(path)


@task(name="filter-occurrences")
def filter_occurrences(occurrences: tables.Table, catalog_ids: set[str]) -> tables.Table:
    """Keep rows whose catalogNumber is listed."""
    return catalog.filter_occurrences(occurrences, catalog_ids)


@task(name="write-filtered")
def write_filtered(filtered: tables.Table, output_path: Path) -> Path:
    """Write the filtered table."""
    return tables.write_table(filtered, output_path)


@flow(name="filter-catalog", log_prints=True)
def filter_catalog(
    occurrences_path: Path,
    catalog_file: Path,
    output_path: Path,
) -> dict[str, object]:
    """
    Filter an occurrences table to the catalog numbers in ``catalog_file``.

    Missing inputs and a missing ``catalogNumber`` column raise before any
    output is written.
    """
    tables.require_file(occurrences_path, "Occurrences file")
    tables.require_file(catalog_file, "Catalog numbers file")

    occurrences = load_occurrences(occurrences_path)
    catalog_ids = load_catalog_ids(catalog_file)
    print(f"Loaded {len(occurrences)} occurrences and {len(catalog_ids)} catalog numbers.")

    filtered = filter_occurrences(occurrences, catalog_ids)
    output = write_filtered(filtered, output_path)
    print(f"Wrote {len(filtered)} matching rows to {output}")

    return {
        "input_rows": len(occurrences),
        "catalog_ids": len(catalog_ids),
        "matched_rows": len(filtered),
        "output": output,
    }


if __name__ == "__main__":
    settings = get_settings()
    result = filter_catalog(
        settings.occurrences_path, settings.catalog_file, settings.filtered_output
    )
    print(f"Flow complete: {result}")
