"""
Prefect flow for the image fetcher.

join (occurrences ⋈ multimedia) → filter by catalog number → download.

Run locally (paths from settings):
    python -m specimen_media.flows.images
"""

from __future__ import annotations

from pathlib import Path

from prefect import flow, task

from specimen_media import download, join, tables
from specimen_media.config import get_settings
from specimen_media.schemas import DownloadReport, DownloadTask, TaskOutcome, TaskStatus
from specimen_media.services.http import build_retry, create_session


@task(name="load-tables")
def load_tables(
    catalog_file: Path, extracted_dir: Path
) -> tuple[tables.Table, tables.Table, set[str]]:
    """Read catalog ids, occurrences and multimedia.  All files are checked first."""
    settings = get_settings()
    occurrences_path = extracted_dir / settings.occurrences_name
    multimedia_path = extracted_dir / settings.multimedia_name

    tables.require_file(catalog_file, "Catalog numbers file")
    tables.require_file(occurrences_path, "Occurrences file")
    tables.require_file(multimedia_path, "Multimedia file")

    return (
        tables.read_table(occurrences_path, label="Occurrences file"),
        tables.read_table(multimedia_path, label="Multimedia file"),
        tables.read_catalog_ids(catalog_file),
    )


@task(name="resolve-targets")
def resolve_targets(
    occurrences: tables.Table, multimedia: tables.Table, catalog_ids: set[str]
) -> list[DownloadTask]:
    """Join, filter and number the images to download."""
    return join.resolve_targets(occurrences, multimedia, catalog_ids)


def print_progress(outcome: TaskOutcome, total: int) -> None:
    """One progress line per task."""
    t = outcome.task
    prefix = f"[{t.sequence_number}/{total}]"
    if outcome.status is TaskStatus.SUCCEEDED:
        print(f"{prefix} {t.catalog_number}: downloaded to {outcome.path}")
    elif outcome.status is TaskStatus.INVALID_URL:
        print(f"{prefix} {t.catalog_number}: invalid URL {t.access_uri}")
    else:
        print(f"{prefix} {t.catalog_number}: failed to download {t.access_uri} ({outcome.error})")


@task(name="download-images")
def download_images(tasks: list[DownloadTask], output_dir: Path) -> DownloadReport:
    """Download every task sequentially with the configured retry/timeout."""
    settings = get_settings()
    session = create_session(
        retry=build_retry(settings.download_retries),
        timeout=settings.request_timeout,
    )
    try:
        return download.download_all(tasks, output_dir, session=session, on_outcome=print_progress)
    finally:
        session.close()


@flow(name="fetch-images", log_prints=True)
def fetch_images(catalog_file: Path, extracted_dir: Path, output_dir: Path) -> DownloadReport:
    """
    Download the images of every listed catalog number.

    Missing inputs and missing columns raise before any download starts.
    Individual download failures are recorded in the returned report.
    """
    print("Processing catalog numbers and preparing download list...")
    occurrences, multimedia, catalog_ids = load_tables(catalog_file, extracted_dir)
    targets = resolve_targets(occurrences, multimedia, catalog_ids)

    print(f"Starting {len(targets)} image downloads...")
    report = download_images(targets, output_dir)

    print("Image download completed.")
    print(f"Total Images: {report.total}")
    print(f"Downloaded Successfully: {report.succeeded}")
    print(f"Failed Downloads: {report.failed}")
    return report


if __name__ == "__main__":
    settings = get_settings()
    fetch_images(settings.catalog_file, settings.extracted_dir, settings.output_dir)
