"""
Download stage of the image fetcher.

Tasks are processed one at a time, in sequence order.  Each task ends in
exactly one TaskOutcome; a failing task never stops the batch.

Per task:
  1. accessURI must start with ``http`` (else INVALID_URL, no request made)
  2. extension is inferred from the URI (``jpg`` if unrecognised)
  3. the image is streamed to ``{sequence}_{catalogNumber}.{ext}``
  4. success needs a 2xx response and a non-empty file; otherwise the file
     is removed and the task is DOWNLOAD_ERROR

Retries (see services/http.py) cover connecting and reading the response
headers.  The body is streamed after that, so a read that fails partway
(e.g. ``ChunkedEncodingError``) is a DOWNLOAD_ERROR without another attempt.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import requests

from specimen_media.schemas import DownloadReport, DownloadTask, TaskOutcome, TaskStatus
from specimen_media.services import http

IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif", "bmp", "tiff"})
DEFAULT_EXTENSION = "jpg"

CHUNK_SIZE = 64 * 1024

ProgressCallback = Callable[[TaskOutcome, int], None]


def is_valid_uri(uri: str) -> bool:
    """Only http:// and https:// URIs are fetched."""
    return uri.startswith("http")


def infer_extension(uri: str) -> str:
    """
    Guess an image file extension from a URI.

    Takes the text after the last ``.``, drops any ``?query``, lower-cases it,
    and falls back to ``jpg`` unless it is a known image extension.

    >>> infer_extension("http://x/img.JPG?size=large")
    'jpg'
    >>> infer_extension("http://x/photo.png")
    'png'
    """
    extension = uri.rsplit(".", 1)[-1]
    extension = extension.split("?", 1)[0].lower()
    if extension not in IMAGE_EXTENSIONS:
        return DEFAULT_EXTENSION
    return extension


def image_filename(task: DownloadTask, extension: str) -> str:
    return f"{task.sequence_number}_{task.catalog_number}.{extension}"


def _fetch_to_file(session: requests.Session, uri: str, path: Path) -> None:
    """Stream ``uri`` into ``path``.  Raises on transport or HTTP error."""
    resp = session.get(uri, stream=True, allow_redirects=True)
    try:
        resp.raise_for_status()
        with path.open("wb") as f:
            for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
                if chunk:
                    f.write(chunk)
    finally:
        resp.close()


def download_task(
    task: DownloadTask,
    output_dir: Path,
    session: requests.Session | None = None,
) -> TaskOutcome:
    """Run one task through validate → name → fetch → verify."""
    if not is_valid_uri(task.access_uri):
        return TaskOutcome(
            task=task,
            status=TaskStatus.INVALID_URL,
            error=f"Invalid URL: {task.access_uri}",
        )

    session = session or http.session
    path = output_dir / image_filename(task, infer_extension(task.access_uri))

    try:
        _fetch_to_file(session, task.access_uri, path)
    except (requests.RequestException, OSError) as e:
        path.unlink(missing_ok=True)
        return TaskOutcome(task=task, status=TaskStatus.DOWNLOAD_ERROR, error=str(e))

    if not path.is_file() or path.stat().st_size == 0:
        path.unlink(missing_ok=True)
        return TaskOutcome(
            task=task,
            status=TaskStatus.DOWNLOAD_ERROR,
            error=f"Empty response from {task.access_uri}",
        )

    return TaskOutcome(task=task, status=TaskStatus.SUCCEEDED, path=path)


def download_all(
    tasks: Iterable[DownloadTask],
    output_dir: Path,
    session: requests.Session | None = None,
    on_outcome: ProgressCallback | None = None,
) -> DownloadReport:
    """
    Download every task sequentially and summarise the run.

    Args:
        tasks: Tasks to process; they are sorted by sequence number first.
        output_dir: Destination directory (created if missing).
        session: HTTP session (defaults to the shared retrying session).
        on_outcome: Called with ``(outcome, total)`` after each task.

    Returns:
        DownloadReport with one outcome per task, in sequence order.
    """
    ordered = sorted(tasks, key=lambda t: t.sequence_number)
    total = len(ordered)
    output_dir.mkdir(parents=True, exist_ok=True)

    outcomes: list[TaskOutcome] = []
    for task in ordered:
        outcome = download_task(task, output_dir, session)
        outcomes.append(outcome)
        if on_outcome is not None:
            on_outcome(outcome, total)

    return DownloadReport.from_outcomes(outcomes, total=total)
