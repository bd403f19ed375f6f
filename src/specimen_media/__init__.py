"""Specimen Media - catalog filtering and image download for occurrence exports.

Works on Darwin Core style exports: an ``occurrences.csv`` core table and a
``multimedia.csv`` extension linked by ``id`` → ``coreid``.

Architecture::

    tables.py      CSV I/O, required-column and input-file checks
    catalog.py     Catalog Filter (occurrence rows matching a catalogNumber list)
    join.py        Hash inner-join of occurrences ⋈ multimedia → DownloadTasks
    download.py    Sequential image download with extension inference
    schemas.py     DownloadTask / TaskOutcome / DownloadReport models
    flows/         Prefect orchestration (filter-catalog, fetch-images)
    services/      Shared utilities (HTTP client with retry)

Data flow: tables → catalog / join → download → DownloadReport
"""

__version__ = "0.1.0"

from specimen_media.config import Settings
from specimen_media.errors import MissingInputError, SchemaError, SpecimenMediaError
from specimen_media.schemas import DownloadReport, DownloadTask, TaskOutcome, TaskStatus

__all__ = [
    "DownloadReport",
    "DownloadTask",
    "MissingInputError",
    "SchemaError",
    "Settings",
    "SpecimenMediaError",
    "TaskOutcome",
    "TaskStatus",
    "__version__",
]
