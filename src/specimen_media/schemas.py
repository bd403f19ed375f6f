"""
Domain models for the image download pipeline.

Pydantic models shared by join.py (which produces tasks), download.py (which
consumes them) and the flows/CLI (which report on them).  All are frozen:
a DownloadReport is built once from its outcomes and never mutated.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, Field

# =============================================================================
# Tasks
# =============================================================================


class DownloadTask(BaseModel):
    """One image to fetch, derived from a joined occurrence/multimedia row."""

    model_config = {"frozen": True}

    sequence_number: int = Field(..., ge=1, description="1-based position in join order")
    catalog_number: str = Field(..., description="Occurrence catalogNumber")
    access_uri: str = Field(..., description="Multimedia accessURI")


# =============================================================================
# Outcomes
# =============================================================================


class TaskStatus(StrEnum):
    """Final state of a single download task."""

    SUCCEEDED = "succeeded"
    INVALID_URL = "invalid_url"
    DOWNLOAD_ERROR = "download_error"


class TaskOutcome(BaseModel):
    """Result of processing one DownloadTask."""

    model_config = {"frozen": True}

    task: DownloadTask
    status: TaskStatus
    path: Path | None = Field(default=None, description="Saved file (success only)")
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.status is TaskStatus.SUCCEEDED


class DownloadReport(BaseModel):
    """Aggregate of a download run, in sequence order."""

    model_config = {"frozen": True}

    total: int = 0
    succeeded: int = 0
    failed: int = 0
    outcomes: tuple[TaskOutcome, ...] = ()

    @classmethod
    def from_outcomes(
        cls, outcomes: Iterable[TaskOutcome], total: int | None = None
    ) -> DownloadReport:
        """Fold a sequence of outcomes into a report.

        ``total`` defaults to the number of outcomes; pass the task count when
        it is known up front.
        """
        items = tuple(outcomes)
        succeeded = sum(1 for o in items if o.succeeded)
        return cls(
            total=len(items) if total is None else total,
            succeeded=succeeded,
            failed=len(items) - succeeded,
            outcomes=items,
        )

    @property
    def filenames(self) -> list[str]:
        """Names of the files written, in sequence order."""
        return [o.path.name for o in self.outcomes if o.path is not None]
