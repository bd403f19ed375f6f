"""
Application settings.

Values come from (highest priority first) ``SPECIMEN_MEDIA_*`` environment
variables, a local ``.env`` file, then the defaults below.  The CLI uses these
as defaults for its positional arguments.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for both pipelines."""

    model_config = SettingsConfigDict(
        env_prefix="SPECIMEN_MEDIA_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "specimen-media"
    app_env: str = "development"
    debug: bool = False

    catalog_file: Path = Field(
        Path("catalogNumbers.txt"), description="Newline-delimited catalogNumber list"
    )
    extracted_dir: Path = Field(
        Path("extracted"), description="Directory holding occurrences.csv and multimedia.csv"
    )
    occurrences_name: str = "occurrences.csv"
    multimedia_name: str = "multimedia.csv"
    output_dir: Path = Field(Path("images"), description="Where downloaded images are saved")
    filtered_output: Path = Field(
        Path("filtered_occurrences.csv"), description="Catalog Filter output table"
    )

    request_timeout: float = Field(30.0, gt=0, description="Per-request timeout in seconds")
    download_retries: int = Field(3, ge=0, description="Retries per image on transport failure")

    @property
    def occurrences_path(self) -> Path:
        return self.extracted_dir / self.occurrences_name

    @property
    def multimedia_path(self) -> Path:
        return self.extracted_dir / self.multimedia_name


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (cached)."""
    return Settings()
