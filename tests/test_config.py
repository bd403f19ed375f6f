"""Tests for application settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from specimen_media.config import Settings, get_settings


class TestSettings:
    """Tests for Settings defaults and environment overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)  # no stray .env
        settings = Settings()
        assert settings.catalog_file == Path("catalogNumbers.txt")
        assert settings.extracted_dir == Path("extracted")
        assert settings.output_dir == Path("images")
        assert settings.download_retries == 3
        assert settings.request_timeout == 30.0

    def test_table_paths(self) -> None:
        settings = Settings(extracted_dir=Path("dwca"))
        assert settings.occurrences_path == Path("dwca/occurrences.csv")
        assert settings.multimedia_path == Path("dwca/multimedia.csv")

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPECIMEN_MEDIA_OUTPUT_DIR", "/tmp/specimens")
        monkeypatch.setenv("SPECIMEN_MEDIA_DOWNLOAD_RETRIES", "5")
        settings = Settings()
        assert settings.output_dir == Path("/tmp/specimens")
        assert settings.download_retries == 5

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Settings(request_timeout=0)

    def test_get_settings_cached(self) -> None:
        assert get_settings() is get_settings()
