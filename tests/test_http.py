"""Tests for the shared HTTP client with retry logic."""

from __future__ import annotations

from unittest.mock import patch

import requests
from urllib3.util.retry import Retry

from specimen_media.services.http import (
    DEFAULT_RETRY,
    DEFAULT_TIMEOUT,
    build_retry,
    create_session,
    session,
)


class TestDefaultRetry:
    """Verify retry strategy configuration."""

    def test_total_retries(self) -> None:
        assert DEFAULT_RETRY.total == 3

    def test_retries_on_server_errors(self) -> None:
        for status in (500, 502, 503, 504):
            assert status in DEFAULT_RETRY.status_forcelist

    def test_retries_on_timeout_and_rate_limit(self) -> None:
        assert 408 in DEFAULT_RETRY.status_forcelist
        assert 429 in DEFAULT_RETRY.status_forcelist

    def test_does_not_retry_not_found(self) -> None:
        assert 404 not in DEFAULT_RETRY.status_forcelist

    def test_only_safe_methods(self) -> None:
        allowed = DEFAULT_RETRY.allowed_methods
        assert "GET" in allowed
        assert "POST" not in allowed

    def test_status_left_to_caller(self) -> None:
        assert DEFAULT_RETRY.raise_on_status is False


class TestBuildRetry:
    """Verify retry count override."""

    def test_overrides_total(self) -> None:
        assert build_retry(5).total == 5

    def test_keeps_status_forcelist(self) -> None:
        assert build_retry(0).status_forcelist == DEFAULT_RETRY.status_forcelist

    def test_does_not_mutate_default(self) -> None:
        build_retry(9)
        assert DEFAULT_RETRY.total == 3


class TestCreateSession:
    """Verify session factory."""

    def test_returns_session(self) -> None:
        s = create_session()
        assert isinstance(s, requests.Session)

    def test_mounts_https_adapter(self) -> None:
        s = create_session()
        adapter = s.get_adapter("https://example.com")
        assert isinstance(adapter, requests.adapters.HTTPAdapter)

    def test_mounts_http_adapter(self) -> None:
        s = create_session()
        adapter = s.get_adapter("http://example.com")
        assert isinstance(adapter, requests.adapters.HTTPAdapter)

    def test_adapter_has_retry(self) -> None:
        s = create_session()
        adapter = s.get_adapter("https://example.com")
        assert adapter.max_retries.total == 3

    def test_custom_retry(self) -> None:
        custom = Retry(total=10, backoff_factor=1)
        s = create_session(retry=custom)
        adapter = s.get_adapter("https://example.com")
        assert adapter.max_retries.total == 10

    def test_user_agent_header(self) -> None:
        s = create_session()
        assert "specimen-media" in s.headers["User-Agent"]

    def test_default_timeout_injected(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 42

    def test_default_timeout_injected_through_get(self) -> None:
        """Session.get passes timeout=None; the default still applies."""
        s = create_session(timeout=42)
        response = requests.Response()
        response.status_code = 200
        with patch.object(requests.adapters.HTTPAdapter, "send", return_value=response) as mock_send:
            s.get("https://example.com/img.jpg")
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 42

    def test_explicit_timeout_not_overridden(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep, timeout=99)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 99


class TestModuleSession:
    """Verify the module-level singleton."""

    def test_session_is_configured(self) -> None:
        adapter = session.get_adapter("https://example.com")
        assert adapter.max_retries.total == 3

    def test_default_timeout(self) -> None:
        assert DEFAULT_TIMEOUT == 30
