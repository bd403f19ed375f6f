"""
Shared HTTP client with automatic retry.

Provides a pre-configured ``requests.Session`` that retries transient
failures (connection errors, timeouts, 408/429/5xx) a bounded number of times
and never waits forever on a socket.  Redirects are followed by ``requests``.

Usage::

    from specimen_media.services.http import session

    resp = session.get("https://example.org/media/123.jpg", stream=True)
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from specimen_media import __version__

#: Default retry strategy — three retries after the first attempt.
DEFAULT_RETRY = Retry(
    total=3,
    backoff_factor=1,  # 0s, 2s, 4s between retries
    status_forcelist=[408, 429, 500, 502, 503, 504],
    allowed_methods=["GET", "HEAD"],
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"specimen-media/{__version__}"


def build_retry(retries: int) -> Retry:
    """Return ``DEFAULT_RETRY`` with a different retry count."""
    return DEFAULT_RETRY.new(total=retries)


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Session.request always forwards ``timeout=None`` when the caller omits
    # it, so a plain setdefault would never apply the default.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session — import and use directly.
session: requests.Session = create_session()
