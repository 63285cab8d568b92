"""
Shared HTTP client for downloading source tables.

A ``requests.Session`` with a retry adapter: transient failures (connection
resets, 429 and 5xx gateway errors) are retried with exponential backoff, and
every request gets a default timeout unless the caller passes one.

Usage::

    from butterfly_checklist.services.http import session

    resp = session.get("https://example.org/checklist/taxa.csv")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from butterfly_checklist import __version__

#: Source tables are static files; only safe methods are retried.
DEFAULT_RETRY = Retry(
    total=4,
    backoff_factor=2,
    status_forcelist=[429, 500, 502, 503, 504],
    allowed_methods=["GET", "HEAD"],
    raise_on_status=False,
)

DEFAULT_TIMEOUT = 60  # seconds; full checklist tables are a few MB

USER_AGENT = f"butterfly-checklist/{__version__}"


class _TimeoutSession(requests.Session):
    """Session that applies a default timeout to every request."""

    def __init__(self, timeout: float) -> None:
        super().__init__()
        self.default_timeout = timeout

    def send(  # type: ignore[override]
        self, request: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", self.default_timeout)
        return super().send(request, **kwargs)  # type: ignore[arg-type]


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a session with the retry adapter mounted for http and https.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = _TimeoutSession(timeout)
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT
    return s


#: Module-level session, import and use directly.
session: requests.Session = create_session()
