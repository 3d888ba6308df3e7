"""HTTP fetcher for Your Acclaim pages."""

from __future__ import annotations

from typing import Optional

import httpx

from acclaim.config import settings
from acclaim.scraper.models import RawPage


def _default_headers() -> dict[str, str]:
    return {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }


def make_client() -> httpx.Client:
    """Return an ``httpx.Client`` configured from ``settings``.

    The client is safe to share between the worker threads that fetch
    detail pages.
    """
    return httpx.Client(
        headers=_default_headers(),
        timeout=settings.request_timeout,
        follow_redirects=True,
    )


def fetch_page(url: str, client: Optional[httpx.Client] = None) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    When *client* is given it is reused and left open; otherwise a
    short-lived client is created for this single request.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
        httpx.RequestError: If the host is unreachable or the request times out.
    """
    if client is None:
        with make_client() as own_client:
            return fetch_page(url, own_client)

    response = client.get(url)
    response.raise_for_status()
    return RawPage(url=url, html=response.text, status_code=response.status_code)
