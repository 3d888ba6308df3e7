"""Badge aggregation: listing fetch, optional detail fetches, merge.

``fetch_badges`` is the single entry point.  It fetches a profile's listing
page, extracts one summary per badge and, when asked, fetches every badge's
detail page **in parallel** on a bounded ``ThreadPoolExecutor``.  Results are
collected by position so the output always follows listing order.

Failure policy
--------------
* A failed listing fetch propagates unchanged.
* A failed detail fetch only degrades its own entry to a summary-only
  :class:`Badge` (reported on stderr), unless ``strict=True`` in which case
  the error propagates and pending detail fetches are cancelled.
"""

from __future__ import annotations

import sys
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Dict, List, Optional

import httpx

from acclaim.config import settings
from acclaim.scraper.extractor import (
    extract_badge_detail,
    extract_badge_summaries,
    parse_html,
)
from acclaim.scraper.fetcher import fetch_page, make_client
from acclaim.scraper.models import Badge, BadgeDetail, BadgeSummary


def _origin(base_url: Optional[str]) -> str:
    return (base_url or settings.base_url).rstrip("/")


def listing_url(profile_id: str, base_url: Optional[str] = None) -> str:
    """Return the badge listing URL for *profile_id*."""
    return f"{_origin(base_url)}/users/{profile_id}/badges"


def fetch_badge_detail(
    url: str, base_url: Optional[str] = None, client: Optional[httpx.Client] = None
) -> BadgeDetail:
    """Fetch the detail page at *url* and extract its :class:`BadgeDetail`.

    Raises:
        httpx.HTTPError: Any transport or status error from the fetcher.
    """
    raw = fetch_page(url, client)
    return extract_badge_detail(parse_html(raw.html), _origin(base_url))


def _collect_details(
    summaries: List[BadgeSummary],
    base_url: str,
    client: httpx.Client,
    strict: bool,
) -> List[Optional[BadgeDetail]]:
    """Fetch detail pages for *summaries*, one result slot per summary."""
    details: List[Optional[BadgeDetail]] = [None] * len(summaries)
    workers = max(1, min(settings.detail_concurrency, len(summaries)))

    with ThreadPoolExecutor(max_workers=workers) as pool:
        # Entries without a detail URL keep a ``None`` slot.
        future_to_index: Dict[Future, int] = {
            pool.submit(fetch_badge_detail, s.url, base_url, client): index
            for index, s in enumerate(summaries)
            if s.url is not None
        }
        for future in as_completed(future_to_index):
            index = future_to_index[future]
            try:
                details[index] = future.result()
            except httpx.HTTPError as exc:
                if strict:
                    # Requests already in flight still run to completion.
                    pool.shutdown(wait=False, cancel_futures=True)
                    raise
                print(
                    f"[DETAILS] ✗ Failed {summaries[index].url!r}: {exc}",
                    file=sys.stderr,
                )

    return details


def fetch_badges(
    profile_id: str,
    include_detail: bool = False,
    *,
    base_url: Optional[str] = None,
    strict: bool = False,
) -> List[Badge]:
    """Fetch the public badges of a Your Acclaim profile.

    Args:
        profile_id: The profile identifier (``/users/<profile_id>/badges``).
        include_detail: ``True`` to also fetch every badge's detail page for
            the large image, organisation URL and skills.
        base_url: Site origin; defaults to ``settings.base_url``.
        strict: Abort the whole call on the first detail-page failure instead
            of degrading that entry.

    Returns:
        The badges in listing order.

    Raises:
        httpx.HTTPError: If the listing fetch fails, or a detail fetch fails
            while ``strict`` is set.
    """
    origin = _origin(base_url)

    with make_client() as client:
        raw = fetch_page(listing_url(profile_id, origin), client)
        summaries = extract_badge_summaries(parse_html(raw.html), origin)

        if not include_detail or not summaries:
            return [Badge.from_parts(summary) for summary in summaries]

        details = _collect_details(summaries, origin, client, strict)

    return [
        Badge.from_parts(summary, detail)
        for summary, detail in zip(summaries, details)
    ]
