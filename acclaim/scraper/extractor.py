"""Markup extraction: turns Your Acclaim listing and detail pages into models.

Both extractors are pure functions of a parsed document.  A missing element
or attribute only ever blanks the field that depends on it; nothing in here
raises on unexpected markup.
"""

from __future__ import annotations

from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from acclaim.scraper.models import BadgeDetail, BadgeSummary, Skill

# ---------------------------------------------------------------------------
# Site markup constants
# ---------------------------------------------------------------------------
LISTING_ITEM_CLASS = "cr-public-earned-badge-grid-item"
LISTING_ORGANISATION_CLASS = "cr-standard-grid-item-content__subtitle"
DETAIL_IMAGE_CLASS = "cr-badges-full-badge__img"
ISSUER_ENTITY_CLASS = "cr-badges-badge-issuer__entity"
LINKED_SKILL_CLASS = "cr-badges-badge-skills__skill--linked"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def clean_text(text: Optional[str]) -> Optional[str]:
    """Remove newline characters from *text*; falsy values are returned as-is."""
    return text.replace("\n", "") if text else text


def _attr(element: Optional[Tag], name: str) -> Optional[str]:
    """Return attribute *name* of *element* as a string, or ``None``."""
    if element is None:
        return None
    value = element.get(name)
    if value is None:
        return None
    # Multi-valued attributes (e.g. ``rel``) come back as lists.
    if isinstance(value, list):
        return " ".join(value)
    return value


def _absolute(base_url: str, path: Optional[str]) -> Optional[str]:
    """Prefix *path* with *base_url* verbatim; ``None`` stays ``None``."""
    if path is None:
        return None
    return f"{base_url}{path}"


def _first_with_class(element: Tag, tag_name: str, class_name: str) -> Optional[Tag]:
    return element.find(tag_name, class_=class_name)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_html(html: str) -> BeautifulSoup:
    """Parse *html* with the lenient stdlib-backed parser.

    Malformed or empty markup produces a partial (or empty) tree.
    """
    return BeautifulSoup(html, "html.parser")


def extract_badge_summary(anchor: Tag, base_url: str) -> BadgeSummary:
    """Read the list-level fields from one listing anchor."""
    organisation = _first_with_class(anchor, "div", LISTING_ORGANISATION_CLASS)
    return BadgeSummary(
        title=_attr(anchor, "title"),
        url=_absolute(base_url, _attr(anchor, "href")),
        image110=_attr(anchor.find("img"), "src"),
        organisation=clean_text(organisation.get_text()) if organisation else None,
    )


def extract_badge_summaries(soup: BeautifulSoup, base_url: str) -> List[BadgeSummary]:
    """Return one :class:`BadgeSummary` per badge entry, in document order."""
    return [
        extract_badge_summary(anchor, base_url)
        for anchor in soup.find_all("a", class_=LISTING_ITEM_CLASS)
    ]


def _extract_skill(item: Tag, base_url: str) -> Skill:
    link = item.find("a")
    if link is None:
        return Skill(name=None, url=None)
    return Skill(
        name=clean_text(link.get_text()),
        url=_absolute(base_url, _attr(link, "href")),
    )


def extract_badge_detail(soup: BeautifulSoup, base_url: str) -> BadgeDetail:
    """Read the detail-level fields from a badge page.

    A document without any of the expected structure (``<html></html>``)
    yields a :class:`BadgeDetail` with every field empty.
    """
    image = _first_with_class(soup, "img", DETAIL_IMAGE_CLASS)

    issuer = _first_with_class(soup, "div", ISSUER_ENTITY_CLASS)
    issuer_link = issuer.find("a") if issuer is not None else None

    skills = tuple(
        _extract_skill(item, base_url)
        for item in soup.find_all("li", class_=LINKED_SKILL_CLASS)
    )

    return BadgeDetail(
        image340=_attr(image, "src"),
        organisation_url=_absolute(base_url, _attr(issuer_link, "href")),
        skills=skills,
    )
