"""Shared HTML page builders for the badge scraper tests.

The builders mirror the markup Your Acclaim renders for a profile's badge
listing and for a single badge page.  Any field passed as ``None`` is left
out of the markup entirely so tests can exercise absent attributes.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import pytest

BASE_URL = "https://www.youracclaim.com"


def _attr(name: str, value: Optional[str]) -> str:
    return f' {name}="{value}"' if value is not None else ""


def build_listing_page(badges: list[dict[str, Any]]) -> str:
    """Render a listing page with one grid item per entry of *badges*.

    Keys: ``title``, ``href``, ``img``, ``organisation``.
    """
    items = []
    for badge in badges:
        img = (
            f'<img class="cr-standard-grid-item-content__image"{_attr("src", badge.get("img"))}>'
            if badge.get("img") is not None
            else ""
        )
        org = (
            '<div class="cr-standard-grid-item-content__subtitle">'
            f'{badge["organisation"]}</div>'
            if badge.get("organisation") is not None
            else ""
        )
        items.append(
            '<a class="cr-public-earned-badge-grid-item cr-standard-grid-item"'
            f'{_attr("href", badge.get("href"))}{_attr("title", badge.get("title"))}>'
            f'<div class="cr-standard-grid-item-content">{img}{org}</div>'
            "</a>"
        )
    return (
        "<!DOCTYPE html>\n<html><head><title>Badges</title></head><body>"
        '<div class="cr-public-earned-badges">'
        '<a class="cr-header-link" href="/earner/earned">Not a badge</a>'
        + "".join(items)
        + "</div></body></html>"
    )


def build_detail_page(
    image: Optional[str] = None,
    organisation_href: Optional[str] = None,
    skills: Optional[list[tuple[str, Optional[str]]]] = None,
    unlinked_skills: Optional[list[str]] = None,
) -> str:
    """Render a badge detail page.

    *skills* are ``(name, href)`` pairs rendered as linked skill entries;
    *unlinked_skills* are plain entries without the linked marker class.
    """
    img = (
        f'<img class="cr-badges-full-badge__img" src="{image}">' if image is not None else ""
    )
    issuer = (
        '<div class="cr-badges-badge-issuer__entity">'
        f'<a href="{organisation_href}">Issuer</a></div>'
        if organisation_href is not None
        else ""
    )
    items = []
    for name, href in skills or []:
        items.append(
            '<li class="cr-badges-badge-skills__skill cr-badges-badge-skills__skill--linked">'
            f'<a{_attr("href", href)}>{name}</a></li>'
        )
    for name in unlinked_skills or []:
        items.append(f'<li class="cr-badges-badge-skills__skill">{name}</li>')
    return (
        "<!DOCTYPE html>\n<html><body>"
        f'<div class="cr-badges-full-badge">{img}</div>'
        f"{issuer}"
        f'<ul class="cr-badges-badge-skills">{"".join(items)}</ul>'
        "</body></html>"
    )


@pytest.fixture
def listing_page() -> Callable[[list[dict[str, Any]]], str]:
    return build_listing_page


@pytest.fixture
def detail_page() -> Callable[..., str]:
    return build_detail_page
