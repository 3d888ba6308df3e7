"""Scraper package: page fetch & badge markup extraction."""

from acclaim.scraper.extractor import (
    extract_badge_detail,
    extract_badge_summaries,
    extract_badge_summary,
    parse_html,
)
from acclaim.scraper.fetcher import fetch_page, make_client
from acclaim.scraper.models import Badge, BadgeDetail, BadgeSummary, RawPage, Skill

__all__ = [
    "fetch_page",
    "make_client",
    "parse_html",
    "extract_badge_summaries",
    "extract_badge_summary",
    "extract_badge_detail",
    "RawPage",
    "Badge",
    "BadgeSummary",
    "BadgeDetail",
    "Skill",
]
