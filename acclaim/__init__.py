"""Your Acclaim public badge scraper."""

from acclaim.badges import fetch_badges
from acclaim.scraper.models import Badge, BadgeDetail, BadgeSummary, Skill

__all__ = ["fetch_badges", "Badge", "BadgeSummary", "BadgeDetail", "Skill"]
