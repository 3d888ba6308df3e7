"""Data models for the badge scraper."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass(frozen=True)
class Skill:
    """A linked competency listed on a badge detail page."""

    name: Optional[str]
    url: Optional[str]

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "url": self.url}


@dataclass(frozen=True)
class BadgeSummary:
    """Fields read from one entry of a profile's badge listing page."""

    title: Optional[str]
    url: Optional[str]
    image110: Optional[str]
    organisation: Optional[str]


@dataclass(frozen=True)
class BadgeDetail:
    """Fields read from a single badge detail page."""

    image340: Optional[str] = None
    organisation_url: Optional[str] = None
    skills: Tuple[Skill, ...] = ()


@dataclass(frozen=True)
class Badge:
    """A listing entry, optionally enriched with its detail page.

    ``detail`` is ``None`` when detail pages were not requested or the
    detail fetch for this entry failed.
    """

    title: Optional[str]
    url: Optional[str]
    image110: Optional[str]
    organisation: Optional[str]
    detail: Optional[BadgeDetail] = field(default=None)

    @classmethod
    def from_parts(
        cls, summary: BadgeSummary, detail: Optional[BadgeDetail] = None
    ) -> Badge:
        """Combine *summary* and *detail* without touching summary fields."""
        return cls(
            title=summary.title,
            url=summary.url,
            image110=summary.image110,
            organisation=summary.organisation,
            detail=detail,
        )

    @property
    def image340(self) -> Optional[str]:
        return self.detail.image340 if self.detail else None

    @property
    def organisation_url(self) -> Optional[str]:
        return self.detail.organisation_url if self.detail else None

    @property
    def skills(self) -> Tuple[Skill, ...]:
        return self.detail.skills if self.detail else ()

    def to_dict(self) -> dict[str, Any]:
        """Render the public JSON shape.

        Detail keys (``images["340"]``, ``organisationUrl``, ``skills``) are
        only present when a detail page was merged in.
        """
        images: dict[str, Optional[str]] = {"110": self.image110}
        data: dict[str, Any] = {
            "title": self.title,
            "url": self.url,
            "images": images,
            "organisation": self.organisation,
        }
        if self.detail is not None:
            images["340"] = self.detail.image340
            data["organisationUrl"] = self.detail.organisation_url
            data["skills"] = [skill.to_dict() for skill in self.detail.skills]
        return data
