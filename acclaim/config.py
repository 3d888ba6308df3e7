"""Centralised settings for the badge scraper.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Target site
    # ------------------------------------------------------------------
    base_url: str = field(
        default_factory=lambda: os.environ.get(
            "ACCLAIM_BASE_URL", "https://www.youracclaim.com"
        )
    )

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "ACCLAIM_USER_AGENT",
            "Mozilla/5.0 (compatible; AcclaimBadges/1.0; +https://github.com/acclaim-badges)",
        )
    )

    # ------------------------------------------------------------------
    # Detail pages
    # ------------------------------------------------------------------
    detail_concurrency: int = field(
        default_factory=lambda: int(os.environ.get("DETAIL_CONCURRENCY", "8"))
    )


# Module-level singleton; import this everywhere:
#   from acclaim.config import settings
settings = Settings()
