"""Acclaim badges CLI: entry-point for fetching a profile's badges.

Usage:
    python cli/main.py --help
    python cli/main.py badges <profile-id> --details
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from acclaim.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import Optional

import httpx
import typer

from acclaim.badges import fetch_badges, listing_url

app = typer.Typer(
    name="acclaim-badges",
    help="Fetch public Your Acclaim badges.",
    no_args_is_help=True,
)


@app.callback()
def main() -> None:
    """Fetch public Your Acclaim badges."""


@app.command("badges")
def badges(
    profile_id: str = typer.Argument(..., help="Your Acclaim profile id."),
    details: bool = typer.Option(
        False, "--details/--no-details", help="Also fetch organisation URL and skills."
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Abort if any badge detail page fails to load."
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="Site origin (defaults to ACCLAIM_BASE_URL)."
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write JSON to this file instead of stdout."
    ),
) -> None:
    """Fetch a profile's badges and print them as JSON."""
    typer.echo(
        f"[badges] Fetching {listing_url(profile_id, base_url)!r} …", err=True
    )
    try:
        result = fetch_badges(
            profile_id, include_detail=details, base_url=base_url, strict=strict
        )
    except httpx.HTTPError as e:
        typer.echo(f"[badges] Error: {e}", err=True)
        raise typer.Exit(code=1)

    payload = json.dumps([badge.to_dict() for badge in result], indent=2)
    typer.echo(f"[badges] Found {len(result)} badge(s).", err=True)

    if output is not None:
        output.write_text(payload + "\n", encoding="utf-8")
        typer.echo(f"[badges] Wrote {output}", err=True)
    else:
        typer.echo(payload)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
