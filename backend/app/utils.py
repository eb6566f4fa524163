import html
from datetime import datetime, timezone

import bleach


def now_utc() -> datetime:
    """Current time as a timezone aware UTC datetime."""
    return datetime.now(timezone.utc)


def strip_html(value: str) -> str:
    """
    Remove any markup from user supplied text.
    Entities are decoded again afterwards, so plain text like "AT&T" is kept
    as typed. Markup hidden behind entities is stripped on the next pass.
    """
    cleaned = value
    while True:
        stripped = html.unescape(
            bleach.clean(cleaned, tags=set(), attributes={}, strip=True)
        )
        if stripped == cleaned:
            return cleaned.strip()
        cleaned = stripped
