"""Timestamp parsing / formatting helpers.

Centralized so validation and record building agree on what counts as a
parseable date and on the canonical output form
(``YYYY-MM-DDTHH:MM:SS.mmmZ``, always UTC).
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse an ISO-8601 date or date-time string into an aware UTC datetime.

    Date-only values resolve to midnight UTC and values without an offset are
    taken as UTC. Accepted forms are those of ``datetime.fromisoformat`` on
    Python 3.11+, the minimum supported interpreter. Returns None when the
    string is not a valid calendar date/time.
    """
    text = value.strip()
    if not text:
        return None
    if text[-1] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None


def format_timestamp(moment: datetime) -> str:
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment.isoformat(timespec="milliseconds") + "Z"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
