from __future__ import annotations

from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date.

    A full ISO datetime (``2026-01-31T00:00:00``) is accepted and truncated.
    """
    v = value.strip()
    try:
        return datetime.strptime(v, "%Y-%m-%d").date()
    except ValueError:
        return datetime.fromisoformat(v).date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()
