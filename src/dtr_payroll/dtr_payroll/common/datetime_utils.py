from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional
from zoneinfo import ZoneInfo

from ..core.constants import DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def try_parse_iso_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        return None


def now_local(tz_name: Optional[str] = None) -> datetime:
    """Current local time as a naive datetime.

    Note: Wrapped so tests can patch/mocked easier. When a zone name is given
    the wall clock of that zone is returned (timestamps are stored naive).
    """
    if tz_name:
        return datetime.now(ZoneInfo(tz_name)).replace(tzinfo=None)
    return datetime.now()


def resolve_period(
    start_s: Optional[str],
    end_s: Optional[str],
    *,
    now: datetime,
) -> tuple[Optional[datetime], datetime]:
    """Turn raw query-string dates into an inclusive payroll period.

    - missing/unparsable start -> None (no lower bound)
    - missing/unparsable end -> now
    - a parsed end date covers that whole day

    start > end is returned as-is; the report then simply has no events.
    """
    start_d = try_parse_iso_date(start_s)
    end_d = try_parse_iso_date(end_s)

    start = datetime.combine(start_d, time.min) if start_d else None
    end = datetime.combine(end_d, time.max) if end_d else now
    return start, end
