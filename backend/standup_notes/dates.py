"""
Standup Notes Backend - Date Windows
====================================

What:  Calendar-day arithmetic for the time-windowed queries.
Who:   NoteService (today/yesterday listings) and SummaryService (standup).

All windows are in UTC and are compared against the store's created_at.

Day listing window:   [D 00:00:00, D 23:59:59)
    The last second of the day is outside the window. Notes stamped
    23:59:59.x are therefore listed under neither day.

Standup window:       [D+1 00:00:00, D+3 00:00:00)
    The two calendar days AFTER the requested date. Callers of the existing
    service rely on this shifted window, so it is kept as-is.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Tuple

from standup_notes.exceptions import InvalidInputError

DAY_WINDOW_END = time(23, 59, 59)

Window = Tuple[datetime, datetime]


def utc_today() -> date:
    """Current calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def day_window(day: date) -> Window:
    """(start, end) bounds of the listing window for `day`; end is exclusive."""
    start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    end = datetime.combine(day, DAY_WINDOW_END, tzinfo=timezone.utc)
    return start, end


def standup_window(day: date) -> Window:
    """(start, end) bounds of the standup note query for `day`; end is exclusive."""
    start = datetime.combine(day + timedelta(days=1), time.min, tzinfo=timezone.utc)
    end = datetime.combine(day + timedelta(days=3), time.min, tzinfo=timezone.utc)
    return start, end


def parse_calendar_date(raw: str) -> date:
    """
    Parse the standup `date` parameter.

    Accepts YYYY-MM-DD, or an ISO datetime. A datetime with an offset is
    converted to UTC before its date is taken.

    Raises:
        InvalidInputError: `raw` is not an ISO date or datetime.
    """
    value = raw.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise InvalidInputError(
            message=f"Invalid date '{raw}'. Expected YYYY-MM-DD",
            field="date",
        )
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()
