"""Calendar date parsing for the fixed set of accepted text layouts."""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .errors import ParseError

MONTH_NAMES = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)

_MONTHS_BY_NAME = {name: i for i, name in enumerate(MONTH_NAMES, start=1)}
_MONTHS_BY_ABBR = {name[:3]: i for i, name in enumerate(MONTH_NAMES, start=1)}


@dataclass(frozen=True)
class DateFormat:
    """A date layout and the pattern that recognizes it."""
    layout: str
    pattern: re.Pattern

    def parse(self, text: str) -> datetime | None:
        """Return the date described by text, or None if it does not fit."""
        m = self.pattern.fullmatch(text)
        if m is None:
            return None

        parts = m.groupdict()
        if "month" in parts:
            month = int(parts["month"])
        elif "mon" in parts:
            month = _MONTHS_BY_ABBR.get(parts["mon"].lower(), 0)
        else:
            month = _MONTHS_BY_NAME.get(parts["month_name"].lower(), 0)

        try:
            return datetime(int(parts["year"]), month, int(parts["day"]), tzinfo=timezone.utc)
        except ValueError:
            # impossible calendar date, e.g. month 00 or Feb 30
            return None


def _fmt(layout: str, pattern: str) -> DateFormat:
    return DateFormat(layout, re.compile(pattern, re.ASCII))


# Tried in order; the first layout that yields a real date wins.
DATE_FORMATS: tuple[DateFormat, ...] = (
    _fmt("YYYYMMDD", r"(?P<year>\d{4})(?P<month>\d{2})(?P<day>\d{2})"),
    _fmt("M/D/YYYY", r"(?P<month>\d{1,2})/(?P<day>\d{1,2})/(?P<year>\d{4})"),
    _fmt("MM/DD/YYYY", r"(?P<month>\d{2})/(?P<day>\d{2})/(?P<year>\d{4})"),
    _fmt("Mon D, YYYY", r"(?P<mon>[A-Za-z]{3}) (?P<day>\d{1,2}), (?P<year>\d{4})"),
    _fmt("Month D, YYYY", r"(?P<month_name>[A-Za-z]+) (?P<day>\d{1,2}), (?P<year>\d{4})"),
    _fmt("Mon D YYYY", r"(?P<mon>[A-Za-z]{3}) (?P<day>\d{1,2}) (?P<year>\d{4})"),
    _fmt("Month D YYYY", r"(?P<month_name>[A-Za-z]+) (?P<day>\d{1,2}) (?P<year>\d{4})"),
)


def parse_date(text: str) -> datetime:
    """Parse text as a date using the accepted layouts.

    Single quotes are removed first so SQL-quoted literals such as
    ``'20240131'`` are accepted.

    Args:
        text: Date text

    Returns:
        Midnight UTC datetime

    Raises:
        ParseError: If no layout matches or the date does not exist
    """
    cleaned = text.replace("'", "")
    for fmt in DATE_FORMATS:
        parsed = fmt.parse(cleaned)
        if parsed is not None:
            return parsed

    raise ParseError(f"cannot convert {text!r} to date", text)


def to_last_day(dt: datetime) -> datetime:
    """Move a date to the last day of its month (midnight UTC)."""
    year, month = dt.year, dt.month + 1
    if month == 13:
        month = 1
        year += 1

    return datetime(year, month, 1, tzinfo=timezone.utc) - timedelta(days=1)
