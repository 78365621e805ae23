"""
Parse salatomatic time labels like "05:30 (EST)" into UTC datetimes.
Only the time of day is meaningful: the date comes from the reference date, not the page.
"""
import re
from datetime import date, datetime, timedelta, timezone
from typing import Dict, Mapping, Optional

# Hours relative to UTC (local = UTC + offset). Static table, no DST transitions.
TIMEZONE_OFFSETS: Dict[str, int] = {
    "UTC": 0,
    "GMT": 0,
    "EST": -5,
    "EDT": -4,
    "CST": -6,
    "CDT": -5,
    "MST": -7,
    "MDT": -6,
    "PST": -8,
    "PDT": -7,
}

TIME_PATTERN = re.compile(r"(\d{2}):(\d{2})\s\((\w+)\)")


class TimeParserError(ValueError):
    """Base error for time label parsing."""


class TimeParseError(TimeParserError):
    """Label does not look like "HH:MM (TZ)"."""


class UnknownTimezoneError(TimeParserError):
    """Timezone abbreviation is not in the offset table."""


def parse_time(
    time_string: str,
    reference_date: Optional[date] = None,
    offsets: Optional[Mapping[str, int]] = None,
) -> datetime:
    """
    Convert "HH:MM (TZ)" to an aware UTC datetime on reference_date (default: today in UTC).
    Seconds and microseconds are zero. UTC hours past 23 or below 0 roll into the next/previous day.
    Raises TimeParseError or UnknownTimezoneError.
    """
    match = TIME_PATTERN.search(time_string or "")
    if not match:
        raise TimeParseError(f"Invalid time format: {time_string!r}")

    hours, minutes, abbreviation = int(match.group(1)), int(match.group(2)), match.group(3)

    table = TIMEZONE_OFFSETS if offsets is None else offsets
    offset = table.get(abbreviation)
    if offset is None:
        raise UnknownTimezoneError(f"Unknown time zone abbreviation: {abbreviation}")

    if reference_date is None:
        reference_date = datetime.now(timezone.utc).date()
    elif isinstance(reference_date, datetime):
        reference_date = reference_date.date()

    midnight = datetime(
        reference_date.year, reference_date.month, reference_date.day, tzinfo=timezone.utc
    )
    return midnight + timedelta(hours=hours - offset, minutes=minutes)
