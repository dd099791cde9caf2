"""Calendar-date helpers for Bank of England series.

The BoE publishes observation dates in UK local time. Every date entering the
package is reduced to a plain ``date`` in that zone so that lookups never
depend on the caller's timezone or time of day.
"""

from datetime import date, datetime
from typing import Optional, Union
from zoneinfo import ZoneInfo

from dateutil import parser as date_parser

from ..config.settings import settings

DateLike = Union[date, datetime]

SOURCE_TZ = ZoneInfo(settings.BOE_TIMEZONE)

# Fixed English abbreviations; strftime("%b") follows the process locale
MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def to_calendar_date(value: DateLike, tz: ZoneInfo = SOURCE_TZ) -> date:
    """Normalize a date or datetime to a calendar date in ``tz``.

    Aware datetimes are converted to ``tz`` first; naive datetimes are taken
    to already be local to ``tz``.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Unsupported type for date: {type(value)}")


def now_local(tz: ZoneInfo = SOURCE_TZ) -> datetime:
    """Current moment in the source timezone."""
    return datetime.now(tz)


def parse_date(text: str, date_format: Optional[str] = None, tz: ZoneInfo = SOURCE_TZ) -> date:
    """Parse ``text`` into a calendar date.

    Args:
        text: Date string
        date_format: strptime pattern; when omitted the flexible dateutil
            parser is used

    Raises:
        ValueError: If the text cannot be parsed
    """
    if date_format:
        parsed = datetime.strptime(text, date_format)
    else:
        try:
            parsed = date_parser.parse(text)
        except (date_parser.ParserError, OverflowError) as e:
            raise ValueError(f"Unparseable date {text!r}: {e}") from e
    return to_calendar_date(parsed, tz)


def month_abbr(value: date) -> str:
    """Three-letter English month name, e.g. 'Sep'."""
    return MONTH_ABBR[value.month - 1]
