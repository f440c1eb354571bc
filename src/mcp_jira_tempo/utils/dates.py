"""Duration and date helpers shared by the clients, reports and tools."""

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Literal

import dateutil.parser

from ..exceptions import ParseError

DURATION_EXAMPLES = "2h, 30m, 1h30m, 1.5h"

_DURATION_PATTERN = re.compile(
    r"^(?:(\d+(?:\.\d+)?)\s*h)?\s*(?:(\d+)\s*m)?$", re.IGNORECASE
)
_ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_START_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")

Period = Literal["today", "week", "month", "custom"]


def parse_duration(text: str) -> int:
    """
    Parse a human-readable duration into seconds.

    Accepts an hours part, a minutes part or both, e.g. "2h", "30m",
    "1h30m", "1.5h", "2h 15m". Units are case-insensitive.

    Args:
        text: The duration literal

    Returns:
        Duration in whole seconds (rounded)

    Raises:
        ParseError: If the text is empty or matches neither component
    """
    trimmed = (text or "").strip()
    if not trimmed:
        raise ParseError(f"Empty duration string. Use formats like: {DURATION_EXAMPLES}")

    match = _DURATION_PATTERN.match(trimmed)
    if match and (match.group(1) or match.group(2)):
        hours = float(match.group(1)) if match.group(1) else 0.0
        minutes = int(match.group(2)) if match.group(2) else 0
        return round(hours * 3600 + minutes * 60)

    raise ParseError(
        f"Cannot parse duration '{text}'. Use formats like: {DURATION_EXAMPLES}"
    )


def format_seconds(seconds: int) -> str:
    """Format seconds as "<H>h <M>m"; sub-minute remainders are dropped."""
    total_minutes = int(seconds) // 60
    hours, minutes = divmod(total_minutes, 60)
    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    return " ".join(parts) or "0m"


def format_signed_seconds(seconds: int, zero: str = "0h") -> str:
    """Format a signed difference, e.g. "+1h 30m" or "-45m"."""
    if seconds == 0:
        return zero
    sign = "+" if seconds > 0 else "-"
    return f"{sign}{format_seconds(abs(seconds))}"


def parse_date(text: str) -> date:
    """
    Parse a date string into a date.

    ISO "YYYY-MM-DD" is the documented format; anything dateutil can parse
    is accepted as well.

    Raises:
        ParseError: If the string is not a valid date
    """
    trimmed = (text or "").strip()
    try:
        if _ISO_DATE_PATTERN.match(trimmed):
            return date.fromisoformat(trimmed)
        return dateutil.parser.parse(trimmed).date()
    except (ValueError, OverflowError) as e:
        raise ParseError(
            f"Cannot parse date '{text}'. Use ISO format like 2026-02-09"
        ) from e


def format_date(d: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return d.isoformat()


def today() -> date:
    """Return the current local date."""
    return datetime.now().date()


def get_week_bounds(ref: date | None = None) -> tuple[date, date]:
    """Return (monday, friday) of the week containing ``ref`` (default: today)."""
    d = ref or today()
    monday = d - timedelta(days=d.weekday())
    return monday, monday + timedelta(days=4)


def month_bounds(ref: date | None = None) -> tuple[date, date]:
    """Return the first and last calendar day of the month containing ``ref``."""
    d = ref or today()
    last_day = calendar.monthrange(d.year, d.month)[1]
    return d.replace(day=1), d.replace(day=last_day)


def weekday_range(from_date: date, to_date: date) -> list[date]:
    """Return every calendar day from ``from_date`` to ``to_date`` inclusive.

    Weekends inside the range are included.
    """
    days = []
    current = from_date
    while current <= to_date:
        days.append(current)
        current += timedelta(days=1)
    return days


def normalize_start_time(text: str | None, default: str = "09:00:00") -> str:
    """
    Normalize a worklog start time to HH:MM:SS.

    Args:
        text: "HH:MM" or "HH:MM:SS"; empty means ``default``
        default: Value used when text is empty

    Returns:
        Start time as HH:MM:SS

    Raises:
        ParseError: If the value is not a valid wall-clock time
    """
    if not text or not text.strip():
        return default
    match = _START_TIME_PATTERN.match(text.strip())
    if not match:
        raise ParseError(
            f"Cannot parse start time '{text}'. Use HH:MM or HH:MM:SS, e.g. 09:00"
        )
    hours, minutes = int(match.group(1)), int(match.group(2))
    seconds = int(match.group(3)) if match.group(3) else 0
    if hours > 23 or minutes > 59 or seconds > 59:
        raise ParseError(f"Start time '{text}' is out of range")
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar dates."""

    from_date: date
    to_date: date

    def __post_init__(self) -> None:
        if self.from_date > self.to_date:
            raise ParseError(
                f"Start date {format_date(self.from_date)} is after "
                f"end date {format_date(self.to_date)}"
            )

    @property
    def from_str(self) -> str:
        return format_date(self.from_date)

    @property
    def to_str(self) -> str:
        return format_date(self.to_date)

    @property
    def is_single_day(self) -> bool:
        return self.from_date == self.to_date

    def days(self) -> list[date]:
        return weekday_range(self.from_date, self.to_date)

    def label(self) -> str:
        if self.is_single_day:
            return self.from_str
        return f"{self.from_str} → {self.to_str}"


def resolve_period(
    period: Period,
    *,
    date_str: str | None = None,
    week_start: str | None = None,
    from_str: str | None = None,
    to_str: str | None = None,
    ref: date | None = None,
) -> DateRange:
    """
    Turn a tool's period options into a concrete date range.

    "custom" accepts either an explicit ``from_str``/``to_str`` pair, a single
    ``date_str``, or a ``week_start`` (normalized to that week's Mon..Fri).

    Raises:
        ParseError: If a companion field is missing or a date is invalid
    """
    current = ref or today()
    if period == "today":
        return DateRange(current, current)
    if period == "week":
        return DateRange(*get_week_bounds(current))
    if period == "month":
        return DateRange(*month_bounds(current))
    if period != "custom":
        raise ParseError(f"Unknown period '{period}'")

    if from_str or to_str:
        if not (from_str and to_str):
            raise ParseError(
                'When period is "custom", both "from" and "to" dates are required.'
            )
        return DateRange(parse_date(from_str), parse_date(to_str))
    if date_str:
        d = parse_date(date_str)
        return DateRange(d, d)
    if week_start:
        return DateRange(*get_week_bounds(parse_date(week_start)))
    raise ParseError(
        'When period is "custom", provide either "date" or "week_start".'
    )
