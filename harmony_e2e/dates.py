"""
Date Helpers

Produce date and time strings that match the Harmony Hub calendar rendering,
so assertions against "today" stay valid on whatever day the suite runs.

Names are taken from fixed en-US tables rather than the host locale, and the
clock is read in an explicit timezone (HARMONY_TZ).

Usage:
    from harmony_e2e import dates

    dates.formatted_long_date()   # "Tuesday, December 30, 2025"
    dates.format_time(9, 0)       # "09:00"
"""
from datetime import date, datetime
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from .config import E2EConfig
from .errors import InvalidArgument

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

Clock = Callable[[ZoneInfo], datetime]


def system_clock(tz: ZoneInfo) -> datetime:
    return datetime.now(tz)


def format_long_date(d: date) -> str:
    """Render a date as 'Weekday, Month D, YYYY' (en-US long form)."""
    return f"{WEEKDAY_NAMES[d.weekday()]}, {MONTH_NAMES[d.month - 1]} {d.day}, {d.year}"


def format_time(hours: int, minutes: int) -> str:
    """Render a 24-hour time as zero-padded HH:MM.

    Raises InvalidArgument for values outside 0-23 / 0-59; nothing is wrapped.
    """
    _check_range("hours", hours, 23)
    _check_range("minutes", minutes, 59)
    return f"{hours:02d}:{minutes:02d}"


def _check_range(name: str, value: int, upper: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= upper:
        raise InvalidArgument(f"{name} must be in [0, {upper}], got {value}")


class DateFormatter:
    """Clock-driven formatter bound to one timezone.

    Every call reads the clock again; nothing is cached between calls.
    """

    def __init__(self, tz: str = "UTC", clock: Optional[Clock] = None):
        self.tz = ZoneInfo(tz)
        self.clock = clock or system_clock

    def now(self) -> datetime:
        return self.clock(self.tz)

    def today(self) -> date:
        return self.now().date()

    def formatted_long_date(self) -> str:
        return format_long_date(self.today())

    def current_day_of_month(self) -> int:
        return self.now().day

    def current_month_name(self) -> str:
        return MONTH_NAMES[self.now().month - 1]

    def current_year(self) -> int:
        return self.now().year

    def current_time(self) -> str:
        now = self.now()
        return format_time(now.hour, now.minute)


def default_formatter() -> DateFormatter:
    """Formatter for the configured timezone.

    Built per call so a changed HARMONY_TZ is picked up.
    """
    return DateFormatter(E2EConfig.load().timezone)


def formatted_long_date() -> str:
    return default_formatter().formatted_long_date()


def current_day_of_month() -> int:
    return default_formatter().current_day_of_month()


def current_month_name() -> str:
    return default_formatter().current_month_name()


def current_year() -> int:
    return default_formatter().current_year()


def current_time() -> str:
    return default_formatter().current_time()
