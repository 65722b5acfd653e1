"""Static public-holiday calendars.

Calendars are plain mappings of date -> holiday name. Callers may pass their
own mapping (or any iterable of dates / ISO strings) wherever a calendar is
accepted, so the projector is not tied to one institution's year.
"""

import re
from datetime import date
from typing import Iterable, Mapping, Optional, Set, Union

from loguru import logger

from .exceptions import UnknownHolidayCalendarError
from .settings import get_settings
from .workdays import DateLike, parse_date

HolidayCalendar = Union[Mapping[date, str], Iterable[DateLike]]

# GITAM University Academic Calendar 2025-26
GITAM_PUBLIC_HOLIDAYS_2025_2026 = {
    date(2025, 8, 15): "Independence Day",
    date(2025, 8, 16): "Sri Krishna Janmastami",
    date(2025, 8, 27): "Vinayaka Chaturdhi",
    date(2025, 10, 2): "Mahatma Gandhi Jayanthi / Vijayadasami",
    date(2025, 10, 20): "Deepavali",
    date(2025, 12, 25): "Christmas",
    date(2026, 1, 26): "Republic Day",
    date(2026, 3, 3): "Holi",
    date(2026, 4, 3): "Good Friday",
    date(2026, 4, 14): "Ambedkar Jayanthi",
}

HOLIDAY_CALENDARS = {
    "gitam-2025-26": GITAM_PUBLIC_HOLIDAYS_2025_2026,
}

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def get_holiday_calendar(name: str) -> Mapping[date, str]:
    try:
        return HOLIDAY_CALENDARS[name]
    except KeyError:
        raise UnknownHolidayCalendarError(
            f"Unknown holiday calendar {name!r}; available: {', '.join(sorted(HOLIDAY_CALENDARS))}"
        ) from None


def holidays_in_range(start: DateLike, end: DateLike, calendar: Optional[HolidayCalendar] = None) -> Set[date]:
    """Return the calendar's holidays falling in [start, end] inclusive.

    Without an explicit calendar, the one named by the ``holiday_calendar``
    setting is used.
    """
    if calendar is None:
        calendar = get_holiday_calendar(get_settings().holiday_calendar)

    start, end = parse_date(start), parse_date(end)
    found = {d for d in map(parse_date, calendar) if start <= d <= end}
    logger.debug(f"{len(found)} holiday(s) between {start} and {end}")
    return found


def holiday_name(day: date, calendar: Mapping[date, str]) -> str:
    return calendar.get(day, "Holiday")


def parse_holiday_list(text: str) -> list:
    """Parse comma/whitespace separated ISO dates, dropping malformed tokens."""
    holidays = set()
    for token in re.split(r"[,\s]+", text or ""):
        if not _ISO_DATE.match(token):
            continue
        try:
            holidays.add(parse_date(token))
        except ValueError:
            logger.debug(f"Ignoring invalid holiday date {token!r}")
    return sorted(holidays)
