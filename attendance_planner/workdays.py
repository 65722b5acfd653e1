from datetime import date, datetime, timedelta
from typing import Iterable, Iterator, Union

from .exceptions import InvalidDateError

DateLike = Union[date, str]


def parse_date(value: DateLike) -> date:
    """Normalize a date or YYYY-MM-DD string to a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError) as exc:
        raise InvalidDateError(f"Invalid date {value!r}, expected YYYY-MM-DD") from exc


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day in [start, end]; nothing when end < start."""
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


def is_working_day(day: date, excluded: frozenset = frozenset()) -> bool:
    return day.weekday() < 5 and day not in excluded


def get_working_days(start: DateLike, end: DateLike, excluded: Iterable[DateLike] = ()) -> list:
    start, end = parse_date(start), parse_date(end)
    excluded = frozenset(parse_date(d) for d in excluded)
    return [d for d in iter_days(start, end) if is_working_day(d, excluded)]


def count_working_days(start: DateLike, end: DateLike, excluded: Iterable[DateLike] = ()) -> int:
    """Count Monday-Friday dates in [start, end] that are not excluded."""
    return len(get_working_days(start, end, excluded))
