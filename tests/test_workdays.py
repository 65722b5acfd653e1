from datetime import date

import pytest

from attendance_planner.exceptions import InvalidDateError
from attendance_planner.workdays import count_working_days, get_working_days, parse_date

MONDAY = date(2025, 9, 1)
SUNDAY = date(2025, 9, 7)


def test_one_calendar_week_has_five_working_days():
    assert count_working_days(MONDAY, SUNDAY) == 5


def test_range_is_inclusive_of_both_ends():
    assert count_working_days(MONDAY, date(2025, 9, 8)) == 6
    assert count_working_days(MONDAY, MONDAY) == 1


def test_weekday_holiday_is_excluded():
    assert count_working_days(MONDAY, SUNDAY, {date(2025, 9, 3)}) == 4


def test_holidays_accept_iso_strings():
    assert count_working_days("2025-09-01", "2025-09-07", ["2025-09-03"]) == 4


def test_weekend_holiday_changes_nothing():
    assert count_working_days(MONDAY, SUNDAY, {date(2025, 9, 6)}) == 5


def test_weekend_only_range_has_no_working_days():
    assert count_working_days(date(2025, 9, 6), SUNDAY) == 0


def test_reversed_range_is_empty():
    assert count_working_days(SUNDAY, MONDAY) == 0


def test_counting_is_repeatable_and_leaves_inputs_alone():
    start, end = MONDAY, date(2025, 12, 19)
    holidays = {date(2025, 10, 2), date(2025, 10, 20)}

    first = count_working_days(start, end, holidays)
    second = count_working_days(start, end, holidays)

    assert first == second == 78
    assert start == date(2025, 9, 1)
    assert end == date(2025, 12, 19)
    assert holidays == {date(2025, 10, 2), date(2025, 10, 20)}


def test_get_working_days_lists_dates_in_order():
    days = get_working_days(MONDAY, SUNDAY, {date(2025, 9, 3)})
    assert days == [date(2025, 9, 1), date(2025, 9, 2), date(2025, 9, 4), date(2025, 9, 5)]


@pytest.mark.parametrize("value", ["2025-02-30", "01/09/2025", "", None])
def test_parse_date_rejects_malformed_values(value):
    with pytest.raises(InvalidDateError):
        parse_date(value)


def test_parse_date_passes_dates_through():
    assert parse_date(MONDAY) is MONDAY
    assert parse_date(" 2025-09-01 ") == MONDAY
