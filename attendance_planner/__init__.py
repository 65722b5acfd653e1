"""Semester attendance eligibility planner."""

from .exceptions import (
    AttendancePlannerError,
    InvalidAttendanceError,
    InvalidDateError,
    InvalidDateRangeError,
    UnknownHolidayCalendarError,
)
from .holidays import get_holiday_calendar, holidays_in_range, parse_holiday_list
from .projector import AttendanceReport, SemesterParameters, compute_report
from .recommendations import RecommendationStatus, format_recommendation
from .workdays import count_working_days

__all__ = [
    "AttendancePlannerError",
    "AttendanceReport",
    "InvalidAttendanceError",
    "InvalidDateError",
    "InvalidDateRangeError",
    "RecommendationStatus",
    "SemesterParameters",
    "UnknownHolidayCalendarError",
    "compute_report",
    "count_working_days",
    "format_recommendation",
    "get_holiday_calendar",
    "holidays_in_range",
    "parse_holiday_list",
]
