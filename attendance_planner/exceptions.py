"""Error types raised by the attendance planner."""


class AttendancePlannerError(Exception):
    """Base exception for invalid planner input."""


class InvalidDateError(AttendancePlannerError, ValueError):
    """Raised when a date string is not a valid YYYY-MM-DD calendar date."""


class InvalidDateRangeError(AttendancePlannerError, ValueError):
    """Raised when the semester end date is not after the start date."""

    def __init__(self, start, end) -> None:
        self.start = start
        self.end = end
        super().__init__(f"End date {end} must be after start date {start}")


class InvalidAttendanceError(AttendancePlannerError, ValueError):
    """Raised when a reported attendance percentage is outside 0-100."""

    def __init__(self, subject: str, percentage) -> None:
        self.subject = subject
        self.percentage = percentage
        super().__init__(f"Attendance for {subject!r} must be between 0 and 100, got {percentage}")


class UnknownHolidayCalendarError(AttendancePlannerError, KeyError):
    """Raised when a named holiday calendar is not registered."""
