"""Shared fixtures for planner tests."""

import pytest

from attendance_planner.constants import WEEKDAYS


@pytest.fixture
def math_timetable():
    """'Math' once per weekday, remaining slots blank."""
    return {day: ["Math", "", ""] for day in WEEKDAYS}


@pytest.fixture
def mixed_timetable():
    return {
        "Monday": ["Math", "Physics", ""],
        "Tuesday": ["English", "English", ""],
        "Wednesday": ["Math", "Math", "CS"],
        "Thursday": ["Physics", "", ""],
        "Friday": ["Math", "CS", ""],
    }
