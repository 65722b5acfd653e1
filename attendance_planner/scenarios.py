"""What-if projections built on top of an AttendanceReport."""

import math
from collections import Counter
from datetime import date, timedelta
from fractions import Fraction
from typing import Dict, List, Optional

from .constants import SUBJECT_THRESHOLD, WEEKDAYS, WORKING_DAYS_PER_WEEK
from .projector import AttendanceReport, SemesterParameters, Timetable
from .workdays import iter_days, is_working_day, parse_date


def remaining_classes(report: AttendanceReport, subject: str) -> Fraction:
    return Fraction(report.days_remaining * report.weekly_frequency[subject], WORKING_DAYS_PER_WEEK)


def best_case_margin(report: AttendanceReport, subject: str) -> Fraction:
    """Classes above the threshold share of the semester if every remaining
    class is attended; negative when the threshold is out of reach."""
    total = report.total_classes_till_end[subject]
    return (
        report.attended_so_far[subject]
        + remaining_classes(report, subject)
        - Fraction(SUBJECT_THRESHOLD * total, 100)
    )


def project_attendance(report: AttendanceReport, future_rate: float) -> Dict[str, float]:
    """Projected end-of-semester percentage per subject when attending
    ``future_rate`` percent of the remaining classes."""
    future_rate = min(100.0, max(0.0, future_rate))
    projection = {}
    for subject in report.subjects:
        total = report.total_classes_till_end[subject]
        attended = report.attended_so_far[subject] + float(remaining_classes(report, subject)) * future_rate / 100
        projection[subject] = min(100.0, attended / total * 100) if total > 0 else 0.0
    return projection


def max_skippable_classes(report: AttendanceReport) -> Dict[str, int]:
    skippable = {}
    for subject in report.subjects:
        spare = math.floor(best_case_margin(report, subject))
        skippable[subject] = min(math.floor(remaining_classes(report, subject)), max(0, spare))
    return skippable


def safe_skip_days(
    timetable: Timetable,
    params: SemesterParameters,
    report: AttendanceReport,
    today: Optional[date] = None,
    limit: int = 5,
) -> List[date]:
    """Upcoming working days whose classes can all be missed while every
    subject on that day still ends the semester at the threshold or above."""
    today = parse_date(today) if today is not None else date.today()
    skippable = max_skippable_classes(report)

    safe = []
    first = max(today + timedelta(days=1), params.start_date)
    for day in iter_days(first, params.end_date):
        if len(safe) >= limit:
            break
        if not is_working_day(day, params.holidays):
            continue
        missed = Counter(label.strip() for label in timetable.get(WEEKDAYS[day.weekday()], ()) if label and label.strip())
        if not missed:
            continue
        if all(skippable[s] >= n for s, n in missed.items()):
            safe.append(day)
    return safe
