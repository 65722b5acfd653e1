"""Semester attendance projection.

Classes are assumed to be spread evenly over working days at the weekly
rate (``weekly_frequency / 5`` per working day). Holidays shrink the working
day count, not any particular weekday's slots.
"""

import math
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple

import pandas as pd
from loguru import logger

from .constants import OVERALL_THRESHOLD, SUBJECT_THRESHOLD, WORKING_DAYS_PER_WEEK
from .exceptions import InvalidAttendanceError, InvalidDateRangeError
from .recommendations import RecommendationStatus, classify
from .workdays import DateLike, count_working_days, parse_date

Timetable = Mapping[str, Sequence[str]]


@dataclass(frozen=True)
class SemesterParameters:
    start_date: DateLike
    end_date: DateLike
    attendance: Mapping[str, float] = field(default_factory=dict)
    holidays: FrozenSet[date] = frozenset()

    def __post_init__(self):
        object.__setattr__(self, "start_date", parse_date(self.start_date))
        object.__setattr__(self, "end_date", parse_date(self.end_date))
        object.__setattr__(self, "attendance", MappingProxyType(dict(self.attendance)))
        object.__setattr__(self, "holidays", frozenset(parse_date(d) for d in self.holidays))

    def percentage_for(self, subject: str) -> float:
        # Subjects without a reported figure count as 0%.
        return float(self.attendance.get(subject, 0))


@dataclass(frozen=True)
class AttendanceReport:
    subjects: Tuple[str, ...]
    total_working_days: int
    elapsed_working_days: int
    days_remaining: int
    total_weeks: int
    weekly_frequency: Mapping[str, int]
    total_classes_till_end: Mapping[str, int]
    classes_held_so_far: Mapping[str, int]
    attended_so_far: Mapping[str, int]
    overall_attendance_now: float
    best_case_attendance: Mapping[str, float]
    best_case_overall: float
    eligibility_now: Mapping[str, bool]
    best_case_eligibility: Mapping[str, bool]
    is_eligible_overall: bool
    is_best_case_eligible_overall: bool
    future_attendance_needed: Mapping[str, float]
    recommendations: Mapping[str, RecommendationStatus]

    @property
    def subjects_meeting_threshold(self) -> int:
        return sum(1 for s in self.subjects if self.eligibility_now[s])

    @property
    def total_classes(self) -> int:
        return sum(self.total_classes_till_end.values())

    @property
    def total_attended(self) -> int:
        return sum(self.attended_so_far.values())

    def current_percentage(self, subject: str) -> float:
        """Attended classes as a percentage of all classes till semester end."""
        return _percent(self.attended_so_far[subject], self.total_classes_till_end[subject])

    def to_frame(self) -> pd.DataFrame:
        rows = [
            {
                "Subject": subject,
                "Classes/Week": self.weekly_frequency[subject],
                "Held": self.classes_held_so_far[subject],
                "Attended": self.attended_so_far[subject],
                "Total Till End": self.total_classes_till_end[subject],
                "Current %": self.current_percentage(subject),
                "Best Case %": self.best_case_attendance[subject],
                "Future Needed %": self.future_attendance_needed[subject],
                "Eligible": self.eligibility_now[subject],
                "Best Case Eligible": self.best_case_eligibility[subject],
                "Status": self.recommendations[subject].value,
            }
            for subject in self.subjects
        ]
        columns = [
            "Subject", "Classes/Week", "Held", "Attended", "Total Till End", "Current %",
            "Best Case %", "Future Needed %", "Eligible", "Best Case Eligible", "Status",
        ]
        return pd.DataFrame(rows, columns=columns)


def _round(value: float) -> int:
    # Half-up; every value rounded here is non-negative.
    return math.floor(value + 0.5)


def _percent(part: float, whole: float) -> float:
    return part / whole * 100 if whole > 0 else 0.0


def _meets_threshold(attended: int, total: int, threshold: int) -> bool:
    return total > 0 and attended * 100 >= threshold * total


def extract_subjects(timetable: Timetable) -> List[str]:
    return sorted({label.strip() for slots in timetable.values() for label in slots if label and label.strip()})


def weekly_frequencies(timetable: Timetable, subjects: Sequence[str]) -> Dict[str, int]:
    counts = dict.fromkeys(subjects, 0)
    for slots in timetable.values():
        for label in slots:
            label = (label or "").strip()
            if label in counts:
                counts[label] += 1
    return counts


def validate_parameters(params: SemesterParameters) -> None:
    if params.end_date <= params.start_date:
        raise InvalidDateRangeError(params.start_date, params.end_date)
    for subject, percentage in params.attendance.items():
        if not 0 <= percentage <= 100:
            raise InvalidAttendanceError(subject, percentage)


def elapsed_working_days(params: SemesterParameters, today: date) -> int:
    if today < params.start_date:
        return 0
    return count_working_days(params.start_date, min(today, params.end_date), params.holidays)


def compute_report(timetable: Timetable, params: SemesterParameters, today: Optional[date] = None) -> AttendanceReport:
    """Project current and best-case attendance for every timetabled subject.

    Raises:
        InvalidDateRangeError: end date is not after the start date
        InvalidAttendanceError: a reported percentage is outside 0-100
    """
    validate_parameters(params)
    today = parse_date(today) if today is not None else date.today()

    total_days = count_working_days(params.start_date, params.end_date, params.holidays)
    elapsed_days = elapsed_working_days(params, today)
    days_remaining = max(0, total_days - elapsed_days)

    subjects = extract_subjects(timetable)
    frequency = weekly_frequencies(timetable, subjects)
    missing = [s for s in subjects if s not in params.attendance]
    if missing:
        logger.warning(f"No attendance reported for {', '.join(missing)}; treating as 0%")

    total_classes, held, attended = {}, {}, {}
    for subject in subjects:
        per_day = frequency[subject] / WORKING_DAYS_PER_WEEK
        total_classes[subject] = _round(per_day * total_days)
        held[subject] = _round(per_day * elapsed_days)
        attended[subject] = _round(params.percentage_for(subject) / 100 * held[subject])

    overall_now = _percent(sum(attended.values()), sum(held.values()))

    best_case = {}
    for subject in subjects:
        projected = attended[subject] + days_remaining * (frequency[subject] / WORKING_DAYS_PER_WEEK)
        best_case[subject] = min(100.0, _percent(projected, total_classes[subject]))
    best_case_overall = min(100.0, sum(best_case.values()) / len(subjects)) if subjects else 0.0

    eligibility = {s: _meets_threshold(attended[s], total_classes[s], SUBJECT_THRESHOLD) for s in subjects}
    best_case_eligibility = {s: best_case[s] >= SUBJECT_THRESHOLD for s in subjects}

    future_needed, recommendations = {}, {}
    for subject in subjects:
        total, done = total_classes[subject], attended[subject]
        remaining = total - done
        needed = -(-SUBJECT_THRESHOLD * total // 100) - done
        future_needed[subject] = min(100.0, max(0.0, needed / remaining * 100)) if remaining > 0 else 0.0
        recommendations[subject] = classify(_percent(done, total), future_needed[subject])

    logger.debug(
        f"Projected {len(subjects)} subject(s): {total_days} working days, "
        f"{elapsed_days} elapsed, {days_remaining} remaining"
    )

    return AttendanceReport(
        subjects=tuple(subjects),
        total_working_days=total_days,
        elapsed_working_days=elapsed_days,
        days_remaining=days_remaining,
        total_weeks=math.ceil(total_days / WORKING_DAYS_PER_WEEK),
        weekly_frequency=MappingProxyType(frequency),
        total_classes_till_end=MappingProxyType(total_classes),
        classes_held_so_far=MappingProxyType(held),
        attended_so_far=MappingProxyType(attended),
        overall_attendance_now=overall_now,
        best_case_attendance=MappingProxyType(best_case),
        best_case_overall=best_case_overall,
        eligibility_now=MappingProxyType(eligibility),
        best_case_eligibility=MappingProxyType(best_case_eligibility),
        is_eligible_overall=overall_now >= OVERALL_THRESHOLD and all(eligibility.values()),
        is_best_case_eligible_overall=best_case_overall >= OVERALL_THRESHOLD and all(best_case_eligibility.values()),
        future_attendance_needed=MappingProxyType(future_needed),
        recommendations=MappingProxyType(recommendations),
    )
