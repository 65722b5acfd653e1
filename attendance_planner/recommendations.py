from enum import Enum

from .constants import OVERALL_THRESHOLD, SUBJECT_THRESHOLD

CAUTION_NEEDED_LIMIT = 50


class RecommendationStatus(str, Enum):
    ON_TRACK = "on-track"
    CAUTION = "caution"
    CRITICAL = "critical"


def classify(current_percent: float, future_needed: float) -> RecommendationStatus:
    """Classify a subject by its attended/total ratio so far."""
    if current_percent >= OVERALL_THRESHOLD:
        return RecommendationStatus.ON_TRACK
    if current_percent >= SUBJECT_THRESHOLD:
        if future_needed <= CAUTION_NEEDED_LIMIT:
            return RecommendationStatus.ON_TRACK
        return RecommendationStatus.CAUTION
    return RecommendationStatus.CRITICAL


def _format_percent(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_recommendation(status, subject: str, needed_percentage: float) -> str:
    try:
        status = RecommendationStatus(status)
    except ValueError:
        return ""

    if status is RecommendationStatus.ON_TRACK:
        return "You're on track! Maintain your current attendance."
    if status is RecommendationStatus.CAUTION:
        return (
            f"Attend at least {_format_percent(needed_percentage)}% of remaining classes "
            f"to meet {SUBJECT_THRESHOLD}% requirement."
        )
    return f"Critical! Attend all remaining classes to meet {SUBJECT_THRESHOLD}% requirement."
