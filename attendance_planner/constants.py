"""Fixed thresholds and calendar constants."""

SUBJECT_THRESHOLD = 65  # percent of all classes till semester end
OVERALL_THRESHOLD = 75  # percent of classes held so far

WORKING_DAYS_PER_WEEK = 5
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")

DEFAULT_TIME_SLOTS = (
    "8:00-9:00",
    "9:00-10:00",
    "10:00-11:00",
    "11:00-12:00",
    "12:00-1:00",
    "1:00-2:00",
    "2:00-3:00",
    "3:00-4:00",
    "4:00-5:00",
)
