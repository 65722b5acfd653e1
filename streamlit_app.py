import streamlit as st
import pandas as pd
import altair as alt
from datetime import date, timedelta

from attendance_planner import (
    AttendancePlannerError,
    SemesterParameters,
    compute_report,
    format_recommendation,
    get_holiday_calendar,
    holidays_in_range,
    parse_holiday_list,
)
from attendance_planner.constants import OVERALL_THRESHOLD, SUBJECT_THRESHOLD, WEEKDAYS
from attendance_planner.holidays import holiday_name
from attendance_planner.logger import setup_logger
from attendance_planner.projector import extract_subjects
from attendance_planner.recommendations import RecommendationStatus
from attendance_planner.scenarios import max_skippable_classes, project_attendance, safe_skip_days
from attendance_planner.settings import get_settings

# ============ CONFIGURATION ============
settings = get_settings()
setup_logger(level=settings.log_level, log_file=settings.log_file)
calendar = get_holiday_calendar(settings.holiday_calendar)
today = date.today()

STATUS_ICONS = {
    RecommendationStatus.ON_TRACK: "✅",
    RecommendationStatus.CAUTION: "⚠️",
    RecommendationStatus.CRITICAL: "❌",
}

# ============ FUNCTIONS ============

def empty_timetable():
    return pd.DataFrame("", index=list(settings.time_slots), columns=list(WEEKDAYS))


def frame_to_timetable(frame):
    frame = frame.fillna("").astype(str)
    return {day: [cell.strip() for cell in frame[day].tolist()] for day in WEEKDAYS}


def go_to(step):
    st.session_state.step = step


def reset_wizard():
    for key in ("timetable", "timetable_frame", "params", "holidays", "holiday_window"):
        st.session_state.pop(key, None)
    go_to(0)


def eligibility_label(eligible):
    return "✓ Eligible" if eligible else "✗ Not Eligible"


def threshold_chart(frame, column, threshold):
    return alt.Chart(frame).mark_bar().encode(
        x="Subject",
        y=alt.Y(column, scale=alt.Scale(domain=[0, 100])),
        color=alt.condition(
            alt.datum[column] >= threshold,
            alt.value("seagreen"), alt.value("orangered")
        )
    ).properties(height=350)


# ============ STREAMLIT APP ============
st.set_page_config(page_title=settings.page_title, page_icon="")
st.title(settings.page_title)
st.write(f"Check whether you meet the {SUBJECT_THRESHOLD}% per-subject and {OVERALL_THRESHOLD}% overall attendance requirements.")

if "step" not in st.session_state:
    st.session_state.step = 0

# Step 1: Timetable
if st.session_state.step == 0:
    st.header("Step 1: Weekly Timetable")
    st.write("Enter your subject names in the grid below. Each cell is one class slot.")
    frame = st.data_editor(
        st.session_state.get("timetable_frame", empty_timetable()),
        use_container_width=True,
        key="timetable_editor",
    )

    if st.button("Next: Enter Semester Details"):
        timetable = frame_to_timetable(frame)
        if not extract_subjects(timetable):
            st.error("Please add at least one subject to your timetable.")
        else:
            st.session_state.timetable = timetable
            st.session_state.timetable_frame = frame
            go_to(1)
            st.rerun()

# Step 2: Semester details, attendance and holidays
elif st.session_state.step == 1:
    timetable = st.session_state.timetable
    subjects = extract_subjects(timetable)

    st.header("Step 2: Semester Details & Attendance")
    col1, col2 = st.columns(2)
    start_date = col1.date_input("Semester start date", value=today - timedelta(days=60))
    end_date = col2.date_input("Semester end date", value=today + timedelta(days=60))
    range_ok = end_date > start_date
    if not range_ok:
        st.error("End date must be after start date.")

    st.subheader("Current Attendance (%)")
    attendance = {}
    for subject in subjects:
        attendance[subject] = st.number_input(
            subject, min_value=0, max_value=100, value=0, step=1, key=f"{subject}_percent"
        )

    st.subheader("Public Holidays")
    st.caption(f"Pre-filled from the {settings.holiday_calendar} calendar. Add or remove dates as needed.")
    window = (start_date, end_date)
    if range_ok and st.session_state.get("holiday_window") != window:
        st.session_state.holidays = sorted(holidays_in_range(start_date, end_date, calendar))
        st.session_state.holiday_window = window
    holidays = st.session_state.get("holidays", [])

    text = st.text_input("Holidays (YYYY-MM-DD, comma separated)", value=", ".join(d.isoformat() for d in holidays))
    holidays = parse_holiday_list(text)

    add_col, button_col = st.columns([3, 1])
    extra = add_col.date_input("Add a holiday", value=None)
    if button_col.button("Add") and extra and extra not in holidays:
        holidays = sorted(holidays + [extra])
    for day in holidays:
        day_col, remove_col = st.columns([4, 1])
        day_col.write(f"{day.strftime('%A, %d %B %Y')} ({holiday_name(day, calendar)})")
        if remove_col.button("Remove", key=f"remove_{day}"):
            holidays = [d for d in holidays if d != day]
            st.session_state.holidays = holidays
            st.rerun()
    st.session_state.holidays = holidays
    if holidays:
        st.success(f"{len(holidays)} holiday(s) will be excluded from class calculations.")

    back, submit = st.columns(2)
    if back.button("Back"):
        go_to(0)
        st.rerun()
    if submit.button("Calculate Attendance") and range_ok:
        st.session_state.params = SemesterParameters(
            start_date=start_date,
            end_date=end_date,
            attendance=attendance,
            holidays=frozenset(holidays),
        )
        go_to(2)
        st.rerun()

# Step 3: Results
else:
    timetable = st.session_state.timetable
    params = st.session_state.params
    try:
        report = compute_report(timetable, params, today=today)
    except AttendancePlannerError as exc:
        st.error(str(exc))
        st.button("Back", on_click=go_to, args=(1,))
        st.stop()

    st.header("Your Attendance Status")
    col1, col2, col3 = st.columns(3)
    col1.metric("Overall Attendance", f"{report.overall_attendance_now:.2f}%", help=f"Required: {OVERALL_THRESHOLD}%")
    col2.metric("Semester Duration", f"{report.total_weeks} weeks", f"{report.total_working_days} days", delta_color="off")
    col3.metric("Eligibility Status", eligibility_label(report.is_eligible_overall))

    st.header("Best-Case Scenario Projection")
    st.write(
        f"If you attend all remaining classes until {params.end_date.strftime('%d %B %Y')} "
        f"({report.days_remaining} days remaining):"
    )
    col1, col2, col3 = st.columns(3)
    col1.metric("Projected Overall Attendance", f"{report.best_case_overall:.2f}%")
    col2.metric("Days Remaining", report.days_remaining)
    col3.metric("Best-Case Eligibility", eligibility_label(report.is_best_case_eligible_overall))

    st.header("Subject-wise Analysis")
    table = report.to_frame()
    st.dataframe(table, use_container_width=True, hide_index=True)
    st.altair_chart(threshold_chart(table, "Best Case %", SUBJECT_THRESHOLD), use_container_width=True)

    st.header("Personalized Recommendations")
    for subject in report.subjects:
        status = report.recommendations[subject]
        message = format_recommendation(status, subject, report.future_attendance_needed[subject])
        st.write(f"{STATUS_ICONS[status]} **{subject}:** {message}")

    st.header("📈 Projected Attendance Scenario")
    future_plan = st.slider("If you attend __%__ of future classes", 0, 100, 75)
    projection = project_attendance(report, future_plan)
    proj_df = pd.DataFrame(
        [{"Subject": s, "Projected %": round(p, 2)} for s, p in projection.items()],
        columns=["Subject", "Projected %"],
    )
    st.altair_chart(threshold_chart(proj_df, "Projected %", SUBJECT_THRESHOLD), use_container_width=True)

    st.header("🟢 Skip Recommender (Safe Picks Only)")
    skippable = max_skippable_classes(report)
    for subject in report.subjects:
        st.info(f"{subject}: you can afford to miss {skippable[subject]} more class(es) and stay at {SUBJECT_THRESHOLD}%.")
    safe_days = safe_skip_days(timetable, params, report, today=today)
    if safe_days:
        st.write("You can safely skip all classes on:")
        for d in safe_days:
            st.success(f"✅ {d.strftime('%A, %d %B')}")
    else:
        st.info("No completely safe days to skip based on current data.")

    st.header("Summary Statistics")
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Total Subjects", len(report.subjects))
    col2.metric(f"Subjects Meeting {SUBJECT_THRESHOLD}%", report.subjects_meeting_threshold)
    col3.metric("Total Classes Till End", report.total_classes)
    col4.metric("Total Classes Attended", report.total_attended)

    st.button("Calculate Again", on_click=reset_wizard)
