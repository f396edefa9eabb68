"""Per-day activity scheduling: ordering, conflict detection and free time.

Activities are placed on their calendar day as half-open intervals. An
activity without an explicit end runs for its duration, or for the policy
default when it has neither; derived ends are capped at the following
midnight so an interval never leaves its day.
"""

import logging
from datetime import date, datetime, time, timedelta

from itinerary.config import Settings, get_settings
from itinerary.models.common import TimeInterval, TimeSlot
from itinerary.models.day import Activity, DayView
from itinerary.timing.intervals import duration, overlaps

logger = logging.getLogger(__name__)

# Anchor used when the caller does not say which day the activities belong to
REFERENCE_DATE = date(2000, 1, 1)


def sort_activities(activities: list[Activity]) -> list[Activity]:
    """Sort by start time; ties keep their input order."""
    return sorted(activities, key=lambda a: a.start_time)


def effective_interval(
    activity: Activity,
    on: date = REFERENCE_DATE,
    settings: Settings | None = None,
) -> TimeInterval:
    """Resolve an activity to a concrete interval on the given day."""
    start = datetime.combine(on, activity.start_time)
    if activity.end_time is not None:
        return TimeInterval(start=start, end=datetime.combine(on, activity.end_time))

    if activity.duration_minutes is not None:
        minutes = activity.duration_minutes
    else:
        minutes = (settings or get_settings()).default_activity_minutes

    end_of_day = datetime.combine(on + timedelta(days=1), time(0, 0))
    return TimeInterval(start=start, end=min(start + timedelta(minutes=minutes), end_of_day))


def detect_conflicts(
    activities: list[Activity],
    on: date = REFERENCE_DATE,
    settings: Settings | None = None,
) -> set[str]:
    """Ids of activities overlapping at least one other activity.

    Pairwise O(n^2); a day holds few enough activities for this to be fine.
    """
    settings = settings or get_settings()
    intervals = [(a.id, effective_interval(a, on, settings)) for a in activities]

    conflicts: set[str] = set()
    for i in range(len(intervals)):
        for j in range(i + 1, len(intervals)):
            a_id, a_interval = intervals[i]
            b_id, b_interval = intervals[j]
            if overlaps(a_interval, b_interval):
                conflicts.add(a_id)
                conflicts.add(b_id)

    return conflicts


def compute_free_slots(
    activities: list[Activity],
    on: date = REFERENCE_DATE,
    settings: Settings | None = None,
) -> list[TimeSlot]:
    """Free slots inside the day window at least ``min_free_slot_minutes`` long.

    A single pass over activities ordered by start; the cursor only moves
    forward, so slots never overlap an activity or each other.
    """
    settings = settings or get_settings()
    threshold = timedelta(minutes=settings.min_free_slot_minutes)
    window_end = datetime.combine(on, settings.day_window_end)
    cursor = datetime.combine(on, settings.day_window_start)

    slots: list[TimeSlot] = []

    def emit(end: datetime) -> None:
        slot = TimeInterval(start=cursor, end=end)
        length = duration(slot)
        if length > timedelta(0) and length >= threshold:
            slots.append(
                TimeSlot(
                    start=cursor.time(),
                    end=end.time(),
                    duration_minutes=int(length.total_seconds() // 60),
                )
            )

    for activity in sort_activities(activities):
        interval = effective_interval(activity, on, settings)
        if cursor < window_end and interval.start > cursor:
            emit(min(interval.start, window_end))
        cursor = max(cursor, interval.end)

    if cursor < window_end:
        emit(window_end)

    return slots


def build_day_view(
    activities: list[Activity],
    on: date = REFERENCE_DATE,
    settings: Settings | None = None,
) -> DayView:
    """Sorted activities with their conflicts and free slots."""
    settings = settings or get_settings()
    view = DayView(
        sorted_activities=sort_activities(activities),
        conflicts=detect_conflicts(activities, on, settings),
        free_slots=compute_free_slots(activities, on, settings),
    )
    logger.debug(
        "day view: %d activities, %d conflicts, %d free slots",
        len(activities),
        len(view.conflicts),
        len(view.free_slots),
    )
    return view
