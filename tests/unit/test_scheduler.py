"""Tests for per-day conflict detection and free-slot computation."""

import random
from datetime import date, datetime, time, timedelta

import pytest
from pydantic import ValidationError

from itinerary.config import Settings
from itinerary.models import Activity, ActivityType, TimeSlot
from itinerary.scheduling.scheduler import (
    build_day_view,
    compute_free_slots,
    detect_conflicts,
    effective_interval,
    sort_activities,
)

DAY = date(2025, 6, 10)


def make_activity(
    activity_id: str,
    start: time,
    end: time | None = None,
    duration_minutes: int | None = None,
    kind: ActivityType = ActivityType.sightseeing,
) -> Activity:
    """Helper to create a test activity."""
    return Activity(
        id=activity_id,
        day_id="day_1",
        name=activity_id.title(),
        type=kind,
        start_time=start,
        end_time=end,
        duration_minutes=duration_minutes,
    )


def slot(start: time, end: time) -> tuple[time, time]:
    return (start, end)


def as_pairs(slots: list[TimeSlot]) -> list[tuple[time, time]]:
    return [(s.start, s.end) for s in slots]


# Effective intervals


def test_effective_end_prefers_explicit_end_time() -> None:
    activity = make_activity("museum", time(10, 0), end=time(11, 0), duration_minutes=300)

    interval = effective_interval(activity, DAY)

    assert interval.start == datetime(2025, 6, 10, 10, 0)
    assert interval.end == datetime(2025, 6, 10, 11, 0)


def test_effective_end_uses_duration() -> None:
    interval = effective_interval(make_activity("walk", time(10, 0), duration_minutes=45), DAY)
    assert interval.end == datetime(2025, 6, 10, 10, 45)


def test_effective_end_defaults_to_policy_duration() -> None:
    interval = effective_interval(make_activity("tour", time(10, 0)), DAY)
    assert interval.end == datetime(2025, 6, 10, 12, 0)


def test_default_duration_comes_from_settings() -> None:
    settings = Settings(default_activity_minutes=60)
    interval = effective_interval(make_activity("tour", time(10, 0)), DAY, settings)
    assert interval.end == datetime(2025, 6, 10, 11, 0)


def test_derived_end_is_capped_at_midnight() -> None:
    interval = effective_interval(make_activity("club", time(23, 0), duration_minutes=180), DAY)
    assert interval.end == datetime(2025, 6, 11, 0, 0)


def test_explicit_end_before_start_is_rejected() -> None:
    with pytest.raises(ValidationError, match="ends before it starts"):
        make_activity("night_train", time(22, 0), end=time(2, 0))


# Sorting


def test_sort_is_stable_for_equal_start_times() -> None:
    first = make_activity("first", time(9, 0))
    second = make_activity("second", time(9, 0))
    early = make_activity("early", time(8, 0))

    assert [a.id for a in sort_activities([first, second, early])] == ["early", "first", "second"]
    assert [a.id for a in sort_activities([second, first, early])] == ["early", "second", "first"]


# Conflicts


def test_overlapping_activities_both_conflict() -> None:
    breakfast = make_activity("breakfast", time(9, 0), end=time(10, 30), kind=ActivityType.dining)
    museum = make_activity("museum", time(10, 0), end=time(11, 0))

    assert detect_conflicts([breakfast, museum], DAY) == {"breakfast", "museum"}


def test_back_to_back_activities_do_not_conflict() -> None:
    a = make_activity("a", time(9, 0), end=time(10, 0))
    b = make_activity("b", time(10, 0), end=time(11, 0))

    assert detect_conflicts([a, b], DAY) == set()


def test_default_duration_can_cause_conflict() -> None:
    """No end and no duration means two hours, which runs into 10:30."""
    a = make_activity("a", time(9, 0))
    b = make_activity("b", time(10, 30), end=time(11, 0))
    c = make_activity("c", time(15, 0), end=time(16, 0))

    assert detect_conflicts([a, b, c], DAY) == {"a", "b"}


def test_zero_duration_activity_never_conflicts() -> None:
    checkpoint = make_activity("checkpoint", time(10, 0), duration_minutes=0)
    tour = make_activity("tour", time(9, 0), end=time(12, 0))

    assert detect_conflicts([checkpoint, tour], DAY) == set()


def test_conflicts_invariant_under_permutation() -> None:
    rng = random.Random(42)
    for _ in range(50):
        activities = []
        for i in range(rng.randint(2, 8)):
            hour = rng.randint(6, 20)
            start = time(hour, rng.choice([0, 15, 30, 45]))
            minutes = rng.randint(0, 180)
            activities.append(make_activity(f"act_{i}", start, duration_minutes=minutes))
        expected = detect_conflicts(activities, DAY)
        shuffled = list(activities)
        rng.shuffle(shuffled)
        assert detect_conflicts(shuffled, DAY) == expected


# Free slots


def test_free_slots_between_and_around_activities() -> None:
    a = make_activity("a", time(9, 0), end=time(10, 0))
    b = make_activity("b", time(14, 0), end=time(15, 0))

    slots = compute_free_slots([a, b], DAY)

    assert as_pairs(slots) == [
        slot(time(6, 0), time(9, 0)),
        slot(time(10, 0), time(14, 0)),
        slot(time(15, 0), time(23, 0)),
    ]
    assert [s.duration_minutes for s in slots] == [180, 240, 480]


def test_empty_day_is_one_free_slot() -> None:
    assert as_pairs(compute_free_slots([], DAY)) == [slot(time(6, 0), time(23, 0))]


def test_gaps_below_threshold_are_dropped() -> None:
    a = make_activity("a", time(6, 20), end=time(10, 0))
    b = make_activity("b", time(10, 29), end=time(22, 40))

    assert compute_free_slots([a, b], DAY) == []


def test_gap_exactly_at_threshold_is_kept() -> None:
    a = make_activity("a", time(6, 0), end=time(10, 0))
    b = make_activity("b", time(10, 30), end=time(23, 0))

    assert as_pairs(compute_free_slots([a, b], DAY)) == [slot(time(10, 0), time(10, 30))]


def test_cursor_never_moves_backwards_over_nested_activity() -> None:
    """A short activity inside a long one must not reopen free time."""
    long = make_activity("long", time(9, 0), end=time(13, 0))
    short = make_activity("short", time(10, 0), end=time(11, 0))

    assert as_pairs(compute_free_slots([long, short], DAY)) == [
        slot(time(6, 0), time(9, 0)),
        slot(time(13, 0), time(23, 0)),
    ]


def test_activities_outside_window_are_clipped() -> None:
    early = make_activity("early", time(5, 0), end=time(7, 0))
    late = make_activity("late", time(23, 30), end=time(23, 45))

    assert as_pairs(compute_free_slots([early, late], DAY)) == [slot(time(7, 0), time(23, 0))]


def test_window_comes_from_settings() -> None:
    settings = Settings(day_window_start=time(8, 0), day_window_end=time(20, 0))
    a = make_activity("a", time(12, 0), end=time(13, 0))

    assert as_pairs(compute_free_slots([a], DAY, settings)) == [
        slot(time(8, 0), time(12, 0)),
        slot(time(13, 0), time(20, 0)),
    ]


def test_free_slots_never_overlap_activities_or_each_other() -> None:
    rng = random.Random(99)
    for _ in range(100):
        activities = [
            make_activity(
                f"act_{i}",
                time(rng.randint(4, 22), rng.choice([0, 20, 40])),
                duration_minutes=rng.randint(0, 240),
            )
            for i in range(rng.randint(0, 7))
        ]

        slots = compute_free_slots(activities, DAY)
        slot_intervals = [
            (datetime.combine(DAY, s.start), datetime.combine(DAY, s.end)) for s in slots
        ]

        for start, end in slot_intervals:
            assert end - start >= timedelta(minutes=30)
            for activity in activities:
                interval = effective_interval(activity, DAY)
                assert not (start < interval.end and interval.start < end)

        for i in range(len(slot_intervals) - 1):
            assert slot_intervals[i][1] <= slot_intervals[i + 1][0]


def test_free_slots_invariant_under_permutation() -> None:
    rng = random.Random(5)
    activities = [
        make_activity(f"act_{i}", time(rng.randint(6, 21), 0), duration_minutes=rng.randint(15, 90))
        for i in range(6)
    ]
    expected = compute_free_slots(activities, DAY)

    for _ in range(10):
        shuffled = list(activities)
        rng.shuffle(shuffled)
        assert compute_free_slots(shuffled, DAY) == expected


def test_build_day_view_combines_everything() -> None:
    breakfast = make_activity("breakfast", time(9, 0), end=time(10, 30), kind=ActivityType.dining)
    museum = make_activity("museum", time(10, 0), end=time(11, 0))

    view = build_day_view([museum, breakfast], DAY)

    assert [a.id for a in view.sorted_activities] == ["breakfast", "museum"]
    assert view.conflicts == {"breakfast", "museum"}
    assert as_pairs(view.free_slots) == [
        slot(time(6, 0), time(9, 0)),
        slot(time(11, 0), time(23, 0)),
    ]
