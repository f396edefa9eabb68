"""Recompute denormalized day and trip rollups from their child records.

Rollups are always rebuilt from the full current set of children and written
over the stored value; nothing here is incremental. Batch passes re-derive
their result from the observed state, so re-running them after an
interruption is safe.
"""

import logging
from collections import defaultdict
from datetime import date, datetime, timedelta

from itinerary.models.budget import Expense
from itinerary.models.common import ActivityType, DateRange
from itinerary.models.day import Activity, Day, DayStats, DuplicateDayGroup, TripStats
from itinerary.models.trip import Destination, DestinationVisit
from itinerary.sequencing.sequencer import legacy_destination
from itinerary.timing.intervals import contained_within

logger = logging.getLogger(__name__)


def recompute_day_stats(activities: list[Activity]) -> DayStats:
    """Full rollup of a day's activities; a missing cost contributes zero."""
    return DayStats(
        activity_count=len(activities),
        accommodation_count=sum(1 for a in activities if a.type == ActivityType.accommodation),
        transport_count=sum(1 for a in activities if a.type == ActivityType.transport),
        total_cost=sum(a.cost.amount for a in activities if a.cost is not None),
    )


def recompute_trip_stats(
    days: list[Day],
    activities: list[Activity],
    expenses: list[Expense],
) -> TripStats:
    """Full rollup of a trip from its days, activities and expenses."""
    return TripStats(
        total_days=len({day.date for day in days}),
        total_activities=len(activities),
        total_expenses=sum(expense.amount for expense in expenses),
    )


def _creation_key(day: Day) -> tuple[bool, datetime, str]:
    # Missing timestamps sort after every real one; id breaks ties
    return (day.created_at is None, day.created_at or datetime.min, day.id or "")


def deduplicate_days(days: list[Day]) -> list[DuplicateDayGroup]:
    """Classify duplicate day records per date.

    For each date held by more than one record, the earliest created record
    is the winner and the rest are losers. Nothing is deleted here.

    Args:
        days: Day records of one trip

    Returns:
        One group per duplicated date, ordered by date (empty when clean)
    """
    by_date: dict[date, list[Day]] = defaultdict(list)
    for day in days:
        by_date[day.date].append(day)

    groups: list[DuplicateDayGroup] = []
    for day_date in sorted(by_date):
        candidates = by_date[day_date]
        if len(candidates) < 2:
            continue
        ranked = sorted(candidates, key=_creation_key)
        logger.debug("found %d day records for %s", len(ranked), day_date)
        groups.append(DuplicateDayGroup(date=day_date, winner=ranked[0], losers=ranked[1:]))

    return groups


def reparent_loser_activities(
    groups: list[DuplicateDayGroup],
    activities: list[Activity],
) -> list[Activity]:
    """Move activities of loser days onto their group's winner.

    Returns updated copies of only the affected activities. The caller persists
    them before deleting the losers, then recomputes the winner's stats.
    """
    winner_for: dict[str, str] = {}
    for group in groups:
        if group.winner.id is None:
            continue
        for loser in group.losers:
            if loser.id is not None:
                winner_for[loser.id] = group.winner.id

    return [
        activity.model_copy(update={"day_id": winner_for[activity.day_id]})
        for activity in activities
        if activity.day_id in winner_for
    ]


def _destination_on(
    day: date,
    visit_ranges: list[tuple[DateRange, Destination]],
    fallback: Destination | None,
) -> Destination | None:
    """Destination of the last visit whose stay covers ``day``.

    On a transit date the arriving visit wins over the departing one.
    """
    covering = [
        destination
        for stay, destination in visit_ranges
        if contained_within(DateRange(start=day, end=day), stay)
    ]
    return covering[-1] if covering else fallback


def create_days_for_range(
    trip_id: str,
    start: date,
    end: date,
    existing_dates: set[date] | list[date],
    visits: list[DestinationVisit] | None = None,
) -> list[Day]:
    """Placeholder days for every date in [start, end] not already present.

    Matching is on the exact date. ``day_number`` is the date's position in
    the range, so skipped dates keep later numbering stable. Each placeholder
    is tagged with the destination whose visit covers its date, falling back
    to the single-destination view of ``visits``; inverted visits are ignored.
    """
    existing = set(existing_dates)
    visits = visits or []
    visit_ranges = [
        (DateRange(start=visit.arrival, end=visit.departure), visit.destination)
        for visit in visits
        if visit.arrival <= visit.departure
    ]
    fallback = legacy_destination(visits)
    placeholders: list[Day] = []

    offset = 0
    current = start
    while current <= end:
        if current not in existing:
            destination = _destination_on(current, visit_ranges, fallback)
            placeholders.append(
                Day(
                    trip_id=trip_id,
                    date=current,
                    day_number=offset + 1,
                    destination_id=destination.id if destination else None,
                    destination_name=destination.name if destination else None,
                )
            )
        offset += 1
        current += timedelta(days=1)

    return placeholders
