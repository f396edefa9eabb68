"""Destination sequence editing and validation.

Every edit returns a new list with ``order`` re-derived from list position;
inputs are never mutated. Validation is fail-fast and never auto-corrects:
it reports the first broken rule so the caller can block persistence.
"""

import logging
from datetime import date, timedelta

from itinerary.config import Settings, get_settings
from itinerary.models.trip import Destination, DestinationVisit, Trip
from itinerary.models.violations import (
    SequenceResult,
    SequenceViolation,
    SequenceViolationCode,
)

logger = logging.getLogger(__name__)


def renumber(visits: list[DestinationVisit]) -> list[DestinationVisit]:
    """Copy visits with ``order`` set to their list position."""
    return [visit.model_copy(update={"order": i}) for i, visit in enumerate(visits)]


def _check_index(visits: list[DestinationVisit], index: int) -> None:
    if not 0 <= index < len(visits):
        raise IndexError(f"visit index {index} out of range for {len(visits)} visits")


def default_visit(
    trip: Trip,
    visits: list[DestinationVisit],
    destination: Destination,
    settings: Settings | None = None,
) -> DestinationVisit:
    """Build a visit to append after the last one with policy default dates.

    Arrival is the previous departure (or the trip start for the first visit);
    departure follows after ``default_visit_days``. The result is not clipped
    to the trip end; validation reports it if it overruns.
    """
    settings = settings or get_settings()
    arrival: date = visits[-1].departure if visits else trip.start
    return DestinationVisit(
        destination=destination,
        arrival=arrival,
        departure=arrival + timedelta(days=settings.default_visit_days),
        order=len(visits),
    )


def add_visit(
    visits: list[DestinationVisit],
    visit: DestinationVisit,
    after_index: int | None = None,
) -> list[DestinationVisit]:
    """Insert ``visit`` after ``after_index`` (append when None; -1 inserts first)."""
    if after_index is None:
        position = len(visits)
    else:
        if after_index != -1:
            _check_index(visits, after_index)
        position = after_index + 1
    updated = list(visits)
    updated.insert(position, visit)
    return renumber(updated)


def remove_visit(visits: list[DestinationVisit], index: int) -> list[DestinationVisit]:
    """Remove the visit at ``index``."""
    _check_index(visits, index)
    return renumber([v for i, v in enumerate(visits) if i != index])


def reorder(visits: list[DestinationVisit], index: int, new_index: int) -> list[DestinationVisit]:
    """Move the visit at ``index`` so it ends up at ``new_index``."""
    _check_index(visits, index)
    _check_index(visits, new_index)
    updated = list(visits)
    updated.insert(new_index, updated.pop(index))
    return renumber(updated)


def move_up(visits: list[DestinationVisit], index: int) -> list[DestinationVisit]:
    """Swap a visit with its predecessor; no-op for the first visit."""
    _check_index(visits, index)
    if index == 0:
        return renumber(visits)
    return reorder(visits, index, index - 1)


def move_down(visits: list[DestinationVisit], index: int) -> list[DestinationVisit]:
    """Swap a visit with its successor; no-op for the last visit."""
    _check_index(visits, index)
    if index == len(visits) - 1:
        return renumber(visits)
    return reorder(visits, index, index + 1)


def is_single(visits: list[DestinationVisit]) -> bool:
    """True when the sequence collapsed to exactly one visit."""
    return len(visits) == 1


def legacy_destination(visits: list[DestinationVisit]) -> Destination | None:
    """Single-destination projection of a one-element sequence."""
    return visits[0].destination if is_single(visits) else None


def _violation(index: int, code: SequenceViolationCode, reason: str) -> SequenceResult:
    return SequenceResult(violation=SequenceViolation(index=index, code=code, reason=reason))


def validate_sequence(
    trip: Trip,
    visits: list[DestinationVisit] | None = None,
) -> SequenceResult:
    """Validate a visit sequence against its trip.

    Rules, reported on first failure:
    1. each visit departs on or after its arrival
    2. each visit arrives on or after the previous departure (same-day transit is fine)
    3. the first visit arrives on or after the trip start
    4. the last visit departs on or before the trip end

    Args:
        trip: Trip providing the date bounds
        visits: Candidate sequence in position order (defaults to the trip's visits)

    Returns:
        SequenceResult with no violation when the sequence is valid
    """
    candidate = renumber(visits if visits is not None else trip.visits)

    # Rules 1 and 2 are checked visit by visit, so the lowest offending index wins
    for i, visit in enumerate(candidate):
        if visit.departure < visit.arrival:
            return _violation(
                i, SequenceViolationCode.DEPARTURE_BEFORE_ARRIVAL, "departure before arrival"
            )
        if i > 0 and visit.arrival < candidate[i - 1].departure:
            return _violation(
                i,
                SequenceViolationCode.ARRIVAL_BEFORE_PREVIOUS_DEPARTURE,
                "arrival before previous departure",
            )

    if candidate:
        if candidate[0].arrival < trip.start:
            return _violation(
                0, SequenceViolationCode.ARRIVAL_BEFORE_TRIP_START, "arrival before trip start"
            )
        last = len(candidate) - 1
        if candidate[last].departure > trip.end:
            return _violation(
                last, SequenceViolationCode.DEPARTURE_AFTER_TRIP_END, "departure after trip end"
            )

    logger.debug("sequence of %d visits valid for trip %s", len(candidate), trip.id)
    return SequenceResult()
