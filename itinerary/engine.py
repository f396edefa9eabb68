"""Engine entry points consumed by the owning service layer.

Each function wraps a pure component operation with structured logging and
Prometheus metrics. None of them perform I/O; persisting results (and
blocking persistence on a rejected sequence) is the caller's job.
"""

import time
from datetime import date

from itinerary.aggregates import maintainer
from itinerary.budget import allocator
from itinerary.config import Settings, get_settings
from itinerary.models.budget import BudgetBreakdown, Expense
from itinerary.models.day import Activity, Day, DayStats, DayView, DuplicateDayGroup
from itinerary.models.trip import DestinationVisit, Trip
from itinerary.models.violations import SequenceResult
from itinerary.scheduling import scheduler
from itinerary.sequencing import sequencer
from itinerary.utils.logging import StructuredEngineLogger
from itinerary.utils.metrics import PrometheusEngineMetrics

_log = StructuredEngineLogger()
_metrics = PrometheusEngineMetrics()


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000


def validate_destination_sequence(
    trip: Trip,
    candidate_visits: list[DestinationVisit],
) -> SequenceResult:
    """Validate a candidate visit list before it replaces the trip's visits."""
    started = time.perf_counter()
    result = sequencer.validate_sequence(trip, candidate_visits)
    latency_ms = _elapsed_ms(started)

    if result.violation is None:
        _metrics.record_latency("validate_destination_sequence", "success", latency_ms)
        _log.log_operation(
            "validate_destination_sequence",
            "success",
            latency_ms,
            trip_id=trip.id,
            num_visits=len(candidate_visits),
            is_single=sequencer.is_single(candidate_visits),
        )
        return result

    violation = result.violation
    _metrics.record_latency("validate_destination_sequence", "rejected", latency_ms)
    _metrics.inc_violation(violation.code.value)
    _log.log_operation(
        "validate_destination_sequence",
        "rejected",
        latency_ms,
        trip_id=trip.id,
        index=violation.index,
        code=violation.code.value,
        reason=violation.reason,
    )
    return result


def compute_day_view(
    activities: list[Activity],
    on: date = scheduler.REFERENCE_DATE,
    settings: Settings | None = None,
) -> DayView:
    """Sorted activities, conflicting ids and free slots for one day."""
    started = time.perf_counter()
    view = scheduler.build_day_view(activities, on, settings or get_settings())
    latency_ms = _elapsed_ms(started)

    outcome = "conflicts" if view.conflicts else "success"
    _metrics.record_latency("compute_day_view", outcome, latency_ms)
    _metrics.inc_conflicts(len(view.conflicts))
    _log.log_operation(
        "compute_day_view",
        outcome,
        latency_ms,
        num_activities=len(activities),
        conflict_ids=sorted(view.conflicts),
        num_free_slots=len(view.free_slots),
    )
    return view


def recompute_day_stats(activities: list[Activity]) -> DayStats:
    """Fresh day rollup to overwrite the stored stats after an activity mutation."""
    started = time.perf_counter()
    stats = maintainer.recompute_day_stats(activities)
    latency_ms = _elapsed_ms(started)

    _metrics.record_latency("recompute_day_stats", "success", latency_ms)
    _log.log_operation(
        "recompute_day_stats",
        "success",
        latency_ms,
        activity_count=stats.activity_count,
        total_cost=stats.total_cost,
    )
    return stats


def compute_budget_breakdown(
    activities: list[Activity],
    expenses: list[Expense],
    traveler_count: int,
) -> BudgetBreakdown:
    """Per-category spend from the live activities and expenses."""
    started = time.perf_counter()
    breakdown = allocator.compute_breakdown(activities, expenses, traveler_count)
    latency_ms = _elapsed_ms(started)

    _metrics.record_latency("compute_budget_breakdown", "success", latency_ms)
    _log.log_operation(
        "compute_budget_breakdown",
        "success",
        latency_ms,
        num_activities=len(activities),
        num_expenses=len(expenses),
        total=breakdown.total,
    )
    return breakdown


def deduplicate_days(days: list[Day]) -> list[DuplicateDayGroup]:
    """Classify duplicate day records; the caller removes the losers."""
    started = time.perf_counter()
    groups = maintainer.deduplicate_days(days)
    latency_ms = _elapsed_ms(started)

    num_losers = sum(len(group.losers) for group in groups)
    outcome = "duplicates" if groups else "clean"
    _metrics.record_latency("deduplicate_days", outcome, latency_ms)
    _metrics.inc_duplicates(num_losers)
    _log.log_operation(
        "deduplicate_days",
        outcome,
        latency_ms,
        num_days=len(days),
        duplicate_dates=[str(group.date) for group in groups],
        num_losers=num_losers,
    )
    return groups
