"""Models package - re-exports for convenience."""

from itinerary.models.budget import (
    Budget,
    BudgetBreakdown,
    BudgetSummary,
    CategoryUsage,
    Expense,
)
from itinerary.models.common import (
    ActivityType,
    BudgetCategory,
    BudgetStatus,
    DateRange,
    TimeInterval,
    TimeSlot,
)
from itinerary.models.day import (
    Activity,
    ActivityCost,
    Day,
    DayStats,
    DayView,
    DuplicateDayGroup,
    TripStats,
)
from itinerary.models.trip import Destination, DestinationVisit, Trip
from itinerary.models.violations import (
    SequenceResult,
    SequenceViolation,
    SequenceViolationCode,
)

__all__ = [
    # Common
    "TimeInterval",
    "DateRange",
    "TimeSlot",
    "ActivityType",
    "BudgetCategory",
    "BudgetStatus",
    # Trip
    "Trip",
    "Destination",
    "DestinationVisit",
    # Day
    "Day",
    "DayStats",
    "DayView",
    "Activity",
    "ActivityCost",
    "TripStats",
    "DuplicateDayGroup",
    # Budget
    "Budget",
    "BudgetBreakdown",
    "BudgetSummary",
    "CategoryUsage",
    "Expense",
    # Violations
    "SequenceResult",
    "SequenceViolation",
    "SequenceViolationCode",
]
