"""Day models - per-day activities and their denormalized rollups."""

from datetime import date, datetime, time

from pydantic import BaseModel, Field, model_validator

from itinerary.models.common import ActivityType, TimeSlot


class ActivityCost(BaseModel):
    """Cost attached to an activity."""

    amount: float = Field(..., ge=0)
    currency: str = "USD"
    per_person: bool = False


class Activity(BaseModel):
    """Single scheduled activity within a day."""

    id: str
    day_id: str
    name: str
    type: ActivityType = ActivityType.other
    start_time: time
    end_time: time | None = None
    duration_minutes: int | None = Field(default=None, ge=0)
    cost: ActivityCost | None = None

    @model_validator(mode="after")
    def validate_not_crossing_midnight(self) -> "Activity":
        """Reject explicit end times that fall before the start time."""
        if self.end_time is not None and self.end_time < self.start_time:
            raise ValueError(
                f"activity {self.id} ends before it starts ({self.end_time} < {self.start_time}); "
                "split activities that cross midnight into one per day"
            )
        return self


class DayStats(BaseModel):
    """Denormalized rollup of a day's activities."""

    activity_count: int = 0
    accommodation_count: int = 0
    transport_count: int = 0
    total_cost: float = 0


class Day(BaseModel):
    """One calendar date of a trip.

    id and created_at are assigned by the store; placeholders have neither.
    """

    id: str | None = None
    trip_id: str
    date: date
    day_number: int = Field(default=1, ge=1)
    destination_id: str | None = None
    destination_name: str | None = None
    created_at: datetime | None = None
    stats: DayStats = Field(default_factory=DayStats)


class TripStats(BaseModel):
    """Denormalized rollup of a whole trip."""

    total_days: int = 0
    total_activities: int = 0
    total_expenses: float = 0


class DayView(BaseModel):
    """Computed schedule view of a day."""

    sorted_activities: list[Activity]
    conflicts: set[str]
    free_slots: list[TimeSlot]


class DuplicateDayGroup(BaseModel):
    """Day records sharing one date: the kept winner and the losers to remove."""

    date: date
    winner: Day
    losers: list[Day]
