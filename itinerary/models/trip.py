"""Trip models - a trip's date range and its ordered destination visits."""

from datetime import date

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class Destination(BaseModel):
    """Reference to a destination place."""

    id: str
    name: str
    country: str | None = None


class DestinationVisit(BaseModel):
    """A destination's occupancy interval within a trip.

    Dates are not cross-checked here; an inverted visit is reported by
    sequence validation as a typed violation instead of failing construction.
    """

    destination: Destination
    arrival: date
    departure: date
    order: int = Field(default=0, ge=0)


class Trip(BaseModel):
    """Trip with its date range and destination visits."""

    id: str
    start: date
    end: date
    visits: list[DestinationVisit] = Field(default_factory=list)
    traveler_count: int = Field(default=1, ge=1)

    @field_validator("end")
    @classmethod
    def validate_end_after_start(cls, v: date, info: ValidationInfo) -> date:
        """Ensure end >= start."""
        if "start" in info.data and v < info.data["start"]:
            raise ValueError("end must be >= start")
        return v

    @property
    def is_single(self) -> bool:
        """True when the trip has exactly one destination visit."""
        return len(self.visits) == 1

    @property
    def legacy_destination(self) -> Destination | None:
        """Read-time projection for single-destination consumers."""
        if self.is_single:
            return self.visits[0].destination
        return None
