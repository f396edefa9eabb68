"""Common types and enums shared across all models."""

from datetime import date, datetime, time
from enum import Enum

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class TimeInterval(BaseModel):
    """Half-open interval [start, end) between two instants."""

    start: datetime
    end: datetime

    @field_validator("end")
    @classmethod
    def validate_end_after_start(cls, v: datetime, info: ValidationInfo) -> datetime:
        """Ensure end >= start."""
        if "start" in info.data and v < info.data["start"]:
            raise ValueError("end must be >= start")
        return v


class DateRange(BaseModel):
    """Inclusive calendar date range."""

    start: date
    end: date

    @field_validator("end")
    @classmethod
    def validate_end_after_start(cls, v: date, info: ValidationInfo) -> date:
        """Ensure end >= start."""
        if "start" in info.data and v < info.data["start"]:
            raise ValueError("end must be >= start")
        return v


class TimeSlot(BaseModel):
    """Free time slot within a day's scheduling window."""

    start: time
    end: time
    duration_minutes: int = Field(..., ge=0)


class ActivityType(str, Enum):
    """Type of activity as entered by the traveler."""

    sightseeing = "sightseeing"
    dining = "dining"
    activity = "activity"
    transport = "transport"
    accommodation = "accommodation"
    entertainment = "entertainment"
    cultural = "cultural"
    outdoor = "outdoor"
    other = "other"


class BudgetCategory(str, Enum):
    """Budget breakdown bucket."""

    accommodation = "accommodation"
    transportation = "transportation"
    food = "food"
    activities = "activities"
    miscellaneous = "miscellaneous"


class BudgetStatus(str, Enum):
    """Budget utilization status, from worst to best."""

    OVER = "over"
    NEAR_LIMIT = "near-limit"
    ON_TRACK = "on-track"
    UNDER_BUDGET = "under-budget"
