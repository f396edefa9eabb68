"""Violation models - destination sequence problems found during validation."""

from enum import Enum

from pydantic import BaseModel


class SequenceViolationCode(str, Enum):
    """Machine-usable codes for sequence violations."""

    DEPARTURE_BEFORE_ARRIVAL = "DEPARTURE_BEFORE_ARRIVAL"
    ARRIVAL_BEFORE_PREVIOUS_DEPARTURE = "ARRIVAL_BEFORE_PREVIOUS_DEPARTURE"
    ARRIVAL_BEFORE_TRIP_START = "ARRIVAL_BEFORE_TRIP_START"
    DEPARTURE_AFTER_TRIP_END = "DEPARTURE_AFTER_TRIP_END"


class SequenceViolation(BaseModel):
    """First rule broken by a candidate visit sequence.

    The caller must not persist a sequence that produced a violation.
    """

    index: int  # Position of the offending visit
    code: SequenceViolationCode
    reason: str  # Human-readable, e.g. "arrival before previous departure"


class SequenceResult(BaseModel):
    """Outcome of sequence validation: accepted, or the first violation."""

    violation: SequenceViolation | None = None

    @property
    def ok(self) -> bool:
        return self.violation is None
