"""Voyage event entity - one timestamped operational event."""

from datetime import datetime
from typing import Any, Optional

from pydantic import field_validator

from offshore_activity.models.base import (
    RecordModel,
    coerce_optional_float,
    coerce_voyage_number,
)


class VoyageEvent(RecordModel):
    """A timestamped vessel event from the voyage-event export."""

    vessel: Optional[str] = None
    voyage_number: Optional[str] = None
    event: Optional[str] = None
    parent_event: Optional[str] = None
    location: Optional[str] = None
    event_date: Optional[datetime] = None
    hours: Optional[float] = None
    final_hours: Optional[float] = None
    mission: Optional[str] = None
    port_type: Optional[str] = None

    @field_validator("voyage_number", mode="before")
    @classmethod
    def _coerce_voyage_number(cls, value: Any) -> Optional[str]:
        return coerce_voyage_number(value)

    @field_validator("hours", "final_hours", mode="before")
    @classmethod
    def _coerce_hours(cls, value: Any) -> Optional[float]:
        return coerce_optional_float(value)

    @property
    def effective_hours(self) -> float:
        """Hours, falling back to final hours, then zero."""
        if self.hours:
            return self.hours
        if self.final_hours:
            return self.final_hours
        return 0.0
