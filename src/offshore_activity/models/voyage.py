"""Voyage entity - one vessel round-trip from the voyage list."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator, model_validator

from offshore_activity.models.base import RecordModel, coerce_list, coerce_voyage_number

LOCATION_SEPARATOR = "->"


class Voyage(RecordModel):
    """A vessel round-trip.

    ``locations`` holds the route as exported, e.g.
    "Fourchon -> Na Kika -> Thunder Horse PDQ"; ``location_list`` is the
    same route split into stops.
    """

    standardized_voyage_id: str = Field(..., min_length=1)
    vessel: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    locations: Optional[str] = None
    location_list: list[str] = Field(default_factory=list)
    voyage_number: Optional[str] = None
    mission: Optional[str] = None

    @field_validator("voyage_number", mode="before")
    @classmethod
    def _coerce_voyage_number(cls, value: Any) -> Optional[str]:
        return coerce_voyage_number(value)

    @field_validator("location_list", mode="before")
    @classmethod
    def _coerce_location_list(cls, value: Any) -> Any:
        return coerce_list(value)

    @model_validator(mode="before")
    @classmethod
    def _derive_location_list(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        has_list = data.get("location_list") or data.get("locationList")
        locations = data.get("locations")
        if not has_list and isinstance(locations, str) and locations.strip():
            data = dict(data)
            data["location_list"] = [
                stop.strip()
                for stop in locations.split(LOCATION_SEPARATOR)
                if stop.strip()
            ]
            data.pop("locationList", None)
        return data

    @property
    def stop_count(self) -> int:
        """Number of stops on the route."""
        return len(self.location_list)
