"""Cost allocation entity - one cost-accounting line."""

from typing import Any, Optional

from pydantic import field_validator

from offshore_activity.models.base import (
    RecordModel,
    coerce_optional_float,
    coerce_optional_str,
)


class CostAllocation(RecordModel):
    """A cost-allocation row keyed by location (LC) number.

    Carries no vessel or time fields, so it can only be scoped by text.
    """

    lc_number: Optional[str] = None
    location_reference: Optional[str] = None
    rig_location: Optional[str] = None
    description: Optional[str] = None
    project_type: Optional[str] = None
    department: Optional[str] = None
    total_cost: Optional[float] = None

    @field_validator("lc_number", mode="before")
    @classmethod
    def _coerce_lc_number(cls, value: Any) -> Optional[str]:
        return coerce_optional_str(value)

    @field_validator("total_cost", mode="before")
    @classmethod
    def _coerce_cost(cls, value: Any) -> Optional[float]:
        return coerce_optional_float(value)
