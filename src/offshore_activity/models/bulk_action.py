"""Bulk action entity - one bulk-material transfer."""

from datetime import datetime
from typing import Any, Optional

from pydantic import field_validator

from offshore_activity.models.base import RecordModel, coerce_flag, coerce_optional_float


class BulkAction(RecordModel):
    """A bulk fluid or dry-bulk transfer to or from a vessel."""

    vessel_name: Optional[str] = None
    start_date: Optional[datetime] = None
    action: Optional[str] = None
    destination_port: Optional[str] = None
    at_port: Optional[str] = None
    bulk_type: Optional[str] = None
    bulk_description: Optional[str] = None
    is_drilling_fluid: bool = False
    volume_bbls: Optional[float] = None

    @field_validator("is_drilling_fluid", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> Any:
        return coerce_flag(value)

    @field_validator("volume_bbls", mode="before")
    @classmethod
    def _coerce_volume(cls, value: Any) -> Optional[float]:
        return coerce_optional_float(value)
