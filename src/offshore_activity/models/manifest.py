"""Vessel manifest entity - one cargo manifest tied to a vessel call."""

from datetime import datetime
from typing import Optional

from offshore_activity.models.base import RecordModel


class Manifest(RecordModel):
    """A cargo manifest.

    ``transporter`` is the vessel name; ``offshore_location`` is the free-text
    destination that drives drilling/production classification.
    """

    transporter: Optional[str] = None
    manifest_date: Optional[datetime] = None
    offshore_location: Optional[str] = None
    manifest_number: Optional[str] = None
    voyage_id: Optional[str] = None
    remarks: Optional[str] = None
