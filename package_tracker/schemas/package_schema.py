"""Package record data models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class PackageStatus(str, Enum):
    IN_TRANSIT = "In Transit"
    DELIVERED = "Delivered"
    LOST = "Lost"


class PackageRecord(BaseModel):
    """Carrier record for a single shipment. Read-only for the engine."""

    model_config = ConfigDict(frozen=True)

    tracking_number: str
    status: PackageStatus
    carrier: str
    estimated_delivery: str
    owner_email: str
    current_location: Optional[str] = None
    delivered_date: Optional[str] = None
    delivered_location: Optional[str] = None
    last_known_location: Optional[str] = None
    last_seen_date: Optional[str] = None
