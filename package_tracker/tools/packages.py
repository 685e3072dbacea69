"""
Mock package record store.

In production, this would query a carrier tracking API or an order
database. Lookups are read-only and never raise for unknown keys, so a
single store can be shared by every chat session.
"""

import logging
from typing import Iterable, Optional, Protocol

from package_tracker.schemas.package_schema import PackageRecord, PackageStatus
from package_tracker.utils import normalize_tracking_number

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    """Read-only lookup contract consumed by the dialogue engine."""

    def lookup_by_tracking(self, tracking_number: str) -> Optional[PackageRecord]:
        ...

    def lookup_by_email(self, email: str) -> frozenset[str]:
        ...


_SAMPLE_PACKAGES: list[PackageRecord] = [
    PackageRecord(
        tracking_number="TST123456",
        status=PackageStatus.IN_TRANSIT,
        carrier="FedEx",
        estimated_delivery="Dec 1, 2025",
        current_location="Los Angeles, CA",
        owner_email="johndoe@gmail.com",
    ),
    PackageRecord(
        tracking_number="TST456789",
        status=PackageStatus.DELIVERED,
        carrier="UPS",
        estimated_delivery="Nov 25, 2025",
        delivered_date="Nov 25, 2025",
        delivered_location="Your location",
        owner_email="janesmith@gmail.com",
    ),
    PackageRecord(
        tracking_number="TST789123",
        status=PackageStatus.LOST,
        carrier="USPS",
        estimated_delivery="Nov 27, 2025",
        last_known_location="San Francisco, CA",
        last_seen_date="Nov 26, 2025",
        owner_email="alice@live.com",
    ),
]


class InMemoryRecordStore:
    """Dictionary-backed record store with an email index derived from owners."""

    def __init__(self, records: Optional[Iterable[PackageRecord]] = None) -> None:
        if records is None:
            records = _SAMPLE_PACKAGES
        self._packages: dict[str, PackageRecord] = {}
        email_index: dict[str, set[str]] = {}
        for record in records:
            self._packages[record.tracking_number] = record
            email_index.setdefault(record.owner_email, set()).add(record.tracking_number)
        self._email_index: dict[str, frozenset[str]] = {
            email: frozenset(numbers) for email, numbers in email_index.items()
        }

    def lookup_by_tracking(self, tracking_number: str) -> Optional[PackageRecord]:
        """Look up a package by tracking number. Returns None if not found."""
        result = self._packages.get(normalize_tracking_number(tracking_number))
        if result:
            logger.debug("Package found: %s (%s)", result.tracking_number, result.status.value)
        return result

    def lookup_by_email(self, email: str) -> frozenset[str]:
        """Tracking numbers owned by an email, matched exactly as entered."""
        return self._email_index.get(email, frozenset())

    def __len__(self) -> int:
        return len(self._packages)
