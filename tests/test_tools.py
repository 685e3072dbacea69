"""Tests for the record store and claim number tools."""

import random
import re

from package_tracker.schemas.package_schema import PackageRecord, PackageStatus
from package_tracker.tools.claims import fixed_case_number, generate_case_number
from package_tracker.tools.packages import InMemoryRecordStore


class TestRecordStore:
    def test_sample_data_loaded(self, record_store):
        assert len(record_store) == 3

    def test_lookup_in_transit(self, record_store):
        pkg = record_store.lookup_by_tracking("TST123456")
        assert pkg is not None
        assert pkg.status == PackageStatus.IN_TRANSIT
        assert pkg.carrier == "FedEx"
        assert pkg.current_location == "Los Angeles, CA"

    def test_lookup_delivered(self, record_store):
        pkg = record_store.lookup_by_tracking("TST456789")
        assert pkg.status == PackageStatus.DELIVERED
        assert pkg.delivered_date == "Nov 25, 2025"

    def test_lookup_lost(self, record_store):
        pkg = record_store.lookup_by_tracking("TST789123")
        assert pkg.status == PackageStatus.LOST
        assert pkg.last_known_location == "San Francisco, CA"
        assert pkg.last_seen_date == "Nov 26, 2025"

    def test_lookup_normalizes_number(self, record_store):
        assert record_store.lookup_by_tracking(" tst123456 ") is not None

    def test_unknown_tracking_returns_none(self, record_store):
        assert record_store.lookup_by_tracking("TST000000") is None

    def test_lookup_by_email(self, record_store):
        assert record_store.lookup_by_email("johndoe@gmail.com") == frozenset({"TST123456"})

    def test_unknown_email_returns_empty(self, record_store):
        assert record_store.lookup_by_email("nobody@example.com") == frozenset()

    def test_email_match_is_case_sensitive(self, record_store):
        assert record_store.lookup_by_email("JohnDoe@gmail.com") == frozenset()

    def test_custom_records_build_email_index(self):
        records = [
            PackageRecord(
                tracking_number="TST111111",
                status=PackageStatus.IN_TRANSIT,
                carrier="DHL",
                estimated_delivery="Jan 2, 2026",
                current_location="Austin, TX",
                owner_email="sam@example.com",
            ),
            PackageRecord(
                tracking_number="TST222222",
                status=PackageStatus.DELIVERED,
                carrier="DHL",
                estimated_delivery="Jan 1, 2026",
                delivered_date="Jan 1, 2026",
                delivered_location="Front porch",
                owner_email="sam@example.com",
            ),
        ]
        store = InMemoryRecordStore(records)
        assert store.lookup_by_email("sam@example.com") == frozenset({"TST111111", "TST222222"})
        assert store.lookup_by_tracking("TST123456") is None


class TestCaseNumbers:
    def test_format(self):
        case_number = generate_case_number(random.Random(7))
        match = re.fullmatch(r"CLM-(\d+)", case_number)
        assert match is not None
        assert 0 <= int(match.group(1)) <= 9999

    def test_seeded_generation_is_repeatable(self):
        assert generate_case_number(random.Random(3)) == generate_case_number(random.Random(3))

    def test_explicit_prefix_and_maximum(self):
        case_number = generate_case_number(random.Random(1), prefix="PKG", maximum=5)
        match = re.fullmatch(r"PKG-(\d+)", case_number)
        assert match is not None
        assert 0 <= int(match.group(1)) <= 5

    def test_fixed_generator(self):
        generator = fixed_case_number("CLM-1")
        assert generator() == "CLM-1"
        assert generator() == "CLM-1"
