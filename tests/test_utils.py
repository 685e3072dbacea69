"""Tests for shared utility functions."""

from package_tracker.utils import normalize_tracking_number


class TestNormalizeTrackingNumber:
    def test_uppercases(self):
        assert normalize_tracking_number("tst123456") == "TST123456"

    def test_strips_whitespace(self):
        assert normalize_tracking_number("  TST123456  ") == "TST123456"

    def test_clean_number_unchanged(self):
        assert normalize_tracking_number("TST123456") == "TST123456"

    def test_does_not_remove_inner_spaces(self):
        assert normalize_tracking_number("tst 123456") == "TST 123456"
