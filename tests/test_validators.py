"""Tests for tracking number and email validation."""

import pytest

from package_tracker.conversation.validators import validate_email, validate_tracking_number


class TestTrackingNumber:
    def test_uppercase_accepted(self):
        assert validate_tracking_number("TST123456") is True

    def test_lowercase_accepted(self):
        assert validate_tracking_number("tst123456") is True

    def test_surrounding_whitespace_accepted(self):
        assert validate_tracking_number("  TST789123\n") is True

    def test_five_digits_rejected(self):
        assert validate_tracking_number("TST12345") is False

    def test_seven_digits_rejected(self):
        assert validate_tracking_number("TST1234567") is False

    def test_wrong_prefix_rejected(self):
        assert validate_tracking_number("ABC123456") is False

    def test_inner_space_rejected(self):
        assert validate_tracking_number("TST 123456") is False

    def test_letters_in_digits_rejected(self):
        assert validate_tracking_number("TST12A456") is False

    def test_empty_rejected(self):
        assert validate_tracking_number("") is False


class TestEmail:
    @pytest.mark.parametrize("value", [
        "a@b.co",
        "johndoe@gmail.com",
        "first.last@sub.example.org",
    ])
    def test_valid_emails(self, value):
        assert validate_email(value) is True

    @pytest.mark.parametrize("value", [
        "a@b",
        "a b@c.com",
        "@example.com",
        "user@@example.com",
        "user@example.",
        "",
    ])
    def test_invalid_emails(self, value):
        assert validate_email(value) is False

    def test_email_is_not_trimmed(self):
        assert validate_email(" a@b.co") is False
