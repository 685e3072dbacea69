"""
Structural validators for user-supplied identifiers.

Both checks are pure: they never consult the record store, so a value that
passes may still be unknown to it.
"""

import re

from package_tracker.utils import normalize_tracking_number

TRACKING_NUMBER_PATTERN = re.compile(r"^TST\d{6}$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def validate_tracking_number(value: str) -> bool:
    """Check for ``TST`` followed by exactly six digits, ignoring case and padding."""
    return TRACKING_NUMBER_PATTERN.match(normalize_tracking_number(value)) is not None


def validate_email(value: str) -> bool:
    return EMAIL_PATTERN.match(value) is not None
