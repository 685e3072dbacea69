"""Shared utilities used across the package tracker."""


def normalize_tracking_number(value: str) -> str:
    """Normalize a tracking number by trimming whitespace and uppercasing.

    Examples:
        >>> normalize_tracking_number("  tst123456 ")
        'TST123456'
        >>> normalize_tracking_number("TsT789123")
        'TST789123'
    """
    return value.strip().upper()
