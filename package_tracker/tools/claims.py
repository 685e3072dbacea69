"""
Claim case number generation.

In production, this would come from a claims or ticketing system. The
engine takes any zero-argument callable, so tests can pin the value.
"""

import logging
import random
from typing import Callable, Optional

from package_tracker.config import settings

logger = logging.getLogger(__name__)

CaseNumberGenerator = Callable[[], str]


def generate_case_number(
    rng: Optional[random.Random] = None,
    prefix: Optional[str] = None,
    maximum: Optional[int] = None,
) -> str:
    """Build a case number such as ``CLM-4821``.

    ``prefix`` and ``maximum`` default to the global settings; the dialogue
    engine passes its own config values.
    """
    source = rng or random
    if prefix is None:
        prefix = settings.dialogue.case_number_prefix
    if maximum is None:
        maximum = settings.dialogue.case_number_max
    case_number = f"{prefix}-{source.randint(0, maximum)}"
    logger.debug("Generated case number %s", case_number)
    return case_number


def fixed_case_number(case_number: str) -> CaseNumberGenerator:
    """Return a generator that always yields the same case number."""

    def generator() -> str:
        return case_number

    return generator
