"""
Keyword and menu-choice parsing for free-text replies.

Matching is plain substring containment: "option 1 please" selects option 1,
and when several digits appear the lowest option wins.
"""

from enum import Enum

RESET_KEYWORDS = ("reset", "stop", "retry")


class MenuChoice(str, Enum):
    OPTION_1 = "1"
    OPTION_2 = "2"
    OPTION_3 = "3"
    NONE = "none"


def parse_menu_choice(text: str) -> MenuChoice:
    """Map a reply onto a numbered menu option, checked in order 1, 2, 3."""
    stripped = text.strip()
    for choice in (MenuChoice.OPTION_1, MenuChoice.OPTION_2, MenuChoice.OPTION_3):
        if choice.value in stripped:
            return choice
    return MenuChoice.NONE


def is_reset_request(text: str) -> bool:
    lower = text.strip().lower()
    return any(keyword in lower for keyword in RESET_KEYWORDS)
