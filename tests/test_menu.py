"""Tests for menu choice and reset keyword parsing."""

import pytest

from package_tracker.conversation.menu import MenuChoice, is_reset_request, parse_menu_choice


class TestParseMenuChoice:
    @pytest.mark.parametrize("text,expected", [
        ("1", MenuChoice.OPTION_1),
        ("2", MenuChoice.OPTION_2),
        ("3", MenuChoice.OPTION_3),
        ("  2  ", MenuChoice.OPTION_2),
        ("option 3 please", MenuChoice.OPTION_3),
    ])
    def test_single_digit(self, text, expected):
        assert parse_menu_choice(text) == expected

    def test_checks_in_order_one_two_three(self):
        assert parse_menu_choice("3, no wait, 2") == MenuChoice.OPTION_2
        assert parse_menu_choice("32 1") == MenuChoice.OPTION_1

    def test_digit_inside_number_matches(self):
        assert parse_menu_choice("TST123456") == MenuChoice.OPTION_1

    @pytest.mark.parametrize("text", ["", "track", "four", "0", "456789"])
    def test_no_choice(self, text):
        assert parse_menu_choice(text) == MenuChoice.NONE


class TestResetRequest:
    @pytest.mark.parametrize("text", ["reset", "RESET", " Stop ", "please retry", "nonstop"])
    def test_keywords_detected(self, text):
        assert is_reset_request(text) is True

    @pytest.mark.parametrize("text", ["", "1", "restart", "track my parcel"])
    def test_other_text_ignored(self, text):
        assert is_reset_request(text) is False
