"""Tests for configuration loading and validation."""

import pytest

from package_tracker.config import AppConfig, _validate_config


def _config_with(business=None, dialogue=None) -> AppConfig:
    from package_tracker.config import BusinessConfig, DialogueConfig

    config = AppConfig.__new__(AppConfig)
    object.__setattr__(config, "business", business or BusinessConfig())
    object.__setattr__(config, "dialogue", dialogue or DialogueConfig())
    object.__setattr__(config, "log_level", "INFO")
    object.__setattr__(config, "session_name", "test")
    return config


def _dialogue(
    follow_up_delay_sec=2.5, case_number_prefix="CLM", case_number_max=9999, max_input_length=500
):
    from package_tracker.config import DialogueConfig

    dialogue = DialogueConfig.__new__(DialogueConfig)
    object.__setattr__(dialogue, "follow_up_delay_sec", follow_up_delay_sec)
    object.__setattr__(dialogue, "case_number_prefix", case_number_prefix)
    object.__setattr__(dialogue, "case_number_max", case_number_max)
    object.__setattr__(dialogue, "max_input_length", max_input_length)
    return dialogue


class TestConfigValidation:
    def test_default_config_passes_validation(self):
        config = AppConfig()
        _validate_config(config)  # should not raise

    def test_default_follow_up_delay(self):
        from package_tracker.config import DialogueConfig

        assert DialogueConfig().follow_up_delay_sec > 0

    def test_zero_delay_rejected(self):
        with pytest.raises(ValueError, match="FOLLOW_UP_DELAY_SEC"):
            _validate_config(_config_with(dialogue=_dialogue(follow_up_delay_sec=0)))

    def test_negative_case_number_max_rejected(self):
        with pytest.raises(ValueError, match="CASE_NUMBER_MAX"):
            _validate_config(_config_with(dialogue=_dialogue(case_number_max=-1)))

    def test_blank_case_prefix_rejected(self):
        with pytest.raises(ValueError, match="CASE_NUMBER_PREFIX"):
            _validate_config(_config_with(dialogue=_dialogue(case_number_prefix="  ")))

    def test_zero_input_length_rejected(self):
        with pytest.raises(ValueError, match="MAX_INPUT_LENGTH"):
            _validate_config(_config_with(dialogue=_dialogue(max_input_length=0)))

    def test_zero_claim_hours_rejected(self):
        from package_tracker.config import BusinessConfig

        business = BusinessConfig.__new__(BusinessConfig)
        object.__setattr__(business, "bot_name", "test")
        object.__setattr__(business, "claim_response_hours", 0)

        with pytest.raises(ValueError, match="CLAIM_RESPONSE_HOURS"):
            _validate_config(_config_with(business=business))

    def test_safe_int_parsing(self):
        from package_tracker.config import _safe_int

        assert _safe_int("NONEXISTENT_VAR_12345", "42") == 42

    def test_safe_float_parsing(self):
        from package_tracker.config import _safe_float

        assert _safe_float("NONEXISTENT_VAR_12345", "2.5") == pytest.approx(2.5)

    def test_safe_int_rejects_garbage(self, monkeypatch):
        from package_tracker.config import _safe_int

        monkeypatch.setenv("PT_TEST_BAD_INT", "lots")
        with pytest.raises(ValueError, match="PT_TEST_BAD_INT"):
            _safe_int("PT_TEST_BAD_INT", "1")
