"""
Centralized configuration with environment variable overrides.

Timing, claim numbering and presentation values are configurable here.
Nothing is hardcoded in the dialogue engine or the record lookup logic.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from package_tracker.logging_context import SESSION_LOG_FORMAT, install_session_filter

load_dotenv()

logger = logging.getLogger(__name__)


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class BusinessConfig:
    """Customer-facing settings loaded from environment or defaults."""

    bot_name: str = os.getenv("BOT_NAME", "Package Tracking Helper")
    claim_response_hours: int = _safe_int("CLAIM_RESPONSE_HOURS", "24")


@dataclass(frozen=True)
class DialogueConfig:
    """Timing and identifier settings for the dialogue engine."""

    follow_up_delay_sec: float = _safe_float("FOLLOW_UP_DELAY_SEC", "2.5")
    case_number_prefix: str = os.getenv("CASE_NUMBER_PREFIX", "CLM")
    case_number_max: int = _safe_int("CASE_NUMBER_MAX", "9999")
    max_input_length: int = _safe_int("MAX_INPUT_LENGTH", "500")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    business: BusinessConfig = field(default_factory=BusinessConfig)
    dialogue: DialogueConfig = field(default_factory=DialogueConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    session_name: str = os.getenv("SESSION_NAME", "package-tracker")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if config.dialogue.follow_up_delay_sec <= 0:
        raise ValueError(
            f"FOLLOW_UP_DELAY_SEC must be > 0, got {config.dialogue.follow_up_delay_sec}"
        )
    if config.dialogue.case_number_max < 0:
        raise ValueError(
            f"CASE_NUMBER_MAX must be >= 0, got {config.dialogue.case_number_max}"
        )
    if not config.dialogue.case_number_prefix.strip():
        raise ValueError("CASE_NUMBER_PREFIX must not be empty")
    if config.dialogue.max_input_length < 1:
        raise ValueError(
            f"MAX_INPUT_LENGTH must be >= 1, got {config.dialogue.max_input_length}"
        )
    if config.business.claim_response_hours < 1:
        raise ValueError(
            f"CLAIM_RESPONSE_HOURS must be >= 1, got {config.business.claim_response_hours}"
        )


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=SESSION_LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    for handler in logging.getLogger().handlers:
        install_session_filter(handler)
    logger.info("Configuration loaded for '%s'", config.business.bot_name)
    return config


# Singleton instance
settings = load_config()
