"""
Package tracking assistant entry point.

Starts the console chat. Pass a scenario name to auto-play a scripted
conversation instead of reading from stdin.

Usage:
    Interactive:  python main.py
    Scenario:     python main.py scenario lost
"""

import logging
import sys

from package_tracker.config import settings

logger = logging.getLogger(__name__)


def _run_console_mode() -> None:
    from console_demo import ConsoleSession

    session = ConsoleSession()
    session.run()


def _run_scenario_mode(name: str) -> None:
    from console_demo import ConsoleSession

    session = ConsoleSession()
    session.run_scenario(name)


if __name__ == "__main__":
    logger.info("Starting %s (%s)", settings.business.bot_name, settings.session_name)
    if len(sys.argv) > 2 and sys.argv[1] == "scenario":
        _run_scenario_mode(sys.argv[2])
    else:
        _run_console_mode()
