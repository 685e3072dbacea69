"""
Offline console demo: runs the package tracking chat in a terminal.

Uses the real dialogue engine, validators, record store and scheduler. The
scheduler's virtual clock is driven by real sleeps here, so follow-up
messages appear after the same pause a user would see in the chat window.

Usage:
    python console_demo.py
    python console_demo.py --scenario lost
    python console_demo.py --scenario claim
"""

import argparse
import time
from typing import Optional

from package_tracker.config import settings
from package_tracker.conversation.engine import DialogueEngine
from package_tracker.schemas.conversation_schema import Message, Sender

BLUE = "\033[94m"
GREEN = "\033[92m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"


class ConsoleSession:
    """Renders one chat session in the terminal."""

    # Pre-scripted scenarios for --scenario flag
    SCENARIOS: dict[str, list[str]] = {
        "track": [
            "1",
            "tst123456",
        ],
        "lost": [
            "2",
            "TST789123",
            "1",
            "alice@live.com",
        ],
        "claim": [
            "1",
            "TST456789",
            "1",
            "not-an-email",
            "janesmith@gmail.com",
        ],
        "agent": [
            "hello?",
            "3",
        ],
    }

    def __init__(self, engine: Optional[DialogueEngine] = None, realtime: bool = True) -> None:
        self.realtime = realtime
        self.engine = engine or DialogueEngine()
        for message in self.engine.transcript:
            self._render(message)
        self.engine.subscribe(self._render, self._render_clear)

    def _render(self, message: Message) -> None:
        if message.sender == Sender.BOT:
            print(f"{GREEN}{BOLD}[{settings.business.bot_name}]{RESET} {GREEN}{message.text}{RESET}")

    def _render_clear(self) -> None:
        print(f"{DIM}  >> Conversation reset{RESET}")

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    def wait_for_follow_ups(self) -> None:
        """Block until every scheduled follow-up for this session has fired."""
        if not self.realtime:
            self.engine.run_until_idle()
            return
        while True:
            remaining = self.engine.seconds_until_next_effect()
            if remaining is None:
                return
            time.sleep(remaining)
            self.engine.advance_time(remaining)

    def send(self, text: str) -> None:
        self.engine.submit_input(text)
        self.wait_for_follow_ups()
        self.system_log(f"State: {self.engine.state}")

    def run_scenario(self, scenario: str) -> None:
        """Auto-play a pre-scripted scenario for demo purposes."""
        steps = self.SCENARIOS.get(scenario)
        if not steps:
            print(f"{RED}Unknown scenario: {scenario}{RESET}")
            return

        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {settings.business.bot_name.upper()} - Scenario: {scenario}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")
        print()

        for step in steps:
            print(f"\n{BLUE}[You] {RESET}{step}")
            self.send(step)

        print(f"\n{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  Scenario '{scenario}' complete.{RESET}")
        print(f"{DIM}  State trace: {' -> '.join(self.engine.state_machine.get_state_trace())}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

    def run(self) -> None:
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {settings.business.bot_name.upper()} - Console Demo{RESET}")
        print(f"{BOLD}  Type 'quit' to exit, 'reset' to start over{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")
        print()

        while True:
            try:
                user_input = input(f"\n{BLUE}[You] {RESET}")
            except EOFError:
                print(f"\n{DIM}Session ended.{RESET}")
                return
            if user_input.strip().lower() in ("quit", "exit", "q"):
                print(f"\n{DIM}Session ended.{RESET}")
                return

            if len(user_input) > settings.dialogue.max_input_length:
                print(f"{RED}That was quite long. Could you keep it brief?{RESET}")
                continue

            self.send(user_input)


def main() -> None:
    parser = argparse.ArgumentParser(description="Offline console demo")
    parser.add_argument(
        "--scenario",
        choices=sorted(ConsoleSession.SCENARIOS),
        default=None,
        help="Auto-play a pre-scripted scenario instead of interactive mode",
    )
    args = parser.parse_args()

    session = ConsoleSession()
    if args.scenario:
        session.run_scenario(args.scenario)
    else:
        session.run()


if __name__ == "__main__":
    main()
