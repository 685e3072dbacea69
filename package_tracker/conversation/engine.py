"""
Dialogue engine for the package tracking assistant.

Takes one line of free text at a time, dispatches it on the session's
current state, consults the validators and the record store, and appends
the bot's reply to the transcript. Replies that are followed by a pause
("connecting you to an agent...") queue the follow-up menu and the return
to the greeting on the effect scheduler instead of committing them
immediately.

Usage:
    engine = DialogueEngine()
    engine.submit_input("1")
    engine.submit_input("TST123456")
    engine.advance_time(2.5)
    print(engine.transcript[-1].text)
"""

import functools
import logging
from typing import Callable, Optional

from package_tracker.config import AppConfig, settings
from package_tracker.conversation.menu import MenuChoice, is_reset_request, parse_menu_choice
from package_tracker.conversation.scheduler import EffectScheduler
from package_tracker.conversation.state_machine import (
    ConversationState,
    ConversationStateMachine,
    TransitionTrigger,
)
from package_tracker.conversation.transcript import AppendListener, ClearListener, MessageChannel
from package_tracker.conversation.validators import validate_email, validate_tracking_number
from package_tracker.logging_context import new_session_id, set_session_id
from package_tracker.prompts import messages
from package_tracker.schemas.conversation_schema import ConversationContext, Message, Sender
from package_tracker.schemas.package_schema import PackageStatus
from package_tracker.tools.claims import CaseNumberGenerator, generate_case_number
from package_tracker.tools.packages import InMemoryRecordStore, RecordStore
from package_tracker.utils import normalize_tracking_number

logger = logging.getLogger(__name__)

StateHandler = Callable[[ConversationContext, str], None]


class DialogueEngine:
    """
    One chat session: context, transcript, state machine and pending effects.

    No operation raises for bad user input. Malformed values, unknown
    tracking numbers and unrecognized menu replies all produce a bot
    message and leave the session able to continue; the reset keywords
    are honoured from every state.
    """

    def __init__(
        self,
        store: Optional[RecordStore] = None,
        case_number_generator: Optional[CaseNumberGenerator] = None,
        scheduler: Optional[EffectScheduler] = None,
        config: Optional[AppConfig] = None,
        session_id: Optional[str] = None,
    ) -> None:
        self._config = config or settings
        self._store = store if store is not None else InMemoryRecordStore()
        self._generate_case_number = case_number_generator or functools.partial(
            generate_case_number,
            prefix=self._config.dialogue.case_number_prefix,
            maximum=self._config.dialogue.case_number_max,
        )
        self._scheduler = scheduler or EffectScheduler()
        self.session_id = session_id or new_session_id()

        self.context = ConversationContext()
        self._sm = ConversationStateMachine(self.context)
        self._channel = MessageChannel()
        self._timer_ids: set[int] = set()
        self._handlers: dict[ConversationState, StateHandler] = {
            ConversationState.GREETING: self._handle_greeting,
            ConversationState.AWAITING_TRACKING_NUMBER: self._handle_tracking_number,
            ConversationState.AWAITING_EMAIL: self._handle_email,
            ConversationState.REPORT_LOST: self._handle_lost_report,
            ConversationState.CONFIRMATION: self._handle_confirmation,
            ConversationState.INCORRECT_INFO: self._handle_incorrect_info,
        }

        set_session_id(self.session_id)
        logger.info("Session started: %s", self.session_id)
        self._bot_say(messages.GREETING)

    # ------------------------------------------------------------------ #
    # Presentation boundary
    # ------------------------------------------------------------------ #

    @property
    def state(self) -> str:
        return self.context.state

    @property
    def transcript(self) -> tuple[Message, ...]:
        return self._channel.messages

    @property
    def state_machine(self) -> ConversationStateMachine:
        return self._sm

    @property
    def has_pending_effects(self) -> bool:
        return bool(self._timer_ids)

    def subscribe(self, on_append: AppendListener, on_clear: Optional[ClearListener] = None) -> None:
        """Register callbacks for transcript appends and full clears."""
        self._channel.subscribe(on_append, on_clear)

    def submit_input(self, raw_text: str) -> None:
        """Record a user turn and run it through the dialogue rules."""
        set_session_id(self.session_id)
        text = raw_text.strip()
        self._channel.append(text, Sender.USER)

        if is_reset_request(text):
            self.reset()
            return

        if not text:
            self._bot_say(messages.EMPTY_INPUT)
            return

        if not self._sm.has_known_state():
            self._bot_say(messages.STATE_RECOVERED)
            self._sm.recover()
            return

        self._handlers[self._sm.current_state](self.context, text)

    def reset(self) -> None:
        """
        Clear transcript and collected data, then greet again.

        Follow-ups already scheduled are left in place and still fire.
        """
        set_session_id(self.session_id)
        self._channel.clear()
        self.context.clear_fields()
        self._sm.transition(TransitionTrigger.RESET)
        logger.info("Session reset")
        self._bot_say(messages.GREETING)

    def advance_time(self, seconds: float) -> int:
        """Let virtual time pass, firing any follow-ups that fall due."""
        return self._scheduler.advance(seconds)

    def run_until_idle(self) -> int:
        """Fire every pending follow-up on the scheduler without waiting."""
        return self._scheduler.run_until_idle()

    def seconds_until_next_effect(self) -> Optional[float]:
        own = [e for e in self._scheduler.pending() if e.timer_id in self._timer_ids]
        if not own:
            return None
        return max(0.0, own[0].fire_at - self._scheduler.now)

    # ------------------------------------------------------------------ #
    # State handlers
    # ------------------------------------------------------------------ #

    def _handle_greeting(self, ctx: ConversationContext, text: str) -> None:
        choice = parse_menu_choice(text)
        if choice == MenuChoice.OPTION_1:
            self._sm.transition(TransitionTrigger.SELECT_TRACK)
            self._bot_say(messages.ASK_TRACKING_NUMBER)
        elif choice == MenuChoice.OPTION_2:
            self._sm.transition(TransitionTrigger.SELECT_REPORT_LOST)
            self._bot_say(messages.ASK_LOST_TRACKING_NUMBER)
        elif choice == MenuChoice.OPTION_3:
            self._bot_say(messages.CONNECTING_TO_LIVE_AGENT)
            self._schedule_follow_up()
        else:
            self._bot_say(messages.GREETING_NOT_UNDERSTOOD)

    def _handle_tracking_number(self, ctx: ConversationContext, text: str) -> None:
        if not validate_tracking_number(text):
            self._bot_say(messages.INVALID_TRACKING_NUMBER)
            return

        number = normalize_tracking_number(text)
        ctx.tracking_number = number
        pkg = self._store.lookup_by_tracking(number)
        logger.debug("Tracking lookup for %s: %s", number, pkg.status.value if pkg else "not found")

        if pkg is None:
            self._bot_say(messages.tracking_not_found(number))
            self._sm.transition(TransitionTrigger.PACKAGE_NOT_FOUND)
        elif pkg.status == PackageStatus.LOST:
            self._bot_say(messages.tracking_lost(pkg))
            self._sm.transition(TransitionTrigger.PACKAGE_NEEDS_ACTION)
        elif pkg.status == PackageStatus.DELIVERED:
            self._bot_say(messages.tracking_delivered(pkg))
            self._sm.transition(TransitionTrigger.PACKAGE_NEEDS_ACTION)
        else:
            self._bot_say(messages.tracking_in_transit(pkg))
            self._schedule_follow_up()

    def _handle_email(self, ctx: ConversationContext, text: str) -> None:
        if not validate_email(text):
            self._bot_say(messages.INVALID_EMAIL)
            return

        pkg = self._store.lookup_by_tracking(ctx.tracking_number) if ctx.tracking_number else None

        # Without a known package the email can only point the user back to their order.
        if pkg is None:
            if self._store.lookup_by_email(text):
                self._bot_say(messages.EMAIL_HAS_ACTIVE_ORDER)
                self._schedule_follow_up()
            else:
                self._bot_say(messages.EMAIL_NOT_RECOGNIZED)
            return

        if pkg.owner_email != text:
            logger.debug("Email does not match owner of %s", pkg.tracking_number)
            self._bot_say(messages.EMAIL_NOT_RECOGNIZED)
            return

        ctx.email = text
        case_number = self._generate_case_number()
        logger.info("Claim filed for %s: %s", pkg.tracking_number, case_number)
        self._bot_say(messages.claim_confirmed(
            case_number, text, self._config.business.claim_response_hours,
        ))
        self._schedule_follow_up()

    def _handle_lost_report(self, ctx: ConversationContext, text: str) -> None:
        if not validate_tracking_number(text):
            self._bot_say(messages.INVALID_LOST_TRACKING_NUMBER)
            return

        number = normalize_tracking_number(text)
        ctx.tracking_number = number
        pkg = self._store.lookup_by_tracking(number)
        logger.debug("Lost report lookup for %s: %s", number, pkg.status.value if pkg else "not found")

        if pkg is None:
            self._bot_say(messages.lost_report_not_found(number))
            self._sm.transition(TransitionTrigger.PACKAGE_NOT_FOUND)
        elif pkg.status == PackageStatus.DELIVERED:
            self._bot_say(messages.lost_report_delivered(pkg))
            self._sm.transition(TransitionTrigger.CLAIM_REQUESTED)
        elif pkg.status == PackageStatus.LOST:
            self._bot_say(messages.lost_report_already_lost(pkg))
            self._sm.transition(TransitionTrigger.PACKAGE_NEEDS_ACTION)
        else:
            self._bot_say(messages.lost_report_in_transit(pkg))
            self._sm.transition(TransitionTrigger.PACKAGE_NEEDS_ACTION)

    def _handle_incorrect_info(self, ctx: ConversationContext, text: str) -> None:
        choice = parse_menu_choice(text)
        if choice == MenuChoice.OPTION_1:
            ctx.clear_fields()
            self._sm.transition(TransitionTrigger.RETRY_TRACKING)
            self._bot_say(messages.ASK_TRACKING_NUMBER_AGAIN)
        elif choice == MenuChoice.OPTION_2:
            self._sm.transition(TransitionTrigger.CLAIM_REQUESTED)
            self._bot_say(messages.ASK_EMAIL_FOR_CLAIM)
        elif choice == MenuChoice.OPTION_3:
            self._bot_say(messages.CONNECTING_TO_AGENT)
            self._schedule_follow_up()
        else:
            self._bot_say(messages.CHOICE_NOT_UNDERSTOOD)

    def _handle_confirmation(self, ctx: ConversationContext, text: str) -> None:
        choice = parse_menu_choice(text)
        if choice == MenuChoice.OPTION_1:
            self._sm.transition(TransitionTrigger.CLAIM_REQUESTED)
            self._bot_say(messages.ASK_EMAIL_FOR_CLAIM)
        elif choice == MenuChoice.OPTION_2:
            self._bot_say(messages.CONNECTING_TO_AGENT)
            self._schedule_follow_up()
        elif choice == MenuChoice.OPTION_3:
            ctx.clear_fields()
            self._sm.transition(TransitionTrigger.START_OVER)
            self._bot_say(messages.START_OVER)
        else:
            self._bot_say(messages.CHOICE_NOT_UNDERSTOOD)

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _bot_say(self, text: str) -> None:
        self._channel.append(text, Sender.BOT)

    def _schedule_follow_up(self) -> None:
        """Queue the follow-up menu and the return to the greeting."""
        timer_id = 0

        def follow_up() -> None:
            self._timer_ids.discard(timer_id)
            set_session_id(self.session_id)
            self._bot_say(messages.FOLLOW_UP_MENU)
            self._sm.transition(TransitionTrigger.FOLLOW_UP_COMPLETE)

        timer_id = self._scheduler.schedule(
            self._config.dialogue.follow_up_delay_sec, follow_up, description="follow-up menu",
        )
        self._timer_ids.add(timer_id)
