"""
Finite state machine for the package tracking conversation.

Defines 6 conversation states and explicit transitions with triggers.
The current position lives on the session's ConversationContext; this
class only allows moves that appear in the transition table and keeps a
history of every state visited.

Usage:
    context = ConversationContext()
    sm = ConversationStateMachine(context)
    sm.transition(TransitionTrigger.SELECT_TRACK)
    assert context.state == ConversationState.AWAITING_TRACKING_NUMBER
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from package_tracker.schemas.conversation_schema import ConversationContext

logger = logging.getLogger(__name__)


class ConversationState(str, Enum):
    """All possible states in a conversation lifecycle."""
    GREETING = "greeting"
    AWAITING_TRACKING_NUMBER = "awaiting_tracking_number"
    AWAITING_EMAIL = "awaiting_email"
    REPORT_LOST = "report_lost"
    CONFIRMATION = "confirmation"
    INCORRECT_INFO = "incorrect_info"


class TransitionTrigger(str, Enum):
    """Events that cause state transitions."""
    SELECT_TRACK = "select_track"
    SELECT_REPORT_LOST = "select_report_lost"
    PACKAGE_NEEDS_ACTION = "package_needs_action"
    PACKAGE_NOT_FOUND = "package_not_found"
    CLAIM_REQUESTED = "claim_requested"
    RETRY_TRACKING = "retry_tracking"
    START_OVER = "start_over"
    FOLLOW_UP_COMPLETE = "follow_up_complete"
    RESET = "reset"
    STATE_RECOVERED = "state_recovered"


@dataclass
class Transition:
    """A single valid state transition. ``from_state=None`` matches any state."""
    from_state: Optional[ConversationState]
    to_state: ConversationState
    trigger: TransitionTrigger


@dataclass
class StateEntry:
    """Recorded history entry for a state visit."""
    state: str
    entered_at: datetime
    trigger: Optional[TransitionTrigger] = None


class InvalidTransitionError(Exception):
    """Raised when a transition is not valid from the current state."""


class ConversationStateMachine:
    """
    Deterministic state machine controlling conversation flow.

    Every transition must be explicitly defined. A trigger with no matching
    entry for the current state is rejected with the list of triggers that
    would have been accepted.
    """

    TRANSITIONS: list[Transition] = [
        # --- Main menu ---
        Transition(ConversationState.GREETING, ConversationState.AWAITING_TRACKING_NUMBER,
                   TransitionTrigger.SELECT_TRACK),
        Transition(ConversationState.GREETING, ConversationState.REPORT_LOST,
                   TransitionTrigger.SELECT_REPORT_LOST),

        # --- Tracking lookup ---
        Transition(ConversationState.AWAITING_TRACKING_NUMBER, ConversationState.CONFIRMATION,
                   TransitionTrigger.PACKAGE_NEEDS_ACTION),
        Transition(ConversationState.AWAITING_TRACKING_NUMBER, ConversationState.INCORRECT_INFO,
                   TransitionTrigger.PACKAGE_NOT_FOUND),

        # --- Lost package report ---
        Transition(ConversationState.REPORT_LOST, ConversationState.CONFIRMATION,
                   TransitionTrigger.PACKAGE_NEEDS_ACTION),
        Transition(ConversationState.REPORT_LOST, ConversationState.INCORRECT_INFO,
                   TransitionTrigger.PACKAGE_NOT_FOUND),
        Transition(ConversationState.REPORT_LOST, ConversationState.AWAITING_EMAIL,
                   TransitionTrigger.CLAIM_REQUESTED),

        # --- Next-step menus ---
        Transition(ConversationState.CONFIRMATION, ConversationState.AWAITING_EMAIL,
                   TransitionTrigger.CLAIM_REQUESTED),
        Transition(ConversationState.CONFIRMATION, ConversationState.GREETING,
                   TransitionTrigger.START_OVER),
        Transition(ConversationState.INCORRECT_INFO, ConversationState.AWAITING_TRACKING_NUMBER,
                   TransitionTrigger.RETRY_TRACKING),
        Transition(ConversationState.INCORRECT_INFO, ConversationState.AWAITING_EMAIL,
                   TransitionTrigger.CLAIM_REQUESTED),

        # --- Any state ---
        Transition(None, ConversationState.GREETING, TransitionTrigger.FOLLOW_UP_COMPLETE),
        Transition(None, ConversationState.GREETING, TransitionTrigger.RESET),
    ]

    def __init__(self, context: ConversationContext) -> None:
        self._context = context
        self._history: list[StateEntry] = [
            StateEntry(state=context.state, entered_at=datetime.now(timezone.utc))
        ]
        self._recovery_count: int = 0

    @property
    def context(self) -> ConversationContext:
        return self._context

    @property
    def current_state(self) -> ConversationState:
        """
        The current state as an enum member.

        Raises:
            ValueError: If the context holds a value outside ConversationState.
        """
        return ConversationState(self._context.state)

    @property
    def recovery_count(self) -> int:
        return self._recovery_count

    def has_known_state(self) -> bool:
        return self._context.state in {s.value for s in ConversationState}

    def transition(self, trigger: TransitionTrigger) -> ConversationState:
        """
        Execute a state transition.

        Args:
            trigger: The event triggering the transition.

        Returns:
            The new conversation state.

        Raises:
            InvalidTransitionError: If no valid transition exists.
        """
        for t in self._matching(self._context.state):
            if t.trigger == trigger:
                old_state = self._context.state
                self._enter(t.to_state, trigger)
                logger.debug(
                    "State transition: %s -> %s (trigger: %s)",
                    old_state, t.to_state.value, trigger.value,
                )
                return t.to_state

        valid = [t.value for t in self.get_valid_triggers()]
        raise InvalidTransitionError(
            f"No valid transition from '{self._context.state}' "
            f"with trigger '{trigger.value}'. Valid triggers: {valid}"
        )

    def recover(self) -> ConversationState:
        """Force the conversation back to the greeting after its state was lost."""
        logger.warning("Unknown conversation state %r, recovering to greeting", self._context.state)
        self._recovery_count += 1
        self._enter(ConversationState.GREETING, TransitionTrigger.STATE_RECOVERED)
        return ConversationState.GREETING

    def get_valid_triggers(self) -> list[TransitionTrigger]:
        """Return all triggers valid from the current state."""
        return [t.trigger for t in self._matching(self._context.state)]

    def get_history(self) -> list[StateEntry]:
        """Return the full state transition history."""
        return list(self._history)

    def get_state_trace(self) -> list[str]:
        """Return ordered list of state names visited."""
        return [entry.state for entry in self._history]

    def _matching(self, state: str) -> list[Transition]:
        return [
            t for t in self.TRANSITIONS
            if t.from_state is None or t.from_state.value == state
        ]

    def _enter(self, state: ConversationState, trigger: TransitionTrigger) -> None:
        self._context.state = state.value
        self._history.append(StateEntry(
            state=state.value,
            entered_at=datetime.now(timezone.utc),
            trigger=trigger,
        ))
