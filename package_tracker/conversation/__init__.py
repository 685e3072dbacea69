from package_tracker.conversation.engine import DialogueEngine
from package_tracker.conversation.menu import MenuChoice, parse_menu_choice
from package_tracker.conversation.scheduler import EffectScheduler
from package_tracker.conversation.state_machine import (
    ConversationState,
    ConversationStateMachine,
    TransitionTrigger,
)
from package_tracker.conversation.validators import validate_email, validate_tracking_number

__all__ = [
    "DialogueEngine",
    "ConversationStateMachine",
    "ConversationState",
    "TransitionTrigger",
    "EffectScheduler",
    "MenuChoice",
    "parse_menu_choice",
    "validate_email",
    "validate_tracking_number",
]
