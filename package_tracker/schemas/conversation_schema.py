"""Conversation transcript and per-session context models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Sender(str, Enum):
    BOT = "bot"
    USER = "user"


class Message(BaseModel):
    """A single turn in the chat transcript."""

    model_config = ConfigDict(frozen=True)

    text: str
    sender: Sender


@dataclass
class ConversationContext:
    """
    Per-session structured data owned by the dialogue engine.

    Handlers read and write this instead of parsing the transcript.
    ``state`` holds a ``ConversationState`` value; anything else is treated
    as a corrupted position and recovered to the greeting.
    """
    state: str = "greeting"
    tracking_number: Optional[str] = None
    email: Optional[str] = None

    def clear_fields(self) -> None:
        """Drop collected user data, leaving the state untouched."""
        self.tracking_number = None
        self.email = None
