"""Shared test fixtures and helpers."""

import pytest

from package_tracker.conversation.engine import DialogueEngine
from package_tracker.conversation.scheduler import EffectScheduler
from package_tracker.conversation.state_machine import ConversationStateMachine
from package_tracker.schemas.conversation_schema import ConversationContext, Sender
from package_tracker.tools.claims import fixed_case_number
from package_tracker.tools.packages import InMemoryRecordStore

FIXED_CASE_NUMBER = "CLM-4242"


@pytest.fixture
def context():
    return ConversationContext()


@pytest.fixture
def state_machine(context):
    return ConversationStateMachine(context)


@pytest.fixture
def scheduler():
    return EffectScheduler()


@pytest.fixture
def record_store():
    return InMemoryRecordStore()


@pytest.fixture
def engine(record_store, scheduler):
    return DialogueEngine(
        store=record_store,
        case_number_generator=fixed_case_number(FIXED_CASE_NUMBER),
        scheduler=scheduler,
        session_id="TEST-SESSION",
    )


def drive(engine: DialogueEngine, inputs: list[str]) -> None:
    """Submit several user turns in order without advancing time."""
    for text in inputs:
        engine.submit_input(text)


def last_bot_text(engine: DialogueEngine) -> str:
    """Text of the most recent bot message in the transcript."""
    for message in reversed(engine.transcript):
        if message.sender == Sender.BOT:
            return message.text
    raise AssertionError("Transcript has no bot messages")
