"""Append-only chat transcript consumed by the presentation layer."""

from typing import Callable, Iterator, Optional

from package_tracker.schemas.conversation_schema import Message, Sender

AppendListener = Callable[[Message], None]
ClearListener = Callable[[], None]


class MessageChannel:
    """
    Ordered transcript of bot and user turns.

    Messages are never edited or removed individually; ``clear`` empties the
    whole transcript and is only used by a full session reset.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._append_listeners: list[AppendListener] = []
        self._clear_listeners: list[ClearListener] = []

    def subscribe(
        self, on_append: AppendListener, on_clear: Optional[ClearListener] = None
    ) -> None:
        self._append_listeners.append(on_append)
        if on_clear is not None:
            self._clear_listeners.append(on_clear)

    def append(self, text: str, sender: Sender) -> Message:
        message = Message(text=text, sender=sender)
        self._messages.append(message)
        for listener in self._append_listeners:
            listener(message)
        return message

    def clear(self) -> None:
        self._messages.clear()
        for listener in self._clear_listeners:
            listener()

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))

    def __len__(self) -> int:
        return len(self._messages)
