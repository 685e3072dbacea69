"""Session correlation ids for log output.

Every chat session gets an id such as ``SESSION-1a2b3c``. The engine sets
it before handling a turn or firing a follow-up, and ``SessionIdFilter``
copies it onto each record that reaches a handler it is installed on, so
``SESSION_LOG_FORMAT`` can print which session a line belongs to.
"""

import logging
import uuid
from contextvars import ContextVar

SESSION_LOG_FORMAT = "%(asctime)s [%(name)s] [%(session_id)s] %(levelname)s: %(message)s"

_session_id: ContextVar[str] = ContextVar("session_id", default="-")


def new_session_id() -> str:
    return f"SESSION-{uuid.uuid4().hex[:6]}"


def set_session_id(session_id: str) -> None:
    _session_id.set(session_id)


def get_session_id() -> str:
    return _session_id.get()


class SessionIdFilter(logging.Filter):
    """Stamps the active session id on records passing through a handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = _session_id.get()  # type: ignore[attr-defined]
        return True


def install_session_filter(handler: logging.Handler) -> None:
    """Attach a SessionIdFilter to ``handler`` unless it already has one."""
    if not any(isinstance(f, SessionIdFilter) for f in handler.filters):
        handler.addFilter(SessionIdFilter())
