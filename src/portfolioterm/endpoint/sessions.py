"""In-memory store of interpreter sessions.

Each session is an independent ``Interpreter``: creating one corresponds
to a terminal being mounted, deleting one to it being unmounted. Nothing
is persisted.
"""

from __future__ import annotations

import logging
import uuid
from collections import OrderedDict
from typing import Callable

from portfolioterm.interpreter.session import Interpreter

logger = logging.getLogger(__name__)


class SessionStore:
    """Holds live interpreters by session id.

    When full, creating a session evicts the least recently used one.
    """

    def __init__(self, factory: Callable[[], Interpreter], max_sessions: int = 256) -> None:
        self._factory = factory
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, Interpreter] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def create(self) -> tuple[str, Interpreter]:
        """Mount a new terminal and return its id and interpreter."""
        while len(self._sessions) >= self._max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info("Session limit reached, evicted %s", evicted)
        session_id = uuid.uuid4().hex
        interpreter = self._factory()
        self._sessions[session_id] = interpreter
        logger.info("Created session %s (%d active)", session_id, len(self._sessions))
        return session_id, interpreter

    def get(self, session_id: str) -> Interpreter:
        """Look up a session, marking it as recently used.

        Raises:
            SessionNotFoundError: If no such session is live.
        """
        try:
            interpreter = self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None
        self._sessions.move_to_end(session_id)
        return interpreter

    def delete(self, session_id: str) -> None:
        """Unmount a terminal, discarding its transcript."""
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)
        logger.info("Deleted session %s (%d active)", session_id, len(self._sessions))


class SessionNotFoundError(KeyError):
    """Raised when a session id is unknown or already discarded."""

    def __init__(self, session_id: str) -> None:
        super().__init__(session_id)
        self.session_id = session_id
