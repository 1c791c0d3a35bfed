"""In-memory session provider."""

from __future__ import annotations

import logging
from typing import Callable

from minimarket.models import Session

logger = logging.getLogger(__name__)

Listener = Callable[[Session], None]


class SessionStore:
    """Holds the current session and notifies subscribers when it changes."""

    def __init__(self, session: Session | None = None) -> None:
        self.session = session or Session()
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def sign_in(self, role: str | None = None) -> None:
        self._set(Session(authenticated=True, role=role))

    def sign_out(self) -> None:
        self._set(Session())

    def _set(self, session: Session) -> None:
        logger.info("session changed authenticated=%s role=%r", session.authenticated, session.role)
        self.session = session
        for listener in list(self._listeners):
            listener(session)
