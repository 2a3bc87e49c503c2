"""
Application layer: login session for the dashboard.
"""

from __future__ import annotations

import logging

from shopdash.client.domain.entities import SessionState
from shopdash.common.mixins import Observable
from shopdash.common.models import Principal

logger = logging.getLogger(__name__)


class AuthStore(Observable):
    """Tracks who is logged in.

    Any non-empty username/password pair is accepted; credentials are not
    checked against anything.
    """

    def __init__(self) -> None:
        super().__init__()
        self._session = SessionState()

    @property
    def session(self) -> SessionState:
        return self._session

    @property
    def user(self) -> Principal | None:
        return self._session.principal

    @property
    def is_authenticated(self) -> bool:
        return self._session.is_authenticated

    def login(self, username: str, password: str) -> bool:
        """Start a session for username; returns False for empty credentials."""
        if not (username and password):
            logger.info("Login rejected: empty credentials")
            return False
        self._session = SessionState(principal=Principal(name=username))
        logger.info("User %s logged in", username)
        self.notify(self._session)
        return True

    def logout(self) -> None:
        if self._session.principal is not None:
            logger.info("User %s logged out", self._session.principal.name)
        self._session = SessionState()
        self.notify(self._session)
