"""
Mixins for common functionality.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class Observable:
    """
    Mixin class for explicit change notification.

    Classes using this mixin call notify() with a snapshot of their state after
    every mutation. Listeners are plain callables registered with subscribe().
    """

    def __init__(self) -> None:
        self._observers: list[Callable[[Any], None]] = []

    def subscribe(self, listener: Callable[[Any], None]) -> Callable[[], None]:
        """
        Register a listener called with each new snapshot.

        Args:
            listener: Callable receiving the snapshot

        Returns:
            A callable that removes the listener again
        """
        self._observers.append(listener)

        def unsubscribe() -> None:
            if listener in self._observers:
                self._observers.remove(listener)

        return unsubscribe

    def notify(self, snapshot: Any) -> None:
        """Call every registered listener with the given snapshot."""
        for listener in list(self._observers):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("State listener %r failed", listener)
