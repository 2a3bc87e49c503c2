"""Domain layer: Immutable state snapshots handed to views and listeners.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from shopdash.common.models import Principal

T = TypeVar("T")


@dataclass(frozen=True)
class StoreState(Generic[T]):
    """Snapshot of a resource store."""

    items: tuple[T, ...] = ()
    loading: bool = False
    error: str | None = None

    @property
    def count(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class SessionState:
    """Snapshot of the auth session; authenticated iff a principal is set."""

    principal: Principal | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.principal is not None
