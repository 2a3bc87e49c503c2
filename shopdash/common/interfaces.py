"""
Interfaces and protocols for dependency injection.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

from pydantic import BaseModel

T_co = TypeVar("T_co", bound=BaseModel, covariant=True)


class IResourceClient(Protocol[T_co]):
    """Protocol for a remote resource collection."""

    def list(self) -> list[T_co]: ...

    def create(self, payload: dict[str, Any]) -> dict[str, Any]: ...

    def remove(self, resource_id: int) -> None: ...

    def close(self) -> None: ...


class IAuthState(Protocol):
    """Protocol for anything that can answer whether a user is logged in."""

    @property
    def is_authenticated(self) -> bool: ...
