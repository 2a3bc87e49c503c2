"""
Application layer: state containers for remote resource collections.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import contextmanager
from dataclasses import replace
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from shopdash.client.domain.entities import StoreState
from shopdash.common.exceptions import ResourceError
from shopdash.common.mixins import Observable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from shopdash.common.interfaces import IResourceClient

T = TypeVar("T", bound=BaseModel)

logger = logging.getLogger(__name__)


class ResourceStore(Observable, Generic[T]):
    """Holds one remote collection together with a loading flag and an error slot.

    Operations never raise for remote failures: they record a message in
    ``error`` and leave ``items`` as they were. Every operation returns the
    resulting snapshot.
    """

    resource_name: str = "resources"

    def __init__(
        self, client: IResourceClient[T], resource_name: str | None = None
    ) -> None:
        super().__init__()
        self.client = client
        if resource_name:
            self.resource_name = resource_name
        self._state: StoreState[T] = StoreState()

    @property
    def items(self) -> tuple[T, ...]:
        return self._state.items

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error(self) -> str | None:
        return self._state.error

    @property
    def count(self) -> int:
        return self._state.count

    def snapshot(self) -> StoreState[T]:
        """Return the current immutable state."""
        return self._state

    def _update(self, **changes: Any) -> None:
        self._state = replace(self._state, **changes)
        self.notify(self._state)

    def _fail(self, action: str, error: Exception) -> None:
        message = f"Failed to {action} {self.resource_name}: {error}"
        logger.warning(message)
        self._update(error=message)

    @contextmanager
    def _loading(self) -> Iterator[None]:
        self._update(loading=True, error=None)
        try:
            yield
        finally:
            self._update(loading=False)

    async def fetch_all(self) -> StoreState[T]:
        """Replace the collection with a fresh copy from the remote API."""
        with self._loading():
            try:
                items = await asyncio.to_thread(self.client.list)
            except ResourceError as e:
                self._fail("fetch", e)
            else:
                logger.info("Fetched %d %s", len(items), self.resource_name)
                self._update(items=tuple(items), error=None)
        return self._state


class MutableResourceStore(ResourceStore[T]):
    """Resource store that can also create and delete entities.

    The demo API answers every create with the same id, so created entities
    get a locally issued id that is greater than every id seen or issued so far.
    """

    model: type[T]
    input_model: type[BaseModel]

    def __init__(
        self, client: IResourceClient[T], resource_name: str | None = None
    ) -> None:
        super().__init__(client, resource_name)
        self._last_id = 0

    def _next_id(self) -> int:
        self._last_id = max([self._last_id, *(item.id for item in self.items)]) + 1  # type: ignore[attr-defined]
        return self._last_id

    async def add(self, data: BaseModel | dict[str, Any]) -> StoreState[T]:
        """Create an entity remotely and put it at the front of the collection."""
        try:
            entity_input = self.input_model.model_validate(
                data.model_dump() if isinstance(data, BaseModel) else data
            )
        except ValidationError as e:
            self._fail("add", e)
            return self._state
        payload = entity_input.model_dump()
        try:
            created = await asyncio.to_thread(self.client.create, payload)
        except ResourceError as e:
            self._fail("add", e)
            return self._state

        try:
            item = self.model.model_validate(
                {**created, **payload, "id": self._next_id()}
            )
        except ValidationError as e:
            self._fail("add", e)
            return self._state

        logger.info("Added %s %s", self.resource_name, item.id)  # type: ignore[attr-defined]
        self._update(items=(item, *self.items), error=None)
        return self._state

    async def remove(self, resource_id: int) -> StoreState[T]:
        """Delete an entity remotely, then drop it from the collection."""
        try:
            await asyncio.to_thread(self.client.remove, resource_id)
        except ResourceError as e:
            self._fail("remove", e)
            return self._state

        remaining = tuple(item for item in self.items if item.id != resource_id)  # type: ignore[attr-defined]
        logger.info(
            "Removed %s %s (%d local item(s) dropped)",
            self.resource_name,
            resource_id,
            len(self.items) - len(remaining),
        )
        self._update(items=remaining, error=None)
        return self._state
