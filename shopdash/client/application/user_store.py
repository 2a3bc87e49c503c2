"""
Application layer: read-only user collection.
"""

from __future__ import annotations

from shopdash.client.application.resource_store import ResourceStore
from shopdash.common.models import User


class UserStore(ResourceStore[User]):
    """Users as returned by the remote API."""

    resource_name = "users"

    def find(self, user_id: int) -> User | None:
        return next((user for user in self.items if user.id == user_id), None)
