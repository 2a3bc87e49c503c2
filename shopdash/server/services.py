"""View logic for the dashboard server.
"""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING, Any

from shopdash.common.decorators import requires_authentication
from shopdash.common.exceptions import AuthenticationRequired
from shopdash.common.fixtures import CATALOG

if TYPE_CHECKING:
    from shopdash.client.application.resource_store import ResourceStore
    from shopdash.client.client import DashboardClient
    from shopdash.client.domain.entities import StoreState
    from shopdash.common.models import LoginRequest, ProductInput


def render_state(state: StoreState[Any]) -> dict[str, Any]:
    """Turn a store snapshot into a JSON-friendly dict."""
    return {
        "items": [item.model_dump() for item in state.items],
        "count": state.count,
        "loading": state.loading,
        "error": state.error,
    }


class DashboardService:
    """Renders store state for the views and forwards mutations to the stores."""

    def __init__(self, client: DashboardClient):
        self.client = client
        self.products = client.products
        self.users = client.users
        self.auth = client.auth

    def health(self) -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "timestamp": int(time.time())}

    @staticmethod
    async def _load(store: ResourceStore[Any], *, refresh: bool) -> None:
        if refresh or store.count == 0:
            await store.fetch_all()

    async def dashboard(self, *, refresh: bool = False) -> dict[str, Any]:
        await asyncio.gather(
            self._load(self.products, refresh=refresh),
            self._load(self.users, refresh=refresh),
        )
        principal = self.auth.user
        return {
            "user": principal.model_dump() if principal else None,
            "total_products": self.products.total_products,
            "total_users": self.users.count,
            "loading": self.products.loading or self.users.loading,
            "errors": [e for e in (self.products.error, self.users.error) if e],
        }

    async def products_view(self, *, refresh: bool = False) -> dict[str, Any]:
        await self._load(self.products, refresh=refresh)
        return render_state(self.products.snapshot())

    async def users_view(self, *, refresh: bool = False) -> dict[str, Any]:
        await self._load(self.users, refresh=refresh)
        state = render_state(self.users.snapshot())
        for rendered, user in zip(state["items"], self.users.items):
            rendered["display_name"] = user.display_name
        return state

    def catalog_view(self) -> dict[str, Any]:
        return {
            "items": [
                {**item.model_dump(), "discounted_price": item.discounted_price}
                for item in CATALOG
            ],
            "count": len(CATALOG),
        }

    def session_view(self) -> dict[str, Any]:
        principal = self.auth.user
        return {
            "authenticated": self.auth.is_authenticated,
            "user": principal.model_dump() if principal else None,
        }

    def login(self, req: LoginRequest) -> dict[str, Any]:
        if not self.auth.login(req.username, req.password):
            msg = "Username and password are required"
            raise AuthenticationRequired(msg)
        return self.session_view()

    def logout(self) -> dict[str, Any]:
        self.auth.logout()
        return self.session_view()

    @requires_authentication("auth", "Log in to add products")
    async def add_product(self, product: ProductInput) -> dict[str, Any]:
        return render_state(await self.products.add(product))

    @requires_authentication("auth", "Log in to remove products")
    async def remove_product(self, product_id: int) -> dict[str, Any]:
        return render_state(await self.products.remove(product_id))
