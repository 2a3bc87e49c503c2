"""
Routes for the dashboard server.
"""

from typing import Any, Awaitable, Callable

from fastapi import FastAPI, HTTPException
from fastapi.responses import RedirectResponse

from shopdash.common.exceptions import AuthenticationRequired
from shopdash.common.models import LoginRequest, ProductInput

from .guard import RouteSpec, SessionGuard
from .services import DashboardService

ROUTES: tuple[RouteSpec, ...] = (
    RouteSpec("/", "dashboard", requires_auth=True),
    RouteSpec("/products", "products", requires_auth=True),
    RouteSpec("/users", "users", requires_auth=True),
    RouteSpec("/catalog", "catalog"),
    RouteSpec("/login", "login"),
)

View = Callable[[bool], Awaitable[dict[str, Any]]]


class DashboardRoutes:
    """Handles FastAPI routes for the dashboard server."""

    def __init__(self, service: DashboardService, guard: SessionGuard):
        self.service = service
        self.guard = guard
        self.views: dict[str, View] = {
            "dashboard": self.dashboard,
            "products": self.products,
            "users": self.users,
            "catalog": self.catalog,
            "login": self.login_page,
        }

    def setup_routes(self, app: FastAPI) -> None:
        """Setup view and API routes on the FastAPI app."""

        app.get("/health")(self.health)
        for route in ROUTES:
            app.get(route.path, name=route.name)(
                self._guarded(route, self.views[route.name])
            )
        app.post("/login")(self.login)
        app.post("/logout")(self.logout)
        app.post("/api/products")(self.add_product)
        app.delete("/api/products/{product_id}")(self.remove_product)

    def _guarded(self, route: RouteSpec, view: View) -> Callable[..., Awaitable[Any]]:
        """Wrap a view so the guard is consulted once before it renders."""

        async def endpoint(refresh: bool = False):
            redirect = self.guard.before_each(route)
            if redirect is not None:
                return RedirectResponse(redirect, status_code=303)
            return await view(refresh)

        endpoint.__name__ = f"{route.name}_view"
        return endpoint

    async def health(self) -> dict[str, Any]:
        """Handle /health endpoint."""
        return self.service.health()

    async def dashboard(self, refresh: bool) -> dict[str, Any]:
        return await self.service.dashboard(refresh=refresh)

    async def products(self, refresh: bool) -> dict[str, Any]:
        return await self.service.products_view(refresh=refresh)

    async def users(self, refresh: bool) -> dict[str, Any]:
        return await self.service.users_view(refresh=refresh)

    async def catalog(self, refresh: bool) -> dict[str, Any]:
        return self.service.catalog_view()

    async def login_page(self, refresh: bool) -> dict[str, Any]:
        return self.service.session_view()

    async def login(self, req: LoginRequest) -> dict[str, Any]:
        """Handle POST /login."""
        try:
            return self.service.login(req)
        except AuthenticationRequired as e:
            raise HTTPException(e.status_code, str(e))

    async def logout(self) -> dict[str, Any]:
        """Handle POST /logout."""
        return self.service.logout()

    async def add_product(self, product: ProductInput) -> dict[str, Any]:
        """Handle POST /api/products."""
        try:
            return await self.service.add_product(product)
        except AuthenticationRequired as e:
            raise HTTPException(e.status_code, str(e))

    async def remove_product(self, product_id: int) -> dict[str, Any]:
        """Handle DELETE /api/products/{product_id}."""
        try:
            return await self.service.remove_product(product_id)
        except AuthenticationRequired as e:
            raise HTTPException(e.status_code, str(e))
