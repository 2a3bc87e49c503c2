"""
Dashboard web application using FastAPI.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from shopdash.client.client import DashboardClient
from shopdash.common.config import Config

from .guard import SessionGuard
from .routes import DashboardRoutes
from .services import DashboardService

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


class DashboardServer:
    """Wires the stores, the session guard and the routes into one FastAPI app."""

    def __init__(
        self,
        config: Config | None = None,
        client: DashboardClient | None = None,
        server_host: str | None = None,
        server_port: int | None = None,
    ):
        self.config = config or Config()
        self.logger = logging.getLogger(__name__)
        self.server_host = server_host or self.config.SERVER_HOST
        self.server_port = server_port or self.config.SERVER_PORT

        self.client = client or DashboardClient(api_url=self.config.API_URL)
        self.guard = SessionGuard(self.client.auth, self.client.login_path)
        self.service = DashboardService(self.client)
        self.routes = DashboardRoutes(self.service, self.guard)

        self.app = FastAPI(title="shopdash", lifespan=self._lifespan)
        self.routes.setup_routes(self.app)

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI) -> AsyncIterator[None]:
        self.logger.info(
            "Dashboard serving on http://%s:%s using %s",
            self.server_host,
            self.server_port,
            self.client.api_url,
        )
        try:
            yield
        finally:
            self.client.close()
