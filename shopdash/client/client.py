"""
Dashboard client: builds the remote resource clients and the stores.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from shopdash.client.application.auth_store import AuthStore
from shopdash.client.application.product_store import ProductStore
from shopdash.client.application.user_store import UserStore
from shopdash.client.infrastructure.config_loader import ConfigLoader
from shopdash.client.infrastructure.http_client import ResourceClient
from shopdash.common.models import ClientConfig, Product, User

if TYPE_CHECKING:
    from shopdash.common.interfaces import IResourceClient


class DashboardClient:
    """Owns the product, user and auth stores for one application run.

    Create it at start-up, hand its stores to whoever needs them, and call
    close() (or use it as a context manager) at shutdown.
    """

    def __init__(
        self,
        client_config: ClientConfig | None = None,
        product_client: IResourceClient[Product] | None = None,
        user_client: IResourceClient[User] | None = None,
        **kwargs: Any,
    ):
        if client_config is None:
            client_config = ClientConfig(**kwargs)
        self.config_loader = ConfigLoader(client_config)
        self.api_url = self.config_loader.api_url
        self.login_path = self.config_loader.login_path
        self.logger = logging.getLogger(__name__)

        self.product_client = product_client or ResourceClient(
            self.api_url, self.config_loader.products_resource, Product
        )
        self.user_client = user_client or ResourceClient(
            self.api_url, self.config_loader.users_resource, User
        )

        self.products = ProductStore(self.product_client)
        self.users = UserStore(self.user_client)
        self.auth = AuthStore()
        self._closed = False

    def close(self) -> None:
        """Release the HTTP sessions held by the resource clients."""
        if self._closed:
            return
        self.product_client.close()
        self.user_client.close()
        self._closed = True
        self.logger.info("Dashboard client closed")

    def __enter__(self) -> DashboardClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
