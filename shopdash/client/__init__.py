from shopdash.client.application.auth_store import AuthStore
from shopdash.client.application.product_store import ProductStore
from shopdash.client.application.resource_store import (
    MutableResourceStore,
    ResourceStore,
)
from shopdash.client.application.user_store import UserStore
from shopdash.client.client import DashboardClient
from shopdash.client.infrastructure.http_client import ResourceClient

__all__ = [
    "AuthStore",
    "DashboardClient",
    "MutableResourceStore",
    "ProductStore",
    "ResourceClient",
    "ResourceStore",
    "UserStore",
]
