# Shop dashboard

from shopdash.client.application.auth_store import AuthStore
from shopdash.client.application.product_store import ProductStore
from shopdash.client.application.user_store import UserStore
from shopdash.client.client import DashboardClient
from shopdash.common.decorators import requires_authentication

__all__ = [
    "AuthStore",
    "DashboardClient",
    "ProductStore",
    "UserStore",
    "requires_authentication",
]
