"""
Application layer: product collection.
"""

from __future__ import annotations

from shopdash.client.application.resource_store import MutableResourceStore
from shopdash.common.models import Product, ProductInput


class ProductStore(MutableResourceStore[Product]):
    """Products fetched from, added to and removed from the remote API."""

    resource_name = "products"
    model = Product
    input_model = ProductInput

    @property
    def total_products(self) -> int:
        return self.count
