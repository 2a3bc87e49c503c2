from __future__ import annotations

from typing import Any

import pytest

from shopdash.client.client import DashboardClient
from shopdash.common.exceptions import TransportError
from shopdash.common.models import Product, User

PRODUCTS = [
    {
        "id": 1,
        "title": "Fjallraven Backpack",
        "price": 109.95,
        "description": "Your perfect pack for everyday use.",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_.jpg",
        "rating": {"rate": 3.9, "count": 120},
    },
    {
        "id": 2,
        "title": "Mens Casual Premium Slim Fit T-Shirts",
        "price": 22.3,
        "description": "Slim-fitting style.",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/71-3HjGNDUL._AC_SY879._SX._UX._SY._UY_.jpg",
        "rating": {"rate": 4.1, "count": 259},
    },
]

USERS = [
    {
        "id": 1,
        "email": "john@gmail.com",
        "username": "johnd",
        "password": "m38rmF$",
        "name": {"firstname": "john", "lastname": "doe"},
        "phone": "1-570-236-7033",
        "address": {
            "city": "kilcoole",
            "street": "new road",
            "number": 7682,
            "zipcode": "12926-3874",
            "geolocation": {"lat": "-37.3159", "long": "81.1496"},
        },
        "__v": 0,
    },
    {
        "id": 2,
        "email": "morrison@gmail.com",
        "username": "mor_2314",
        "name": {"firstname": "david", "lastname": "morrison"},
        "phone": "1-570-236-7033",
    },
]


class FakeResourceClient:
    """In-memory stand-in for ResourceClient that mimics the demo API."""

    def __init__(self, model: type, rows: list[dict[str, Any]]):
        self.model = model
        self.rows = [dict(row) for row in rows]
        self.fail: Exception | None = None
        self.created: list[dict[str, Any]] = []
        self.removed: list[int] = []
        self.closed = False

    def list(self) -> list[Any]:
        if self.fail:
            raise self.fail
        return [self.model.model_validate(row) for row in self.rows]

    def create(self, payload: dict[str, Any]) -> dict[str, Any]:
        if self.fail:
            raise self.fail
        self.created.append(payload)
        # The demo API always answers with the same id
        return {**payload, "id": 21, "title": "server echo"}

    def remove(self, resource_id: int) -> None:
        if self.fail:
            raise self.fail
        self.removed.append(resource_id)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def product_client() -> FakeResourceClient:
    return FakeResourceClient(Product, PRODUCTS)


@pytest.fixture
def user_client() -> FakeResourceClient:
    return FakeResourceClient(User, USERS)


@pytest.fixture
def network_down() -> TransportError:
    return TransportError("Could not reach https://fakestoreapi.com/products")


@pytest.fixture
def dashboard_client(
    product_client: FakeResourceClient, user_client: FakeResourceClient
) -> DashboardClient:
    """Create DashboardClient backed by fake resource clients."""
    return DashboardClient(
        api_url="http://api.test",
        product_client=product_client,
        user_client=user_client,
    )
