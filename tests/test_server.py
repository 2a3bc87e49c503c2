from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from shopdash.client.client import DashboardClient
from shopdash.common.config import Config
from shopdash.common.exceptions import TransportError
from shopdash.server.core import DashboardServer
from shopdash.server.routes import ROUTES

from .conftest import FakeResourceClient

LAMP = {"title": "Desk Lamp", "price": 19.99, "category": "home"}


@pytest.fixture
def server(dashboard_client: DashboardClient) -> DashboardServer:
    return DashboardServer(client=dashboard_client)


@pytest.fixture
def http(server: DashboardServer) -> TestClient:
    return TestClient(server.app, follow_redirects=False)


def login(http: TestClient) -> None:
    response = http.post("/login", json={"username": "alice", "password": "pw"})
    assert response.status_code == 200  # noqa: PLR2004


def test_server_initialization(server: DashboardServer) -> None:
    config = Config()
    assert server.server_host == config.SERVER_HOST
    assert server.server_port == config.SERVER_PORT
    routes = [route.path for route in server.app.routes]  # type: ignore[attr-defined]
    for path in ("/health", "/", "/products", "/users", "/catalog", "/login"):
        assert path in routes


def test_health_endpoint(http: TestClient) -> None:
    response = http.get("/health")
    assert response.status_code == 200  # noqa: PLR2004
    assert response.json()["status"] == "ok"


@pytest.mark.parametrize("route", [r for r in ROUTES if r.requires_auth])
def test_protected_routes_redirect_when_anonymous(http: TestClient, route) -> None:
    response = http.get(route.path)
    assert response.status_code == 303  # noqa: PLR2004
    assert response.headers["location"] == "/login"


@pytest.mark.parametrize("route", [r for r in ROUTES if not r.requires_auth])
def test_public_routes_never_redirect(http: TestClient, route) -> None:
    assert http.get(route.path).status_code == 200  # noqa: PLR2004
    login(http)
    assert http.get(route.path).status_code == 200  # noqa: PLR2004


def test_login_rejects_empty_password(http: TestClient) -> None:
    response = http.post("/login", json={"username": "alice", "password": ""})
    assert response.status_code == 401  # noqa: PLR2004
    assert http.get("/").status_code == 303  # noqa: PLR2004


def test_login_then_dashboard(http: TestClient) -> None:
    login(http)

    response = http.get("/")

    assert response.status_code == 200  # noqa: PLR2004
    body = response.json()
    assert body["user"] == {"name": "alice"}
    assert body["total_products"] == 2  # noqa: PLR2004
    assert body["total_users"] == 2  # noqa: PLR2004
    assert body["errors"] == []


def test_logout_protects_again(http: TestClient) -> None:
    login(http)
    assert http.get("/products").status_code == 200  # noqa: PLR2004

    response = http.post("/logout")
    assert response.json()["authenticated"] is False
    assert http.get("/products").status_code == 303  # noqa: PLR2004


def test_products_view_reports_error(
    http: TestClient, product_client: FakeResourceClient
) -> None:
    login(http)
    http.get("/products")
    product_client.fail = TransportError("down")
    body = http.get("/products", params={"refresh": "true"}).json()

    assert body["count"] == 2  # noqa: PLR2004
    assert body["error"].startswith("Failed to fetch products")
    assert body["loading"] is False


def test_users_view_has_display_names(http: TestClient) -> None:
    login(http)
    body = http.get("/users").json()
    assert [u["display_name"] for u in body["items"]] == ["john doe", "david morrison"]


def test_users_view_hides_passwords(http: TestClient) -> None:
    login(http)
    body = http.get("/users").json()
    assert body["count"] == 2  # noqa: PLR2004
    for user in body["items"]:
        assert "password" not in user
    assert body["items"][0]["address"]["city"] == "kilcoole"


def test_catalog_view(http: TestClient) -> None:
    body = http.get("/catalog").json()
    assert body["count"] == 4  # noqa: PLR2004
    watch = body["items"][1]
    assert watch["name"] == "Minimalist Smart Watch"
    assert watch["discounted_price"] == pytest.approx(39.6)


def test_add_product_requires_login(http: TestClient) -> None:
    response = http.post("/api/products", json=LAMP)
    assert response.status_code == 401  # noqa: PLR2004


def test_add_and_remove_product(http: TestClient) -> None:
    login(http)
    http.get("/products")

    added = http.post("/api/products", json=LAMP).json()
    assert added["count"] == 3  # noqa: PLR2004
    new_id = added["items"][0]["id"]
    assert added["items"][0]["title"] == "Desk Lamp"

    removed = http.delete(f"/api/products/{new_id}").json()
    assert removed["count"] == 2  # noqa: PLR2004
    assert all(item["id"] != new_id for item in removed["items"])


def test_add_product_validates_price(http: TestClient) -> None:
    login(http)
    response = http.post("/api/products", json={**LAMP, "price": -1})
    assert response.status_code == 422  # noqa: PLR2004


def test_remove_product_requires_login(http: TestClient) -> None:
    assert http.delete("/api/products/1").status_code == 401  # noqa: PLR2004


def test_shutdown_closes_clients(
    server: DashboardServer,
    product_client: FakeResourceClient,
    user_client: FakeResourceClient,
) -> None:
    with TestClient(server.app):
        assert not product_client.closed
    assert product_client.closed
    assert user_client.closed
