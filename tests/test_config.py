import logging
from typing import Any

from shopdash.client.infrastructure.config_loader import ConfigLoader
from shopdash.common.config import Config
from shopdash.common.models import ClientConfig


def test_config_defaults(monkeypatch: Any) -> None:
    """Test config values with a clean environment."""
    for name in (
        "SHOPDASH_API_URL",
        "SHOPDASH_SERVER_HOST",
        "SHOPDASH_SERVER_PORT",
        "SHOPDASH_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    config = Config()
    assert config.API_URL == "https://fakestoreapi.com"
    assert config.PRODUCTS_RESOURCE == "products"
    assert config.USERS_RESOURCE == "users"
    assert config.SERVER_URL == "http://127.0.0.1:8000"
    assert config.LOGIN_PATH == "/login"
    assert config.LOG_LEVEL == logging.INFO


def test_config_from_environment(monkeypatch: Any) -> None:
    monkeypatch.setenv("SHOPDASH_API_URL", "http://localhost:3000/")
    monkeypatch.setenv("SHOPDASH_SERVER_PORT", "9000")
    monkeypatch.setenv("SHOPDASH_LOG_LEVEL", "debug")

    config = Config()
    assert config.API_URL == "http://localhost:3000"
    assert config.SERVER_PORT == 9000  # noqa: PLR2004
    assert config.LOG_LEVEL == logging.DEBUG


def test_config_unknown_log_level_falls_back(monkeypatch: Any) -> None:
    monkeypatch.setenv("SHOPDASH_LOG_LEVEL", "chatty")
    assert Config().LOG_LEVEL == logging.INFO


def test_config_loader_overrides(monkeypatch: Any) -> None:
    monkeypatch.delenv("SHOPDASH_API_URL", raising=False)

    loader = ConfigLoader(
        ClientConfig(api_url="http://api.test/", users_resource="customers")
    )
    assert loader.api_url == "http://api.test"
    assert loader.users_resource == "customers"
    assert loader.products_resource == "products"
    assert loader.login_path == "/login"


def test_config_loader_defaults(monkeypatch: Any) -> None:
    monkeypatch.delenv("SHOPDASH_API_URL", raising=False)
    loader = ConfigLoader()
    assert loader.api_url == "https://fakestoreapi.com"
