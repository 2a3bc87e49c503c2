"""
Configuration settings for the dashboard.
"""

from __future__ import annotations

import logging
import os


class Config:
    """Central configuration class for all system settings."""

    def __init__(self) -> None:
        # Remote API settings
        self.API_URL: str = os.getenv(
            "SHOPDASH_API_URL", "https://fakestoreapi.com"
        ).rstrip("/")
        self.PRODUCTS_RESOURCE: str = "products"
        self.USERS_RESOURCE: str = "users"

        # Server settings
        self.SERVER_HOST: str = os.getenv("SHOPDASH_SERVER_HOST", "127.0.0.1")
        self.SERVER_PORT: int = int(os.getenv("SHOPDASH_SERVER_PORT", "8000"))
        self.SERVER_URL: str = f"http://{self.SERVER_HOST}:{self.SERVER_PORT}"

        # Navigation
        self.LOGIN_PATH: str = "/login"

        # Logging
        self.LOG_LEVEL: int = logging.getLevelName(
            os.getenv("SHOPDASH_LOG_LEVEL", "INFO").upper()
        )
        if not isinstance(self.LOG_LEVEL, int):
            self.LOG_LEVEL = logging.INFO
