"""Infrastructure layer: Configuration loading.
"""

from __future__ import annotations

import logging

from shopdash.common import setup_logger
from shopdash.common.config import Config
from shopdash.common.models import ClientConfig


class ConfigLoader:
    """Resolves client settings from overrides, falling back to Config."""

    def __init__(self, client_config: ClientConfig | None = None):
        client_config = client_config or ClientConfig()
        self.config: Config = Config()

        self.api_url: str = (client_config.api_url or self.config.API_URL).rstrip("/")
        self.products_resource: str = (
            client_config.products_resource or self.config.PRODUCTS_RESOURCE
        )
        self.users_resource: str = (
            client_config.users_resource or self.config.USERS_RESOURCE
        )
        self.login_path: str = client_config.login_path or self.config.LOGIN_PATH
        self.log_level: int = (
            client_config.log_level
            if client_config.log_level is not None
            else self.config.LOG_LEVEL
        )

        # Setup logging
        self.logger = logging.getLogger("shopdash")
        setup_logger(self.logger, self.log_level)
