"""
Entry point for the dashboard server.
"""

import logging

import uvicorn

from shopdash.common.config import Config
from shopdash.common.logging_utils import LOG_FORMAT

from .core import DashboardServer


def start_server(config: Config | None = None) -> None:
    """Start the dashboard server."""
    if config is None:
        config = Config()
    logging.basicConfig(level=config.LOG_LEVEL, format=LOG_FORMAT)
    server = DashboardServer(config=config)
    uvicorn.run(server.app, host=server.server_host, port=server.server_port)
