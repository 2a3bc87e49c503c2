# Common utilities
from shopdash.common.logging_utils import setup_logger as setup_logger
from shopdash.common.mixins import Observable as Observable

__all__ = ["Observable", "setup_logger"]
