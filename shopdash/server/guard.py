"""
Navigation guard for protected dashboard routes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shopdash.common.interfaces import IAuthState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteSpec:
    path: str
    name: str
    requires_auth: bool = False


class SessionGuard:
    """Decides whether a navigation may proceed, based on the auth store only."""

    def __init__(self, auth: IAuthState, login_path: str = "/login"):
        self.auth = auth
        self.login_path = login_path

    def before_each(self, route: RouteSpec) -> str | None:
        """Return the path to redirect to, or None to proceed."""
        if route.requires_auth and not self.auth.is_authenticated:
            logger.info("Redirecting anonymous visit of %s to %s", route.path, self.login_path)
            return self.login_path
        return None
