"""Authentication decorators for function protection.
"""

from __future__ import annotations

import inspect
import logging
from functools import wraps
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

from shopdash.common.exceptions import AuthenticationRequired

logger = logging.getLogger(__name__)


def _resolve_auth(auth_source: Any, func: Callable, args: tuple) -> Any:
    # Attribute name, factory, or store instance
    if isinstance(auth_source, str):
        if not args:
            msg = f"Cannot get auth attribute '{auth_source}' without self"
            raise ValueError(msg)
        return getattr(args[0], auth_source)
    if callable(auth_source):
        if args and hasattr(args[0], func.__name__):
            return auth_source(args[0])
        return auth_source()
    return auth_source


def requires_authentication(
    auth_source: Any | Callable[..., Any] | str,
    error_message: str = "Authentication required",
    *,
    raise_exception: bool = True,
) -> Callable:
    """Decorator that ensures a function runs only for a logged-in user.

    Works for plain functions and coroutine functions alike.

    Args:
        auth_source: AuthStore instance, callable that returns one, or the
            name of an attribute holding one on the bound instance
        error_message: Message used when nobody is logged in
        raise_exception: Whether to raise AuthenticationRequired or return None

    Returns:
        Decorated function that only executes when authenticated
    """

    def decorator(func: Callable) -> Callable:
        def allowed(args: tuple) -> bool:
            auth = _resolve_auth(auth_source, func, args)
            if auth.is_authenticated:
                return True
            if raise_exception:
                raise AuthenticationRequired(error_message)
            logger.warning("Authentication check failed: %s", error_message)
            return False

        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                if not allowed(args):
                    return None
                return await func(*args, **kwargs)

            return async_wrapper

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if not allowed(args):
                return None
            return func(*args, **kwargs)

        return wrapper

    return decorator
