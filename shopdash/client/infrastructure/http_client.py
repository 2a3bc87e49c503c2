"""
HTTP access to one remote resource collection.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Generic, TypeVar

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from shopdash.common.exceptions import DecodeError, ResponseError, TransportError

T = TypeVar("T", bound=BaseModel)

logger = logging.getLogger(__name__)


class ResourceClient(Generic[T]):
    """Performs list, create and delete requests against `{base_url}/{resource}`.

    Store operations call this client from worker threads, so unless a session
    is passed in, every thread gets its own requests.Session. A session passed
    in is shared by all threads.
    """

    def __init__(
        self,
        base_url: str,
        resource: str,
        model: type[T],
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.resource = resource.strip("/")
        self.model = model
        self._shared_session = session
        self._local = threading.local()
        self._sessions: list[requests.Session] = []
        self._lock = threading.Lock()
        self._list_adapter: TypeAdapter[list[T]] = TypeAdapter(list[model])  # type: ignore[valid-type]

    @property
    def session(self) -> requests.Session:
        """Session for the calling thread."""
        if self._shared_session is not None:
            return self._shared_session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
            with self._lock:
                self._sessions.append(session)
        return session

    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.resource}"

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        logger.debug("%s %s", method, url)
        try:
            r = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            msg = f"Could not reach {url}: {e}"
            raise TransportError(msg) from e

        if not 200 <= r.status_code < 300:  # noqa: PLR2004
            logger.warning("%s %s returned %s", method, url, r.status_code)
            msg = f"{method} {url} returned HTTP {r.status_code}"
            raise ResponseError(msg, r.status_code)
        return r

    @staticmethod
    def _decode(r: requests.Response) -> Any:
        try:
            return r.json()
        except ValueError as e:
            msg = f"Response from {r.url} is not valid JSON"
            raise DecodeError(msg) from e

    def list(self) -> list[T]:
        """Fetch the whole collection."""
        r = self._request("GET", self.url)
        data = self._decode(r)
        try:
            return self._list_adapter.validate_python(data)
        except ValidationError as e:
            msg = f"Unexpected {self.resource} payload: {e.error_count()} invalid field(s)"
            raise DecodeError(msg) from e

    def create(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Create one entity and return the server's representation of it."""
        r = self._request("POST", self.url, json=payload)
        data = self._decode(r)
        if not isinstance(data, dict):
            msg = f"Expected a JSON object from {self.url}, got {type(data).__name__}"
            raise DecodeError(msg)
        return data

    def remove(self, resource_id: int) -> None:
        """Delete one entity; the response body is ignored."""
        self._request("DELETE", f"{self.url}/{resource_id}")

    def close(self) -> None:
        if self._shared_session is not None:
            self._shared_session.close()
        with self._lock:
            for session in self._sessions:
                session.close()
            self._sessions.clear()
