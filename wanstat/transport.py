"""HTTP transport for the router's WAN status endpoint."""

from __future__ import annotations

import json
import os
from pathlib import Path
from types import TracebackType
from typing import Any, Self

import requests
from loguru import logger

from wanstat.exceptions import APIError, AuthenticationError

WAN_STATUS_PATH = "api/status/wan"
PASSWORD_ENV = "CP_PASSWORD"


def get_password() -> str | None:
    """Router password from the ``CP_PASSWORD`` environment variable."""
    return os.environ.get(PASSWORD_ENV) or None


def _decode(text: str, source: str) -> dict[str, Any]:
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise APIError(f"{source}: invalid JSON: {e}") from e
    if not isinstance(document, dict):
        raise APIError(f"{source}: expected a JSON object, got {type(document).__name__}")
    return document


def load_document(path: str | Path) -> dict[str, Any]:
    """Read a saved WAN status document from disk."""
    p = Path(path)
    return _decode(p.read_text(), str(p))


class WanStatusClient:
    """Fetch the WAN status document using HTTP basic authentication.

    Usage::

        with WanStatusClient("192.168.0.1", password) as client:
            document = client.get_wan_status()
    """

    def __init__(
        self,
        host: str,
        password: str,
        username: str = "admin",
        scheme: str = "http",
        timeout: float = 10.0,
    ):
        self.host = host
        self.username = username
        self.password = password
        self.timeout = timeout
        self.base_url = f"{scheme}://{host}"
        self._session: requests.Session | None = None

    def connect(self) -> None:
        self._session = requests.Session()
        self._session.auth = (self.username, self.password)

    def disconnect(self) -> None:
        if self._session:
            self._session.close()
            self._session = None

    def is_connected(self) -> bool:
        return self._session is not None

    def __enter__(self) -> Self:
        self.connect()
        return self

    def __exit__(
        self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: TracebackType | None
    ) -> None:
        self.disconnect()

    def get_wan_status(self) -> dict[str, Any]:
        """GET ``/api/status/wan`` and return the decoded document.

        Raises:
            AuthenticationError: the router answered 401 or 403.
            APIError: the request failed or the body is not a JSON object.
        """
        if not self.is_connected():
            raise APIError("Not connected. Call connect() first.")
        assert self._session is not None

        url = f"{self.base_url}/{WAN_STATUS_PATH}"
        try:
            resp = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise APIError(f"GET {url} failed: {e}") from e

        logger.info(f"status={resp.status_code}")

        if resp.status_code in (401, 403):
            raise AuthenticationError(f"{self.host} rejected credentials for {self.username}")
        try:
            resp.raise_for_status()
        except requests.RequestException as e:
            raise APIError(f"GET {url} failed: {e}", status_code=resp.status_code) from e

        return _decode(resp.text, url)
