"""
KubeClient - minimal HTTP client for the Kubernetes API server.

Intended to talk to an API server endpoint reachable over plain HTTP(S), for
example `kubectl proxy` on http://127.0.0.1:8001. Every request takes an
ExecutionContext whose remaining time becomes the request timeout.
"""
import logging
from typing import Any, Dict, Optional

import requests

from resource_browser.dao.ExecutionContext import ExecutionContext
from resource_browser.errors import ApiError, DeadlineExceeded

logger = logging.getLogger(__name__)

MERGE_PATCH = "application/merge-patch+json"


class KubeClient:
    """
    Thin wrapper over requests.Session.

    Args:
        server: Base URL of the API server
        token: Optional bearer token
        verify_ssl: Verify TLS certificates
        session: Optional pre-built session (tests)
    """

    def __init__(
        self,
        server: str,
        token: Optional[str] = None,
        verify_ssl: bool = True,
        session: Optional[requests.Session] = None
    ):
        self.server = server.rstrip("/")
        self._session = session if session is not None else requests.Session()
        self._session.verify = verify_ssl
        self._session.headers["Accept"] = "application/json"
        if token:
            self._session.headers["Authorization"] = f"Bearer {token}"

    @classmethod
    def from_config(cls, config: Dict) -> 'KubeClient':
        """Build a client from the "connection" section of the config."""
        conn = config["connection"]
        return cls(
            server=conn["server"],
            token=conn.get("token"),
            verify_ssl=conn.get("verify_ssl", True),
        )

    def get(self, ctx: ExecutionContext, path: str) -> Dict[str, Any]:
        return self._request(ctx, "GET", path)

    def patch(self, ctx: ExecutionContext, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """Apply a JSON merge patch to the object at `path`."""
        return self._request(ctx, "PATCH", path, json=body, headers={"Content-Type": MERGE_PATCH})

    def _request(self, ctx: ExecutionContext, method: str, path: str, **kwargs) -> Dict[str, Any]:
        """
        Send one request bounded by the context deadline.

        Raises:
            DeadlineExceeded: context expired before or during the request
            ApiError: transport failure or HTTP status >= 400
        """
        timeout = ctx.remaining()
        url = f"{self.server}{path}"
        logger.debug("%s %s (timeout=%s)", method, url, timeout)

        try:
            response = self._session.request(method, url, timeout=timeout, **kwargs)
        except requests.Timeout as e:
            raise DeadlineExceeded(f"{method} {path}: {e}") from e
        except requests.RequestException as e:
            raise ApiError(f"{method} {path}: {e}") from e

        if response.status_code >= 400:
            raise ApiError(self._status_message(response), status=response.status_code)

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"{method} {path}: invalid JSON response") from e

    @staticmethod
    def _status_message(response: requests.Response) -> str:
        """Extract the message of a Kubernetes Status object, falling back to the reason."""
        try:
            status = response.json()
        except ValueError:
            status = None
        if isinstance(status, dict) and status.get("message"):
            return status["message"]
        return f"{response.status_code} {response.reason}"
