"""HTTP client for the bug tracker API"""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000/api"


class BugAPIError(Exception):
    """Error response from the bug tracker API.

    ``message`` is the server's error text, unchanged.
    """

    def __init__(self, message: str, status_code: int, details: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or []


class BugClient:
    """Thin wrapper over the /bugs endpoints.

    Pass ``http_client`` to reuse an existing ``httpx.Client`` (any client
    exposing ``request`` works, e.g. a FastAPI TestClient).
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        http_client: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.Client(
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    def close(self):
        if self._owns_client:
            self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        response = self.http_client.request(method, url, **kwargs)

        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.is_error:
            message = body.get("error") if isinstance(body, dict) else None
            details = body.get("details") if isinstance(body, dict) else None
            logger.debug("%s %s failed with %s: %s", method, url, response.status_code, message)
            raise BugAPIError(
                message or f"Request failed with status {response.status_code}",
                status_code=response.status_code,
                details=details,
            )
        return body

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/health")

    def list_bugs(self, status: Optional[str] = None, priority: Optional[str] = None) -> Dict[str, Any]:
        """List bugs; empty filters are left out of the query"""
        params = {key: value for key, value in (("status", status), ("priority", priority)) if value}
        return self._request("GET", "/bugs", params=params)

    def get_bug(self, bug_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/bugs/{bug_id}")

    def create_bug(self, bug_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/bugs", json=bug_data)

    def update_bug(self, bug_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/bugs/{bug_id}", json=updates)

    def delete_bug(self, bug_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/bugs/{bug_id}")
