"""
http.py — Shared request/response pipeline
============================================
One configured ``httpx.Client`` for the whole app.  Two event hooks do what
every call needs:

  request   – attach ``Authorization: Bearer <token>`` when signed in, log it
  response  – log it; on 401 wipe stored credentials and raise Unauthorized;
              403 and 5xx are logged loudly and left to the caller

``ApiClient.request`` then turns transport failures and non-2xx bodies into
the errors in ``services.errors`` and hands back the decoded JSON body.
"""

import logging
from typing import Any, Callable, Dict, Optional

import httpx

from services.errors import ApiError, TransportError, Unauthorized
from services.storage import CredentialStore

logger = logging.getLogger(__name__)


class ApiClient:
    """
    Args:
        base_url        : Backend root.
        credentials     : Where the bearer token is read from (and wiped on 401).
        timeout         : Per-request timeout in seconds.
        transport       : Optional httpx transport (tests pass ``httpx.MockTransport``).
        on_unauthorized : Optional callback fired after credentials are wiped.
    """

    def __init__(
        self,
        base_url: str,
        credentials: CredentialStore,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
        on_unauthorized: Optional[Callable[[], None]] = None,
    ):
        self.credentials = credentials
        self.on_unauthorized = on_unauthorized
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            transport=transport,
            event_hooks={
                "request":  [self._attach_token],
                "response": [self._inspect_response],
            },
        )

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------
    def _attach_token(self, request: httpx.Request) -> None:
        token = self.credentials.get_token()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        logger.debug("API request: %s %s", request.method, request.url.path)

    def _inspect_response(self, response: httpx.Response) -> None:
        request = response.request
        status = response.status_code
        logger.debug("API response: %s %s -> %s", request.method, request.url.path, status)

        if status == 401:
            response.read()
            logger.warning("401 from %s; clearing stored credentials", request.url.path)
            self.credentials.clear()
            if self.on_unauthorized is not None:
                self.on_unauthorized()
            raise Unauthorized(payload=_json_or_empty(response))
        if status == 403:
            logger.warning("Access forbidden: %s %s", request.method, request.url.path)
        elif status >= 500:
            logger.error("Server error %s on %s %s", status, request.method, request.url.path)

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------
    def request(self, method: str, url: str, *, params: Optional[Dict[str, Any]] = None,
                json: Any = None) -> Dict[str, Any]:
        try:
            response = self._client.request(method, url, params=params, json=json)
        except httpx.TransportError as exc:
            logger.error("Network error on %s %s: %s", method, url, exc)
            raise TransportError(
                "Network error. Please check your connection and try again."
            ) from exc

        body = _json_or_empty(response)
        if response.is_error:
            message = body.get("message") or f"Request failed with status {response.status_code}"
            raise ApiError(message, response.status_code, body)
        return body

    def get(self, url: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self.request("GET", url, params=params)

    def post(self, url: str, data: Any = None) -> Dict[str, Any]:
        return self.request("POST", url, json=data)

    def put(self, url: str, data: Any = None) -> Dict[str, Any]:
        return self.request("PUT", url, json=data)

    def delete(self, url: str) -> Dict[str, Any]:
        return self.request("DELETE", url)

    def close(self) -> None:
        self._client.close()


def _json_or_empty(response: httpx.Response) -> Dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}
