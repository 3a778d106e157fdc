"""
base.py — Shared plumbing for the per-endpoint wrappers
"""

import logging
from typing import Any, Dict, Optional

from services.errors import ApiError, TransportError, Unauthorized
from services.http import ApiClient
from services.models import ApiResponse

logger = logging.getLogger(__name__)


class BaseService:

    def __init__(self, client: ApiClient):
        self.client = client

    def _call(
        self,
        method: str,
        url: str,
        failure_message: str,
        params: Optional[Dict[str, Any]] = None,
        data: Any = None,
    ) -> ApiResponse:
        """
        Issue one request and normalise the outcome.

        Transport and HTTP failures become ``ApiResponse(success=False)``
        carrying the backend's message when it sent one, else
        ``failure_message``.  ``Unauthorized`` is re-raised untouched: the
        401 policy is global and must not be swallowed per call.
        """
        try:
            body = self.client.request(method, url, params=params, json=data)
        except Unauthorized:
            raise
        except ApiError as exc:
            return ApiResponse.failure(exc.payload.get("message") or failure_message)
        except TransportError as exc:
            logger.info("%s: %s", failure_message, exc.message)
            return ApiResponse.failure(failure_message)
        response = ApiResponse.from_body(body)
        if not response.success and not response.message:
            response.message = failure_message
        return response
