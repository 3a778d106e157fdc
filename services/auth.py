"""
auth.py — Sign-in / sign-up endpoints

Persisting the returned token is the auth store's job, not this wrapper's.
"""

import logging
from typing import Optional

from services.base import BaseService
from services.errors import Unauthorized
from services.models import ApiResponse

logger = logging.getLogger(__name__)


class AuthService(BaseService):

    def signin(self, username: str, password: str) -> ApiResponse:
        logger.info("Signing in user %s", username)
        try:
            return self._call(
                "POST", "/api/auth/login", "Signin failed. Please try again.",
                data={"username": username, "password": password},
            )
        except Unauthorized as exc:
            # bad credentials, not an expired session
            return ApiResponse.failure(exc.payload.get("message") or "Invalid username or password")

    def signup(self, username: str, password: str, email: Optional[str] = None) -> ApiResponse:
        # registration does not return a token; the user signs in afterwards
        payload = {"username": username, "password": password}
        if email:
            payload["email"] = email
        logger.info("Registering user %s", username)
        return self._call(
            "POST", "/api/auth/register", "Signup failed. Please try again.", data=payload,
        )
