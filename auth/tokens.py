"""
tokens.py — Local JWT expiry check

The signature is not verified here (the backend does that on every call);
this only decides whether a stored token is worth trusting at startup.
"""

import logging
import time
from typing import Callable, Optional

import jwt

logger = logging.getLogger(__name__)


def token_expiry(token: str) -> Optional[float]:
    """Return the ``exp`` claim of ``token``, or None if it cannot be read."""
    try:
        payload = jwt.decode(token, options={"verify_signature": False, "verify_exp": False})
    except jwt.InvalidTokenError as exc:
        logger.debug("Unreadable token: %s", exc)
        return None
    exp = payload.get("exp")
    try:
        return float(exp)
    except (TypeError, ValueError):
        return None


def is_token_valid(token: Optional[str], clock: Callable[[], float] = time.time) -> bool:
    if not token:
        return False
    exp = token_expiry(token)
    return exp is not None and exp > clock()
