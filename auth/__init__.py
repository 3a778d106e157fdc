"""
auth/
-----
Session identity for the client.

    from auth import AuthStore, AuthState
"""

from auth.store import Action, ActionType, AuthState, AuthStore, auth_reducer
from auth.tokens import is_token_valid, token_expiry

__all__ = [
    "Action",
    "ActionType",
    "AuthState",
    "AuthStore",
    "auth_reducer",
    "is_token_valid",
    "token_expiry",
]
