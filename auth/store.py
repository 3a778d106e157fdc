"""
store.py — Authentication state
================================
A reducer over four fields, driven by five actions:

    SET_LOADING     payload: bool
    LOGIN_SUCCESS   payload: (User, token)
    LOGIN_FAILURE   payload: message
    LOGOUT
    INIT_AUTH       payload: (User, token) or None

``AuthStore`` is an explicit object, not a module global: the web app builds
one per request around that browser's ``CredentialStore`` and hangs it on
``flask.g``.  ``init_from_storage()`` is the rehydration step that runs on
every page load.
"""

import logging
import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple

from auth.tokens import is_token_valid
from services.auth import AuthService
from services.models import User
from services.storage import CredentialStore

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# State + actions
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AuthState:
    user:             Optional[User] = None
    token:            Optional[str]  = None
    is_authenticated: bool           = False
    is_loading:       bool           = True


class ActionType(Enum):
    SET_LOADING   = "set_loading"
    LOGIN_SUCCESS = "login_success"
    LOGIN_FAILURE = "login_failure"
    LOGOUT        = "logout"
    INIT_AUTH     = "init_auth"


@dataclass(frozen=True)
class Action:
    type:    ActionType
    payload: Any = None


def auth_reducer(state: AuthState, action: Action) -> AuthState:
    if action.type is ActionType.SET_LOADING:
        return replace(state, is_loading=bool(action.payload))

    if action.type is ActionType.LOGIN_SUCCESS:
        user, token = action.payload
        return AuthState(user=user, token=token, is_authenticated=True, is_loading=False)

    if action.type in (ActionType.LOGIN_FAILURE, ActionType.LOGOUT):
        return AuthState(is_loading=False)

    if action.type is ActionType.INIT_AUTH:
        if action.payload:
            user, token = action.payload
            return AuthState(user=user, token=token, is_authenticated=True, is_loading=False)
        return AuthState(is_loading=False)

    return state


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------
class AuthStore:

    def __init__(
        self,
        credentials: CredentialStore,
        auth_service: AuthService,
        clock: Callable[[], float] = time.time,
    ):
        self.credentials = credentials
        self.auth_service = auth_service
        self.clock = clock
        self.state = AuthState()
        self.listeners: List[Callable[[AuthState], None]] = []

    def dispatch(self, action: Action) -> AuthState:
        self.state = auth_reducer(self.state, action)
        for listener in self.listeners:
            listener(self.state)
        return self.state

    # -- read-only accessors --
    @property
    def user(self) -> Optional[User]:
        return self.state.user

    @property
    def is_authenticated(self) -> bool:
        return self.state.is_authenticated

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def init_from_storage(self) -> AuthState:
        token = self.credentials.get_token()
        raw_user = self.credentials.get_user()

        if token and raw_user and is_token_valid(token, self.clock):
            return self.dispatch(Action(ActionType.INIT_AUTH, (User.from_dict(raw_user), token)))

        if token or raw_user:
            logger.info("Discarding stored credentials: missing, invalid or expired token")
        self.credentials.clear()
        return self.dispatch(Action(ActionType.INIT_AUTH, None))

    def login(self, username: str, password: str) -> Tuple[bool, str]:
        self.dispatch(Action(ActionType.SET_LOADING, True))
        try:
            response = self.auth_service.signin(username, password)
            token = response.get("token")
            raw_user = response.get("user")
            if response.success and token:
                user = User.from_dict(raw_user or {"username": username})
                self.credentials.set_token(token)
                self.credentials.set_user(user.to_dict())
                self.dispatch(Action(ActionType.LOGIN_SUCCESS, (user, token)))
                logger.info("User %s signed in", user.username)
                return True, response.message or "Login successful"

            message = response.message or "Login failed. Please try again."
            self.dispatch(Action(ActionType.LOGIN_FAILURE, message))
            return False, message
        finally:
            self.dispatch(Action(ActionType.SET_LOADING, False))

    def signup(self, username: str, password: str, email: Optional[str] = None) -> Tuple[bool, str]:
        # does not touch state: a new account still has to sign in
        response = self.auth_service.signup(username, password, email)
        if response.success:
            return True, response.message or "Account created successfully! Please sign in."
        return False, response.message or "Signup failed. Please try again."

    def logout(self) -> None:
        logger.info("Signing out %s", self.user.username if self.user else "anonymous user")
        self.credentials.clear()
        self.dispatch(Action(ActionType.LOGOUT))
