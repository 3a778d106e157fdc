"""
storage.py — Persisted credentials
===================================
The bearer token and the signed-in user live under two keys of a mutable
mapping.  In the web app that mapping is ``flask.session`` (a proxy, so one
store object serves every request); tests hand in a plain dict.
"""

import json
from typing import Any, Dict, MutableMapping, Optional

TOKEN_KEY = "token"
USER_KEY = "user"


class CredentialStore:

    def __init__(self, backing: MutableMapping[str, Any]):
        self._backing = backing

    # -- token --
    def get_token(self) -> Optional[str]:
        return self._backing.get(TOKEN_KEY) or None

    def set_token(self, token: str) -> None:
        self._backing[TOKEN_KEY] = token

    def remove_token(self) -> None:
        self._backing.pop(TOKEN_KEY, None)

    # -- user --
    def get_user(self) -> Optional[Dict[str, Any]]:
        raw = self._backing.get(USER_KEY)
        if not raw:
            return None
        try:
            user = json.loads(raw)
        except (TypeError, ValueError):
            return None
        return user if isinstance(user, dict) else None

    def set_user(self, user: Dict[str, Any]) -> None:
        self._backing[USER_KEY] = json.dumps(user)

    def remove_user(self) -> None:
        self._backing.pop(USER_KEY, None)

    def clear(self) -> None:
        self.remove_token()
        self.remove_user()
