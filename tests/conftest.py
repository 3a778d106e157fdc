"""
Root conftest.py — sys.path, a fake AlgoPulse backend, shared fixtures.

The backend is an in-memory stand-in served through ``httpx.MockTransport``
so the real ApiClient, hooks and services run unchanged.  Every request it
sees is kept in ``backend.requests``.
"""

import json
import os
import sys
import time
from typing import Any, Dict, List, Optional

import httpx
import jwt
import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from config import Settings  # noqa: E402
from services import ApiClient, CredentialStore, Services  # noqa: E402


def make_token(expires_in: float = 3600, username: str = "alice") -> str:
    payload = {"sub": username, "exp": int(time.time() + expires_in)}
    return jwt.encode(payload, "backend-secret", algorithm="HS256")


# ============================================================================
# Fake backend
# ============================================================================
class FakeBackend:
    STRUCTURES = ("linkedlist", "stack", "queue")

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.users: Dict[str, str] = {"alice": "wonderland"}
        self.structures: Dict[str, Dict[str, dict]] = {k: {} for k in self.STRUCTURES}
        self.runs: Dict[str, Dict[str, dict]] = {"sort": {}, "search": {}}
        self.overrides: Dict[str, Any] = {}
        self.token = make_token()
        self._tick = 0

    # -- test helpers --
    def override(self, path: str, status: Any = 500, body: Optional[dict] = None) -> None:
        """Answer ``path`` with a canned status/body, or raise ``status`` if it is an httpx error."""
        self.overrides[path] = (status, body if body is not None else {})

    def paths(self, method: Optional[str] = None) -> List[str]:
        return [r.url.path for r in self.requests if method is None or r.method == method]

    def _stamp(self) -> str:
        self._tick += 1
        return f"2026-01-01T00:{self._tick // 60:02d}:{self._tick % 60:02d}Z"

    # -- dispatch --
    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path in self.overrides:
            status, body = self.overrides[path]
            if isinstance(status, httpx.RequestError):
                status.request = request
                raise status
            return httpx.Response(status, json=body)

        body = json.loads(request.content) if request.content else {}
        parts = path.strip("/").split("/")   # ["api", family, action, ...]
        family = parts[1]
        action = parts[2] if len(parts) > 2 else ""

        if family == "auth":
            return self._auth(action, body)
        if family in self.STRUCTURES:
            return self._structure(family, action, body, request.url.params)
        if family in ("sort", "search"):
            return self._algorithm(family, request.method, parts[2:], body)
        return httpx.Response(404, json={"success": False, "message": "Not found"})

    # -- auth --
    def _auth(self, action: str, body: dict) -> httpx.Response:
        if action == "login":
            if self.users.get(body.get("username")) == body.get("password"):
                return _ok(token=self.token,
                           user={"id": "u1", "username": body["username"], "email": "a@b.io"},
                           message="Login successful")
            return httpx.Response(401, json={"success": False,
                                             "message": "Invalid username or password"})
        if action == "register":
            if body.get("username") in self.users:
                return httpx.Response(409, json={"success": False,
                                                 "message": "Username already exists"})
            self.users[body["username"]] = body["password"]
            return _ok(message="User registered successfully")
        return httpx.Response(404, json={})

    # -- data structures --
    def _structure(self, family: str, action: str, body: dict, params) -> httpx.Response:
        store = self.structures[family]
        if action in ("singly", "doubly", "static", "dynamic"):
            sid = body.get("sessionId") or f"{family}-{len(store) + 1}"
            now = self._stamp()
            store[sid] = {"sessionId": sid, "type": action, "elements": [],
                          "maxSize": body.get("maxSize"), "userId": "u1",
                          "createdAt": now, "updatedAt": now}
            return _ok(data=self._view(store[sid]), message="Session created")
        if action == "sessions":
            return _ok(data=[self._view(s) for s in store.values()])

        sid = body.get("sessionId") or params.get("sessionId")
        s = store.get(sid)
        if s is None:
            return httpx.Response(404, json={"success": False, "message": "Session not found"})
        items = s["elements"]
        cap = s.get("maxSize")

        if action == "view":
            return _ok(data=self._view(s))
        if action in ("push", "enqueue", "insert-tail"):
            if cap is not None and len(items) >= cap:
                return _ok(success=False, message=f"{family.title()} is full")
            items.append(body["data"])
        elif action == "insert-head":
            items.insert(0, body["data"])
        elif action == "insert-at-index":
            if not 0 <= body["index"] <= len(items):
                return _ok(success=False, message="Index out of bounds")
            items.insert(body["index"], body["value"])
        elif action in ("pop", "delete-tail"):
            if not items:
                return _ok(success=False, message=f"{family.title()} is empty")
            return self._touch(s, data=items.pop())
        elif action in ("dequeue", "delete-head"):
            if not items:
                return _ok(success=False, message=f"{family.title()} is empty")
            return self._touch(s, data=items.pop(0))
        elif action == "remove-at-index":
            if not 0 <= body["index"] < len(items):
                return _ok(success=False, message="Index out of bounds")
            return self._touch(s, data=items.pop(body["index"]))
        elif action == "peek":
            if not items:
                return _ok(success=False, message=f"{family.title()} is empty")
            return _ok(data=items[-1] if family == "stack" else items[0])
        elif action == "search":
            found = body["data"] in [str(e) for e in items]
            return _ok(data={"found": found}, message="Element found" if found else "Not found")
        elif action == "clear":
            items.clear()
        else:
            return httpx.Response(404, json={})
        return self._touch(s)

    def _touch(self, s: dict, data: Any = None) -> httpx.Response:
        s["updatedAt"] = self._stamp()
        return _ok(data=data if data is not None else self._view(s), message="OK")

    @staticmethod
    def _view(s: dict) -> dict:
        cap = s.get("maxSize")
        items = s["elements"]
        return dict(s, elements=list(items), size=len(items), currentSize=len(items),
                    isEmpty=not items, isFull=cap is not None and len(items) >= cap)

    # -- algorithms --
    def _algorithm(self, family: str, method: str, rest: List[str], body: dict) -> httpx.Response:
        runs = self.runs[family]
        head = rest[0] if rest else ""
        if head == "sessions":
            return _ok(sessions=list(runs.values()))
        if head == "session":
            sid = rest[1]
            if sid not in runs:
                return httpx.Response(404, json={"success": False, "message": "Session not found"})
            if method == "DELETE":
                del runs[sid]
                return _ok(message="Deleted")
            return _ok(session=runs[sid])

        sid = f"{family}-{len(runs) + 1}"
        array = list(body["array"])
        if family == "sort":
            steps, comparisons, swaps, result = bubble_steps(array)
            extra = {"swaps": swaps}
        else:
            steps, comparisons, found_index = linear_steps(array, body["target"])
            result, extra = array, {"target": body["target"], "found": found_index >= 0,
                                    "foundIndex": found_index}
        now = self._stamp()
        runs[sid] = dict(sessionId=sid, algorithm=head, originalArray=array, currentArray=result,
                         steps=steps, comparisons=comparisons, createdAt=now, updatedAt=now,
                         **extra)
        return _ok(session={k: v for k, v in runs[sid].items() if k != "steps"},
                   steps=steps, comparisons=comparisons, **extra)


def bubble_steps(array: List[int]):
    a = list(array)
    steps, comparisons, swaps = [], 0, 0
    for i in range(len(a)):
        for j in range(len(a) - i - 1):
            comparisons += 1
            swapped = a[j] > a[j + 1]
            if swapped:
                a[j], a[j + 1] = a[j + 1], a[j]
                swaps += 1
            steps.append({"stepNumber": len(steps), "array": list(a), "compareIndex1": j,
                          "compareIndex2": j + 1, "swapped": swapped,
                          "description": f"Compare {a[j]} and {a[j + 1]}"})
    return steps, comparisons, swaps, a


def linear_steps(array: List[int], target: int):
    steps = []
    for i, value in enumerate(array):
        match = value == target
        steps.append({"stepNumber": i, "currentIndex": i, "left": -1, "right": -1, "mid": -1,
                      "match": match, "description": f"Check index {i}"})
        if match:
            return steps, i + 1, i
    return steps, len(array), -1


def _ok(success: bool = True, **fields) -> httpx.Response:
    return httpx.Response(200, json=dict(success=success, **fields))


# ============================================================================
# Fixtures
# ============================================================================
@pytest.fixture
def settings() -> Settings:
    return Settings(secret_key="test-secret", log_level="WARNING")


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def storage() -> Dict[str, Any]:
    return {}


@pytest.fixture
def credentials(storage) -> CredentialStore:
    return CredentialStore(storage)


@pytest.fixture
def api(backend, credentials, settings) -> ApiClient:
    client = ApiClient(settings.api_base_url, credentials, transport=httpx.MockTransport(backend))
    yield client
    client.close()


@pytest.fixture
def services(api) -> Services:
    return Services.bind(api)


@pytest.fixture
def app(settings, backend):
    from main import create_app
    flask_app = create_app(settings, transport=httpx.MockTransport(backend))
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture
def http(app):
    return app.test_client()


@pytest.fixture
def signed_in(http):
    response = http.post("/signin", data={"username": "alice", "password": "wonderland"})
    assert response.status_code == 302
    return http
