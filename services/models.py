"""
models.py — Typed views of backend payloads
============================================
The backend speaks camelCase JSON and is not always consistent about field
names (``size`` vs ``currentSize``, ``array`` vs ``currentArray``).  These
dataclasses are where that gets smoothed over, so nothing above the service
layer touches raw dicts.

    ApiResponse        – the {success, message, data|session|sessions} envelope
    User               – signed-in identity
    StructureSession   – linked list / stack / queue instance
    AlgorithmSession   – one sorting or searching run
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _first(raw: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return default


# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------
@dataclass
class ApiResponse:
    """
    Attributes:
        success  : Backend's verdict (False for transport / HTTP failures too).
        message  : Human-readable outcome; always set on failure.
        data     : ``data`` field of the body, if any.
        session  : ``session`` field of the body, if any.
        sessions : ``sessions`` field of the body, if any.
        extra    : Everything else in the body (steps, token, comparisons, …).
    """

    success:  bool
    message:  str                     = ""
    data:     Any                     = None
    session:  Any                     = None
    sessions: Optional[List[Any]]     = None
    extra:    Dict[str, Any]          = field(default_factory=dict)

    @classmethod
    def from_body(cls, body: Any) -> "ApiResponse":
        if not isinstance(body, dict):
            return cls(success=False, message="Unexpected response from server")
        known = {"success", "message", "data", "session", "sessions"}
        return cls(
            success=bool(body.get("success", False)),
            message=body.get("message") or "",
            data=body.get("data"),
            session=body.get("session"),
            sessions=body.get("sessions"),
            extra={k: v for k, v in body.items() if k not in known},
        )

    @classmethod
    def failure(cls, message: str) -> "ApiResponse":
        return cls(success=False, message=message)

    @property
    def payload(self) -> Any:
        """Whichever of data / session the endpoint chose to fill."""
        return self.data if self.data is not None else self.session

    @property
    def items(self) -> List[Any]:
        """List payload, whether it came as ``sessions`` or as a list in ``data``."""
        if self.sessions is not None:
            return list(self.sessions)
        if isinstance(self.data, list):
            return list(self.data)
        return []

    def get(self, key: str, default: Any = None) -> Any:
        return self.extra.get(key, default)


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class User:
    id:       str
    username: str
    email:    Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "User":
        return cls(
            id=str(_first(raw, "id", "_id", "userId", default="")),
            username=raw.get("username", ""),
            email=raw.get("email"),
        )

    def to_dict(self) -> Dict[str, Any]:
        out = {"id": self.id, "username": self.username}
        if self.email:
            out["email"] = self.email
        return out


# ---------------------------------------------------------------------------
# Data-structure sessions
# ---------------------------------------------------------------------------
@dataclass
class StructureSession:
    session_id: str
    type:       str
    elements:   List[Any]       = field(default_factory=list)
    size:       int             = 0
    user_id:    Optional[str]   = None
    created_at: Optional[str]   = None
    updated_at: Optional[str]   = None
    max_size:   Optional[int]   = None
    is_full:    bool            = False
    is_empty:   bool            = True
    front:      int             = -1
    rear:       int             = -1

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "StructureSession":
        elements = list(raw.get("elements") or [])
        size = _first(raw, "currentSize", "size", default=len(elements))
        max_size = raw.get("maxSize")
        return cls(
            session_id=str(_first(raw, "sessionId", "id", default="")),
            type=raw.get("type", ""),
            elements=elements,
            size=int(size),
            user_id=raw.get("userId"),
            created_at=raw.get("createdAt"),
            updated_at=raw.get("updatedAt"),
            max_size=int(max_size) if max_size is not None else None,
            is_full=bool(raw.get("isFull", max_size is not None and len(elements) >= int(max_size))),
            is_empty=bool(raw.get("isEmpty", not elements)),
            front=int(raw.get("front", 0 if elements else -1)),
            rear=int(raw.get("rear", len(elements) - 1)),
        )


# ---------------------------------------------------------------------------
# Algorithm runs
# ---------------------------------------------------------------------------
@dataclass
class AlgorithmSession:
    session_id:     str
    algorithm:      str
    array:          List[int]             = field(default_factory=list)
    original_array: List[int]             = field(default_factory=list)
    steps:          List[Dict[str, Any]]  = field(default_factory=list)
    comparisons:    int                   = 0
    swaps:          int                   = 0
    target:         Optional[int]         = None
    found:          bool                  = False
    found_index:    int                   = -1
    created_at:     Optional[str]         = None
    updated_at:     Optional[str]         = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "AlgorithmSession":
        array = _first(raw, "currentArray", "array", "originalArray", default=[])
        original = _first(raw, "originalArray", "array", default=array)
        return cls(
            session_id=str(_first(raw, "sessionId", "id", default="")),
            algorithm=raw.get("algorithm", ""),
            array=list(array),
            original_array=list(original),
            steps=list(raw.get("steps") or []),
            comparisons=int(raw.get("comparisons", 0) or 0),
            swaps=int(raw.get("swaps", 0) or 0),
            target=raw.get("target"),
            found=bool(raw.get("found", False)),
            found_index=int(_first(raw, "foundIndex", default=-1)),
            created_at=raw.get("createdAt"),
            updated_at=raw.get("updatedAt"),
        )
