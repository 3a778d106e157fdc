"""
errors.py — Client error taxonomy
==================================

    AlgoPulseError
     ├── TransportError   – no response at all (DNS, refused, timeout)
     ├── ApiError         – backend answered with a non-2xx status
     │    └── Unauthorized – 401; credentials already cleared when raised
     └── ValidationError  – rejected locally, no request was sent

Domain failures that arrive as ``{"success": false}`` inside a 2xx body are
NOT exceptions; they come back as a failed ``ApiResponse``.
"""

from typing import Optional


class AlgoPulseError(Exception):
    """Base class for every error this client raises."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(AlgoPulseError):
    pass


class ApiError(AlgoPulseError):
    def __init__(self, message: str, status_code: int, payload: Optional[dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload or {}


class Unauthorized(ApiError):
    def __init__(self, message: str = "Session expired. Please sign in again.",
                 payload: Optional[dict] = None):
        super().__init__(message, 401, payload)


class ValidationError(AlgoPulseError):
    """Bad user input caught before any network call."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
