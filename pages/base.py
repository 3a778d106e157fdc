"""
base.py — Shared page-controller behaviour
===========================================
Every page owns some local UI state, talks to one or more services and
reports outcomes through a transient banner.  This module holds the parts
they all share:

    Banner          – success / error message that expires after a TTL
    HistoryEntry    – one user-triggered operation, newest first, last N kept
    PageController  – banner + history + validation helpers + teardown
"""

import logging
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Deque, List, Optional

from config import Settings
from services.errors import ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Banner:
    kind:       str     # "success" | "error"
    text:       str
    expires_at: float

    @property
    def is_error(self) -> bool:
        return self.kind == "error"


@dataclass(frozen=True)
class HistoryEntry:
    operation: str
    operand:   Optional[str]
    success:   bool
    message:   str
    timestamp: float = field(default_factory=time.time)


class PageController:
    key: str = "page"
    title: str = ""

    def __init__(self, settings: Settings, clock: Callable[[], float] = time.time):
        self.settings = settings
        self.clock = clock
        self._banner: Optional[Banner] = None
        self.history: Deque[HistoryEntry] = deque(maxlen=settings.history_limit)

    # ------------------------------------------------------------------
    # Banners
    # ------------------------------------------------------------------
    def flash_success(self, text: str) -> None:
        self._banner = Banner("success", text, self.clock() + self.settings.message_ttl)

    def flash_error(self, text: str) -> None:
        logger.info("[%s] %s", self.key, text)
        self._banner = Banner("error", text, self.clock() + self.settings.message_ttl)

    def dismiss(self) -> None:
        self._banner = None

    @property
    def banner(self) -> Optional[Banner]:
        if self._banner is not None and self.clock() >= self._banner.expires_at:
            self._banner = None
        return self._banner

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------
    def record(self, operation: str, operand: Optional[Any], success: bool, message: str) -> None:
        self.history.appendleft(HistoryEntry(
            operation=operation,
            operand=None if operand is None else str(operand),
            success=success,
            message=message,
            timestamp=self.clock(),
        ))

    @property
    def history_entries(self) -> List[HistoryEntry]:
        return list(self.history)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def teardown(self) -> None:
        """Called when the page is navigated to fresh or discarded."""


# ---------------------------------------------------------------------------
# Input parsing (raise ValidationError before any request goes out)
# ---------------------------------------------------------------------------
def require_text(raw: Optional[str], what: str = "a value") -> str:
    value = (raw or "").strip()
    if not value:
        raise ValidationError(f"Please enter {what}")
    return value


def parse_index(raw: Optional[str]) -> int:
    try:
        index = int((raw or "").strip())
    except ValueError:
        raise ValidationError("Please enter a valid index (0 or greater)", field="index")
    if index < 0:
        raise ValidationError("Please enter a valid index (0 or greater)", field="index")
    return index


def parse_capacity(raw: Optional[str], label: str) -> int:
    try:
        size = int((raw or "").strip())
    except ValueError:
        size = 0
    if size <= 0:
        raise ValidationError(f"Please enter a valid maximum size for static {label}",
                              field="max_size")
    return size


def parse_int_list(raw: Optional[str], max_size: int) -> List[int]:
    """Comma-separated integers; junk entries are dropped like the form always did."""
    values = []
    for part in (raw or "").split(","):
        try:
            values.append(int(part.strip()))
        except ValueError:
            continue
    if not values:
        raise ValidationError("Please enter a valid array", field="array")
    if len(values) > max_size:
        raise ValidationError(
            f"Array size cannot exceed {max_size} elements for better visualization",
            field="array",
        )
    return values
