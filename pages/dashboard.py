"""
dashboard.py — Every session the user owns, in one list
========================================================
Five independent sources (linked list, stack, queue, sorting, searching) are
fetched in parallel and joined.  Each source succeeds or fails on its own; a
failed source contributes nothing and the rest still render.  Only when all
five fail does the page show an error.

Unauthorized is the exception: if any source hit a 401 the whole join
re-raises it so the app can send the user to sign in.
"""

import contextvars
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Tuple

from pages.base import PageController
from services import Services
from services.errors import Unauthorized
from services.models import ApiResponse

logger = logging.getLogger(__name__)

ALL_FAILED_MESSAGE = "Failed to load sessions. Please check your connection and try again."

SESSION_TYPES = ("linkedlist", "stack", "queue", "sorting", "searching")


@dataclass(frozen=True)
class SessionSummary:
    session_id: str
    type:       str
    name:       str
    size:       int
    detail:     str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def href(self) -> str:
        return f"/{self.type}/{self.session_id}"

    @property
    def sort_key(self) -> float:
        return _timestamp(self.updated_at or self.created_at)


@dataclass
class SourceResult:
    """Outcome of one source: either ``sessions`` or an ``error``."""

    source:   str
    sessions: List[SessionSummary] = field(default_factory=list)
    error:    Optional[str] = None
    unauthorized: Optional[Unauthorized] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DashboardPage(PageController):
    key = "dashboard"
    title = "Dashboard"

    def __init__(self, services: Services, settings, max_workers: int = 5, **kwargs):
        super().__init__(settings, **kwargs)
        self.services = services
        self.max_workers = max_workers
        self.results: Dict[str, SourceResult] = {}
        self.sessions: List[SessionSummary] = []

    def _sources(self) -> List[Tuple[str, Callable[[], ApiResponse]]]:
        s = self.services
        return [
            ("linkedlist", s.linked_list.get_sessions),
            ("stack",      s.stack.get_sessions),
            ("queue",      s.queue.get_sessions),
            ("sorting",    s.sorting.get_sessions),
            ("searching",  s.searching.get_sessions),
        ]

    def refresh(self) -> List[SessionSummary]:
        sources = self._sources()
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            futures = [
                pool.submit(contextvars.copy_context().run, _fetch, name, fetch)
                for name, fetch in sources
            ]
            results = [f.result() for f in futures]

        for result in results:
            if result.unauthorized is not None:
                raise result.unauthorized

        self.results = {r.source: r for r in results}
        merged = [s for r in results for s in r.sessions]
        merged.sort(key=lambda s: s.sort_key, reverse=True)
        self.sessions = merged

        failed = [r.source for r in results if not r.ok]
        if failed:
            logger.warning("Dashboard sources failed: %s", ", ".join(failed))
        if len(failed) == len(results):
            self.flash_error(ALL_FAILED_MESSAGE)
        return merged

    @property
    def counts(self) -> Dict[str, int]:
        counts = {t: 0 for t in SESSION_TYPES}
        for s in self.sessions:
            counts[s.type] = counts.get(s.type, 0) + 1
        return counts

    @property
    def total(self) -> int:
        return len(self.sessions)


def _fetch(source: str, fetch: Callable[[], ApiResponse]) -> SourceResult:
    try:
        response = fetch()
    except Unauthorized as exc:
        return SourceResult(source, error=exc.message, unauthorized=exc)
    if not response.success:
        return SourceResult(source, error=response.message or "Request failed")
    sessions = [summarize_session(source, raw) for raw in response.items if isinstance(raw, dict)]
    return SourceResult(source, sessions=sessions)


def summarize_session(source: str, raw: dict) -> SessionSummary:
    session_id = str(raw.get("sessionId") or raw.get("id") or "")
    if source in ("sorting", "searching"):
        array = raw.get("originalArray") or raw.get("array") or []
        size = len(array)
        detail = str(raw.get("algorithm") or "")
        if source == "searching" and raw.get("target") is not None:
            detail = f"{detail} · target {raw['target']}"
    else:
        elements = raw.get("elements") or []
        size = int(raw.get("currentSize") or raw.get("size") or len(elements))
        detail = str(raw.get("type") or "")
    return SessionSummary(
        session_id=session_id,
        type=source,
        name=session_id or f"{source.title()} Session",
        size=size,
        detail=detail,
        created_at=raw.get("createdAt"),
        updated_at=raw.get("updatedAt"),
    )


def _timestamp(value: Optional[str]) -> float:
    if not value:
        return 0.0
    try:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return 0.0
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()
