"""
registry.py — Per-browser page state
=====================================
Page controllers hold playback cursors and banners between requests, so they
live server-side, keyed by a random ``view_id`` kept in the signed Flask
session cookie.  The store is bounded (least recently used browser evicted).

Two locks:
  • the store lock guards the table of views itself
  • each view carries its own RLock, held by a route for its whole handler,
    so a browser's ``/tick`` and a ``/next`` click never touch the same
    Sequencer at once

Any controller that leaves the store (replaced, evicted, discarded) gets
``teardown()`` under its view's lock so its playback stops with it.
"""

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Callable, Dict, List

from pages.base import PageController

logger = logging.getLogger(__name__)


@dataclass
class ViewState:
    pages: Dict[str, PageController] = field(default_factory=dict)
    lock:  threading.RLock = field(default_factory=threading.RLock)

    def teardown(self, pages: List[PageController], blocking: bool = True) -> bool:
        if not self.lock.acquire(blocking=blocking):
            return False
        try:
            for page in pages:
                page.teardown()
        finally:
            self.lock.release()
        return True


class ViewStateStore:
    def __init__(self, max_views: int = 256):
        self.max_views = max_views
        self._views: "OrderedDict[str, ViewState]" = OrderedDict()
        self._lock = threading.Lock()

    def lock_for(self, view_id: str) -> threading.RLock:
        """The lock serialising every request from one browser."""
        view, evicted = self._touch(view_id)
        self._teardown(evicted)
        return view.lock

    def get_or_create(self, view_id: str, key: str,
                      factory: Callable[[], PageController]) -> PageController:
        view, evicted = self._touch(view_id)
        self._teardown(evicted)
        with self._lock:
            page = view.pages.get(key)
            if page is None:
                page = view.pages[key] = factory()
            return page

    def replace(self, view_id: str, key: str, page: PageController) -> PageController:
        view, evicted = self._touch(view_id)
        with self._lock:
            old = view.pages.get(key)
            view.pages[key] = page
        self._teardown(evicted)
        if old is not None and old is not page:
            view.teardown([old])
        return page

    def discard(self, view_id: str) -> None:
        with self._lock:
            view = self._views.pop(view_id, None)
        if view is not None:
            view.teardown(list(view.pages.values()))

    def __len__(self) -> int:
        with self._lock:
            return len(self._views)

    def _touch(self, view_id: str):
        with self._lock:
            view = self._views.get(view_id)
            if view is None:
                view = self._views[view_id] = ViewState()
            self._views.move_to_end(view_id)
            evicted = []
            while len(self._views) > self.max_views:
                old_id, old = self._views.popitem(last=False)
                logger.debug("Evicting view state %s", old_id)
                evicted.append(old)
            return view, evicted

    @staticmethod
    def _teardown(views: List[ViewState]) -> None:
        # never wait on an evicted view: its holder may be waiting on ours
        for view in views:
            if not view.teardown(list(view.pages.values()), blocking=False):
                logger.debug("Evicted view busy, left to its running request")
