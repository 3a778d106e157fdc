"""
structures.py — Linked list, stack and queue pages
===================================================
Each page holds at most one backend session.  The lifecycle is the same for
all three:

    no session ──create──▶ active ──operation*──▶ active
    no session ──load(id)─▶ active

Every mutating operation follows one contract (``_apply``): send it; on
success record history, flash a banner and RE-FETCH the view, replacing all
local state with the backend's; on failure leave the state alone and flash
the error.  The page never edits its own copy of the elements.
"""

import logging
from typing import Any, Callable, List, Optional

from algorithms.step import traversal_steps
from engine import Sequencer, traversal_deriver
from pages.base import PageController, parse_capacity, parse_index, require_text
from services.errors import ValidationError
from services.models import ApiResponse, StructureSession
from services.structures import LinkedListService, QueueService, StackService, StructureService

logger = logging.getLogger(__name__)


class StructurePage(PageController):
    kinds: tuple = ()
    label: str = ""

    def __init__(self, service: StructureService, settings, **kwargs):
        super().__init__(settings, **kwargs)
        self.service = service
        self.session: Optional[StructureSession] = None
        self.show_create = True
        # index emphasised after the last operation (new top, new rear, …)
        self.highlighted_index: Optional[int] = None

    @property
    def elements(self) -> List[Any]:
        return list(self.session.elements) if self.session else []

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------
    def load(self, session_id: str) -> bool:
        response = self.service.view(session_id)
        session = _session_from(response)
        if session is None:
            self.flash_error(response.message or "Failed to load session")
            self.show_create = True
            return False
        self.session = session
        self.show_create = False
        self.highlighted_index = None
        self.flash_success("Session loaded successfully!")
        return True

    def create(self, kind: str, max_size: Optional[str] = None,
               custom_id: Optional[str] = None) -> bool:
        try:
            if kind not in self.kinds:
                raise ValidationError(f"Unknown {self.label} type: {kind}")
            capacity = self._capacity(kind, max_size)
        except ValidationError as exc:
            self.flash_error(exc.message)
            return False

        response = self.service.create_session(kind, capacity, (custom_id or "").strip() or None)
        session = _session_from(response)
        if session is None:
            self.flash_error(response.message or "Failed to create session")
            return False

        self.session = session
        self.show_create = False
        self.refresh_view()
        suffix = f" with ID: {session.session_id}" if custom_id else ""
        self.flash_success(f"{kind} {self.label.lower()} session created successfully{suffix}!")
        return True

    def refresh_view(self) -> None:
        if self.session is None:
            return
        response = self.service.view(self.session.session_id)
        session = _session_from(response)
        if session is None:
            logger.warning("Refreshing %s failed: %s", self.session.session_id, response.message)
            return
        self.session = session

    def _capacity(self, kind: str, raw: Optional[str]) -> Optional[int]:
        return None

    # ------------------------------------------------------------------
    # The one operation contract
    # ------------------------------------------------------------------
    def _apply(self, operation: str, call: Callable[[str], ApiResponse],
               operand: Optional[Any] = None) -> Optional[ApiResponse]:
        if self.session is None:
            self.flash_error("Create or load a session first")
            return None

        response = call(self.session.session_id)
        if not response.success:
            self.flash_error(response.message or f"{operation} failed")
            return response

        shown = f" ({operand})" if operand is not None else ""
        self.flash_success(f"{operation}{shown} completed successfully")
        self.record(operation, operand, True, response.message)
        self.refresh_view()
        return response

    def _guarded(self, action: Callable[[], Any]) -> Any:
        try:
            return action()
        except ValidationError as exc:
            self.flash_error(exc.message)
            return None


# ---------------------------------------------------------------------------
# Linked list
# ---------------------------------------------------------------------------
class LinkedListPage(StructurePage):
    key = "linkedlist"
    title = "Linked List"
    kinds = ("singly", "doubly")
    label = "LinkedList"

    def __init__(self, service: LinkedListService, settings, **kwargs):
        super().__init__(service, settings, **kwargs)
        self.player = Sequencer(traversal_deriver(settings.traversal_delay_ms))
        self.autoplay = False

    @property
    def is_doubly(self) -> bool:
        return bool(self.session and self.session.type == "doubly")

    # a traversal indexes the nodes it walked; any change to the list voids it
    def load(self, session_id: str) -> bool:
        self._drop_traversal()
        return super().load(session_id)

    def create(self, kind: str, max_size: Optional[str] = None,
               custom_id: Optional[str] = None) -> bool:
        created = super().create(kind, max_size, custom_id)
        if created:
            self._drop_traversal()
        return created

    def _apply(self, operation, call, operand=None):
        response = super()._apply(operation, call, operand)
        if response is not None and response.success:
            self._drop_traversal()
        return response

    def _drop_traversal(self) -> None:
        self.player.load([])
        self.autoplay = False

    def insert_head(self, value: str):
        return self._guarded(lambda: self._insert("Insert Front", self.service.insert_head, value))

    def insert_tail(self, value: str):
        return self._guarded(lambda: self._insert("Insert", self.service.insert_tail, value))

    def insert_at(self, value: str, index: str):
        def run():
            v = require_text(value)
            i = parse_index(index)
            return self._apply("Insert At Index",
                               lambda sid: self.service.insert_at_index(sid, v, i),
                               f"{v} @ {i}")
        return self._guarded(run)

    def delete_head(self):
        return self._apply("Remove Front", self.service.delete_head)

    def delete_tail(self):
        return self._apply("Remove", self.service.delete_tail)

    def remove_at(self, index: str):
        def run():
            i = parse_index(index)
            return self._apply("Remove At Index",
                               lambda sid: self.service.remove_at_index(sid, i), i)
        return self._guarded(run)

    def clear(self):
        response = self._apply("Clear", self.service.clear, "All elements")
        if response is not None and response.success:
            self.flash_success("LinkedList cleared successfully")
        return response

    def search(self, value: str):
        """
        Ask the backend, then load a traversal animation over the current
        nodes that stops at the first match.
        """
        try:
            target = require_text(value, "a value to search for")
        except ValidationError as exc:
            self.flash_error(exc.message)
            return None
        if self.session is None:
            self.flash_error("Create or load a session first")
            return None

        response = self.service.search(self.session.session_id, target)
        if not response.success:
            self.flash_error(response.message or "Search failed")
            return response

        steps = traversal_steps(self.elements, target)
        self.player.load(steps)
        self.autoplay = bool(steps)
        if steps and steps[-1].match:
            self.flash_success(f'Found "{target}" at index {steps[-1].index}')
        else:
            self.flash_error(f'"{target}" not found in the list')
        self.record("Search", target, True, response.message)
        return response

    def _insert(self, operation: str, call, value: str):
        v = require_text(value)
        response = self._apply(operation, lambda sid: call(sid, v), v)
        if response is not None and response.success:
            self.highlighted_index = 0 if call == self.service.insert_head else len(self.elements) - 1
        return response

    def teardown(self) -> None:
        self.player.cancel()


# ---------------------------------------------------------------------------
# Stack
# ---------------------------------------------------------------------------
class StackPage(StructurePage):
    key = "stack"
    title = "Stack"
    kinds = ("static", "dynamic")
    label = "Stack"

    def __init__(self, service: StackService, settings, **kwargs):
        super().__init__(service, settings, **kwargs)
        self.peeked: Optional[Any] = None

    def _capacity(self, kind, raw):
        return parse_capacity(raw, "stack") if kind == "static" else None

    @property
    def top(self) -> Optional[Any]:
        items = self.elements
        return items[-1] if items else None

    def push(self, value: str):
        def run():
            v = require_text(value)
            if self.session is not None and self.session.is_full:
                raise ValidationError("Stack is full")
            response = self._apply("Push", lambda sid: self.service.push(sid, v), v)
            if response is not None and response.success:
                self.highlighted_index = len(self.elements) - 1
            return response
        return self._guarded(run)

    def pop(self):
        def run():
            if self.session is not None and not self.elements:
                raise ValidationError("Stack is empty")
            self.highlighted_index = None
            return self._apply("Pop", self.service.pop)
        return self._guarded(run)

    def peek(self):
        def run():
            if self.session is None:
                raise ValidationError("Create or load a session first")
            if not self.elements:
                raise ValidationError("Stack is empty")
            response = self.service.peek(self.session.session_id)
            if not response.success:
                self.flash_error(response.message or "Peek failed")
                return response
            value = response.payload if response.payload is not None else self.top
            self.peeked = value
            self.highlighted_index = len(self.elements) - 1
            self.flash_success(f"Top element: {value}")
            return response
        return self._guarded(run)


# ---------------------------------------------------------------------------
# Queue
# ---------------------------------------------------------------------------
class QueuePage(StructurePage):
    key = "queue"
    title = "Queue"
    kinds = ("static", "dynamic")
    label = "Queue"

    def __init__(self, service: QueueService, settings, **kwargs):
        super().__init__(service, settings, **kwargs)
        self.peeked: Optional[Any] = None

    def _capacity(self, kind, raw):
        return parse_capacity(raw, "queue") if kind == "static" else None

    @property
    def front(self) -> Optional[Any]:
        items = self.elements
        return items[0] if items else None

    def enqueue(self, value: str):
        def run():
            v = require_text(value)
            if self.session is not None and self.session.is_full:
                raise ValidationError("Queue is full")
            response = self._apply("Enqueue", lambda sid: self.service.enqueue(sid, v), v)
            if response is not None and response.success:
                self.highlighted_index = len(self.elements) - 1
            return response
        return self._guarded(run)

    def dequeue(self):
        def run():
            if self.session is not None and not self.elements:
                raise ValidationError("Queue is empty")
            self.highlighted_index = None
            return self._apply("Dequeue", self.service.dequeue)
        return self._guarded(run)

    def peek(self):
        def run():
            if self.session is None:
                raise ValidationError("Create or load a session first")
            if not self.elements:
                raise ValidationError("Queue is empty")
            response = self.service.peek(self.session.session_id)
            if not response.success:
                self.flash_error(response.message or "Peek failed")
                return response
            value = response.payload if response.payload is not None else self.front
            self.peeked = value
            self.highlighted_index = 0
            self.flash_success(f"Front element: {value}")
            return response
        return self._guarded(run)


def _session_from(response: ApiResponse) -> Optional[StructureSession]:
    if not response.success or not isinstance(response.payload, dict):
        return None
    return StructureSession.from_dict(response.payload)
