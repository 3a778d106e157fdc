"""
structures.py — Linked list, stack and queue endpoints
=======================================================
Thin wrappers: one method per backend endpoint, each returning an
``ApiResponse``.  The three services share create / sessions / view, which
only differ in the URL prefix.

    /api/linkedlist/...   LinkedListService
    /api/stack/...        StackService
    /api/queue/...        QueueService
"""

from typing import Any, Optional

from services.base import BaseService
from services.models import ApiResponse


class StructureService(BaseService):
    prefix: str = ""
    label:  str = ""

    def create_session(self, kind: str, max_size: Optional[int] = None,
                       session_id: Optional[str] = None) -> ApiResponse:
        body = {}
        if max_size is not None:
            body["maxSize"] = max_size
        if session_id:
            body["sessionId"] = session_id
        return self._call(
            "POST", f"{self.prefix}/{kind}", f"Failed to create {self.label} session", data=body,
        )

    def get_sessions(self) -> ApiResponse:
        return self._call("GET", f"{self.prefix}/sessions", "Failed to fetch sessions")

    def view(self, session_id: str) -> ApiResponse:
        return self._call(
            "GET", f"{self.prefix}/view", f"Failed to view {self.label}",
            params={"sessionId": session_id},
        )


# ---------------------------------------------------------------------------
# Linked list
# ---------------------------------------------------------------------------
class LinkedListService(StructureService):
    prefix = "/api/linkedlist"
    label  = "LinkedList"

    def insert_head(self, session_id: str, value: Any) -> ApiResponse:
        return self._call("POST", f"{self.prefix}/insert-head", "Failed to insert at front",
                          data={"sessionId": session_id, "data": value})

    def insert_tail(self, session_id: str, value: Any) -> ApiResponse:
        return self._call("POST", f"{self.prefix}/insert-tail", "Failed to insert element",
                          data={"sessionId": session_id, "data": value})

    def insert_at_index(self, session_id: str, value: Any, index: int) -> ApiResponse:
        # this endpoint names the payload "value", not "data"
        return self._call("POST", f"{self.prefix}/insert-at-index", "Failed to insert at index",
                          data={"sessionId": session_id, "value": value, "index": index})

    def delete_head(self, session_id: str) -> ApiResponse:
        return self._call("POST", f"{self.prefix}/delete-head", "Failed to remove from front",
                          data={"sessionId": session_id})

    def delete_tail(self, session_id: str) -> ApiResponse:
        return self._call("POST", f"{self.prefix}/delete-tail", "Failed to remove element",
                          data={"sessionId": session_id})

    def remove_at_index(self, session_id: str, index: int) -> ApiResponse:
        return self._call("POST", f"{self.prefix}/remove-at-index", "Failed to remove at index",
                          data={"sessionId": session_id, "index": index})

    def search(self, session_id: str, value: Any) -> ApiResponse:
        return self._call("POST", f"{self.prefix}/search", "Failed to search element",
                          data={"sessionId": session_id, "data": value})

    def clear(self, session_id: str) -> ApiResponse:
        return self._call("POST", f"{self.prefix}/clear", "Failed to clear LinkedList",
                          data={"sessionId": session_id})


# ---------------------------------------------------------------------------
# Stack
# ---------------------------------------------------------------------------
class StackService(StructureService):
    prefix = "/api/stack"
    label  = "Stack"

    def push(self, session_id: str, value: Any) -> ApiResponse:
        return self._call("POST", f"{self.prefix}/push", "Failed to push element",
                          data={"sessionId": session_id, "data": value})

    def pop(self, session_id: str) -> ApiResponse:
        return self._call("POST", f"{self.prefix}/pop", "Failed to pop element",
                          data={"sessionId": session_id})

    def peek(self, session_id: str) -> ApiResponse:
        return self._call("GET", f"{self.prefix}/peek", "Failed to peek element",
                          params={"sessionId": session_id})


# ---------------------------------------------------------------------------
# Queue
# ---------------------------------------------------------------------------
class QueueService(StructureService):
    prefix = "/api/queue"
    label  = "Queue"

    def enqueue(self, session_id: str, value: Any) -> ApiResponse:
        return self._call("POST", f"{self.prefix}/enqueue", "Failed to enqueue element",
                          data={"sessionId": session_id, "data": value})

    def dequeue(self, session_id: str) -> ApiResponse:
        return self._call("POST", f"{self.prefix}/dequeue", "Failed to dequeue element",
                          data={"sessionId": session_id})

    def peek(self, session_id: str) -> ApiResponse:
        return self._call("GET", f"{self.prefix}/peek", "Failed to peek element",
                          params={"sessionId": session_id})
