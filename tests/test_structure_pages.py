"""
Linked list, stack and queue page controllers against the fake backend.

After every successful mutation the page's elements must equal what the
backend's view endpoint reports.
"""

import pytest

from pages import LinkedListPage, QueuePage, StackPage


@pytest.fixture
def stack_page(services, settings):
    return StackPage(services.stack, settings)


@pytest.fixture
def queue_page(services, settings):
    return QueuePage(services.queue, settings)


@pytest.fixture
def list_page(services, settings):
    return LinkedListPage(services.linked_list, settings)


def _backend_elements(backend, family, page):
    return backend.structures[family][page.session.session_id]["elements"]


# ============================================================================
# Stack
# ============================================================================
class TestStackPage:

    def test_static_stack_fills_then_rejects(self, stack_page, backend):
        assert stack_page.create("static", "3")
        for value in ("a", "b", "c"):
            stack_page.push(value)
        assert stack_page.elements == ["a", "b", "c"]
        assert stack_page.session.size == 3
        assert stack_page.session.is_full

        sent = len(backend.requests)
        stack_page.push("d")
        assert len(backend.requests) == sent
        assert stack_page.banner.is_error
        assert stack_page.banner.text == "Stack is full"
        assert stack_page.elements == ["a", "b", "c"]

    @pytest.mark.parametrize("raw", ["0", "-2", "", "abc"])
    def test_bad_capacity_never_reaches_backend(self, stack_page, backend, raw):
        assert not stack_page.create("static", raw)
        assert backend.requests == []
        assert stack_page.banner.text == "Please enter a valid maximum size for static stack"
        assert stack_page.session is None

    def test_dynamic_ignores_capacity(self, stack_page, backend):
        assert stack_page.create("dynamic", "junk")
        assert stack_page.session.max_size is None

    def test_custom_id_in_message(self, stack_page):
        stack_page.create("dynamic", custom_id="mine")
        assert stack_page.session.session_id == "mine"
        assert stack_page.banner.text == "dynamic stack session created successfully with ID: mine!"

    def test_pop_and_peek(self, stack_page, backend):
        stack_page.create("dynamic")
        stack_page.push("x")
        stack_page.push("y")
        stack_page.peek()
        assert stack_page.banner.text == "Top element: y"
        stack_page.pop()
        assert stack_page.elements == ["x"] == _backend_elements(backend, "stack", stack_page)
        assert stack_page.history_entries[0].operation == "Pop"

    def test_empty_stack_rejected_locally(self, stack_page, backend):
        stack_page.create("dynamic")
        sent = len(backend.requests)
        stack_page.pop()
        assert stack_page.banner.text == "Stack is empty"
        stack_page.peek()
        assert len(backend.requests) == sent

    def test_blank_value(self, stack_page):
        stack_page.create("dynamic")
        stack_page.push("   ")
        assert stack_page.banner.text == "Please enter a value"

    def test_operation_without_session(self, stack_page, backend):
        stack_page.push("a")
        assert stack_page.banner.text == "Create or load a session first"
        assert backend.requests == []

    def test_backend_failure_leaves_state(self, stack_page, backend):
        stack_page.create("dynamic")
        stack_page.push("a")
        backend.override("/api/stack/push", 500, {"message": "Database unavailable"})
        stack_page.push("b")
        assert stack_page.banner.text == "Database unavailable"
        assert stack_page.elements == ["a"]


# ============================================================================
# Queue
# ============================================================================
class TestQueuePage:

    def test_fifo(self, queue_page, backend):
        queue_page.create("static", "2")
        queue_page.enqueue("a")
        queue_page.enqueue("b")
        queue_page.enqueue("c")
        assert queue_page.banner.text == "Queue is full"
        queue_page.dequeue()
        assert queue_page.elements == ["b"] == _backend_elements(backend, "queue", queue_page)
        queue_page.peek()
        assert queue_page.banner.text == "Front element: b"
        assert queue_page.front == "b"

    def test_load_existing(self, queue_page, services):
        sid = services.queue.create_session("dynamic").payload["sessionId"]
        services.queue.enqueue(sid, "z")
        assert queue_page.load(sid)
        assert queue_page.elements == ["z"]
        assert queue_page.banner.text == "Session loaded successfully!"

    def test_load_missing(self, queue_page):
        assert not queue_page.load("ghost")
        assert queue_page.banner.text == "Session not found"
        assert queue_page.show_create


# ============================================================================
# Linked list
# ============================================================================
class TestLinkedListPage:

    def test_inserts_follow_backend(self, list_page, backend):
        list_page.create("doubly")
        list_page.insert_tail("b")
        list_page.insert_head("a")
        list_page.insert_at("c", "2")
        assert list_page.elements == ["a", "b", "c"]
        assert list_page.elements == _backend_elements(backend, "linkedlist", list_page)
        assert list_page.is_doubly

    def test_bad_index(self, list_page, backend):
        list_page.create("singly")
        sent = len(backend.requests)
        list_page.remove_at("-1")
        assert list_page.banner.text == "Please enter a valid index (0 or greater)"
        assert len(backend.requests) == sent

    def test_out_of_bounds_from_backend(self, list_page):
        list_page.create("singly")
        list_page.insert_at("a", "5")
        assert list_page.banner.text == "Index out of bounds"
        assert list_page.elements == []

    def test_search_loads_traversal(self, list_page):
        list_page.create("singly")
        for value in ("a", "b", "c"):
            list_page.insert_tail(value)
        list_page.search("b")
        assert list_page.banner.text == 'Found "b" at index 1'
        assert list_page.player.total_steps == 2
        assert list_page.autoplay

    @pytest.mark.parametrize("mutate", [
        lambda p: p.insert_head("z"),
        lambda p: p.insert_tail("z"),
        lambda p: p.insert_at("z", "1"),
        lambda p: p.delete_head(),
        lambda p: p.remove_at("0"),
    ])
    def test_mutation_drops_finished_search(self, list_page, mutate):
        list_page.create("singly")
        for value in ("a", "b"):
            list_page.insert_tail(value)
        list_page.search("b")
        list_page.player.begin()
        while list_page.player.advance() is not None:
            pass
        assert list_page.player.frame.found == frozenset({1})

        mutate(list_page)
        assert list_page.banner.text.endswith("completed successfully")
        assert list_page.player.frame is None
        assert list_page.player.total_steps == 0
        assert not list_page.autoplay

    def test_failed_mutation_keeps_search(self, list_page):
        list_page.create("singly")
        list_page.insert_tail("a")
        list_page.search("a")
        list_page.insert_at("z", "9")
        assert list_page.banner.text == "Index out of bounds"
        assert list_page.player.total_steps == 1

    def test_loading_another_list_drops_search(self, list_page, services):
        other = services.linked_list.create_session("singly").payload["sessionId"]
        list_page.create("singly")
        list_page.insert_tail("a")
        list_page.search("a")
        assert list_page.load(other)
        assert list_page.player.total_steps == 0

    def test_search_miss(self, list_page):
        list_page.create("singly")
        list_page.insert_tail("a")
        list_page.search("q")
        assert list_page.banner.text == '"q" not found in the list'

    def test_search_needs_value(self, list_page):
        list_page.create("singly")
        list_page.search("")
        assert list_page.banner.text == "Please enter a value to search for"

    def test_clear(self, list_page):
        list_page.create("singly")
        list_page.insert_tail("a")
        list_page.search("a")
        list_page.clear()
        assert list_page.elements == []
        assert list_page.player.total_steps == 0
        assert list_page.banner.text == "LinkedList cleared successfully"

    def test_delete_on_empty_list(self, list_page):
        list_page.create("singly")
        list_page.delete_head()
        assert list_page.banner.text == "Linkedlist is empty"

    def test_unknown_kind(self, list_page, backend):
        assert not list_page.create("circular")
        assert backend.requests == []
