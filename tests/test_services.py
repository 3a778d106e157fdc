"""Endpoint wrappers: URLs, payload names, failure normalisation."""

import json

import httpx
import pytest

from services import ApiResponse, Unauthorized


def _body(request):
    return json.loads(request.content)


class TestEnvelope:

    def test_items_from_sessions_or_data(self):
        assert ApiResponse.from_body({"success": True, "sessions": [1]}).items == [1]
        assert ApiResponse.from_body({"success": True, "data": [2]}).items == [2]
        assert ApiResponse.from_body({"success": True, "data": {"x": 1}}).items == []

    def test_extra_fields_kept(self):
        response = ApiResponse.from_body({"success": True, "token": "t", "steps": []})
        assert response.get("token") == "t"
        assert response.get("steps") == []

    def test_non_dict_body(self):
        assert not ApiResponse.from_body(["nope"]).success


class TestStructureServices:

    def test_create_static_stack_sends_capacity(self, services, backend):
        response = services.stack.create_session("static", 3, "my-stack")
        assert response.success
        assert backend.paths() == ["/api/stack/static"]
        assert _body(backend.requests[0]) == {"maxSize": 3, "sessionId": "my-stack"}

    def test_insert_at_index_uses_value_key(self, services, backend):
        sid = services.linked_list.create_session("singly").payload["sessionId"]
        services.linked_list.insert_at_index(sid, "x", 0)
        assert _body(backend.requests[-1]) == {"sessionId": sid, "value": "x", "index": 0}

    def test_peek_is_a_get_with_query(self, services, backend):
        sid = services.queue.create_session("dynamic").payload["sessionId"]
        services.queue.enqueue(sid, "a")
        response = services.queue.peek(sid)
        assert response.payload == "a"
        request = backend.requests[-1]
        assert request.method == "GET"
        assert request.url.params["sessionId"] == sid

    def test_domain_failure_keeps_backend_message(self, services):
        sid = services.stack.create_session("dynamic").payload["sessionId"]
        response = services.stack.pop(sid)
        assert not response.success
        assert response.message == "Stack is empty"

    def test_server_error_falls_back_to_default_message(self, services, backend):
        backend.override("/api/stack/push", 500)
        response = services.stack.push("s1", "a")
        assert not response.success
        assert response.message == "Failed to push element"

    def test_network_error_uses_default_message(self, services, backend):
        backend.override("/api/queue/sessions",
                         httpx.ConnectError("refused"))
        response = services.queue.get_sessions()
        assert response.message == "Failed to fetch sessions"

    def test_unauthorized_propagates(self, services, backend, storage):
        storage["token"] = "stale"
        backend.override("/api/linkedlist/sessions", 401, {"message": "expired"})
        with pytest.raises(Unauthorized):
            services.linked_list.get_sessions()
        assert "token" not in storage


class TestAlgorithmServices:

    def test_unsupported_algorithm_sends_nothing(self, services, backend):
        response = services.sorting.sort("quick", [3, 1])
        assert response.message == "Unsupported algorithm: quick"
        assert backend.requests == []

    def test_sort_returns_steps(self, services):
        response = services.sorting.sort("bubble", [2, 1])
        assert response.success
        assert response.get("comparisons") == 1
        assert response.get("steps")[0]["swapped"] is True

    def test_failure_message_names_the_algorithm(self, services, backend):
        backend.override("/api/sort/optimized-bubble", 500)
        response = services.sorting.sort("optimized-bubble", [1])
        assert response.message == "Failed to perform optimized bubble sort"

    def test_session_round_trip(self, services):
        services.searching.search("linear", [4, 5], 5)
        sessions = services.searching.get_sessions().items
        sid = sessions[0]["sessionId"]
        assert services.searching.get_session(sid).payload["foundIndex"] == 1
        assert services.searching.delete_session(sid).success
        assert not services.searching.get_session(sid).success


class TestAuthService:

    def test_wrong_password_is_a_failed_response(self, services):
        response = services.auth.signin("alice", "nope")
        assert not response.success
        assert response.message == "Invalid username or password"

    def test_signup_conflict(self, services):
        response = services.auth.signup("alice", "secret1", "a@b.io")
        assert response.message == "Username already exists"
