"""
End-to-end through the Flask test client: auth flow, page POST/redirect/GET,
playback JSON, and the global 401 policy.
"""

import threading

import pytest


def _location(response) -> str:
    return response.headers["Location"]


# ============================================================================
# Auth
# ============================================================================
class TestAuthRoutes:

    def test_landing_for_anonymous(self, http):
        response = http.get("/")
        assert response.status_code == 200
        assert b"Get started" in response.data

    def test_wrong_password_stays_on_page(self, http):
        response = http.post("/signin", data={"username": "alice", "password": "nope"})
        assert response.status_code == 200
        assert "Location" not in response.headers
        assert b"Invalid username or password" in response.data
        assert _location(http.get("/dashboard")).endswith("/signin")

    def test_missing_fields_never_call_backend(self, http, backend):
        response = http.post("/signin", data={"username": "", "password": ""})
        assert b"Username is required" in response.data
        assert backend.requests == []

    def test_signin_redirects_to_dashboard(self, http):
        response = http.post("/signin", data={"username": "alice", "password": "wonderland"})
        assert _location(response).endswith("/dashboard")
        assert _location(http.get("/signin")).endswith("/dashboard")

    def test_signup_then_signin(self, http):
        response = http.post("/signup", data={
            "username": "bob", "email": "bob@b.io",
            "password": "secret1", "confirm_password": "secret1",
        })
        assert _location(response).endswith("/signin")
        page = http.get("/signin")
        assert b"Account created successfully! Please sign in." in page.data

    def test_signup_conflict_shows_backend_message(self, http):
        response = http.post("/signup", data={
            "username": "alice", "email": "a@b.io",
            "password": "secret1", "confirm_password": "secret1",
        })
        assert response.status_code == 200
        assert b"Username already exists" in response.data

    def test_logout(self, signed_in):
        assert _location(signed_in.get("/logout")).endswith("/")
        assert _location(signed_in.get("/dashboard")).endswith("/signin")


class TestProtectedRoutes:

    @pytest.mark.parametrize("path", ["/dashboard", "/stack", "/linkedlist", "/sorting"])
    def test_anonymous_redirected(self, http, path):
        assert _location(http.get(path)).endswith("/signin")

    def test_anonymous_api_gets_json_401(self, http):
        response = http.post("/api/sorting/play")
        assert response.status_code == 401
        assert response.get_json() == {"error": "Not signed in"}

    def test_expired_session_sends_user_to_signin(self, signed_in, backend):
        backend.override("/api/stack/sessions", 401, {"message": "jwt expired"})
        response = signed_in.get("/dashboard")
        assert _location(response).endswith("/signin")
        page = signed_in.get("/signin")
        assert b"Session expired. Please sign in again." in page.data
        assert _location(signed_in.get("/dashboard")).endswith("/signin")


# ============================================================================
# Pages
# ============================================================================
class TestStructureRoutes:

    def test_create_push_and_render(self, signed_in, backend):
        response = signed_in.post("/stack/create", data={"kind": "static", "max_size": "2"})
        assert _location(response).endswith("/stack/stack-1")
        signed_in.post("/stack/op/push", data={"value": "alpha"})
        page = signed_in.get("/stack/stack-1")
        assert page.status_code == 200
        assert b"alpha" in page.data
        assert b"Push (alpha) completed successfully" in page.data
        assert backend.structures["stack"]["stack-1"]["elements"] == ["alpha"]

    def test_unknown_operation(self, signed_in):
        signed_in.post("/queue/create", data={"kind": "dynamic"})
        assert signed_in.post("/queue/op/push", data={"value": "x"}).status_code == 404

    def test_load_by_query(self, signed_in, backend):
        backend.structures["queue"]["q-9"] = {
            "sessionId": "q-9", "type": "dynamic", "elements": ["z"], "maxSize": None,
            "createdAt": "2026-01-01T00:00:00Z", "updatedAt": "2026-01-01T00:00:00Z",
        }
        page = signed_in.get("/queue?sessionId=q-9")
        assert b"Session loaded successfully!" in page.data

    def test_new_session_resets_page(self, signed_in):
        signed_in.post("/stack/create", data={"kind": "dynamic"})
        assert _location(signed_in.post("/stack/new")).endswith("/stack")
        assert b'action="/stack/create"' in signed_in.get("/stack").data

    def test_dashboard_lists_sessions(self, signed_in):
        signed_in.post("/linkedlist/create", data={"kind": "singly", "session_id": "my-list"})
        page = signed_in.get("/dashboard")
        assert b"/linkedlist/my-list" in page.data
        assert b"(1 total)" in page.data


class TestPlaybackRoutes:

    def test_run_then_play_to_the_end(self, signed_in):
        signed_in.post("/sorting/run", data={"array": "3,1,2"})
        page = signed_in.get("/sorting")
        assert b'data-autoplay="1"' in page.data
        assert b'data-autoplay="1"' not in signed_in.get("/sorting").data

        state = signed_in.post("/api/sorting/play").get_json()
        assert (state["playing"], state["cursor"], state["total"]) == (True, 0, 3)
        assert state["delay_ms"] == 1500
        assert "<svg" in state["svg"]

        delays = [state["delay_ms"]]
        while state["playing"]:
            state = signed_in.post("/api/sorting/tick").get_json()
            if state["playing"]:
                delays.append(state["delay_ms"])
        assert delays == [1500, 1500, 1200]
        assert state["finished"]
        assert state["frame"]["comparing"] == []
        assert state["frame"]["swapped"] == []

    def test_manual_steps(self, signed_in):
        signed_in.post("/sorting/run", data={"array": "3,1,2"})
        assert signed_in.post("/api/sorting/next").get_json()["cursor"] == 1
        state = signed_in.post("/api/sorting/prev").get_json()
        assert state["cursor"] == 0
        assert not state["playing"]
        signed_in.post("/api/sorting/next")
        assert signed_in.post("/api/sorting/reset").get_json()["cursor"] == 0

    def test_binary_search_on_unsorted_blocked(self, signed_in, backend):
        signed_in.post("/searching/select", data={"algorithm": "binary"})
        signed_in.post("/searching/run", data={"array": "5,3,1", "target": "3"})
        assert not any(p.startswith("/api/search/binary") for p in backend.paths())
        assert b"requires a sorted array" in signed_in.get("/searching").data

    def test_linked_list_search_animation(self, signed_in):
        signed_in.post("/linkedlist/create", data={"kind": "singly"})
        for value in ("a", "b"):
            signed_in.post("/linkedlist/op/insert-tail", data={"value": value})
        signed_in.post("/linkedlist/op/search", data={"value": "b"})
        state = signed_in.post("/api/linkedlist/play").get_json()
        assert state["total"] == 2
        assert state["delay_ms"] == 500

    def test_requests_from_one_browser_take_turns(self, signed_in, app):
        signed_in.post("/sorting/run", data={"array": "3,1,2"})
        with signed_in.session_transaction() as cookie:
            lock = app.extensions["algopulse"].views.lock_for(cookie["view_id"])

        answers = []
        worker = threading.Thread(
            target=lambda: answers.append(signed_in.post("/api/sorting/next").get_json()))
        with lock:
            worker.start()
            worker.join(0.2)
            assert worker.is_alive()
            assert answers == []
        worker.join(5)
        assert answers[0]["cursor"] == 1
