"""Form validation, view-state store, and the HTML/SVG renderers."""

import threading

import pytest

from engine import Frame, RunMetrics
from pages import Banner, SignInForm, SignUpForm, ViewStateStore
from pages.base import PageController
from ui import (
    analytics_panel,
    banner,
    playback_controls,
    render_array,
    render_linked_list,
    render_queue,
    render_stack,
)


# ============================================================================
# Forms
# ============================================================================
class TestSignUpForm:

    @pytest.mark.parametrize("fields, field, message", [
        ({"username": "al"}, "username", "Username must be at least 3 characters"),
        ({"email": ""}, "email", "Email is required"),
        ({"email": "no-at-sign"}, "email", "Please enter a valid email address"),
        ({"password": "12345", "confirm_password": "12345"}, "password",
         "Password must be at least 6 characters"),
        ({"confirm_password": ""}, "confirm_password", "Please confirm your password"),
        ({"confirm_password": "other1"}, "confirm_password", "Passwords do not match"),
    ])
    def test_field_errors(self, fields, field, message):
        data = {"username": "alice", "email": "a@b.io",
                "password": "secret1", "confirm_password": "secret1"}
        data.update(fields)
        form = SignUpForm.from_form(data)
        assert not form.validate()
        assert form.errors[field] == message

    def test_valid(self):
        form = SignUpForm("alice", "a@b.io", "secret1", "secret1")
        assert form.validate()
        assert form.errors == {}


def test_signin_form_requires_both_fields():
    form = SignInForm.from_form({"username": "  "})
    assert not form.validate()
    assert form.errors == {"username": "Username is required",
                           "password": "Password is required"}


# ============================================================================
# View-state store
# ============================================================================
class StubPage(PageController):
    def __init__(self, settings):
        super().__init__(settings)
        self.torn_down = False

    def teardown(self):
        self.torn_down = True


class TestViewStateStore:

    def test_same_view_same_controller(self, settings):
        views = ViewStateStore()
        first = views.get_or_create("v1", "stack", lambda: StubPage(settings))
        assert views.get_or_create("v1", "stack", lambda: StubPage(settings)) is first
        assert views.get_or_create("v2", "stack", lambda: StubPage(settings)) is not first

    def test_replace_tears_down_old(self, settings):
        views = ViewStateStore()
        old = views.get_or_create("v1", "stack", lambda: StubPage(settings))
        views.replace("v1", "stack", StubPage(settings))
        assert old.torn_down

    def test_eviction_is_lru(self, settings):
        views = ViewStateStore(max_views=2)
        a = views.get_or_create("a", "p", lambda: StubPage(settings))
        b = views.get_or_create("b", "p", lambda: StubPage(settings))
        views.get_or_create("a", "p", lambda: StubPage(settings))
        views.get_or_create("c", "p", lambda: StubPage(settings))
        assert len(views) == 2
        assert b.torn_down
        assert not a.torn_down

    def test_one_lock_per_view(self, settings):
        views = ViewStateStore()
        lock = views.lock_for("v1")
        assert views.lock_for("v1") is lock
        assert views.lock_for("v2") is not lock
        # re-entrant: a locked handler may replace its own pages
        with lock:
            views.replace("v1", "stack", StubPage(settings))
            views.replace("v1", "stack", StubPage(settings))

    def test_busy_evicted_view_is_left_alone(self, settings):
        views = ViewStateStore(max_views=1)
        page = views.get_or_create("a", "p", lambda: StubPage(settings))
        lock = views.lock_for("a")
        holder = threading.Thread(target=lock.acquire)
        holder.start()
        holder.join()
        views.get_or_create("b", "p", lambda: StubPage(settings))
        assert len(views) == 1
        assert not page.torn_down

    def test_discard(self, settings):
        views = ViewStateStore()
        page = views.get_or_create("v1", "stack", lambda: StubPage(settings))
        views.discard("v1")
        assert page.torn_down
        assert len(views) == 0


def test_banner_expires(settings):
    now = [100.0]
    page = PageController(settings, clock=lambda: now[0])
    page.flash_success("saved")
    assert page.banner.text == "saved"
    now[0] += settings.message_ttl
    assert page.banner is None


def test_history_is_bounded(settings):
    page = PageController(settings)
    for i in range(settings.history_limit + 3):
        page.record("Push", i, True, "ok")
    entries = page.history_entries
    assert len(entries) == settings.history_limit
    assert entries[0].operand == str(settings.history_limit + 2)


# ============================================================================
# Renderers
# ============================================================================
class TestRenderers:

    def test_array_uses_frame_snapshot_and_states(self):
        frame = Frame(cursor=0, comparing=frozenset({0}), swapped=frozenset({1}),
                      array=(9, 8), search_range=None)
        svg = render_array([1, 2], frame)
        assert 'class="cell comparing"' in svg
        assert 'class="cell swapped"' in svg
        assert ">9</text>" in svg

    def test_search_window_drawn(self):
        frame = Frame(cursor=0, search_range=(1, 2))
        assert 'class="range"' in render_array([1, 2, 3], frame)

    def test_empty_canvases(self):
        assert "No array yet" in render_array([])
        assert "List is empty" in render_linked_list([])
        assert "Stack is empty" in render_stack([])
        assert "Queue is empty" in render_queue([])

    def test_structure_labels(self):
        assert "HEAD" in render_linked_list(["a", "b"]) and "NULL" in render_linked_list(["a"])
        assert "TOP" in render_stack(["a", "b"], max_size=4)
        queue = render_queue(["a", "b"])
        assert "FRONT" in queue and "REAR" in queue

    def test_user_text_is_escaped(self):
        assert "<script>" not in render_stack(["<script>"])
        assert "&lt;b&gt;" in banner(Banner("error", "<b>", 0))

    def test_playback_controls(self):
        html = playback_controls("/api/sorting", False, 2, 3, autoplay=True)
        assert 'data-autoplay="1"' in html
        assert 'id="finished-badge" class="finished-badge" >' in html
        assert "disabled" not in playback_controls("/api/sorting", total_steps=2)
        assert "disabled" in playback_controls("/api/sorting")

    def test_analytics_panel(self):
        sort = analytics_panel(RunMetrics(algo_label="Bubble Sort", family="sorting", swaps=7))
        assert "Bubble Sort" in sort
        assert "Swaps:" in sort
        search = analytics_panel(RunMetrics(algo_label="Binary Search", family="searching",
                                            target=5, found=False))
        assert "Not Found" in search
        assert "Swaps:" not in search
        assert "Run an algorithm" in analytics_panel(None)
