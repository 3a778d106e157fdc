"""Parallel session aggregation on the dashboard."""

import pytest

from pages import DashboardPage
from pages.dashboard import ALL_FAILED_MESSAGE, summarize_session
from services import Unauthorized

SOURCES = ["/api/linkedlist/sessions", "/api/stack/sessions", "/api/queue/sessions",
           "/api/sort/sessions", "/api/search/sessions"]


@pytest.fixture
def dashboard(services, settings):
    return DashboardPage(services, settings)


def test_merges_newest_first(dashboard, services):
    services.stack.create_session("dynamic")
    services.sorting.sort("bubble", [2, 1])
    services.queue.create_session("static", 4)

    sessions = dashboard.refresh()
    assert [s.type for s in sessions] == ["queue", "sorting", "stack"]
    assert dashboard.total == 3
    assert dashboard.counts == {"linkedlist": 0, "stack": 1, "queue": 1,
                                "sorting": 1, "searching": 0}
    assert dashboard.banner is None


def test_every_source_is_fetched(dashboard, backend):
    dashboard.refresh()
    assert sorted(backend.paths()) == sorted(SOURCES)


def test_partial_failure_still_renders(dashboard, services, backend):
    services.stack.create_session("dynamic")
    backend.override("/api/queue/sessions", 500)
    backend.override("/api/sort/sessions", 500)

    sessions = dashboard.refresh()
    assert [s.type for s in sessions] == ["stack"]
    assert not dashboard.results["queue"].ok
    assert dashboard.results["stack"].ok
    assert dashboard.banner is None


def test_all_sources_failing_shows_error(dashboard, backend):
    for path in SOURCES:
        backend.override(path, 500)
    assert dashboard.refresh() == []
    assert dashboard.banner.text == ALL_FAILED_MESSAGE


def test_unauthorized_in_any_source_is_raised(dashboard, backend):
    backend.override("/api/search/sessions", 401)
    with pytest.raises(Unauthorized):
        dashboard.refresh()


def test_summaries():
    search = summarize_session("searching", {
        "sessionId": "s9", "algorithm": "binary", "originalArray": [1, 2, 3], "target": 2,
    })
    assert search.size == 3
    assert search.detail == "binary · target 2"
    assert search.href == "/searching/s9"

    stack = summarize_session("stack", {"sessionId": "k", "type": "static",
                                        "elements": ["a"], "currentSize": 1})
    assert stack.size == 1
    assert stack.detail == "static"
    assert stack.sort_key == 0.0
