"""
pages/
------
One controller per screen.  Controllers hold the page's local state,
validate input, call services and turn every outcome into a banner.

    from pages import StackPage, ViewStateStore
"""

from pages.algorithms import SearchingPage, SortingPage
from pages.auth_forms import SignInForm, SignUpForm
from pages.base import Banner, HistoryEntry, PageController
from pages.dashboard import DashboardPage, SessionSummary, SourceResult
from pages.registry import ViewStateStore
from pages.structures import LinkedListPage, QueuePage, StackPage

__all__ = [
    "Banner",
    "DashboardPage",
    "HistoryEntry",
    "LinkedListPage",
    "PageController",
    "QueuePage",
    "SearchingPage",
    "SessionSummary",
    "SignInForm",
    "SignUpForm",
    "SortingPage",
    "SourceResult",
    "StackPage",
    "ViewStateStore",
]
