"""
common.py — Helpers every blueprint shares
===========================================
  • app_state()        – services, settings and view store hung on the app
  • page_for(key)      – this browser's controller for one page
  • login_required     – redirect anonymous users to /signin
  • view_locked        – one request at a time per browser
  • render_page(...)   – stitch panels into the layout
"""

import secrets
import time
from dataclasses import dataclass
from functools import wraps
from typing import Callable

from flask import (
    current_app,
    g,
    get_flashed_messages,
    jsonify,
    redirect,
    render_template_string,
    request,
    session,
    url_for,
)

from config import Settings
from pages import Banner, PageController, ViewStateStore
from services import Services
from ui import LAYOUT_TEMPLATE, banner

EXTENSION_KEY = "algopulse"
VIEW_KEY = "view_id"


@dataclass
class AppState:
    settings: Settings
    services: Services
    views:    ViewStateStore


def app_state() -> AppState:
    return current_app.extensions[EXTENSION_KEY]


def view_id() -> str:
    vid = session.get(VIEW_KEY)
    if not vid:
        vid = session[VIEW_KEY] = secrets.token_hex(16)
    return vid


def page_for(key: str, factory: Callable[[AppState], PageController]) -> PageController:
    state = app_state()
    return state.views.get_or_create(view_id(), key, lambda: factory(state))


def forget_views() -> None:
    vid = session.pop(VIEW_KEY, None)
    if vid:
        app_state().views.discard(vid)


def login_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not g.auth.is_authenticated:
            if request.path.startswith("/api/"):
                return jsonify({"error": "Not signed in"}), 401
            return redirect(url_for("auth.signin"))
        return view(*args, **kwargs)
    return wrapped


def view_locked(view):
    """Hold this browser's view lock for the whole handler."""
    @wraps(view)
    def wrapped(*args, **kwargs):
        with app_state().views.lock_for(view_id()):
            return view(*args, **kwargs)
    return wrapped


def flashed_banner(ttl: float):
    """Flask's one-shot flash messages, shown through the same banner."""
    for category, text in get_flashed_messages(with_categories=True):
        kind = "error" if category == "error" else "success"
        return Banner(kind, text, time.time() + ttl)
    return None


def render_page(title: str, page: PageController = None, status: int = 200, **parts):
    settings = app_state().settings
    current = page.banner if page is not None else None
    if current is None:
        current = flashed_banner(settings.message_ttl)
    html = render_template_string(
        LAYOUT_TEMPLATE,
        title=title,
        user=g.auth.user,
        banner=banner(current),
        message_ttl_ms=int(settings.message_ttl * 1000),
        content=parts.get("content", ""),
        sidebar=parts.get("sidebar", ""),
        canvas=parts.get("canvas", ""),
        explanation=parts.get("explanation", ""),
        aside=parts.get("aside", ""),
    )
    return html, status
