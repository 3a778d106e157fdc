"""
structures.py — /linkedlist, /stack, /queue
============================================
GET renders the page (loading ``sessionId`` / ``/<kind>/<id>`` when given);
every operation is a form POST that redirects back to GET.
"""

from typing import Callable, Dict

from flask import Blueprint, abort, redirect, request, url_for

from pages import LinkedListPage, QueuePage, StackPage
from pages.structures import StructurePage
from routes.common import app_state, login_required, page_for, render_page, view_id, view_locked
from ui import (
    action_button,
    create_session_form,
    explanation_panel,
    history_panel,
    legend,
    playback_controls,
    render_linked_list,
    render_queue,
    render_stack,
    structure_stats,
    value_form,
)

bp = Blueprint("structures", __name__)

KINDS = "any(linkedlist, stack, queue)"

FACTORIES: Dict[str, Callable] = {
    "linkedlist": lambda s: LinkedListPage(s.services.linked_list, s.settings),
    "stack":      lambda s: StackPage(s.services.stack, s.settings),
    "queue":      lambda s: QueuePage(s.services.queue, s.settings),
}

# op name → (page, form) → outcome
OPERATIONS: Dict[str, Dict[str, Callable]] = {
    "linkedlist": {
        "insert-head": lambda p, f: p.insert_head(f.get("value")),
        "insert-tail": lambda p, f: p.insert_tail(f.get("value")),
        "insert-at":   lambda p, f: p.insert_at(f.get("value"), f.get("index")),
        "delete-head": lambda p, f: p.delete_head(),
        "delete-tail": lambda p, f: p.delete_tail(),
        "remove-at":   lambda p, f: p.remove_at(f.get("index")),
        "search":      lambda p, f: p.search(f.get("value")),
        "clear":       lambda p, f: p.clear(),
    },
    "stack": {
        "push": lambda p, f: p.push(f.get("value")),
        "pop":  lambda p, f: p.pop(),
        "peek": lambda p, f: p.peek(),
    },
    "queue": {
        "enqueue": lambda p, f: p.enqueue(f.get("value")),
        "dequeue": lambda p, f: p.dequeue(),
        "peek":    lambda p, f: p.peek(),
    },
}


def structure_page(kind: str) -> StructurePage:
    return page_for(kind, FACTORIES[kind])


@bp.route(f"/<{KINDS}:kind>")
@bp.route(f"/<{KINDS}:kind>/<session_id>")
@login_required
@view_locked
def show(kind, session_id=None):
    page = structure_page(kind)
    # navigating to the page stops any animation still running
    page.teardown()
    wanted = session_id or request.args.get("sessionId")
    if wanted and (page.session is None or page.session.session_id != wanted):
        page.load(wanted)
    return render_page(page.title, page, **_panels(kind, page))


@bp.route(f"/<{KINDS}:kind>/create", methods=["POST"])
@login_required
@view_locked
def create(kind):
    page = structure_page(kind)
    page.create(request.form.get("kind", ""), request.form.get("max_size"),
                request.form.get("session_id"))
    return _back(kind, page)


@bp.route(f"/<{KINDS}:kind>/new", methods=["POST"])
@login_required
@view_locked
def new(kind):
    state = app_state()
    state.views.replace(view_id(), kind, FACTORIES[kind](state))
    return redirect(url_for("structures.show", kind=kind))


@bp.route(f"/<{KINDS}:kind>/op/<op>", methods=["POST"])
@login_required
@view_locked
def operate(kind, op):
    action = OPERATIONS[kind].get(op)
    if action is None:
        abort(404)
    page = structure_page(kind)
    action(page, request.form)
    return _back(kind, page)


def _back(kind: str, page: StructurePage):
    if page.session is not None:
        return redirect(url_for("structures.show", kind=kind, session_id=page.session.session_id))
    return redirect(url_for("structures.show", kind=kind))


# ---------------------------------------------------------------------------
# Panels
# ---------------------------------------------------------------------------
def _panels(kind: str, page: StructurePage) -> dict:
    if page.session is None:
        with_capacity = kind in ("stack", "queue")
        return {
            "sidebar": create_session_form(kind, page.kinds, with_capacity),
            "canvas": _canvas(kind, page),
            "explanation": explanation_panel(
                f"Create a {page.label.lower()} session, or load one by its ID."),
        }

    base = f"/{kind}/op"
    if kind == "linkedlist":
        ops = "".join([
            value_form(f"{base}/insert-head", "Insert Head"),
            value_form(f"{base}/insert-tail", "Insert Tail"),
            value_form(f"{base}/insert-at", "Insert At", with_index=True),
            value_form(f"{base}/remove-at", "Remove At", with_value=False, with_index=True),
            value_form(f"{base}/search", "Search", placeholder="Value to find"),
            '<div class="button-row">',
            action_button(f"{base}/delete-head", "Delete Head"),
            action_button(f"{base}/delete-tail", "Delete Tail"),
            action_button(f"{base}/clear", "Clear"),
            "</div>",
        ])
        player = page.player
        extra = {"Doubly": "yes" if page.is_doubly else "no"}
        playback = playback_controls("/api/linkedlist", player.is_playing,
                                     max(player.cursor, 0), player.total_steps,
                                     autoplay=_consume_autoplay(page))
        frame = player.frame
        note = frame.description if frame is not None else ""
    elif kind == "stack":
        ops = "".join([
            value_form(f"{base}/push", "Push"),
            '<div class="button-row">',
            action_button(f"{base}/pop", "Pop"),
            action_button(f"{base}/peek", "Peek"),
            "</div>",
        ])
        extra = {"Top": page.top, "Full": "yes" if page.session.is_full else "no"}
        playback = ""
        note = "LIFO: the last element pushed is the first popped."
    else:
        ops = "".join([
            value_form(f"{base}/enqueue", "Enqueue"),
            '<div class="button-row">',
            action_button(f"{base}/dequeue", "Dequeue"),
            action_button(f"{base}/peek", "Peek"),
            "</div>",
        ])
        extra = {"Front": page.front, "Rear": page.elements[-1] if page.elements else None,
                 "Full": "yes" if page.session.is_full else "no"}
        playback = ""
        note = "FIFO: elements join at the rear and leave from the front."

    sidebar = "".join([
        structure_stats(page.session, page.title, extra),
        f'<div class="panel operations"><h3>🛠 Operations</h3>{ops}</div>',
        playback,
        action_button(f"/{kind}/new", "➕ New session"),
        history_panel(page.history_entries),
    ])
    return {
        "sidebar": sidebar,
        "canvas": _canvas(kind, page),
        "explanation": explanation_panel(note),
        "aside": legend(["idle", "current", "found", "marked"]),
    }


def _canvas(kind: str, page: StructurePage) -> str:
    max_size = page.session.max_size if page.session is not None else None
    if kind == "linkedlist":
        return render_linked_list(page.elements, page.player.frame, page.is_doubly,
                                  page.highlighted_index)
    if kind == "stack":
        return render_stack(page.elements, page.highlighted_index, max_size)
    return render_queue(page.elements, page.highlighted_index, max_size)


def _consume_autoplay(page) -> bool:
    pending, page.autoplay = page.autoplay, False
    return pending
