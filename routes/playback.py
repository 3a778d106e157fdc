"""
playback.py — JSON playback endpoints
======================================
    POST /api/<page>/play    enter PLAYING, first frame
    POST /api/<page>/tick    next frame while PLAYING (settles at the end)
    POST /api/<page>/next    one step forward (stops playback)
    POST /api/<page>/prev    one step back (stops playback)
    POST /api/<page>/reset   back to step 0

Every answer carries the rendered SVG plus ``delay_ms``: how long the
browser holds this frame before its next ``tick``.
"""

from flask import Blueprint, jsonify

from pages.structures import LinkedListPage
from routes import algorithms, structures
from routes.common import login_required, page_for, view_locked
from ui import explanation_panel, render_array, render_linked_list

bp = Blueprint("playback", __name__, url_prefix="/api")

PLAYBACK_PAGES_RULE = "any(sorting, searching, linkedlist)"


def _page(key: str):
    if key == "linkedlist":
        return page_for(key, structures.FACTORIES[key])
    return page_for(key, algorithms.FACTORIES[key])


def _answer(page):
    player = page.player
    frame = player.frame
    if isinstance(page, LinkedListPage):
        svg = render_linked_list(page.elements, frame, page.is_doubly)
    else:
        svg = render_array(page.array, frame)
    total = player.total_steps
    return jsonify({
        "playing":     player.is_playing,
        "cursor":      max(player.cursor, 0),
        "total":       total,
        "finished":    total > 0 and not player.is_playing and player.cursor == total - 1,
        "delay_ms":    frame.delay_ms if frame is not None else 0,
        "svg":         svg,
        "explanation": explanation_panel(frame.description if frame is not None else ""),
        "frame":       frame.to_dict() if frame is not None else None,
    })


@bp.route(f"/<{PLAYBACK_PAGES_RULE}:key>/play", methods=["POST"])
@login_required
@view_locked
def play(key):
    page = _page(key)
    page.player.begin()
    return _answer(page)


@bp.route(f"/<{PLAYBACK_PAGES_RULE}:key>/tick", methods=["POST"])
@login_required
@view_locked
def tick(key):
    page = _page(key)
    page.player.advance()
    return _answer(page)


@bp.route(f"/<{PLAYBACK_PAGES_RULE}:key>/next", methods=["POST"])
@login_required
@view_locked
def step_next(key):
    page = _page(key)
    page.player.step_forward()
    return _answer(page)


@bp.route(f"/<{PLAYBACK_PAGES_RULE}:key>/prev", methods=["POST"])
@login_required
@view_locked
def step_prev(key):
    page = _page(key)
    page.player.step_backward()
    return _answer(page)


@bp.route(f"/<{PLAYBACK_PAGES_RULE}:key>/reset", methods=["POST"])
@login_required
@view_locked
def reset(key):
    page = _page(key)
    page.player.reset()
    return _answer(page)
