"""
algorithms.py — /sorting, /searching
=====================================
Form POSTs (select / run / random / delete) redirect back to GET; the GET
after a successful run tells the browser to start playback.
"""

from typing import Callable, Dict

from flask import Blueprint, redirect, request, url_for

from pages import SearchingPage, SortingPage
from pages.algorithms import AlgorithmPage
from routes.common import app_state, login_required, page_for, render_page, view_locked
from ui import (
    algorithm_info,
    algorithm_selector,
    analytics_panel,
    explanation_panel,
    history_panel,
    legend,
    playback_controls,
    render_array,
    session_list,
)

bp = Blueprint("algorithms", __name__)

FAMILIES = "any(sorting, searching)"

FACTORIES: Dict[str, Callable] = {
    "sorting":   lambda s: SortingPage(s.services.sorting, s.settings),
    "searching": lambda s: SearchingPage(s.services.searching, s.settings),
}


def algorithm_page(family: str) -> AlgorithmPage:
    return page_for(family, FACTORIES[family])


@bp.route(f"/<{FAMILIES}:family>")
@bp.route(f"/<{FAMILIES}:family>/<session_id>")
@login_required
@view_locked
def show(family, session_id=None):
    page = algorithm_page(family)
    page.teardown()
    wanted = session_id or request.args.get("sessionId")
    if wanted and (page.session is None or page.session.session_id != wanted):
        page.load(wanted)
    if not page.sessions:
        page.refresh_sessions()
    return render_page(page.title, page, **_panels(family, page))


@bp.route(f"/<{FAMILIES}:family>/select", methods=["POST"])
@login_required
@view_locked
def select(family):
    page = algorithm_page(family)
    page.select(request.form.get("algorithm", ""))
    return redirect(url_for("algorithms.show", family=family))


@bp.route(f"/<{FAMILIES}:family>/run", methods=["POST"])
@login_required
@view_locked
def run(family):
    page = algorithm_page(family)
    page.set_array(request.form.get("array", ""))
    if isinstance(page, SearchingPage):
        page.set_target(request.form.get("target", ""))
    page.run()
    return redirect(url_for("algorithms.show", family=family))


@bp.route(f"/<{FAMILIES}:family>/random", methods=["POST"])
@login_required
@view_locked
def randomize(family):
    page = algorithm_page(family)
    if isinstance(page, SearchingPage):
        # binary search needs sorted input
        page.randomize(sorted_values=page.is_binary)
    else:
        page.randomize()
    return redirect(url_for("algorithms.show", family=family))


@bp.route(f"/<{FAMILIES}:family>/sessions/<session_id>/delete", methods=["POST"])
@login_required
@view_locked
def delete(family, session_id):
    page = algorithm_page(family)
    page.delete(session_id)
    return redirect(url_for("algorithms.show", family=family))


# ---------------------------------------------------------------------------
# Panels
# ---------------------------------------------------------------------------
def _panels(family: str, page: AlgorithmPage) -> dict:
    settings = app_state().settings
    player = page.player
    pending, page.autoplay = page.autoplay, False
    frame = player.frame
    target = page.target_input if isinstance(page, SearchingPage) else None
    current_id = page.session.session_id if page.session is not None else None

    sidebar = "".join([
        algorithm_selector(page.choices, page.algorithm, f"/{family}", page.array_input,
                           target, settings.max_array_size),
        playback_controls(f"/api/{family}", player.is_playing, max(player.cursor, 0),
                          player.total_steps, autoplay=pending),
        analytics_panel(page.metrics),
        algorithm_info(page.info),
        session_list(page.sessions, family, current_id),
        history_panel(page.history_entries),
    ])
    states = (["idle", "comparing", "swapped"] if family == "sorting"
              else ["idle", "comparing", "current", "found"])
    return {
        "sidebar": sidebar,
        "canvas": render_array(page.array, frame),
        "explanation": explanation_panel(frame.description if frame is not None else ""),
        "aside": legend(states),
    }
