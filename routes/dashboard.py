"""
dashboard.py — /dashboard
"""

from flask import Blueprint

from pages import DashboardPage
from routes.common import login_required, page_for, render_page, view_locked
from ui import dashboard_cards, dashboard_sessions

bp = Blueprint("dashboard", __name__)


@bp.route("/dashboard")
@login_required
@view_locked
def index():
    page = page_for("dashboard", lambda s: DashboardPage(s.services, s.settings))
    page.refresh()
    content = f"""
    <h2 style="margin-bottom:18px">Your sessions <span class="hint">({page.total} total)</span></h2>
    {dashboard_cards(page.counts)}
    {dashboard_sessions(page.sessions)}
    """
    return render_page(page.title, page, content=content)
