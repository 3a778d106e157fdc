"""
main.py — AlgoPulse Flask App
==============================
The web server that fronts the AlgoPulse backend.

Routes (see routes/ for the full list):
  GET  /                                  – landing page
  GET  /signin  /signup  /logout          – authentication
  GET  /dashboard                         – every session, newest first
  GET  /linkedlist /stack /queue          – data-structure visualizers
  GET  /sorting /searching                – algorithm visualizers
  POST /api/<page>/{play,tick,next,prev,reset}  – playback (JSON)

State management:
  • Credentials (token + user) live in the signed Flask session cookie and
    are read by one shared ApiClient through a CredentialStore.
  • An AuthStore is rebuilt per request from those credentials and hung
    on ``flask.g``.
  • Page controllers (banners, history, playback cursors) live server-side
    in a ViewStateStore keyed by a per-browser id kept in the cookie.
"""

import logging
import time
from typing import Callable, Optional

import httpx
from flask import Flask, flash, g, jsonify, redirect, request, session, url_for

from auth import AuthStore
from config import Settings
from log_setup import configure_logging
from pages import ViewStateStore
from routes import register_blueprints
from routes.common import EXTENSION_KEY, AppState, forget_views
from services import ApiClient, CredentialStore, Services, Unauthorized

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.BaseTransport] = None,
    clock: Callable[[], float] = time.time,
) -> Flask:
    """
    Args:
        settings  : Runtime settings (defaults to ``Settings.from_env()``).
        transport : Optional httpx transport for the backend client; tests
                    pass ``httpx.MockTransport``.
        clock     : Wall clock used for token expiry.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.secret_key = settings.secret_key

    client = ApiClient(
        settings.api_base_url,
        CredentialStore(session),
        timeout=settings.request_timeout,
        transport=transport,
    )
    services = Services.bind(client)
    app.extensions[EXTENSION_KEY] = AppState(
        settings=settings,
        services=services,
        views=ViewStateStore(settings.max_views),
    )

    @app.before_request
    def load_auth():
        g.auth = AuthStore(CredentialStore(session), services.auth, clock)
        g.auth.init_from_storage()

    @app.errorhandler(Unauthorized)
    def handle_unauthorized(exc: Unauthorized):
        # credentials were already wiped by the response hook
        logger.info("Unauthorized on %s; sending user to sign in", request.path)
        forget_views()
        if request.path.startswith("/api/"):
            return jsonify({"error": exc.message}), 401
        flash(exc.message, "error")
        return redirect(url_for("auth.signin"))

    register_blueprints(app)
    logger.info("AlgoPulse client ready; backend at %s", settings.api_base_url)
    return app


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app = create_app()
    print("=" * 60)
    print("  AlgoPulse")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=False, port=5000)
