"""
routes/
-------
HTTP surface of the client.

    auth        /  /signin  /signup  /logout
    dashboard   /dashboard
    structures  /linkedlist  /stack  /queue  (+ /<page>/<session_id>)
    algorithms  /sorting  /searching         (+ /<page>/<session_id>)
    playback    /api/<sorting|searching|linkedlist>/{play,tick,next,prev,reset}
"""

from flask import Flask

from routes import algorithms, auth, dashboard, playback, structures


def register_blueprints(app: Flask) -> None:
    app.register_blueprint(auth.bp)
    app.register_blueprint(dashboard.bp)
    app.register_blueprint(playback.bp)
    app.register_blueprint(algorithms.bp)
    app.register_blueprint(structures.bp)
