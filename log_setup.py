"""
log_setup.py — Logging bootstrap
=================================
One stream handler on the root logger; modules just do
``logger = logging.getLogger(__name__)``.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# chatty third-party loggers that drown out request traces at DEBUG
_QUIET = ("httpx", "httpcore", "werkzeug")


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(level)

    # idempotent: the app factory may run more than once under the test client
    if not any(getattr(h, "_algopulse", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._algopulse = True
        root.addHandler(handler)

    for name in _QUIET:
        logging.getLogger(name).setLevel(max(logging.WARNING, root.level))
