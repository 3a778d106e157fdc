"""
config.py — Runtime Settings
=============================
Every tunable the client needs, read once from the environment.

A ``.env`` file in the working directory is loaded first (python-dotenv),
so local development only needs:

    ALGOPULSE_API_BASE_URL=http://localhost:8080
    ALGOPULSE_SECRET_KEY=change-me

Usage:
    from config import Settings
    settings = Settings.from_env()
"""

import os
import secrets
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv


ENV_PREFIX = "ALGOPULSE_"


@dataclass(frozen=True)
class Settings:
    """
    Attributes:
        api_base_url          : Backend root, e.g. "http://localhost:8080".
        request_timeout       : Seconds before an HTTP call is abandoned.
        secret_key            : Flask session signing key.
        step_delay_ms         : Pause after an ordinary playback step.
        emphasis_delay_ms     : Pause after a swap / match step.
        traversal_delay_ms    : Pause per node in the linked-list search animation.
        message_ttl           : Seconds a banner stays visible.
        max_array_size        : Largest array accepted by sort / search pages.
        history_limit         : Operation history entries kept per page.
        max_views             : Browsers whose page controllers are kept in memory.
        log_level             : Name of the root logging level.
    """

    api_base_url:       str   = "http://localhost:8080"
    request_timeout:    float = 10.0
    secret_key:         str   = ""
    step_delay_ms:      int   = 1200
    emphasis_delay_ms:  int   = 1500
    traversal_delay_ms: int   = 500
    message_ttl:        float = 5.0
    max_array_size:     int   = 15
    history_limit:      int   = 10
    max_views:          int   = 256
    log_level:          str   = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ`` after loading .env)."""
        if environ is None:
            load_dotenv()
            environ = os.environ

        def get(name: str, default):
            raw = environ.get(ENV_PREFIX + name)
            if raw is None or raw == "":
                return default
            return type(default)(raw)

        defaults = cls()
        return cls(
            api_base_url=get("API_BASE_URL", defaults.api_base_url).rstrip("/"),
            request_timeout=get("REQUEST_TIMEOUT", defaults.request_timeout),
            secret_key=get("SECRET_KEY", "") or secrets.token_hex(32),
            step_delay_ms=get("STEP_DELAY_MS", defaults.step_delay_ms),
            emphasis_delay_ms=get("EMPHASIS_DELAY_MS", defaults.emphasis_delay_ms),
            traversal_delay_ms=get("TRAVERSAL_DELAY_MS", defaults.traversal_delay_ms),
            message_ttl=get("MESSAGE_TTL", defaults.message_ttl),
            max_array_size=get("MAX_ARRAY_SIZE", defaults.max_array_size),
            history_limit=get("HISTORY_LIMIT", defaults.history_limit),
            max_views=get("MAX_VIEWS", defaults.max_views),
            log_level=get("LOG_LEVEL", defaults.log_level).upper(),
        )
