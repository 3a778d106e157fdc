"""Settings from the environment."""

from config import Settings


def test_defaults_when_unset():
    settings = Settings.from_env({})
    assert settings.api_base_url == "http://localhost:8080"
    assert settings.step_delay_ms == 1200
    assert settings.emphasis_delay_ms == 1500
    assert settings.max_array_size == 15
    assert len(settings.secret_key) == 64


def test_overrides_are_typed():
    settings = Settings.from_env({
        "ALGOPULSE_API_BASE_URL": "https://api.example.org/",
        "ALGOPULSE_REQUEST_TIMEOUT": "2.5",
        "ALGOPULSE_MAX_ARRAY_SIZE": "20",
        "ALGOPULSE_SECRET_KEY": "fixed",
        "ALGOPULSE_LOG_LEVEL": "debug",
    })
    assert settings.api_base_url == "https://api.example.org"
    assert settings.request_timeout == 2.5
    assert settings.max_array_size == 20
    assert settings.secret_key == "fixed"
    assert settings.log_level == "DEBUG"


def test_blank_values_fall_back():
    settings = Settings.from_env({"ALGOPULSE_HISTORY_LIMIT": ""})
    assert settings.history_limit == 10
