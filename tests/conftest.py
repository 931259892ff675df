import pytest

from greeter.config import get_settings

SETTINGS_ENV = ("PORT", "NAME", "HOST", "LOG_LEVEL", "SHUTDOWN_TIMEOUT", "K_SERVICE", "K_REVISION")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate every test from the caller's environment and any .env file."""
    for var in SETTINGS_ENV:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
