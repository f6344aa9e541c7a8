import pytest
from sqlpeek.config import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep the caller's preset configuration out of every test."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


pytest_plugins = [
    'tests.fixtures.cursors',
    'tests.fixtures.sqlite',
]
