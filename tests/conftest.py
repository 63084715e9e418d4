"""Shared fixtures for ipv4-cidr tests."""

import pytest

CONFIG_ENV_VARS = ("LOG_LEVEL", "CIDR_STRICT")


@pytest.fixture
def clean_env(monkeypatch):
    """Unset config variables and restore them after the test.

    Setting before deleting makes monkeypatch restore the original state
    even when load_dotenv() writes to os.environ behind its back.
    """
    for name in CONFIG_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
