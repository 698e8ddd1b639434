"""Shared fixtures: lifecycle hooks around the registry tests, and a clean settings environment."""

import pytest

from contactbook import config, create_contact_manager

SETTINGS_VARS = ("ENV", "CONTACTBOOK_DEFAULT_REGION", "CONTACTBOOK_LOG_LEVEL")


@pytest.fixture(scope="session", autouse=True)
def announce_session():
    print("Should print before all tests")
    yield
    print("Should be executed at the end of the tests")


@pytest.fixture
def manager():
    """A fresh, empty registry session for each test."""
    print("Should execute before each test")
    yield create_contact_manager()
    print("Should execute after each test")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Settings vars set to empty (restored afterwards) and no .env visible from repo root or cwd."""
    for name in SETTINGS_VARS:
        monkeypatch.setenv(name, "")
    monkeypatch.setattr(config, "_REPO_ROOT", tmp_path)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
