"""Shared pytest fixtures and configuration for all tests."""

import pytest

from typetrainer.config import TrainerSettings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep TYPETRAINER_* variables from the outer shell out of the tests."""
    for name in (
        "TYPETRAINER_CONFIG_FILE",
        "TYPETRAINER_POLL_INTERVAL_MS",
        "TYPETRAINER_COMPLETION_PAUSE_SECONDS",
        "TYPETRAINER_LOG_FILE",
        "TYPETRAINER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def quiet_settings() -> TrainerSettings:
    """Settings with no completion pause and no log file."""
    return TrainerSettings(completion_pause_seconds=0.0, log_file=None)
