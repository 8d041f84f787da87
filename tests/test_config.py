import pytest
from pydantic import ValidationError

from robo_fluent import Settings


def test_defaults():
    config = Settings()

    assert config.action_timeout_ms == 10000
    assert config.poll_interval_ms == 0


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("ROBO_POLL_INTERVAL_MS", "25")
    monkeypatch.setenv("ROBO_HEADLESS", "false")

    config = Settings()

    assert config.poll_interval_ms == 25
    assert config.headless is False


def test_rejects_negative_poll_interval():
    with pytest.raises(ValidationError):
        Settings(poll_interval_ms=-1)
