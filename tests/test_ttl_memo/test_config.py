"""Tests for settings and logging configuration."""

from unittest.mock import Mock

import pytest
from loguru import logger

import ttl_memo.log as log_module
from ttl_memo import disable_logging, enable_logging, memoize
from ttl_memo.config import Settings


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted while the test runs."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
    disable_logging()


class TestSettings:
    """Tests for the pydantic Settings object."""

    def test_defaults(self, monkeypatch):
        """Test that logging is off by default."""
        monkeypatch.delenv("TTL_MEMO_LOG_ENABLED", raising=False)

        assert Settings(_env_file=None).log_enabled is False

    def test_reads_prefixed_environment(self, monkeypatch):
        """Test that TTL_MEMO_-prefixed variables are picked up."""
        monkeypatch.setenv("TTL_MEMO_LOG_ENABLED", "true")

        assert Settings(_env_file=None).log_enabled is True

    def test_ignores_unprefixed_environment(self, monkeypatch):
        """Test that variables without the prefix are ignored."""
        monkeypatch.delenv("TTL_MEMO_LOG_ENABLED", raising=False)
        monkeypatch.setenv("LOG_ENABLED", "true")

        assert Settings(_env_file=None).log_enabled is False


class TestLogging:
    """Tests for loguru wiring."""

    def test_silent_by_default(self, log_messages):
        """Test that nothing is emitted while the package is disabled."""
        disable_logging()

        memoize(Mock(return_value=1), 1000)("a")

        assert log_messages == []

    def test_logs_miss_and_hit_when_enabled(self, log_messages):
        """Test that misses and hits are logged at DEBUG."""
        enable_logging()
        memoized = memoize(Mock(return_value=1), 1000)

        memoized("a")
        memoized("a")

        assert any('Cache miss' in message and '["a"]' in message for message in log_messages)
        assert any('Cache hit' in message for message in log_messages)

    def test_logs_expiry(self, log_messages, timers):
        """Test that expiring an entry is logged."""
        enable_logging()
        memoize(Mock(return_value=1), 1000, scheduler=timers)("a")

        timers.advance(1000)

        assert any("Expired" in message for message in log_messages)

    def test_configure_logging_follows_settings(self, log_messages, monkeypatch):
        """Test that configure_logging applies settings.log_enabled."""
        monkeypatch.setattr(log_module.settings, "log_enabled", True)
        log_module.configure_logging()

        memoize(Mock(return_value=1), 1000)("a")

        assert log_messages
