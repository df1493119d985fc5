"""Tests for structured logging."""

import pytest
import structlog

from src.kobler.logging import LogContext, configure_logging, get_logger


@pytest.fixture(autouse=True)
def clean_context():
    """Start and end with an empty structlog context."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


class TestLogContext:
    """Test suite for LogContext."""

    def test_binds_inside_block(self):
        """Test fields are bound within the block."""
        with LogContext(bidder="kobler", auction_id="a-1"):
            assert structlog.contextvars.get_contextvars() == {
                "bidder": "kobler",
                "auction_id": "a-1",
            }

    def test_keeps_outer_context(self):
        """Test caller keys survive and inner keys are removed."""
        structlog.contextvars.bind_contextvars(request_id="r-1")

        with LogContext(bidder="kobler"):
            assert structlog.contextvars.get_contextvars() == {
                "request_id": "r-1",
                "bidder": "kobler",
            }

        assert structlog.contextvars.get_contextvars() == {"request_id": "r-1"}

    def test_restores_on_error(self):
        """Test context is restored when the block raises."""
        structlog.contextvars.bind_contextvars(request_id="r-1")

        with pytest.raises(RuntimeError):
            with LogContext(request_id="inner"):
                raise RuntimeError("boom")

        assert structlog.contextvars.get_contextvars() == {"request_id": "r-1"}


class TestConfigureLogging:
    """Test log output routing."""

    @pytest.fixture(autouse=True)
    def restore_logging(self, monkeypatch):
        """Reconfigure with defaults after each test."""
        yield
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        configure_logging()

    def test_logs_go_to_stderr(self, monkeypatch, capsys):
        """Test log lines are written to stderr, not stdout."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        configure_logging()

        with LogContext(auction_id="a-1"):
            get_logger("kobler.test").debug("Hello")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert '"event": "Hello"' in captured.err
        assert '"auction_id": "a-1"' in captured.err
