"""Tests for logging configuration."""

import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import patch

import pytest

from dualtransfer.core.engine import TransferEngine, TransferProps
from dualtransfer.core.logging_config import (
    setup_logging,
    get_audit_logger,
    log_move_operation,
    AUDIT_LOGGER_NAME,
)
from dualtransfer.core.messages import Move, Toggle
from dualtransfer.core.models import Direction


@pytest.fixture
def log_paths(temp_dir):
    """Point the log files at a temporary directory."""
    root = logging.getLogger()
    saved_level = root.level
    with patch("dualtransfer.core.logging_config.LOGS_DIR", temp_dir):
        with patch("dualtransfer.core.logging_config.DEBUG_LOG_FILE", temp_dir / "debug.log"):
            with patch("dualtransfer.core.logging_config.AUDIT_LOG_FILE", temp_dir / "audit.log"):
                yield temp_dir

    for handler in root.handlers[:]:
        if type(handler) in (RotatingFileHandler, logging.StreamHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)
    for handler in get_audit_logger().handlers[:]:
        get_audit_logger().removeHandler(handler)
        handler.close()


def read_audit(log_dir):
    for handler in get_audit_logger().handlers:
        handler.flush()
    return (log_dir / "audit.log").read_text()


class TestLoggingSetup:
    """Tests for logging setup."""

    def test_setup_creates_loggers(self, log_paths):
        """setup_logging creates debug and audit loggers."""
        setup_logging()

        root = logging.getLogger()
        audit = logging.getLogger(AUDIT_LOGGER_NAME)

        assert root.level == logging.DEBUG
        assert audit.level == logging.INFO
        assert audit.propagate is False

    def test_debug_mode_adds_console_handler(self, log_paths):
        """Debug mode adds console handler to root logger."""
        setup_logging(debug_mode=True)

        handler_types = [type(h).__name__ for h in logging.getLogger().handlers]
        assert "StreamHandler" in handler_types

    def test_repeated_setup_keeps_one_audit_handler(self, log_paths):
        """Calling setup twice does not duplicate audit lines."""
        setup_logging()
        setup_logging()

        assert len(get_audit_logger().handlers) == 1

    def test_get_audit_logger_returns_correct_logger(self):
        """get_audit_logger returns the audit logger."""
        assert get_audit_logger().name == AUDIT_LOGGER_NAME


class TestAuditLogging:
    """Tests for audit log operations."""

    def test_log_move_operation_format(self, log_paths):
        """log_move_operation writes correctly formatted entry."""
        setup_logging()
        log_move_operation("right", ["a", "b"], target_count=5)

        content = read_audit(log_paths)
        assert "MOVE_RIGHT" in content
        assert "moved=2" in content
        assert "targets=5" in content
        assert "keys=a,b" in content

    def test_log_move_left(self, log_paths):
        """Moves to the left are logged as MOVE_LEFT."""
        setup_logging()
        log_move_operation("left", ["c"], target_count=0)

        assert "MOVE_LEFT" in read_audit(log_paths)

    def test_log_truncates_long_key_list(self, log_paths):
        """Long key lists are truncated with ellipsis."""
        setup_logging()
        log_move_operation("right", [f"key{i}" for i in range(20)], target_count=20)

        content = read_audit(log_paths)
        assert "moved=20" in content
        assert "key9..." in content
        assert "key10" not in content

    def test_engine_moves_are_audited(self, log_paths, abc_items):
        """Every dispatched move reaches the audit log."""
        setup_logging()
        engine = TransferEngine(TransferProps(data_source=abc_items, target_keys=["c"]))
        engine.dispatch(Toggle(Direction.LEFT, "a", True))
        engine.dispatch(Move(Direction.RIGHT))

        content = read_audit(log_paths)
        assert "MOVE_RIGHT | moved=1 | targets=2 | keys=a" in content
