"""Logging configuration for DualTransfer.

Two targets: a rotating debug log fed by every module logger, and an
append-only audit log recording each move the engine resolves.
"""

import logging
from logging.handlers import RotatingFileHandler

from .constants import (
    LOGS_DIR,
    DEBUG_LOG_FILE,
    AUDIT_LOG_FILE,
    DEBUG_LOG_MAX_BYTES,
    DEBUG_LOG_BACKUP_COUNT,
)

AUDIT_LOGGER_NAME = "audit"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MOVE_AUDIT_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

# Keys written per audit line before truncation
AUDIT_MAX_KEYS = 10


def _configure(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def setup_logging(debug_mode: bool = False) -> None:
    """
    Configure application logging.

    Safe to call more than once: existing root and audit handlers are
    replaced, not duplicated.

    Args:
        debug_mode: If True, module loggers also print to the console
    """
    LOGS_DIR.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()
    root_logger.addHandler(
        _configure(
            RotatingFileHandler(
                DEBUG_LOG_FILE,
                maxBytes=DEBUG_LOG_MAX_BYTES,
                backupCount=DEBUG_LOG_BACKUP_COUNT,
                encoding="utf-8",
            ),
            logging.DEBUG,
            LOG_FORMAT,
        )
    )
    if debug_mode:
        root_logger.addHandler(_configure(logging.StreamHandler(), logging.DEBUG, LOG_FORMAT))

    # Moves go to their own file only
    audit_logger = get_audit_logger()
    audit_logger.setLevel(logging.INFO)
    audit_logger.propagate = False
    audit_logger.handlers.clear()
    audit_logger.addHandler(
        _configure(
            logging.FileHandler(AUDIT_LOG_FILE, mode="a", encoding="utf-8"),
            logging.INFO,
            MOVE_AUDIT_FORMAT,
        )
    )


def get_audit_logger() -> logging.Logger:
    """Return the logger that records moves."""
    return logging.getLogger(AUDIT_LOGGER_NAME)


def _format_keys(keys: list[str]) -> str:
    shown = ",".join(keys[:AUDIT_MAX_KEYS])
    if len(keys) > AUDIT_MAX_KEYS:
        shown += "..."
    return shown


def log_move_operation(
    direction: str,
    moved_keys: list[str],
    target_count: int,
) -> None:
    """
    Record one resolved move or remove in the audit log.

    Args:
        direction: Destination side, "left" or "right"
        moved_keys: Keys that changed side
        target_count: Number of target keys after the move
    """
    get_audit_logger().info(
        "%s | moved=%d | targets=%d | keys=%s",
        "MOVE_RIGHT" if direction == "right" else "MOVE_LEFT",
        len(moved_keys),
        target_count,
        _format_keys(moved_keys),
    )
