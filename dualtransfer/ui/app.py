"""QApplication setup for DualTransfer."""

from __future__ import annotations

import logging
import sys
from typing import Sequence

from PyQt6.QtWidgets import QApplication

from dualtransfer.core.constants import APP_NAME, APP_VERSION

logger = logging.getLogger(__name__)


def create_application(
    argv: Sequence[str] | None = None,
    display_name: str | None = None,
) -> QApplication:
    """
    Return the configured QApplication, creating it if needed.

    An already running instance (an embedding host, or a test session) is
    reused and only relabelled.

    Args:
        argv: Command line arguments. Defaults to sys.argv.
        display_name: Name shown in window titles; defaults to APP_NAME

    Returns:
        The application instance
    """
    app = QApplication.instance()
    if app is None:
        app = QApplication(list(sys.argv if argv is None else argv))
    else:
        logger.debug("Reusing running QApplication")

    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setApplicationDisplayName(display_name or APP_NAME)
    return app
