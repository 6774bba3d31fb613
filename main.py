"""Application entry point for DualTransfer.

Initializes logging, loads settings, creates the application and main
window with sample data, and starts the event loop.
"""

import logging
import sys

from dualtransfer.core.config import ConfigManager, ConfigError
from dualtransfer.core.logging_config import setup_logging
from dualtransfer.core.models import TransferItem
from dualtransfer.core.engine import TransferOptions
from dualtransfer.ui.app import create_application
from dualtransfer.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def _sample_items() -> list[TransferItem]:
    """Build demo items; every fourth one is disabled."""
    return [
        TransferItem(
            key=str(i),
            title=f"content{i + 1}",
            description=f"description of content{i + 1}",
            disabled=i % 4 == 0,
        )
        for i in range(20)
    ]


def _load_settings() -> tuple[TransferOptions, str | None]:
    """Load engine options and display name, falling back to defaults on a broken config."""
    try:
        config = ConfigManager()
    except ConfigError as e:
        logger.warning("Using default settings: %s", e)
        return TransferOptions(), None
    return config.to_options(), config.settings["display_name"]


def main() -> int:
    """
    Application entry point.

    Returns:
        Exit code (0 for success)
    """
    setup_logging(debug_mode="--debug" in sys.argv)

    options, display_name = _load_settings()
    app = create_application(sys.argv, display_name=display_name)

    items = _sample_items()
    target_keys = [item.key for item in items if int(item.key) % 3 > 1]
    window = MainWindow(items, target_keys=target_keys, options=options)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
