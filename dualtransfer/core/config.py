"""Settings file handling for DualTransfer.

The file is a versioned JSON object whose ``settings`` block maps onto
``TransferOptions``. Unknown keys are kept; missing keys fall back to
``DEFAULT_SETTINGS``.
"""

import json
import logging
from pathlib import Path
from typing import Any

from .constants import (
    CONFIG_FILE,
    CONFIG_VERSION,
    DEFAULT_SETTINGS,
    VALID_MOVE_ORDERS,
)
from .engine import TransferOptions
from .move_engine import MoveOrder
from .paginator import PaginationConfig

logger = logging.getLogger(__name__)

_BOOL_SETTINGS = ("pagination", "show_search", "one_way")


class ConfigError(Exception):
    """Raised when the settings file or a settings update is invalid."""
    pass


def validate_settings(settings: dict[str, Any]) -> list[str]:
    """
    Check settings values against their allowed types and ranges.

    Args:
        settings: Settings block, possibly partial

    Returns:
        Human-readable problems; empty when valid
    """
    problems = [
        f"Setting '{name}' must be a boolean"
        for name in _BOOL_SETTINGS
        if name in settings and not isinstance(settings[name], bool)
    ]

    page_size = settings.get("page_size", DEFAULT_SETTINGS["page_size"])
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
        problems.append(f"Invalid page_size '{page_size}': must be a positive integer")

    display_name = settings.get("display_name", DEFAULT_SETTINGS["display_name"])
    if not isinstance(display_name, str) or not display_name.strip():
        problems.append("Setting 'display_name' must be a non-empty string")

    move_order = settings.get("move_order", DEFAULT_SETTINGS["move_order"])
    if move_order not in VALID_MOVE_ORDERS:
        problems.append(
            f"Invalid move_order '{move_order}': must be "
            f"one of {', '.join(sorted(VALID_MOVE_ORDERS))}"
        )

    return problems


class ConfigManager:
    """Loads, validates and saves the settings file."""

    def __init__(self, config_path: Path | None = None):
        self.config_path = config_path or CONFIG_FILE
        self._config: dict[str, Any] = {}
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.load()

    def load(self) -> None:
        """Read the settings file, writing defaults on first run."""
        if not self.config_path.exists():
            logger.info("No settings at %s; writing defaults", self.config_path)
            self._config = {"version": CONFIG_VERSION, "settings": dict(DEFAULT_SETTINGS)}
            self.save()
            return

        data = self._read()
        problems = []
        if not isinstance(data.get("version"), int):
            problems.append("Missing or invalid 'version' field")
        if isinstance(data.get("settings"), dict):
            problems.extend(validate_settings(data["settings"]))
        else:
            problems.append("Missing or invalid 'settings' field")

        if problems:
            for problem in problems:
                logger.error("Settings problem in %s: %s", self.config_path, problem)
            raise ConfigError(f"Configuration validation failed: {'; '.join(problems)}")

        self._config = data
        logger.debug("Settings loaded from %s", self.config_path)

    def _read(self) -> dict[str, Any]:
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError("Configuration root must be a JSON object")
        return data

    def save(self) -> None:
        """Write the current settings back to disk."""
        with open(self.config_path, "w", encoding="utf-8") as f:
            json.dump(self._config, f, indent=2)
        logger.debug("Settings saved to %s", self.config_path)

    @property
    def config(self) -> dict[str, Any]:
        """Return a copy of the whole file contents."""
        return self._config.copy()

    @property
    def settings(self) -> dict[str, Any]:
        """Return settings merged over the defaults."""
        return {**DEFAULT_SETTINGS, **self._config.get("settings", {})}

    def update_settings(self, **kwargs: Any) -> None:
        """
        Change settings in memory; call ``save`` to persist.

        Raises:
            ConfigError: If the merged settings would be invalid
        """
        problems = validate_settings({**self.settings, **kwargs})
        if problems:
            raise ConfigError(f"Invalid settings: {'; '.join(problems)}")
        self._config.setdefault("settings", {}).update(kwargs)

    def to_options(self) -> TransferOptions:
        """Build engine options from the current settings."""
        settings = self.settings
        return TransferOptions(
            pagination=PaginationConfig(
                enabled=settings["pagination"],
                page_size=settings["page_size"],
            ),
            move_order=MoveOrder(settings["move_order"]),
            show_search=settings["show_search"],
            one_way=settings["one_way"],
        )
