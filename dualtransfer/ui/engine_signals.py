"""Qt signal bridge for TransferEngine events."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from dualtransfer.core.engine import TransferEngine
from dualtransfer.core.messages import (
    ChangeEvent,
    ScrollEvent,
    SearchEvent,
    SelectChangeEvent,
    TransferEvent,
)

logger = logging.getLogger(__name__)


class EngineSignals(QObject):
    """
    Re-emits engine events as Qt signals.

    Subscribes on construction; call ``detach`` to stop listening.
    """

    changed = pyqtSignal(list, str, list)  # target_keys, direction, move_keys
    selection_changed = pyqtSignal(list, list)  # source, target
    search_changed = pyqtSignal(str, str)  # side, query
    scrolled = pyqtSignal(str, object)  # side, raw event

    def __init__(self, engine: TransferEngine, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._unsubscribe = engine.subscribe(self._on_event)

    def detach(self) -> None:
        """Stop relaying engine events."""
        self._unsubscribe()

    def _on_event(self, event: TransferEvent) -> None:
        if isinstance(event, ChangeEvent):
            logger.debug("Relaying change: %d moved %s", len(event.move_keys), event.direction.value)
            self.changed.emit(list(event.target_keys), event.direction.value, list(event.move_keys))
        elif isinstance(event, SelectChangeEvent):
            self.selection_changed.emit(
                list(event.source_selected_keys), list(event.target_selected_keys)
            )
        elif isinstance(event, SearchEvent):
            self.search_changed.emit(event.side.value, event.query)
        elif isinstance(event, ScrollEvent):
            self.scrolled.emit(event.side.value, event.event)
