"""Main window for DualTransfer.

Demo host around a TransferPanel: owns the target keys, applies every
proposed change and reports counts in the status bar.
"""

from __future__ import annotations

import logging
from typing import Sequence

from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QStatusBar

from dualtransfer.core.constants import APP_NAME, APP_VERSION
from dualtransfer.core.engine import TransferEngine, TransferOptions, TransferProps
from dualtransfer.core.filtering import text_contains
from dualtransfer.core.models import Direction, Item
from dualtransfer.ui.transfer_panel import TransferPanel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Main application window hosting one transfer.

    The window is the host in the controlled sense: it keeps
    ``target_keys`` and hands an updated snapshot to the panel whenever the
    engine proposes a change.
    """

    def __init__(
        self,
        data_source: Sequence[Item],
        target_keys: Sequence[str] = (),
        options: TransferOptions | None = None,
        parent: QWidget | None = None,
    ) -> None:
        """Initialize the MainWindow."""
        super().__init__(parent)

        self._target_keys: list[str] = list(target_keys)
        self._engine = TransferEngine(
            TransferProps(
                data_source=data_source,
                target_keys=self._target_keys,
                filter_option=text_contains("title", "description"),
            ),
            options,
        )

        self._setup_ui()
        self._connect_signals()
        self._update_status()

    def _setup_ui(self) -> None:
        """Set up the main window UI."""
        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setMinimumSize(640, 480)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(8, 8, 8, 8)

        self._panel = TransferPanel(self._engine)
        main_layout.addWidget(self._panel)

        self._status_bar = QStatusBar(self)
        self.setStatusBar(self._status_bar)

    def _connect_signals(self) -> None:
        """Connect signals and slots."""
        self._panel.signals.changed.connect(self._on_transfer_changed)
        self._panel.signals.selection_changed.connect(lambda *_: self._update_status())

    def _on_transfer_changed(self, target_keys: list, direction: str, move_keys: list) -> None:
        """Accept the proposed target keys."""
        logger.info("Moved %d item(s) to the %s", len(move_keys), direction)
        self._target_keys = list(target_keys)
        self._panel.set_props(
            TransferProps(
                data_source=self._engine.props.data_source,
                target_keys=self._target_keys,
                filter_option=self._engine.props.filter_option,
            )
        )
        self._update_status()

    def _update_status(self) -> None:
        engine = self._engine
        self._status_bar.showMessage(
            f"{len(engine.get_items(Direction.LEFT))} source | "
            f"{len(engine.get_items(Direction.RIGHT))} target | "
            f"{len(engine.get_selection(Direction.LEFT)) + len(engine.get_selection(Direction.RIGHT))} selected"
        )

    @property
    def target_keys(self) -> list[str]:
        return list(self._target_keys)

    @property
    def panel(self) -> TransferPanel:
        return self._panel
