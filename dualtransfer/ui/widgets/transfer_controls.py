"""Operation buttons between the two lists of a transfer."""

from __future__ import annotations

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QPushButton, QSizePolicy
from PyQt6.QtCore import pyqtSignal

from dualtransfer.core.constants import DEFAULT_OPERATIONS


class TransferControls(QWidget):
    """
    Column holding the move-right and move-left buttons.

    One-way transfers hide the move-left button; items then leave the
    right list through its remove action instead.
    """

    move_right = pyqtSignal()
    move_left = pyqtSignal()

    def __init__(
        self,
        operations: tuple[str, str] = DEFAULT_OPERATIONS,
        one_way: bool = False,
        parent: QWidget | None = None,
    ) -> None:
        """
        Initialize the TransferControls widget.

        Args:
            operations: Button texts for (move right, move left)
            one_way: Hide the move-left button
            parent: Parent widget
        """
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 0, 4, 0)
        layout.setSpacing(8)
        layout.addStretch()
        self._move_right_btn = self._add_button(
            layout, operations[0], "Move checked items to the right", self.move_right
        )
        self._move_left_btn = self._add_button(
            layout, operations[1], "Move checked items to the left", self.move_left
        )
        layout.addStretch()

        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Expanding)
        self.set_one_way(one_way)

    def _add_button(self, layout: QVBoxLayout, text: str, tooltip: str, signal) -> QPushButton:
        button = QPushButton(text)
        button.setMinimumSize(32, 32)
        button.setToolTip(tooltip)
        button.clicked.connect(signal.emit)
        layout.addWidget(button)
        return button

    def set_one_way(self, one_way: bool) -> None:
        self._move_left_btn.setHidden(one_way)

    def set_move_right_enabled(self, enabled: bool) -> None:
        self._move_right_btn.setEnabled(enabled)

    def set_move_left_enabled(self, enabled: bool) -> None:
        self._move_left_btn.setEnabled(enabled)
