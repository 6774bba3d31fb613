"""Transfer list widget for DualTransfer.

Provides a search field, a select-all checkbox, a checkable item list and a
pager for one side of a transfer. The widget holds no selection or
membership state of its own: it renders what it is given and reports user
interaction through signals.
"""

from __future__ import annotations

from typing import Sequence

from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QLabel,
    QCheckBox,
    QPushButton,
)
from PyQt6.QtCore import pyqtSignal, Qt

from dualtransfer.core.models import CheckStatus, Item, item_disabled, item_field, item_key

_CHECK_STATES = {
    CheckStatus.NONE: Qt.CheckState.Unchecked,
    CheckStatus.PART: Qt.CheckState.PartiallyChecked,
    CheckStatus.ALL: Qt.CheckState.Checked,
}


class TransferListWidget(QWidget):
    """
    One side of a transfer: search, select-all, checkable rows and pager.

    Stores item keys in each row's data role for easy retrieval.
    """

    item_toggled = pyqtSignal(str, bool)  # key, checked
    select_all_toggled = pyqtSignal(bool)  # True to check all
    search_changed = pyqtSignal(str)
    page_requested = pyqtSignal(int)
    scrolled = pyqtSignal(int)  # raw scrollbar value
    item_double_clicked = pyqtSignal(str)

    def __init__(
        self,
        title: str = "",
        placeholder: str = "Search...",
        show_search: bool = True,
        parent: QWidget | None = None,
    ) -> None:
        """
        Initialize the TransferListWidget.

        Args:
            title: Title shown next to the select-all checkbox
            placeholder: Placeholder text for search field
            show_search: Whether the search field is visible
            parent: Parent widget
        """
        super().__init__(parent)

        self._title = title
        self._check_status = CheckStatus.NONE
        self._current_page = 1
        self._max_page = 1
        self._setup_ui(placeholder, show_search)
        self._connect_signals()

    def _setup_ui(self, placeholder: str, show_search: bool) -> None:
        """Set up the widget UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        # Header: select-all checkbox with title and counts
        self._select_all_box = QCheckBox(self._title)
        self._select_all_box.setTristate(True)
        self._select_all_box.setStyleSheet("font-weight: bold;")
        layout.addWidget(self._select_all_box)

        # Search field
        self._search_field = QLineEdit()
        self._search_field.setPlaceholderText(placeholder)
        self._search_field.setClearButtonEnabled(True)
        self._search_field.setVisible(show_search)
        layout.addWidget(self._search_field)

        # List widget
        self._list_widget = QListWidget()
        self._list_widget.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        layout.addWidget(self._list_widget)

        # Pager
        pager = QHBoxLayout()
        self._prev_btn = QPushButton("<")
        self._prev_btn.setFixedSize(24, 24)
        self._next_btn = QPushButton(">")
        self._next_btn.setFixedSize(24, 24)
        self._page_label = QLabel("1 / 1")
        self._page_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        pager.addWidget(self._prev_btn)
        pager.addWidget(self._page_label, stretch=1)
        pager.addWidget(self._next_btn)
        self._pager = QWidget()
        self._pager.setLayout(pager)
        layout.addWidget(self._pager)

    def _connect_signals(self) -> None:
        """Connect internal signals."""
        self._search_field.textChanged.connect(self.search_changed.emit)
        self._list_widget.itemChanged.connect(self._on_item_changed)
        self._list_widget.itemDoubleClicked.connect(self._on_item_double_clicked)
        self._list_widget.verticalScrollBar().valueChanged.connect(self.scrolled.emit)
        self._select_all_box.clicked.connect(self._on_select_all_clicked)
        self._prev_btn.clicked.connect(lambda: self.page_requested.emit(self._current_page - 1))
        self._next_btn.clicked.connect(lambda: self.page_requested.emit(self._current_page + 1))

    def _on_item_changed(self, item: QListWidgetItem) -> None:
        """Relay a checkbox change on a row."""
        key = item.data(Qt.ItemDataRole.UserRole)
        if key is not None:
            self.item_toggled.emit(key, item.checkState() == Qt.CheckState.Checked)

    def _on_item_double_clicked(self, item: QListWidgetItem) -> None:
        """Handle double-click on item."""
        key = item.data(Qt.ItemDataRole.UserRole)
        if key is not None:
            self.item_double_clicked.emit(key)

    def _on_select_all_clicked(self) -> None:
        # The checkbox state is redrawn by set_view(); only the intent matters
        self.select_all_toggled.emit(self._check_status is not CheckStatus.ALL)

    def set_view(
        self,
        items: Sequence[Item],
        selected_keys: Sequence[str],
        check_status: CheckStatus = CheckStatus.NONE,
        current_page: int = 1,
        max_page: int = 1,
        paginated: bool = False,
        total: int | None = None,
        enabled: bool = True,
    ) -> None:
        """
        Redraw the list from engine state.

        Args:
            items: Items visible on the current page
            selected_keys: Selected keys of this side
            check_status: State of the select-all checkbox
            current_page: 1-based current page
            max_page: Last page
            paginated: Whether the pager is shown
            total: Number of filtered items, for the header count
            enabled: False to grey out the whole list
        """
        selected = set(selected_keys)
        self._check_status = check_status
        self._current_page = current_page
        self._max_page = max_page

        # Rows are updated in place when the keys are unchanged, so a row is
        # never deleted from inside its own itemChanged notification
        in_place = self.keys() == [item_key(entry) for entry in items]

        self._list_widget.blockSignals(True)
        try:
            if not in_place:
                self._list_widget.clear()
            for row, entry in enumerate(items):
                key = item_key(entry)
                text = str(item_field(entry, "title") or key)
                if in_place:
                    item = self._list_widget.item(row)
                    item.setText(text)
                else:
                    item = QListWidgetItem(text)
                    item.setData(Qt.ItemDataRole.UserRole, key)
                flags = Qt.ItemFlag.ItemIsUserCheckable
                if enabled and not item_disabled(entry):
                    flags |= Qt.ItemFlag.ItemIsEnabled
                item.setFlags(flags)
                item.setCheckState(
                    Qt.CheckState.Checked if key in selected else Qt.CheckState.Unchecked
                )
                if not in_place:
                    self._list_widget.addItem(item)
        finally:
            self._list_widget.blockSignals(False)

        self._select_all_box.blockSignals(True)
        self._select_all_box.setCheckState(_CHECK_STATES[check_status])
        self._select_all_box.blockSignals(False)
        count = len(items) if total is None else total
        self._select_all_box.setText(f"{self._title} ({len(selected)}/{count})")
        self._select_all_box.setEnabled(enabled)
        self._search_field.setEnabled(enabled)

        self._pager.setVisible(paginated)
        self._page_label.setText(f"{current_page} / {max_page}")
        self._prev_btn.setEnabled(enabled and current_page > 1)
        self._next_btn.setEnabled(enabled and current_page < max_page)

    def set_query(self, text: str) -> None:
        """Show ``text`` in the search field without emitting search_changed."""
        if self._search_field.text() != text:
            self._search_field.blockSignals(True)
            self._search_field.setText(text)
            self._search_field.blockSignals(False)

    def query(self) -> str:
        return self._search_field.text()

    def keys(self) -> list[str]:
        """Return the keys of all rendered rows."""
        keys = []
        for i in range(self._list_widget.count()):
            item = self._list_widget.item(i)
            if item:
                keys.append(item.data(Qt.ItemDataRole.UserRole))
        return keys

    def checked_keys(self) -> list[str]:
        """Return the keys of rendered rows shown as checked."""
        checked = []
        for i in range(self._list_widget.count()):
            item = self._list_widget.item(i)
            if item and item.checkState() == Qt.CheckState.Checked:
                checked.append(item.data(Qt.ItemDataRole.UserRole))
        return checked

    def count(self) -> int:
        """Return the number of rendered rows."""
        return self._list_widget.count()
