"""Tests for the TransferListWidget."""

import pytest

# Skip all tests if PyQt6 is not available
pytest.importorskip("PyQt6")

from PyQt6.QtCore import Qt

from dualtransfer.core.models import CheckStatus
from dualtransfer.ui.widgets.transfer_list import TransferListWidget


class TestTransferListWidget:
    """Tests for TransferListWidget."""

    @pytest.fixture
    def widget(self, qtbot):
        """Create a TransferListWidget for testing."""
        w = TransferListWidget(title="Source", placeholder="Search...")
        qtbot.addWidget(w)
        return w

    def test_initial_state(self, widget):
        """Widget should start with no rows."""
        assert widget.count() == 0
        assert widget.query() == ""

    def test_set_view_populates(self, widget, fruit_dicts):
        """set_view() renders one checkable row per item."""
        widget.set_view(fruit_dicts, ["a"], CheckStatus.PART)

        assert widget.keys() == ["a", "b", "c", "d"]
        assert widget.checked_keys() == ["a"]
        assert widget._list_widget.item(0).text() == "apple"

    def test_disabled_items_not_enabled(self, widget, fruit_dicts):
        """Disabled items are rendered without ItemIsEnabled."""
        widget.set_view(fruit_dicts, [])

        flags = widget._list_widget.item(1).flags()
        assert not flags & Qt.ItemFlag.ItemIsEnabled
        assert widget._list_widget.item(0).flags() & Qt.ItemFlag.ItemIsEnabled

    def test_header_shows_counts(self, widget, fruit_dicts):
        """The header shows selected and total counts."""
        widget.set_view(fruit_dicts[:2], ["a"], total=4)
        assert widget._select_all_box.text() == "Source (1/4)"

    def test_check_status_drives_header_box(self, widget, fruit_dicts):
        """The select-all box mirrors the check status."""
        widget.set_view(fruit_dicts, ["a"], CheckStatus.PART)
        assert widget._select_all_box.checkState() == Qt.CheckState.PartiallyChecked

        widget.set_view(fruit_dicts, ["a", "c", "d"], CheckStatus.ALL)
        assert widget._select_all_box.checkState() == Qt.CheckState.Checked

    def test_rerender_updates_in_place(self, widget, fruit_dicts):
        """Rendering the same keys keeps the row objects."""
        widget.set_view(fruit_dicts, [])
        first = widget._list_widget.item(0)
        widget.set_view(fruit_dicts, ["a"])

        assert widget._list_widget.item(0) is first
        assert widget.checked_keys() == ["a"]

    def test_rerender_refreshes_titles(self, widget):
        """Rows with unchanged keys pick up new titles."""
        widget.set_view([{"key": "a", "title": "old"}], [])
        widget.set_view([{"key": "a", "title": "new"}], [])

        assert widget._list_widget.item(0).text() == "new"

    def test_set_view_emits_nothing(self, widget, fruit_dicts, qtbot):
        """Redraws never emit item_toggled."""
        with qtbot.assertNotEmitted(widget.item_toggled):
            widget.set_view(fruit_dicts, ["a", "c"])

    def test_checking_row_emits_toggle(self, widget, fruit_dicts, qtbot):
        """Checking a row emits item_toggled with its key."""
        widget.set_view(fruit_dicts, [])

        with qtbot.waitSignal(widget.item_toggled) as blocker:
            widget._list_widget.item(2).setCheckState(Qt.CheckState.Checked)

        assert blocker.args == ["c", True]

    def test_select_all_click(self, widget, fruit_dicts, qtbot):
        """Clicking select-all asks to check all unless all are checked."""
        widget.set_view(fruit_dicts, [], CheckStatus.NONE)
        with qtbot.waitSignal(widget.select_all_toggled) as blocker:
            widget._select_all_box.click()
        assert blocker.args == [True]

        widget.set_view(fruit_dicts, ["a", "c", "d"], CheckStatus.ALL)
        with qtbot.waitSignal(widget.select_all_toggled) as blocker:
            widget._select_all_box.click()
        assert blocker.args == [False]

    def test_search_emits(self, widget, qtbot):
        """Typing in the search field emits search_changed."""
        with qtbot.waitSignal(widget.search_changed) as blocker:
            widget._search_field.setText("app")
        assert blocker.args == ["app"]

    def test_set_query_is_silent(self, widget, qtbot):
        """set_query() does not emit search_changed."""
        with qtbot.assertNotEmitted(widget.search_changed):
            widget.set_query("app")
        assert widget.query() == "app"

    def test_pager(self, widget, fruit_dicts, qtbot):
        """The pager requests neighbouring pages."""
        widget.set_view(fruit_dicts[:2], [], current_page=2, max_page=3, paginated=True)

        assert widget._page_label.text() == "2 / 3"
        with qtbot.waitSignal(widget.page_requested) as blocker:
            widget._next_btn.click()
        assert blocker.args == [3]

    def test_pager_bounds(self, widget, fruit_dicts):
        """Prev is disabled on the first page, next on the last."""
        widget.set_view(fruit_dicts, [], current_page=1, max_page=1, paginated=True)

        assert not widget._prev_btn.isEnabled()
        assert not widget._next_btn.isEnabled()

    def test_disabled_list(self, widget, fruit_dicts):
        """enabled=False greys out rows and the header box."""
        widget.set_view(fruit_dicts, [], enabled=False)

        assert not widget._select_all_box.isEnabled()
        assert not widget._list_widget.item(0).flags() & Qt.ItemFlag.ItemIsEnabled

    def test_double_click_emits_key(self, widget, fruit_dicts, qtbot):
        """Double-clicking a row emits its key."""
        widget.set_view(fruit_dicts, [])

        with qtbot.waitSignal(widget.item_double_clicked) as blocker:
            widget._list_widget.itemDoubleClicked.emit(widget._list_widget.item(3))
        assert blocker.args == ["d"]
