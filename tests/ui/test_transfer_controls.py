"""Tests for the TransferControls widget."""

import pytest

# Skip all tests if PyQt6 is not available
pytest.importorskip("PyQt6")

from dualtransfer.ui.widgets.transfer_controls import TransferControls


class TestTransferControls:
    """Tests for TransferControls."""

    @pytest.fixture
    def controls(self, qtbot):
        w = TransferControls()
        qtbot.addWidget(w)
        return w

    def test_buttons_emit(self, controls, qtbot):
        """Each button emits its move signal."""
        with qtbot.waitSignal(controls.move_right):
            controls._move_right_btn.click()
        with qtbot.waitSignal(controls.move_left):
            controls._move_left_btn.click()

    def test_operation_texts(self, qtbot):
        """Button texts come from the operations pair."""
        w = TransferControls(operations=("Add", "Remove"))
        qtbot.addWidget(w)

        assert w._move_right_btn.text() == "Add"
        assert w._move_left_btn.text() == "Remove"

    def test_one_way_hides_left_button(self, qtbot):
        """One-way transfers only offer the > button."""
        w = TransferControls(one_way=True)
        qtbot.addWidget(w)

        assert w._move_left_btn.isHidden()
        assert not w._move_right_btn.isHidden()

    def test_enablement(self, controls):
        """Buttons are enabled independently."""
        controls.set_move_right_enabled(False)
        controls.set_move_left_enabled(True)

        assert not controls._move_right_btn.isEnabled()
        assert controls._move_left_btn.isEnabled()
