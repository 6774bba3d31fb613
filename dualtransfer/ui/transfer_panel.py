"""Transfer panel for DualTransfer.

Composes two TransferListWidgets and the TransferControls around one
TransferEngine. Widget interaction becomes engine requests; every request
is followed by a redraw from the engine's pull accessors.
"""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import QWidget, QHBoxLayout

from dualtransfer.core.engine import TransferEngine, TransferProps
from dualtransfer.core.messages import (
    Move,
    Remove,
    Request,
    Scroll,
    Search,
    SelectAll,
    SetPage,
    Toggle,
)
from dualtransfer.core.models import Direction
from dualtransfer.ui.engine_signals import EngineSignals
from dualtransfer.ui.widgets import TransferControls, TransferListWidget

logger = logging.getLogger(__name__)


class TransferPanel(QWidget):
    """
    Dual-list transfer widget.

    Layout:
        +--------------------+----+--------------------+
        | [x] Source (1/12)  |    | [ ] Target (0/3)   |
        | [Search________]   | >  | [Search________]   |
        | [x] item one       | <  | [ ] item four      |
        | [ ] item two       |    |                    |
        | <     1 / 2     >  |    | <     1 / 1     >  |
        +--------------------+----+--------------------+

    With ``auto_apply`` the panel acts as its own host: proposed target
    keys and controlled selections are fed straight back into the engine.
    Otherwise the host listens on ``signals`` and calls ``set_props``.
    """

    def __init__(
        self,
        engine: TransferEngine,
        auto_apply: bool = False,
        parent: QWidget | None = None,
    ) -> None:
        """
        Initialize the TransferPanel.

        Args:
            engine: Engine providing state and receiving requests
            auto_apply: Feed proposals back into the engine automatically
            parent: Parent widget
        """
        super().__init__(parent)
        self._engine = engine
        self._auto_apply = auto_apply
        self._signals = EngineSignals(engine, self)

        self._setup_ui()
        self._connect_signals()
        self.refresh()

    @property
    def engine(self) -> TransferEngine:
        return self._engine

    @property
    def signals(self) -> EngineSignals:
        """Qt signals carrying the engine's events to the host."""
        return self._signals

    def _setup_ui(self) -> None:
        """Set up the panel UI."""
        options = self._engine.options

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self._left_pane = TransferListWidget(
            title=options.titles[0],
            placeholder="Search...",
            show_search=options.show_search,
        )
        layout.addWidget(self._left_pane, stretch=1)

        self._controls = TransferControls(options.operations, one_way=options.one_way)
        layout.addWidget(self._controls)

        self._right_pane = TransferListWidget(
            title=options.titles[1],
            placeholder="Search...",
            show_search=options.show_search,
        )
        layout.addWidget(self._right_pane, stretch=1)

    def _connect_signals(self) -> None:
        """Relay widget interaction into engine requests."""
        self._controls.move_right.connect(lambda: self._dispatch(Move(Direction.RIGHT)))
        self._controls.move_left.connect(lambda: self._dispatch(Move(Direction.LEFT)))

        for side, pane in self._panes().items():
            pane.item_toggled.connect(
                lambda key, checked, side=side: self._dispatch(Toggle(side, key, checked))
            )
            pane.select_all_toggled.connect(
                lambda check_all, side=side: self._dispatch(SelectAll(side, check_all))
            )
            pane.search_changed.connect(
                lambda query, side=side: self._dispatch(Search(side, query))
            )
            pane.page_requested.connect(
                lambda page, side=side: self._dispatch(SetPage(side, page))
            )
            pane.scrolled.connect(
                lambda value, side=side: self._dispatch(Scroll(side, value))
            )

        self._right_pane.item_double_clicked.connect(self._on_right_item_double_clicked)

        if self._auto_apply:
            self._signals.changed.connect(self._apply_target_keys)
            self._signals.selection_changed.connect(self._apply_selection)

    def _panes(self) -> dict[Direction, TransferListWidget]:
        return {Direction.LEFT: self._left_pane, Direction.RIGHT: self._right_pane}

    def _dispatch(self, request: Request) -> None:
        self._engine.dispatch(request)
        if not isinstance(request, Scroll):
            self.refresh()

    def _on_right_item_double_clicked(self, key: str) -> None:
        """Remove a single item from the right list in one-way mode."""
        if self._engine.options.one_way:
            self._dispatch(Remove((key,)))

    def _apply_target_keys(self, target_keys: list, direction: str, move_keys: list) -> None:
        logger.debug("Applying %d moved key(s) to the %s", len(move_keys), direction)
        self._engine.update_props(target_keys=target_keys)

    def _apply_selection(self, source_keys: list, target_keys: list) -> None:
        if self._engine.is_controlled:
            self._engine.update_props(selected_keys=[*source_keys, *target_keys])

    def set_props(self, props: TransferProps) -> None:
        """Feed a new host snapshot into the engine and redraw."""
        self._engine.update(props)
        self.refresh()

    def refresh(self) -> None:
        """Redraw both lists and the controls from engine state."""
        engine = self._engine
        enabled = not engine.props.disabled
        paginated = engine.options.pagination.enabled

        for side, pane in self._panes().items():
            pane.set_query(engine.get_query(side))
            pane.set_view(
                engine.get_visible(side),
                engine.get_selection(side),
                check_status=engine.get_check_status(side),
                current_page=engine.get_current_page(side),
                max_page=engine.get_max_page(side),
                paginated=paginated,
                total=len(engine.get_filtered(side)),
                enabled=enabled,
            )

        self._controls.set_move_right_enabled(enabled and engine.is_active(Direction.RIGHT))
        self._controls.set_move_left_enabled(enabled and engine.is_active(Direction.LEFT))

    @property
    def left_pane(self) -> TransferListWidget:
        return self._left_pane

    @property
    def right_pane(self) -> TransferListWidget:
        return self._right_pane

    @property
    def controls(self) -> TransferControls:
        return self._controls
