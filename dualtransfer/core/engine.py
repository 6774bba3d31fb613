"""Transfer engine facade.

The single point of truth a host talks to. The host feeds an immutable
``TransferProps`` snapshot through ``update``; the presentation layer relays
user interaction through ``dispatch``; subscribers receive the resulting
events. The engine never changes membership on its own: a ``ChangeEvent``
is only a proposal until the host feeds the new target keys back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional, Sequence

from .constants import DEFAULT_OPERATIONS, DEFAULT_TITLES
from .filtering import FilterOption, accept_all, filter_items
from .logging_config import log_move_operation
from .messages import (
    ChangeEvent,
    InvertSelection,
    Move,
    Remove,
    Request,
    Scroll,
    ScrollEvent,
    Search,
    SearchEvent,
    SelectAll,
    SelectChangeEvent,
    SetPage,
    Toggle,
    TransferEvent,
)
from .models import (
    CheckStatus,
    Direction,
    Item,
    Key,
    RowKey,
    SelectionState,
    item_disabled,
    item_key,
)
from .move_engine import MoveEngine, MoveOrder, MoveResult
from .paginator import PaginationConfig, clamp_page, max_page, page_slice
from .partitioner import PartitionResult, PartitionWarning, partition
from .selection import SelectionTracker, derive_from_controlled

logger = logging.getLogger(__name__)

Listener = Callable[[TransferEvent], None]


class TransferError(Exception):
    """Base class for transfer engine errors."""

    pass


class UnknownRequestError(TransferError):
    """Raised when dispatch receives an unsupported request."""

    pass


@dataclass(frozen=True)
class TransferProps:
    """
    Host-owned input snapshot for one update cycle.

    A non-None ``selected_keys`` switches selection to controlled mode.
    """

    data_source: Sequence[Item] = ()
    target_keys: Sequence[Key] = ()
    selected_keys: Optional[Sequence[Key]] = None
    row_key: Optional[RowKey] = None
    filter_option: FilterOption = accept_all
    disabled: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "data_source", tuple(self.data_source))
        object.__setattr__(self, "target_keys", tuple(self.target_keys))
        if self.selected_keys is not None:
            object.__setattr__(self, "selected_keys", tuple(self.selected_keys))
        if self.filter_option is None:
            object.__setattr__(self, "filter_option", accept_all)


@dataclass(frozen=True)
class TransferOptions:
    """Presentation-independent engine settings."""

    pagination: PaginationConfig = field(default_factory=PaginationConfig)
    move_order: MoveOrder = MoveOrder.PREPEND
    show_search: bool = False
    one_way: bool = False
    titles: tuple[str, str] = DEFAULT_TITLES
    operations: tuple[str, str] = DEFAULT_OPERATIONS

    def __post_init__(self) -> None:
        # pagination may also be given as a bool or a mapping
        object.__setattr__(self, "pagination", PaginationConfig.parse(self.pagination))


@dataclass(frozen=True)
class SideView:
    """Derived view of one side for the current cycle."""

    items: tuple[Item, ...] = ()
    filtered: tuple[Item, ...] = ()
    visible: tuple[Item, ...] = ()
    current_page: int = 1
    max_page: int = 1


class TransferEngine:
    """
    Dual-list partition, selection and move engine.

    Public surface: ``update`` for host snapshots, ``dispatch`` for
    requests, ``subscribe`` for events, plus the pull accessors.
    """

    def __init__(
        self,
        props: TransferProps | None = None,
        options: TransferOptions | None = None,
    ) -> None:
        self._options = options or TransferOptions()
        self._move_engine = MoveEngine(self._options.move_order)
        self._selection = SelectionTracker()
        self._listeners: list[Listener] = []
        self._queries: dict[Direction, str] = {Direction.LEFT: "", Direction.RIGHT: ""}
        self._pages: dict[Direction, int] = {Direction.LEFT: 1, Direction.RIGHT: 1}
        self._views: dict[Direction, SideView] = {}
        self._handlers: dict[type, Callable[[Any], list[TransferEvent]]] = {
            Move: self._handle_move,
            Remove: self._handle_remove,
            Toggle: self._handle_toggle,
            SelectAll: self._handle_select_all,
            InvertSelection: self._handle_invert,
            Search: self._handle_search,
            SetPage: self._handle_set_page,
            Scroll: self._handle_scroll,
        }
        self.update(props or TransferProps())

    # === Host input ===

    @property
    def props(self) -> TransferProps:
        return self._props

    @property
    def options(self) -> TransferOptions:
        return self._options

    @property
    def is_controlled(self) -> bool:
        """Return True if the host owns the selection."""
        return self._props.selected_keys is not None

    def update(self, props: TransferProps) -> None:
        """
        Start a new cycle from a host snapshot.

        Re-partitions, re-derives a controlled selection, re-filters and
        re-clamps both pages. Never emits events.
        """
        self._props = props
        self._partition: PartitionResult = partition(
            props.data_source, props.target_keys, props.row_key
        )
        self._items_by_key = self._partition.items_by_key

        if props.selected_keys is not None:
            self._selection.reset(
                derive_from_controlled(
                    props.selected_keys,
                    self._partition.target_keys,
                    self._items_by_key,
                )
            )
        else:
            self._selection.reset(self._reconcile(self._selection.state))

        self._refresh()

    def _reconcile(self, state: SelectionState) -> SelectionState:
        """Keep only selected keys still on their side after a new partition."""
        left = set(self._partition.left_keys)
        right = set(self._partition.right_keys)
        kept = SelectionState(
            tuple(k for k in state.source_selected_keys if k in left),
            tuple(k for k in state.target_selected_keys if k in right),
        )
        if kept != state:
            logger.debug(
                "Pruned %d stale selected key(s)",
                len(state.source_selected_keys) + len(state.target_selected_keys)
                - len(kept.source_selected_keys) - len(kept.target_selected_keys),
            )
        return kept

    def update_props(self, **changes: Any) -> None:
        """Convenience wrapper: ``update`` with some fields replaced."""
        self.update(replace(self._props, **changes))

    # === Events ===

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener for emitted events.

        Returns:
            A function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, request: Request) -> list[TransferEvent]:
        """
        Handle one request and deliver the resulting events.

        Args:
            request: One of the request messages

        Returns:
            The emitted events, in delivery order

        Raises:
            UnknownRequestError: If the request type is not supported
        """
        handler = self._handlers.get(type(request))
        if handler is None:
            raise UnknownRequestError(f"Unsupported request: {request!r}")

        if self._props.disabled and not isinstance(request, Scroll):
            logger.debug("Ignoring %s: transfer is disabled", type(request).__name__)
            return []

        events = handler(request)
        for event in events:
            for listener in list(self._listeners):
                listener(event)
        return events

    # === Pull accessors ===

    def get_items(self, side: Direction | str) -> list[Item]:
        return list(self._views[Direction.coerce(side)].items)

    def get_filtered(self, side: Direction | str) -> list[Item]:
        return list(self._views[Direction.coerce(side)].filtered)

    def get_visible(self, side: Direction | str) -> list[Item]:
        """Return the items shown on the current page of a side."""
        return list(self._views[Direction.coerce(side)].visible)

    def get_selection(self, side: Direction | str) -> list[Key]:
        """Return the selected keys of a side."""
        return list(self._selection.get(Direction.coerce(side)))

    def get_max_page(self, side: Direction | str) -> int:
        return self._views[Direction.coerce(side)].max_page

    def get_current_page(self, side: Direction | str) -> int:
        return self._views[Direction.coerce(side)].current_page

    def get_query(self, side: Direction | str) -> str:
        return self._queries[Direction.coerce(side)]

    @property
    def selection(self) -> SelectionState:
        return self._selection.state

    @property
    def target_keys(self) -> tuple[Key, ...]:
        """Effective right-side order of the current cycle."""
        return self._partition.target_keys

    @property
    def partition_warnings(self) -> tuple[PartitionWarning, ...]:
        return self._partition.warnings

    def get_check_status(self, side: Direction | str) -> CheckStatus:
        """
        Return the select-all checkbox state of a side.

        Computed over the filtered items; disabled items count as checked.
        """
        side = Direction.coerce(side)
        selected = set(self._selection.get(side))
        if not selected:
            return CheckStatus.NONE
        filtered = self._views[side].filtered
        if all(item_key(item) in selected or item_disabled(item) for item in filtered):
            return CheckStatus.ALL
        return CheckStatus.PART

    def is_active(self, direction: Direction | str) -> bool:
        """Return True if moving towards ``direction`` has a selection to act on."""
        origin = Direction.coerce(direction).opposite
        return bool(self._selection.get(origin))

    # === Internals ===

    def _refresh(self) -> None:
        pagination = self._options.pagination
        sides = {
            Direction.LEFT: self._partition.left_items,
            Direction.RIGHT: self._partition.right_items,
        }
        for side, items in sides.items():
            filtered = filter_items(items, self._props.filter_option, self._queries[side])
            if pagination.enabled:
                last = max_page(len(filtered), pagination.page_size)
                page = clamp_page(self._pages[side], len(filtered), pagination.page_size)
                if page != self._pages[side]:
                    logger.debug("Clamping %s page %d -> %d", side.value, self._pages[side], page)
                visible = page_slice(filtered, page, pagination.page_size)
            else:
                last, page, visible = 1, 1, filtered
            self._pages[side] = page
            self._views[side] = SideView(
                items=tuple(items),
                filtered=tuple(filtered),
                visible=tuple(visible),
                current_page=page,
                max_page=last,
            )

    def _selectable_keys(self, side: Direction, current_page_only: bool = False) -> list[Key]:
        view = self._views[side]
        items = view.visible if current_page_only else view.filtered
        return [item_key(item) for item in items if not item_disabled(item)]

    def _selection_event(self, state: SelectionState) -> SelectChangeEvent:
        return SelectChangeEvent(state.source_selected_keys, state.target_selected_keys)

    def _commit(self, state: SelectionState) -> None:
        # Controlled selections are only proposed; the host feeds them back
        if not self.is_controlled:
            self._selection.reset(state)

    def _finish_move(self, result: MoveResult) -> list[TransferEvent]:
        self._commit(result.selection)
        log_move_operation(result.direction.value, list(result.moved_keys), len(result.target_keys))
        return [
            self._selection_event(result.selection),
            ChangeEvent(result.target_keys, result.direction, result.moved_keys),
        ]

    def _handle_move(self, request: Move) -> list[TransferEvent]:
        result = self._move_engine.move(
            Direction.coerce(request.direction),
            self._selection.state,
            self._partition.target_keys,
            self._items_by_key,
        )
        return self._finish_move(result)

    def _handle_remove(self, request: Remove) -> list[TransferEvent]:
        result = self._move_engine.remove(
            request.keys,
            self._selection.state,
            self._partition.target_keys,
            self._items_by_key,
        )
        return self._finish_move(result)

    def _handle_toggle(self, request: Toggle) -> list[TransferEvent]:
        state = self._selection.toggle(
            Direction.coerce(request.side),
            request.key,
            request.checked,
            commit=not self.is_controlled,
        )
        return [self._selection_event(state)]

    def _handle_select_all(self, request: SelectAll) -> list[TransferEvent]:
        side = Direction.coerce(request.side)
        keys = request.keys
        if keys is None:
            keys = self._selectable_keys(side, request.current_page_only)
        state = self._selection.select_all(
            side, keys, request.check_all, commit=not self.is_controlled
        )
        return [self._selection_event(state)]

    def _handle_invert(self, request: InvertSelection) -> list[TransferEvent]:
        side = Direction.coerce(request.side)
        state = self._selection.invert(
            side,
            self._selectable_keys(side, current_page_only=True),
            commit=not self.is_controlled,
        )
        return [self._selection_event(state)]

    def _handle_search(self, request: Search) -> list[TransferEvent]:
        side = Direction.coerce(request.side)
        self._queries[side] = request.query
        self._refresh()
        return [SearchEvent(side, request.query)]

    def _handle_set_page(self, request: SetPage) -> list[TransferEvent]:
        side = Direction.coerce(request.side)
        view = self._views[side]
        page = min(max(1, request.page), view.max_page)
        if page != request.page:
            logger.debug("Page %d out of range for %s; using %d", request.page, side.value, page)
        self._pages[side] = page
        self._refresh()
        return []

    def _handle_scroll(self, request: Scroll) -> list[TransferEvent]:
        return [ScrollEvent(Direction.coerce(request.side), request.event)]
