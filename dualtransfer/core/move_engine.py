"""Move resolution between the two sides of a transfer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Sequence

from .models import Direction, Item, Key, SelectionState, item_disabled

logger = logging.getLogger(__name__)


class MoveOrder(Enum):
    """Where keys moved to the right side are placed."""

    PREPEND = "prepend"  # most recently moved first
    APPEND = "append"


@dataclass(frozen=True)
class MoveResult:
    """Proposed outcome of a move; inputs are left untouched."""

    target_keys: tuple[Key, ...]
    direction: Direction
    moved_keys: tuple[Key, ...]
    selection: SelectionState


class MoveEngine:
    """
    Computes new target keys for move requests.

    The engine is stateless apart from its ordering policy. Disabled items
    are looked up in the full data source, so filtering or paging never
    affects which keys may move.
    """

    def __init__(self, order: MoveOrder = MoveOrder.PREPEND) -> None:
        self.order = order

    @staticmethod
    def movable_keys(keys: Iterable[Key], items_by_key: Mapping[Key, Item]) -> tuple[Key, ...]:
        """Drop keys without an item and keys whose item is disabled."""
        movable = []
        for key in keys:
            item = items_by_key.get(key)
            if item is None:
                logger.debug("Skipping unknown key '%s'", key)
                continue
            if item_disabled(item):
                logger.debug("Skipping disabled item '%s'", key)
                continue
            movable.append(key)
        return tuple(movable)

    def move(
        self,
        direction: Direction,
        selection: SelectionState,
        target_keys: Sequence[Key],
        items_by_key: Mapping[Key, Item],
    ) -> MoveResult:
        """
        Move the selection of the origin side towards ``direction``.

        Args:
            direction: Destination side
            selection: Current selection of both sides
            target_keys: Current right-side keys
            items_by_key: Every data source item by key

        Returns:
            MoveResult with the origin selection cleared
        """
        origin = direction.opposite
        # keys already on the destination side stay where they are
        on_right = set(target_keys)
        moved = tuple(
            key
            for key in self.movable_keys(selection.for_side(origin), items_by_key)
            if (key in on_right) is (direction is Direction.LEFT)
        )

        if direction is Direction.RIGHT:
            if self.order is MoveOrder.PREPEND:
                new_target = (*moved, *target_keys)
            else:
                new_target = (*target_keys, *moved)
        else:
            leaving = set(moved)
            new_target = tuple(k for k in target_keys if k not in leaving)

        logger.debug(
            "Move %s: %d key(s), %d -> %d target keys",
            direction.value,
            len(moved),
            len(target_keys),
            len(new_target),
        )
        return MoveResult(
            target_keys=new_target,
            direction=direction,
            moved_keys=moved,
            selection=selection.with_side(origin, ()),
        )

    def remove(
        self,
        keys: Iterable[Key],
        selection: SelectionState,
        target_keys: Sequence[Key],
        items_by_key: Mapping[Key, Item],
    ) -> MoveResult:
        """Remove ``keys`` from the right side and clear the right selection."""
        on_right = set(target_keys)
        removed = tuple(
            key
            for key in self.movable_keys(dict.fromkeys(keys), items_by_key)
            if key in on_right
        )
        leaving = set(removed)
        return MoveResult(
            target_keys=tuple(k for k in target_keys if k not in leaving),
            direction=Direction.LEFT,
            moved_keys=removed,
            selection=selection.with_side(Direction.RIGHT, ()),
        )
