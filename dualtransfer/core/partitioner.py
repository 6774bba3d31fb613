"""Partitioning of a data source into left and right lists.

The right list is ordered by ``target_keys``; the left list keeps the data
source order. Input contract violations are reported as warnings and never
raise, since a UI still has to render something deterministic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from .models import Item, Key, RowKey, item_key, with_row_key

logger = logging.getLogger(__name__)

DUPLICATE_KEY = "DUPLICATE_KEY"
DUPLICATE_TARGET_KEY = "DUPLICATE_TARGET_KEY"
ORPHAN_TARGET_KEY = "ORPHAN_TARGET_KEY"


@dataclass(frozen=True)
class PartitionWarning:
    """A single input contract violation found while partitioning."""

    code: str
    message: str
    key: Key


@dataclass(frozen=True)
class PartitionResult:
    """
    Result of splitting a data source by target key membership.

    Attributes:
        left_items: Items not in target_keys, in data source order
        right_items: Items in target_keys, in target_keys order
        target_keys: Effective right order (orphans and repeats removed)
        warnings: Contract violations found in the inputs
    """

    left_items: tuple[Item, ...] = ()
    right_items: tuple[Item, ...] = ()
    target_keys: tuple[Key, ...] = ()
    warnings: tuple[PartitionWarning, ...] = field(default=())

    @property
    def items_by_key(self) -> dict[Key, Item]:
        """Map every partitioned item by key."""
        return {item_key(item): item for item in (*self.left_items, *self.right_items)}

    @property
    def left_keys(self) -> list[Key]:
        return [item_key(item) for item in self.left_items]

    @property
    def right_keys(self) -> list[Key]:
        return list(self.target_keys)


def _warn(warnings: list[PartitionWarning], code: str, message: str, key: Key) -> None:
    logger.warning("%s: %s", code, message)
    warnings.append(PartitionWarning(code, message, key))


def partition(
    data_source: Sequence[Item],
    target_keys: Sequence[Key],
    row_key: RowKey | None = None,
) -> PartitionResult:
    """
    Split ``data_source`` into left and right items.

    Runs in O(n + m): one pass over ``target_keys`` builds the slot map,
    one pass over ``data_source`` places every item.

    Args:
        data_source: Ordered items, never modified
        target_keys: Ordered keys of the right side
        row_key: Optional function deriving each item's key

    Returns:
        PartitionResult with both sides and any warnings
    """
    warnings: list[PartitionWarning] = []

    slot_of: dict[Key, int] = {}
    for index, key in enumerate(target_keys):
        if key in slot_of:
            _warn(
                warnings,
                DUPLICATE_TARGET_KEY,
                f"Target key '{key}' repeated at position {index}; keeping first position",
                key,
            )
            continue
        slot_of[key] = index

    keyed = [with_row_key(item, row_key) for item in data_source]

    # Later occurrences win: remember the last index of every key
    last_index: dict[Key, int] = {}
    for index, item in enumerate(keyed):
        last_index[item_key(item)] = index

    left: list[Item] = []
    slots: list[Item | None] = [None] * len(target_keys)
    for index, item in enumerate(keyed):
        key = item_key(item)
        if last_index[key] != index:
            _warn(
                warnings,
                DUPLICATE_KEY,
                f"Duplicate key '{key}' in data source at position {index}; "
                f"later occurrence at {last_index[key]} wins",
                key,
            )
            continue
        slot = slot_of.get(key)
        if slot is None:
            left.append(item)
        else:
            slots[slot] = item

    right: list[Item] = []
    effective_keys: list[Key] = []
    for index, key in enumerate(target_keys):
        if slot_of.get(key) != index:
            continue
        item = slots[index]
        if item is None:
            _warn(
                warnings,
                ORPHAN_TARGET_KEY,
                f"Target key '{key}' has no matching data source item; dropped",
                key,
            )
            continue
        right.append(item)
        effective_keys.append(key)

    return PartitionResult(
        left_items=tuple(left),
        right_items=tuple(right),
        target_keys=tuple(effective_keys),
        warnings=tuple(warnings),
    )
