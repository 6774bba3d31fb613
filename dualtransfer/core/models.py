"""Core data models for DualTransfer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Iterable, Union

Key = str
RowKey = Callable[[Any], Key]


class Direction(Enum):
    """A side of the transfer; as a move argument, the destination side."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> Direction:
        """Return the other side."""
        return Direction.RIGHT if self is Direction.LEFT else Direction.LEFT

    @classmethod
    def coerce(cls, value: Direction | str) -> Direction:
        """Accept either a Direction or its string value."""
        if isinstance(value, cls):
            return value
        return cls(value)


class CheckStatus(Enum):
    """Tri-state of a side's select-all checkbox."""

    NONE = "none"
    PART = "part"
    ALL = "all"


@dataclass(frozen=True)
class TransferItem:
    """A uniquely keyed record that can live on either side of a transfer."""

    key: Key
    title: str = ""
    description: str = ""
    disabled: bool = False
    data: dict[str, Any] = field(default_factory=dict, compare=False)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "key": self.key,
            "title": self.title,
            "description": self.description,
            "disabled": self.disabled,
            **self.data,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TransferItem:
        """Create instance from dictionary, keeping unknown fields in ``data``."""
        known = {"key", "title", "description", "disabled"}
        return cls(
            key=str(data["key"]),
            title=data.get("title", ""),
            description=data.get("description", ""),
            disabled=bool(data.get("disabled", False)),
            data={k: v for k, v in data.items() if k not in known},
        )


Item = Union[TransferItem, Mapping[str, Any]]


def item_key(item: Item) -> Key:
    """Return the intrinsic key of an item."""
    if isinstance(item, Mapping):
        return item["key"]
    return item.key


def item_disabled(item: Item) -> bool:
    """Return True if the item cannot be selected for a move."""
    if isinstance(item, Mapping):
        return bool(item.get("disabled", False))
    return bool(getattr(item, "disabled", False))


def item_field(item: Item, name: str, default: Any = None) -> Any:
    """Read a named field from a mapping item, a TransferItem or its ``data``."""
    if isinstance(item, Mapping):
        return item.get(name, default)
    if hasattr(item, name):
        return getattr(item, name)
    data = getattr(item, "data", None)
    if isinstance(data, Mapping):
        return data.get(name, default)
    return default


def with_row_key(item: Item, row_key: RowKey | None) -> Item:
    """
    Return the item keyed by ``row_key``.

    The host's item is never modified; a copy carrying the derived key is
    returned instead.
    """
    if row_key is None:
        return item
    key = row_key(item)
    if isinstance(item, TransferItem):
        return item if item.key == key else replace(item, key=key)
    if isinstance(item, Mapping):
        return {**item, "key": key}
    raise TypeError(f"Unsupported item type: {type(item).__name__}")


@dataclass(frozen=True)
class SelectionState:
    """Selected keys on each side, in selection order."""

    source_selected_keys: tuple[Key, ...] = ()
    target_selected_keys: tuple[Key, ...] = ()

    def for_side(self, side: Direction) -> tuple[Key, ...]:
        """Return the selected keys of one side."""
        if side is Direction.LEFT:
            return self.source_selected_keys
        return self.target_selected_keys

    def with_side(self, side: Direction, keys: Iterable[Key]) -> SelectionState:
        """Return a copy with one side's keys replaced."""
        if side is Direction.LEFT:
            return replace(self, source_selected_keys=tuple(keys))
        return replace(self, target_selected_keys=tuple(keys))
