"""Request and event messages exchanged with a TransferEngine.

Requests flow in through ``TransferEngine.dispatch``; events flow out to
subscribers. Both are frozen dataclasses so a listener can keep them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .models import Direction, Key


# === Requests ===

@dataclass(frozen=True)
class Move:
    """Move the selection of the opposite side towards ``direction``."""

    direction: Direction


@dataclass(frozen=True)
class Remove:
    """Remove keys from the right side (one-way transfers)."""

    keys: tuple[Key, ...]


@dataclass(frozen=True)
class Toggle:
    """Check or uncheck one item."""

    side: Direction
    key: Key
    checked: bool


@dataclass(frozen=True)
class SelectAll:
    """
    Check or uncheck many items at once.

    When ``keys`` is None the engine uses the side's filtered, enabled keys,
    or only those on the current page if ``current_page_only`` is set.
    """

    side: Direction
    check_all: bool = True
    keys: Optional[tuple[Key, ...]] = None
    current_page_only: bool = False


@dataclass(frozen=True)
class InvertSelection:
    """Flip the selection of the enabled items on the current page."""

    side: Direction


@dataclass(frozen=True)
class Search:
    """New search text for one side; empty text clears the filter."""

    side: Direction
    query: str


@dataclass(frozen=True)
class SetPage:
    side: Direction
    page: int


@dataclass(frozen=True)
class Scroll:
    """Raw scroll notification, passed through untouched."""

    side: Direction
    event: Any = field(default=None, compare=False)


Request = Union[Move, Remove, Toggle, SelectAll, InvertSelection, Search, SetPage, Scroll]


# === Events ===

@dataclass(frozen=True)
class ChangeEvent:
    """Proposed new target keys after a move or remove."""

    target_keys: tuple[Key, ...]
    direction: Direction
    move_keys: tuple[Key, ...]


@dataclass(frozen=True)
class SelectChangeEvent:
    """Full selection pair after any selection mutation."""

    source_selected_keys: tuple[Key, ...]
    target_selected_keys: tuple[Key, ...]


@dataclass(frozen=True)
class SearchEvent:
    side: Direction
    query: str


@dataclass(frozen=True)
class ScrollEvent:
    side: Direction
    event: Any = field(default=None, compare=False)


TransferEvent = Union[ChangeEvent, SelectChangeEvent, SearchEvent, ScrollEvent]
