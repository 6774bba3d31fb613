"""Selection tracking for both sides of a transfer.

Selection lives in an immutable ``SelectionState``. The controlled path is
a pure reducer; the mutation paths return the new state and remember it
for the uncontrolled case.
"""

from __future__ import annotations

import logging
from typing import Collection, Iterable, Sequence

from .models import Direction, Key, SelectionState

logger = logging.getLogger(__name__)


def derive_from_controlled(
    selected_keys: Sequence[Key],
    target_keys: Sequence[Key],
    known_keys: Collection[Key] | None = None,
) -> SelectionState:
    """
    Split a host-supplied combined selection into the two sides.

    Args:
        selected_keys: Combined selection from the host
        target_keys: Keys currently on the right side
        known_keys: If given, keys outside this collection are dropped

    Returns:
        SelectionState replacing any internal selection
    """
    target_set = set(target_keys)
    source: list[Key] = []
    target: list[Key] = []
    for key in selected_keys:
        if known_keys is not None and key not in known_keys:
            logger.debug("Dropping selected key '%s' absent from data source", key)
            continue
        if key in target_set:
            target.append(key)
        else:
            source.append(key)
    return SelectionState(tuple(source), tuple(target))


class SelectionTracker:
    """
    Owns the selected key sets of both sides.

    Every mutation returns the new SelectionState. Callers decide whether it
    becomes the tracked state (uncontrolled) or is only proposed to the host
    (controlled).
    """

    def __init__(self, state: SelectionState | None = None) -> None:
        self._state = state or SelectionState()

    @property
    def state(self) -> SelectionState:
        """Return the current selection."""
        return self._state

    def reset(self, state: SelectionState) -> None:
        """Replace the tracked selection wholesale."""
        self._state = state

    def get(self, side: Direction) -> tuple[Key, ...]:
        return self._state.for_side(side)

    def toggle(self, side: Direction, key: Key, checked: bool, commit: bool = True) -> SelectionState:
        """Add ``key`` when checked and absent, remove it when unchecked and present."""
        current = self._state.for_side(side)
        if checked and key not in current:
            keys: Iterable[Key] = (*current, key)
        elif not checked and key in current:
            keys = (k for k in current if k != key)
        else:
            keys = current
        return self._apply(self._state.with_side(side, keys), commit)

    def select_all(
        self,
        side: Direction,
        affected_keys: Iterable[Key],
        check_all: bool,
        commit: bool = True,
    ) -> SelectionState:
        """Union ``affected_keys`` into a side, or subtract them from it."""
        current = self._state.for_side(side)
        affected = list(dict.fromkeys(affected_keys))
        if check_all:
            present = set(current)
            keys = [*current, *(k for k in affected if k not in present)]
        else:
            removed = set(affected)
            keys = [k for k in current if k not in removed]
        return self._apply(self._state.with_side(side, keys), commit)

    def invert(self, side: Direction, affected_keys: Iterable[Key], commit: bool = True) -> SelectionState:
        """Flip the membership of every affected key."""
        current = self._state.for_side(side)
        affected = list(dict.fromkeys(affected_keys))
        flipped = set(affected)
        present = set(current)
        keys = [k for k in current if k not in flipped]
        keys.extend(k for k in affected if k not in present)
        return self._apply(self._state.with_side(side, keys), commit)

    def clear(self, side: Direction, commit: bool = True) -> SelectionState:
        """Empty one side."""
        return self._apply(self._state.with_side(side, ()), commit)

    def _apply(self, state: SelectionState, commit: bool) -> SelectionState:
        if commit:
            self._state = state
        return state
