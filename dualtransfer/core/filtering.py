"""Search filtering for one side of a transfer."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from .models import Item, item_field

FilterOption = Callable[[str, Item], bool]


def accept_all(query: str, item: Item) -> bool:
    """Default predicate: every item matches."""
    return True


def text_contains(*fields: str) -> FilterOption:
    """
    Build a case-insensitive substring predicate.

    Args:
        fields: Item fields to search; defaults to ("title", "key")

    Returns:
        Predicate matching items whose fields contain the query
    """
    names = fields or ("title", "key")

    def predicate(query: str, item: Item) -> bool:
        needle = query.lower()
        for name in names:
            value: Any = item_field(item, name)
            if value is not None and needle in str(value).lower():
                return True
        return False

    return predicate


def filter_items(
    items: Sequence[Item],
    predicate: FilterOption = accept_all,
    query: str = "",
) -> list[Item]:
    """
    Return the order-preserving subsequence of ``items`` matching ``query``.

    An empty query resets to the unfiltered list without calling the
    predicate.
    """
    if not query:
        return list(items)
    return [item for item in items if predicate(query, item)]
