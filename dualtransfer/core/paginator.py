"""Page windowing over a filtered list."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Sequence, TypeVar

from .constants import DEFAULT_PAGE_SIZE

T = TypeVar("T")


@dataclass(frozen=True)
class PaginationConfig:
    """Per-side pagination settings."""

    enabled: bool = True
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError(f"page_size must be positive, got {self.page_size}")

    @classmethod
    def parse(cls, value: bool | Mapping[str, Any] | PaginationConfig | None) -> PaginationConfig:
        """
        Normalize the accepted pagination forms.

        ``None``/``False`` disable paging, ``True`` uses the defaults and a
        mapping overrides individual fields.
        """
        if isinstance(value, PaginationConfig):
            return value
        if not value:
            return cls(enabled=False)
        if isinstance(value, Mapping):
            return cls(
                enabled=bool(value.get("enabled", True)),
                page_size=int(value.get("page_size", DEFAULT_PAGE_SIZE)),
            )
        return cls()


def max_page(total: int, page_size: int) -> int:
    """Return the last valid 1-based page; at least 1 even when empty."""
    return max(1, math.ceil(total / page_size))


def clamp_page(page: int, total: int, page_size: int) -> int:
    """Clamp ``page`` into ``[1, max_page]``."""
    return min(max(1, page), max_page(total, page_size))


def page_slice(items: Sequence[T], page: int, page_size: int) -> list[T]:
    """Return the items shown on a 1-based page."""
    start = (page - 1) * page_size
    return list(items[start:start + page_size])
