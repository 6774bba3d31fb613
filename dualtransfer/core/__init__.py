"""Core module for DualTransfer."""

from .config import ConfigManager, ConfigError
from .logging_config import setup_logging, get_audit_logger, log_move_operation
from .models import (
    CheckStatus,
    Direction,
    SelectionState,
    TransferItem,
)
from .partitioner import PartitionResult, PartitionWarning, partition
from .filtering import accept_all, filter_items, text_contains
from .paginator import PaginationConfig, clamp_page, max_page, page_slice
from .selection import SelectionTracker, derive_from_controlled
from .move_engine import MoveEngine, MoveOrder, MoveResult
from .messages import (
    ChangeEvent,
    InvertSelection,
    Move,
    Remove,
    Scroll,
    ScrollEvent,
    Search,
    SearchEvent,
    SelectAll,
    SelectChangeEvent,
    SetPage,
    Toggle,
)
from .engine import (
    TransferEngine,
    TransferError,
    TransferOptions,
    TransferProps,
    UnknownRequestError,
)

__all__ = [
    # Config
    "ConfigManager",
    "ConfigError",
    # Logging
    "setup_logging",
    "get_audit_logger",
    "log_move_operation",
    # Models
    "CheckStatus",
    "Direction",
    "SelectionState",
    "TransferItem",
    # Partitioning
    "PartitionResult",
    "PartitionWarning",
    "partition",
    # Filtering and paging
    "accept_all",
    "filter_items",
    "text_contains",
    "PaginationConfig",
    "clamp_page",
    "max_page",
    "page_slice",
    # Selection and moves
    "SelectionTracker",
    "derive_from_controlled",
    "MoveEngine",
    "MoveOrder",
    "MoveResult",
    # Messages
    "ChangeEvent",
    "InvertSelection",
    "Move",
    "Remove",
    "Scroll",
    "ScrollEvent",
    "Search",
    "SearchEvent",
    "SelectAll",
    "SelectChangeEvent",
    "SetPage",
    "Toggle",
    # Engine
    "TransferEngine",
    "TransferError",
    "TransferOptions",
    "TransferProps",
    "UnknownRequestError",
]
