"""Repository layer: selection stores and the previous-selection history."""

from .history_repository import HistoryStore, escape_scope
from .selection_repository import (
    ContextStore,
    NamespaceStore,
    SelectionStore,
)

__all__ = [
    "HistoryStore",
    "escape_scope",
    "SelectionStore",
    "ContextStore",
    "NamespaceStore",
]
