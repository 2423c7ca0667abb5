"""kubectx-cli domain models.

Pydantic models for the tool configuration and kubeconfig documents,
dataclasses for parsed commands, and the exception hierarchy.
"""

from .command import (
    Command,
    CurrentCommand,
    DeleteCommand,
    HelpCommand,
    ListCommand,
    RenameCommand,
    Sentinel,
    SwapCommand,
    SwitchCommand,
    Target,
    UnsetCommand,
    VersionCommand,
)
from .config_models import (
    DEFAULT_NAMESPACE,
    ContextDetails,
    Kubeconfig,
    NamedContext,
    ToolConfig,
)
from .exceptions import (
    NoHistoryError,
    NotFoundError,
    SelectionError,
    StoreError,
    UsageError,
)

__all__ = [
    "Command",
    "CurrentCommand",
    "DeleteCommand",
    "HelpCommand",
    "ListCommand",
    "RenameCommand",
    "Sentinel",
    "SwapCommand",
    "SwitchCommand",
    "Target",
    "UnsetCommand",
    "VersionCommand",
    "DEFAULT_NAMESPACE",
    "ContextDetails",
    "Kubeconfig",
    "NamedContext",
    "ToolConfig",
    "NoHistoryError",
    "NotFoundError",
    "SelectionError",
    "StoreError",
    "UsageError",
]
