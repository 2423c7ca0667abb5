"""Parsed command-line actions.

Each action is its own small frozen dataclass; the parser returns one of
them and the command modules dispatch on its type.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Sentinel(Enum):
    """Stand-in for "whatever selection is active when this runs"."""

    CURRENT = "."

    def __repr__(self) -> str:
        return "CURRENT"


# A selection name, or the active selection resolved at execution time
Target = str | Sentinel


@dataclass(frozen=True)
class ListCommand:
    """List all selections, highlighting the active one."""


@dataclass(frozen=True)
class SwitchCommand:
    name: str


@dataclass(frozen=True)
class SwapCommand:
    """Switch back to the previously active selection."""


@dataclass(frozen=True)
class RenameCommand:
    old: Target
    new: str


@dataclass(frozen=True)
class DeleteCommand:
    names: tuple[Target, ...]


@dataclass(frozen=True)
class CurrentCommand:
    """Print the active selection."""


@dataclass(frozen=True)
class UnsetCommand:
    """Clear the active context."""


@dataclass(frozen=True)
class VersionCommand:
    pass


@dataclass(frozen=True)
class HelpCommand:
    pass


Command = (
    ListCommand
    | SwitchCommand
    | SwapCommand
    | RenameCommand
    | DeleteCommand
    | CurrentCommand
    | UnsetCommand
    | VersionCommand
    | HelpCommand
)
