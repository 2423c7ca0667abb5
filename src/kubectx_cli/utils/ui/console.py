"""Console utilities for kubectx-cli."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=4)
def get_console(highlight: bool = False, stderr: bool = False) -> Console:
    """Get a Rich Console instance for consistent output formatting.

    Selection names are printed verbatim, so automatic highlighting is off
    unless asked for.
    """
    return Console(highlight=highlight, stderr=stderr)
