"""Custom exceptions for kubectx-cli.

Every handled failure is terminal for the invoking process and maps to
exit code 1; the subclasses only exist so callers and tests can tell the
failure kinds apart.
"""

from kubectx_cli.utils.exit_codes import ERROR_GENERAL


class SelectionError(Exception):
    """Base exception for all selection errors."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


class NotFoundError(SelectionError):
    """Raised when a requested context or namespace does not exist."""


class NoHistoryError(SelectionError):
    """Raised when swapping without a recorded previous selection."""


class UsageError(SelectionError):
    """Raised for malformed or unsupported command-line invocations."""


class StoreError(SelectionError):
    """Raised when reading or writing the kubeconfig or cluster fails."""
