"""Previous-selection history files.

Layout under the base directory (shared with existing kubectx/kubens
installs, so it must not change)::

    <base>/kubectx              previous context name
    <base>/kubens/<context>     previous namespace for that context

Each file holds the raw name with no trailing newline. Context names are
made path-safe by replacing path separators with ``__``; a name made only
of dots (``.``, ``..``) has its dots replaced as well. No context name can
escape ``kubens/``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from kubectx_cli.models.exceptions import StoreError
from kubectx_cli.utils.files import atomic_write_text

logger = logging.getLogger(__name__)

CONTEXT_HISTORY_FILE = "kubectx"
NAMESPACE_HISTORY_DIR = "kubens"
SEPARATOR_SUBSTITUTE = "__"

_SEPARATORS = {sep for sep in ("/", os.sep, os.altsep) if sep}


def escape_scope(context_name: str) -> str:
    """File name for a context's namespace history."""
    escaped = context_name
    for sep in _SEPARATORS:
        escaped = escaped.replace(sep, SEPARATOR_SUBSTITUTE)
    if escaped and not escaped.strip("."):
        escaped = escaped.replace(".", SEPARATOR_SUBSTITUTE)
    return escaped


class HistoryStore:
    """Durable mapping from scope to the last displaced selection.

    A scope of ``None`` addresses the single context slot; any string
    addresses the namespace slot of that context.
    """

    def __init__(self, base_dir: Path):
        self.base_dir = Path(base_dir)

    def path_for(self, scope: str | None) -> Path:
        if scope is None:
            return self.base_dir / CONTEXT_HISTORY_FILE
        return self.base_dir / NAMESPACE_HISTORY_DIR / escape_scope(scope)

    def read(self, scope: str | None) -> str | None:
        """Return the recorded selection, or None if nothing was recorded."""
        path = self.path_for(scope)
        try:
            value = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StoreError(f"failed to read history file {path}: {e}") from e
        return value or None

    def write(self, scope: str | None, value: str) -> bool:
        """Record *value* for *scope*.

        Returns False when the stored value already equals *value* and the
        file was left alone.

        Raises:
            StoreError: If the history file cannot be read or written
        """
        path = self.path_for(scope)
        if self.read(scope) == value:
            logger.debug("history for %r already %r", scope, value)
            return False
        try:
            atomic_write_text(path, value)
        except OSError as e:
            raise StoreError(f"failed to write history file {path}: {e}") from e
        logger.info("history for %r set to %r", scope, value)
        return True
