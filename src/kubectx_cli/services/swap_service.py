"""Swap service - switching selections and remembering the previous one.

``set_active`` reads the active selection, switches, and only after the
switch succeeded records what was displaced. Because every switch
overwrites the record with its own predecessor, ``swap_to_previous``
called twice in a row returns to where it started.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from kubectx_cli.models.command import Sentinel, Target
from kubectx_cli.models.exceptions import NoHistoryError, NotFoundError

if TYPE_CHECKING:
    from kubectx_cli.repositories.history_repository import HistoryStore
    from kubectx_cli.repositories.selection_repository import SelectionStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteResult:
    name: str
    was_active: bool


class SwapService:
    """Service for switching selections.

    Works the same way for contexts and namespaces; the store decides what
    a selection is and which history scope applies.
    """

    def __init__(
        self,
        store: SelectionStore,
        history: HistoryStore,
        notify: Callable[[str], None] | None = None,
    ):
        """Initialize the swap service.

        Args:
            store: Selection store to operate on
            history: Previous-selection store
            notify: Receives user-facing notices (e.g. destructive overwrites)
        """
        self.store = store
        self.history = history
        self.notify = notify or (lambda message: None)

    def resolve(self, target: Target) -> str:
        """Turn ``Sentinel.CURRENT`` into the active selection's name."""
        if target is Sentinel.CURRENT:
            return self.store.get_active()
        return target

    def current(self) -> str:
        """Return the active selection."""
        return self.store.get_active()

    def list_all(self) -> list[str]:
        """Return all selections, sorted."""
        return self.store.list_all()

    def unset(self) -> None:
        """Leave no selection active. History is not touched."""
        self.store.unset()
        logger.info("%s unset", self.store.kind)

    def set_active(self, target: Target) -> str:
        """Make *target* active and record the displaced selection.

        Returns:
            The name that is now active

        Raises:
            NotFoundError: If *target* does not exist (history is untouched)
        """
        name = self.resolve(target)
        previous = self.store.get_active()
        scope = self.store.history_scope()

        self.store.set_active(name)
        logger.info("switched %s %r -> %r", self.store.kind, previous, name)

        if previous and previous != name:
            self.history.write(scope, previous)
        return name

    def swap_to_previous(self) -> str:
        """Switch to the selection recorded for the current scope.

        Raises:
            NoHistoryError: If nothing is recorded for the current scope
        """
        previous = self.history.read(self.store.history_scope())
        if not previous:
            raise NoHistoryError(self._no_history_message())
        return self.set_active(previous)

    def rename(self, old: Target, new: str) -> str:
        """Rename *old* to *new*, deleting an existing *new* first.

        Returns:
            The resolved old name
        """
        old_name = self.resolve(old)
        if not old_name or not self.store.exists(old_name):
            raise NotFoundError(
                f'no {self.store.kind} exists with the name: "{old_name}"'
            )
        if old_name == new:
            return old_name

        if self.store.exists(new):
            self.notify(f'{self.store.kind.capitalize()} "{new}" exists, deleting...')
            self.store.delete(new)

        self.store.rename(old_name, new)
        return old_name

    def delete(self, targets: Iterable[Target]) -> Iterator[DeleteResult]:
        """Delete each target in order, yielding as each one is gone.

        ``Sentinel.CURRENT`` is resolved again for every item, against the
        state left by the deletions before it. History is not touched.
        """
        for target in targets:
            name = self.resolve(target)
            if not name:
                raise NotFoundError(f"there is no current {self.store.kind}")
            was_active = name == self.store.get_active()
            self.store.delete(name)
            yield DeleteResult(name=name, was_active=was_active)

    def _no_history_message(self) -> str:
        if self.store.history_scope() is None:
            return f"No previous {self.store.kind} found."
        return f"No previous {self.store.kind} found for current context."
