"""Selection stores.

A selection store is the system of record for the available selections
and for which one is active. ``ContextStore`` works on kubeconfig
contexts; ``NamespaceStore`` works on the namespace of the current
context. The swap engine only talks to the abstract interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path

from kubectx_cli.models.config_models import DEFAULT_NAMESPACE
from kubectx_cli.models.exceptions import NotFoundError, StoreError, UsageError
from kubectx_cli.services.kubeconfig_service import KubeconfigService
from kubectx_cli.services.namespace_service import list_cluster_namespaces

NamespaceLister = Callable[[Path, str], list[str]]


class SelectionStore(ABC):
    """Abstract base class for a set of selections with one active member."""

    #: Human-readable noun used in messages ("context", "namespace")
    kind: str = "selection"

    @abstractmethod
    def get_active(self) -> str:
        """Name of the active selection ("" when there is none)."""

    @abstractmethod
    def list_all(self) -> list[str]:
        """All selections, sorted."""

    def exists(self, name: str) -> bool:
        return name in self.list_all()

    @abstractmethod
    def set_active(self, name: str) -> None:
        """Make *name* active.

        Raises:
            NotFoundError: If *name* does not exist
        """

    @abstractmethod
    def rename(self, old: str, new: str) -> None:
        """Rename *old* to *new*."""

    @abstractmethod
    def delete(self, name: str) -> None:
        """Delete *name*."""

    def unset(self) -> None:
        """Leave no selection active."""
        raise UsageError(f"a {self.kind} cannot be unset")

    @abstractmethod
    def history_scope(self) -> str | None:
        """Scope key under which the previous selection is recorded."""


class ContextStore(SelectionStore):
    """Kubeconfig contexts; history lives in one global slot."""

    kind = "context"

    def __init__(self, kubeconfig: KubeconfigService):
        self.kubeconfig = kubeconfig

    def get_active(self) -> str:
        return self.kubeconfig.current_context()

    def list_all(self) -> list[str]:
        return self.kubeconfig.list_contexts()

    def exists(self, name: str) -> bool:
        return self.kubeconfig.has_context(name)

    def set_active(self, name: str) -> None:
        self.kubeconfig.use_context(name)

    def rename(self, old: str, new: str) -> None:
        self.kubeconfig.rename_context(old, new)

    def delete(self, name: str) -> None:
        self.kubeconfig.delete_context(name)

    def unset(self) -> None:
        self.kubeconfig.unset_current_context()

    def history_scope(self) -> str | None:
        return None


class NamespaceStore(SelectionStore):
    """Namespaces of the current context; history is kept per context."""

    kind = "namespace"

    def __init__(
        self,
        kubeconfig: KubeconfigService,
        lister: NamespaceLister = list_cluster_namespaces,
        default_namespace: str = DEFAULT_NAMESPACE,
    ):
        self.kubeconfig = kubeconfig
        self.lister = lister
        self.default_namespace = default_namespace

    def current_context(self) -> str:
        ctx = self.kubeconfig.current_context()
        if not ctx:
            raise StoreError("current-context is not set")
        return ctx

    def get_active(self) -> str:
        ns = self.kubeconfig.get_namespace(self.current_context())
        return ns or self.default_namespace

    def list_all(self) -> list[str]:
        return sorted(self.lister(self.kubeconfig.path, self.current_context()))

    def set_active(self, name: str) -> None:
        if not self.exists(name):
            raise NotFoundError(f'no namespace exists with name "{name}"')
        self.kubeconfig.set_namespace(self.current_context(), name)

    def rename(self, old: str, new: str) -> None:
        raise UsageError("namespaces cannot be renamed")

    def delete(self, name: str) -> None:
        raise UsageError("namespaces cannot be deleted")

    def history_scope(self) -> str | None:
        return self.current_context()
