"""Bootstrap helpers wiring config, stores and the swap service together.

Usage Pattern:
    from kubectx_cli.services.selection_manager import get_context_swap_service

    swap = get_context_swap_service()
    swap.set_active("prod")
    swap.swap_to_previous()
"""

from __future__ import annotations

from collections.abc import Callable

from kubectx_cli.repositories.history_repository import HistoryStore
from kubectx_cli.repositories.selection_repository import ContextStore, NamespaceStore
from kubectx_cli.services.config_service import get_config_service
from kubectx_cli.services.kubeconfig_service import KubeconfigService
from kubectx_cli.services.swap_service import SwapService


def get_kubeconfig_service() -> KubeconfigService:
    """KubeconfigService for the configured kubeconfig path."""
    return KubeconfigService(get_config_service().kubeconfig_path())


def get_history_store() -> HistoryStore:
    """HistoryStore rooted at the configured history directory."""
    return HistoryStore(get_config_service().history_dir())


def get_context_swap_service(notify: Callable[[str], None] | None = None) -> SwapService:
    """SwapService operating on kubeconfig contexts."""
    store = ContextStore(get_kubeconfig_service())
    return SwapService(store, get_history_store(), notify=notify)


def get_namespace_swap_service(notify: Callable[[str], None] | None = None) -> SwapService:
    """SwapService operating on namespaces of the current context."""
    config = get_config_service().config
    store = NamespaceStore(
        get_kubeconfig_service(), default_namespace=config.default_namespace
    )
    return SwapService(store, get_history_store(), notify=notify)
