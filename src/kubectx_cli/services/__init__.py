"""Services module for kubectx-cli - Business logic layer."""

from .config_service import ConfigService, get_config_service
from .kubeconfig_service import KubeconfigService
from .swap_service import DeleteResult, SwapService

__all__ = [
    "ConfigService",
    "get_config_service",
    "KubeconfigService",
    "SwapService",
    "DeleteResult",
]
