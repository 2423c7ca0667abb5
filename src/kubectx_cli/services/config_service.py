"""Configuration service for kubectx-cli.

Resolves where the tool reads and writes things:

- the tool's own settings (``config.json`` under the platformdirs config dir)
- the kubeconfig file acting as the selection store
- the directory holding previous-selection files

Environment variables (``KUBECONFIG``, ``XDG_CACHE_HOME``) win over
``config.json``; built-in defaults apply last.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path

from platformdirs import user_config_dir

from kubectx_cli.models.config_models import ToolConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading the tool configuration and resolving paths."""

    def __init__(self, environ: dict[str, str] | None = None):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("kubectx_cli"))
        self.config_path = self.config_dir / "config.json"
        self.environ = os.environ if environ is None else environ

        self._config: ToolConfig | None = None

    @property
    def config(self) -> ToolConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> ToolConfig:
        """Load configuration from config.json, falling back to defaults."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = ToolConfig.model_validate_json(f.read())
            logger.debug("loaded config from %s", self.config_path)
        except FileNotFoundError:
            # No config file is the normal case
            self._config = ToolConfig()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def kubeconfig_path(self) -> Path:
        """Kubeconfig used as the selection store.

        Only the first entry of a multi-file ``KUBECONFIG`` is used.
        """
        env_value = self.environ.get("KUBECONFIG", "")
        for entry in env_value.split(os.pathsep):
            if entry:
                return Path(entry).expanduser()
        if self.config.kubeconfig:
            return Path(self.config.kubeconfig).expanduser()
        return Path.home() / ".kube" / "config"

    def history_dir(self) -> Path:
        """Directory holding the ``kubectx`` file and ``kubens/`` directory."""
        cache_home = self.environ.get("XDG_CACHE_HOME")
        if cache_home:
            return Path(cache_home).expanduser()
        if self.config.history_dir:
            return Path(self.config.history_dir).expanduser()
        return Path.home() / ".kube"


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
