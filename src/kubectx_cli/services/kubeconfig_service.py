"""Kubeconfig service.

Reads and writes the kubeconfig file that acts as the selection store for
both tools: the ``contexts`` list, ``current-context`` and each context's
``namespace``. Everything else in the file is carried through unchanged.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from kubectx_cli.models.config_models import Kubeconfig, NamedContext
from kubectx_cli.models.exceptions import NotFoundError, StoreError
from kubectx_cli.utils.files import atomic_write_text

logger = logging.getLogger(__name__)


class KubeconfigService:
    """Service for reading and modifying a kubeconfig file."""

    def __init__(self, path: Path):
        """Initialize the service for the kubeconfig at *path*."""
        self.path = Path(path)
        self._config: Kubeconfig | None = None

    @property
    def config(self) -> Kubeconfig:
        """Get or load the kubeconfig."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def load(self) -> Kubeconfig:
        """Parse the kubeconfig file.

        Raises:
            StoreError: If the file is missing, unreadable or not a kubeconfig
        """
        try:
            with open(self.path, encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise StoreError(f"kubeconfig file not found: {self.path}") from e
        except (OSError, yaml.YAMLError) as e:
            raise StoreError(f"failed to read kubeconfig {self.path}: {e}") from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise StoreError(f"kubeconfig {self.path} is not a mapping")

        try:
            self._config = Kubeconfig.model_validate(raw)
        except ValueError as e:
            raise StoreError(f"invalid kubeconfig {self.path}: {e}") from e
        return self._config

    def save(self):
        """Write the kubeconfig back to disk."""
        try:
            text = yaml.safe_dump(
                self.config.to_yaml_dict(),
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
            atomic_write_text(self.path, text, mode=0o600)
        except (OSError, yaml.YAMLError) as e:
            raise StoreError(f"failed to write kubeconfig {self.path}: {e}") from e

    def list_contexts(self) -> list[str]:
        """List all context names, sorted."""
        return sorted(self.config.context_names())

    def has_context(self, name: str) -> bool:
        return self.config.has_context(name)

    def current_context(self) -> str:
        """Name of the current context, or "" when unset."""
        return self.config.current_context

    def get_context(self, name: str) -> NamedContext:
        try:
            return self.config.get_context(name)
        except ValueError as e:
            raise NotFoundError(f'no context exists with the name: "{name}"') from e

    def use_context(self, name: str):
        """Make *name* the current context."""
        try:
            self.config.use_context(name)
        except ValueError as e:
            raise NotFoundError(f'no context exists with the name: "{name}"') from e
        self.save()
        logger.info("current-context set to %r", name)

    def unset_current_context(self):
        """Clear current-context."""
        self.config.current_context = ""
        self.save()
        logger.info("current-context unset")

    def rename_context(self, old_name: str, new_name: str):
        """Rename a context; current-context follows the rename."""
        try:
            self.config.rename_context(old_name, new_name)
        except ValueError as e:
            raise NotFoundError(f'no context exists with the name: "{old_name}"') from e
        self.save()
        logger.info("context %r renamed to %r", old_name, new_name)

    def delete_context(self, name: str):
        """Delete a context entry. current-context is left as it is."""
        try:
            self.config.remove_context(name)
        except ValueError as e:
            raise NotFoundError(f'no context exists with the name: "{name}"') from e
        self.save()
        logger.info("context %r deleted", name)

    def get_namespace(self, context_name: str) -> str | None:
        """Namespace set on a context entry, or None."""
        return self.get_context(context_name).context.namespace or None

    def set_namespace(self, context_name: str, namespace: str):
        """Set the namespace of a context entry."""
        try:
            self.config.set_namespace(context_name, namespace)
        except ValueError as e:
            raise NotFoundError(f'no context exists with the name: "{context_name}"') from e
        self.save()
        logger.info("namespace of %r set to %r", context_name, namespace)
