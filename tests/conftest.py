"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real home directory,
kubeconfig and cluster.
"""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from kubectx_cli.models.exceptions import NotFoundError
from kubectx_cli.repositories.history_repository import HistoryStore
from kubectx_cli.repositories.selection_repository import SelectionStore

SAMPLE_KUBECONFIG = {
    "apiVersion": "v1",
    "kind": "Config",
    "preferences": {},
    "clusters": [
        {"name": "cluster-a", "cluster": {"server": "https://a.example.com"}},
        {"name": "cluster-b", "cluster": {"server": "https://b.example.com"}},
    ],
    "users": [{"name": "admin", "user": {"token": "secret"}}],
    "contexts": [
        {"name": "ctx-a", "context": {"cluster": "cluster-a", "user": "admin"}},
        {
            "name": "ctx-b",
            "context": {"cluster": "cluster-b", "user": "admin", "namespace": "kube-system"},
        },
        {"name": "team/prod", "context": {"cluster": "cluster-b", "user": "admin"}},
    ],
    "current-context": "ctx-a",
}


# ---------------------------------------------------------------------------
# In-memory selection store
# ---------------------------------------------------------------------------


class FakeStore(SelectionStore):
    """List-backed selection store recording every mutating call."""

    kind = "context"

    def __init__(self, names, active="", scope=None):
        self.names = list(names)
        self.active = active
        self.scope = scope
        self.calls: list[tuple] = []

    def get_active(self) -> str:
        return self.active

    def list_all(self) -> list[str]:
        return sorted(self.names)

    def set_active(self, name: str) -> None:
        self.calls.append(("set_active", name))
        if name not in self.names:
            raise NotFoundError(f'no context exists with the name: "{name}"')
        self.active = name

    def rename(self, old: str, new: str) -> None:
        self.calls.append(("rename", old, new))
        if old not in self.names:
            raise NotFoundError(f'no context exists with the name: "{old}"')
        self.names[self.names.index(old)] = new
        if self.active == old:
            self.active = new

    def delete(self, name: str) -> None:
        self.calls.append(("delete", name))
        if name not in self.names:
            raise NotFoundError(f'no context exists with the name: "{name}"')
        self.names.remove(name)

    def unset(self) -> None:
        self.active = ""

    def history_scope(self):
        return self.scope


@pytest.fixture()
def fake_store():
    """Context-like store with A, B, C and A active."""
    return FakeStore(["A", "B", "C"], active="A")


@pytest.fixture()
def history(tmp_path) -> HistoryStore:
    """HistoryStore rooted in a temporary directory."""
    return HistoryStore(tmp_path / "history")


# ---------------------------------------------------------------------------
# Kubeconfig helpers
# ---------------------------------------------------------------------------


def write_kubeconfig(path: Path, data: dict | None = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data or SAMPLE_KUBECONFIG, sort_keys=False))
    return path


def read_kubeconfig(path: Path) -> dict:
    return yaml.safe_load(path.read_text())


@pytest.fixture()
def kubeconfig_path(tmp_path) -> Path:
    """A sample kubeconfig with contexts ctx-a (current), ctx-b, team/prod."""
    return write_kubeconfig(tmp_path / "kube" / "config")


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolate_app_dirs(tmp_path):
    """Keep log and config files out of the real platformdirs locations."""
    import kubectx_cli.utils.logger as logger_mod
    from kubectx_cli.services.config_service import get_config_service

    app_logger = logging.getLogger("kubectx_cli")
    logger_mod._logger = None
    app_logger.handlers.clear()
    get_config_service.cache_clear()

    app_dir = str(tmp_path / "appdirs")
    with patch("kubectx_cli.utils.logger.user_log_dir", return_value=app_dir):
        with patch("kubectx_cli.services.config_service.user_config_dir", return_value=app_dir):
            yield

    get_config_service.cache_clear()
    for handler in app_logger.handlers:
        handler.close()
    app_logger.handlers.clear()
    logger_mod._logger = None


@pytest.fixture()
def cli_env(monkeypatch, tmp_path, kubeconfig_path):
    """Point KUBECONFIG and XDG_CACHE_HOME at temporary locations."""
    cache_home = tmp_path / "cache"
    monkeypatch.setenv("KUBECONFIG", str(kubeconfig_path))
    monkeypatch.setenv("XDG_CACHE_HOME", str(cache_home))
    return {"kubeconfig": kubeconfig_path, "history_dir": cache_home}
