"""Tests for the previous-selection history files."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from kubectx_cli.models.exceptions import StoreError
from kubectx_cli.repositories.history_repository import (
    HistoryStore,
    escape_scope,
)


@pytest.fixture
def base_dir(tmp_path):
    return tmp_path / ".kube"


@pytest.fixture
def store(base_dir):
    return HistoryStore(base_dir)


def test_read_never_written(store):
    assert store.read(None) is None
    assert store.read("ctx-a") is None


def test_context_slot_layout(store, base_dir):
    store.write(None, "prod")
    path = base_dir / "kubectx"
    assert path.is_file()
    assert path.read_bytes() == b"prod"


def test_namespace_slot_layout(store, base_dir):
    store.write("ctx-a", "kube-system")
    path = base_dir / "kubens" / "ctx-a"
    assert path.read_bytes() == b"kube-system"


def test_reads_files_written_by_other_tools(store, base_dir):
    (base_dir / "kubens").mkdir(parents=True)
    (base_dir / "kubectx").write_text("legacy-ctx")
    (base_dir / "kubens" / "a__b").write_text("legacy-ns")

    assert store.read(None) == "legacy-ctx"
    assert store.read("a/b") == "legacy-ns"


def test_write_creates_missing_directories(tmp_path):
    store = HistoryStore(tmp_path / "does" / "not" / "exist")
    assert store.write("ctx", "default") is True
    assert store.read("ctx") == "default"


def test_overwrite(store):
    store.write(None, "one")
    store.write(None, "two")
    assert store.read(None) == "two"


def test_same_value_is_not_rewritten(store):
    store.write(None, "prod")
    path = store.path_for(None)
    os.utime(path, (1_000_000, 1_000_000))

    assert store.write(None, "prod") is False
    assert path.stat().st_mtime == 1_000_000


def test_no_temp_files_left_behind(store, base_dir):
    store.write(None, "a")
    store.write(None, "b")
    assert sorted(p.name for p in base_dir.iterdir()) == ["kubectx"]


def test_scopes_are_independent(store):
    store.write("ctx-a", "kube-system")
    store.write("ctx-b", "default")
    store.write(None, "ctx-a")

    assert store.read("ctx-a") == "kube-system"
    assert store.read("ctx-b") == "default"
    assert store.read(None) == "ctx-a"


def test_raw_name_is_stored_unescaped(store, base_dir):
    store.write(None, "arn:aws:eks:us-east-1:123:cluster/prod")
    assert (base_dir / "kubectx").read_text() == "arn:aws:eks:us-east-1:123:cluster/prod"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("plain", "plain"),
        ("team/prod", "team__prod"),
        ("arn:aws:eks:us-east-1:123:cluster/prod", "arn:aws:eks:us-east-1:123:cluster__prod"),
        ("a/b/c", "a__b__c"),
        (".", "__"),
        ("..", "____"),
        ("...", "______"),
        ("../", "..__"),
        ("a..b", "a..b"),
        (".hidden", ".hidden"),
    ],
)
def test_escape_scope(name, expected):
    assert escape_scope(name) == expected


def test_escaped_scope_stays_inside_kubens_dir(store, base_dir):
    path = store.path_for("../../etc/passwd")
    assert path.parent == base_dir / "kubens"


@pytest.mark.parametrize("name", [".", ".."])
def test_dot_context_names_stay_inside_kubens_dir(store, base_dir, name):
    path = store.path_for(name)
    assert path.resolve().parent == (base_dir / "kubens").resolve()

    assert store.write(name, "default") is True
    assert store.read(name) == "default"
    assert (base_dir / "kubens").is_dir()


def test_unreadable_history_raises_store_error(store, base_dir):
    store.path_for(None).mkdir(parents=True)
    with pytest.raises(StoreError, match="failed to read history file"):
        store.read(None)


def test_undecodable_history_raises_store_error(store, base_dir):
    base_dir.mkdir(parents=True)
    store.path_for(None).write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(StoreError, match="failed to read history file"):
        store.read(None)


def test_failed_write_raises_store_error(store):
    with patch(
        "kubectx_cli.repositories.history_repository.atomic_write_text",
        side_effect=PermissionError("read-only file system"),
    ):
        with pytest.raises(StoreError, match="failed to write history file"):
            store.write(None, "prod")
