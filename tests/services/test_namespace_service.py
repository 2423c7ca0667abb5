"""Unit tests for namespace listing (kubernetes client mocked)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from kubernetes.client.rest import ApiException
from kubernetes.config.config_exception import ConfigException
from urllib3.exceptions import MaxRetryError

from kubectx_cli.models.exceptions import StoreError
from kubectx_cli.services.namespace_service import list_cluster_namespaces

KUBECONFIG = Path("/tmp/kubeconfig")


def _namespace(name: str):
    ns = MagicMock()
    ns.metadata.name = name
    return ns


@pytest.fixture
def api_client():
    client = MagicMock()
    client.__enter__.return_value = client
    return client


def test_lists_sorted_names(api_client):
    v1 = MagicMock()
    v1.list_namespace.return_value.items = [_namespace("web"), _namespace("default")]

    with patch(
        "kubectx_cli.services.namespace_service.config.new_client_from_config",
        return_value=api_client,
    ) as new_client:
        with patch("kubectx_cli.services.namespace_service.client.CoreV1Api", return_value=v1):
            names = list_cluster_namespaces(KUBECONFIG, "ctx-a")

    assert names == ["default", "web"]
    new_client.assert_called_once_with(config_file=str(KUBECONFIG), context="ctx-a")
    api_client.__exit__.assert_called_once()


def test_config_error_becomes_store_error():
    with patch(
        "kubectx_cli.services.namespace_service.config.new_client_from_config",
        side_effect=ConfigException("Invalid kube-config file."),
    ):
        with pytest.raises(StoreError, match='cannot load context "ctx-a"'):
            list_cluster_namespaces(KUBECONFIG, "ctx-a")


def test_api_error_becomes_store_error(api_client):
    v1 = MagicMock()
    v1.list_namespace.side_effect = ApiException(status=403, reason="Forbidden")

    with patch(
        "kubectx_cli.services.namespace_service.config.new_client_from_config",
        return_value=api_client,
    ):
        with patch("kubectx_cli.services.namespace_service.client.CoreV1Api", return_value=v1):
            with pytest.raises(StoreError, match="403 Forbidden"):
                list_cluster_namespaces(KUBECONFIG, "ctx-a")


def test_connection_error_becomes_store_error(api_client):
    v1 = MagicMock()
    v1.list_namespace.side_effect = MaxRetryError(pool=None, url="/api/v1/namespaces")

    with patch(
        "kubectx_cli.services.namespace_service.config.new_client_from_config",
        return_value=api_client,
    ):
        with patch("kubectx_cli.services.namespace_service.client.CoreV1Api", return_value=v1):
            with pytest.raises(StoreError, match="failed to reach the cluster"):
                list_cluster_namespaces(KUBECONFIG, "ctx-a")
