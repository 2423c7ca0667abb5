"""Namespace listing against the cluster API."""

from __future__ import annotations

import logging
from pathlib import Path

from kubernetes import client, config
from kubernetes.client.rest import ApiException
from kubernetes.config.config_exception import ConfigException
from urllib3.exceptions import HTTPError

from kubectx_cli.models.exceptions import StoreError

logger = logging.getLogger(__name__)


def list_cluster_namespaces(kubeconfig_path: Path, context: str) -> list[str]:
    """Return the sorted namespace names visible through *context*.

    Raises:
        StoreError: If the client cannot be configured or the API call fails
    """
    try:
        api_client = config.new_client_from_config(
            config_file=str(kubeconfig_path), context=context
        )
    except (ConfigException, OSError) as e:
        raise StoreError(f'cannot load context "{context}": {e}') from e

    try:
        with api_client:
            v1 = client.CoreV1Api(api_client)
            namespaces = v1.list_namespace().items
    except ApiException as e:
        raise StoreError(f"failed to list namespaces: {e.status} {e.reason}") from e
    except HTTPError as e:
        raise StoreError(f"failed to reach the cluster: {e}") from e

    names = sorted(ns.metadata.name for ns in namespaces)
    logger.debug("context %r has %d namespaces", context, len(names))
    return names
