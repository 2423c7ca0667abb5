"""kubectx-cli: fast switching between kubeconfig contexts and namespaces."""

__version__ = "0.1.0"
