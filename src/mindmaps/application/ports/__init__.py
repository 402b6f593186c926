"""Application ports - interfaces for external adapters."""

from mindmaps.application.ports.config_source import ConfigSource
from mindmaps.application.ports.identity import AuthenticatedUser
from mindmaps.application.ports.namespace import Namespace, NamespaceResolver

__all__ = [
    "AuthenticatedUser",
    "ConfigSource",
    "Namespace",
    "NamespaceResolver",
]
