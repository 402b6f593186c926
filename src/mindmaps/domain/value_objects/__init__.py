"""Domain value objects."""

from mindmaps.domain.value_objects.mindmap_name import MindMapName
from mindmaps.domain.value_objects.socket_token import (
    compute_socket_token,
    verify_socket_token,
)

__all__ = [
    "MindMapName",
    "compute_socket_token",
    "verify_socket_token",
]
