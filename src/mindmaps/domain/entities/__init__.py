"""Domain entities."""

from mindmaps.domain.entities.mindmap import MindMap
from mindmaps.domain.entities.socket_info import SocketInfo

__all__ = [
    "MindMap",
    "SocketInfo",
]
