"""Mind map DTOs."""

from dataclasses import dataclass


@dataclass
class SaveMindMapInput:
    """Input for saving a mind map."""

    name: str
    content: str
