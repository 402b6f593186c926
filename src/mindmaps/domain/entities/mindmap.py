"""Mind map entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class MindMap:
    """Named mind map owned by a single user.

    ``content`` is an opaque payload (usually serialized diagram JSON) that is
    stored and returned as-is. ``storage_path`` stays empty until the document
    has been read from or written to its namespace.
    """

    name: str
    content: str
    owner_id: str
    created_at: datetime
    updated_at: datetime
    storage_path: str = ""
    id: int = 0
