"""Persisted mind map record format.

One JSON document per mind map, stored as ``{name}.json``::

    {"name": ..., "content": ..., "createdAt": ISO-8601, "updatedAt": ISO-8601}
"""

import json
from datetime import datetime

from mindmaps.domain.entities import MindMap

RECORD_SUFFIX = ".json"
DEFAULT_CONTENT = "{}"


def record_key(name: str) -> str:
    """Storage key for a mind map name."""
    return f"{name}{RECORD_SUFFIX}"


def name_from_key(key: str) -> str:
    """Mind map name derived from a storage key."""
    return key[: -len(RECORD_SUFFIX)] if key.endswith(RECORD_SUFFIX) else key


def encode_record(mindmap: MindMap) -> str:
    return json.dumps(
        {
            "name": mindmap.name,
            "content": mindmap.content,
            "createdAt": mindmap.created_at.isoformat(),
            "updatedAt": mindmap.updated_at.isoformat(),
        },
        ensure_ascii=False,
    )


def decode_record(
    raw: str,
    *,
    name: str,
    owner_id: str,
    storage_path: str,
    fallback_time: datetime,
) -> MindMap:
    """Decode a stored record. Raises ValueError on malformed data.

    The name always comes from the storage key, never from the payload.
    """
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("Mind map record must be a JSON object")
    content = data.get("content", DEFAULT_CONTENT)
    if not isinstance(content, str):
        raise ValueError("Mind map content must be a string")
    return MindMap(
        name=name,
        content=content,
        owner_id=owner_id,
        storage_path=storage_path,
        created_at=_parse_time(data.get("createdAt"), fallback_time),
        updated_at=_parse_time(data.get("updatedAt"), fallback_time),
    )


def read_created_at(raw: str) -> datetime | None:
    """Creation time of a stored record, or None if it has none."""
    data = json.loads(raw)
    if not isinstance(data, dict) or not data.get("createdAt"):
        return None
    return _parse_time(data["createdAt"], None)


def _parse_time(value: object, fallback: datetime | None) -> datetime | None:
    if not value:
        return fallback
    if not isinstance(value, str):
        raise ValueError(f"Invalid timestamp: {value!r}")
    return datetime.fromisoformat(value)
