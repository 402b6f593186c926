"""Get mind map use case."""

import logging

from mindmaps.application.dto.mindmap_record import decode_record, record_key
from mindmaps.application.ports import NamespaceResolver
from mindmaps.application.use_cases.mindmap.common import (
    Clock,
    open_namespace,
    require_owner,
    utc_now,
)
from mindmaps.domain.entities import MindMap
from mindmaps.domain.exceptions import NotFound, StorageFailure
from mindmaps.domain.value_objects import MindMapName

logger = logging.getLogger(__name__)


class GetMindMapUseCase:
    """Get one mind map by name from the owner's namespace."""

    def __init__(self, namespace_resolver: NamespaceResolver, clock: Clock = utc_now) -> None:
        self._resolver = namespace_resolver
        self._clock = clock

    async def execute(self, owner_id: str | None, name: str) -> MindMap:
        """Get mind map. Raises NotFound if absent or unreadable."""
        owner_id = require_owner(owner_id)
        name = MindMapName(name).value
        key = record_key(name)

        try:
            namespace = await open_namespace(self._resolver, owner_id)
            if not await namespace.has(key):
                raise NotFound("MindMap", name)
            raw = await namespace.read(key)
            return decode_record(
                raw,
                name=name,
                owner_id=owner_id,
                storage_path=namespace.path_of(key),
                fallback_time=self._clock(),
            )
        except (StorageFailure, ValueError) as e:
            logger.error("Error getting mind map %r for user %s: %s", name, owner_id, e)
            raise NotFound("MindMap", name) from e
