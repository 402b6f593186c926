"""Save mind map use case."""

import logging
from datetime import datetime

from mindmaps.application.dto.mindmap_dto import SaveMindMapInput
from mindmaps.application.dto.mindmap_record import (
    encode_record,
    read_created_at,
    record_key,
)
from mindmaps.application.ports import Namespace, NamespaceResolver
from mindmaps.application.use_cases.mindmap.common import (
    Clock,
    open_namespace,
    require_owner,
    utc_now,
)
from mindmaps.domain.entities import MindMap
from mindmaps.domain.exceptions import StorageFailure
from mindmaps.domain.value_objects import MindMapName

logger = logging.getLogger(__name__)


class SaveMindMapUseCase:
    """Create or fully replace a mind map, keeping its original creation time.

    Saves are last-write-wins: two concurrent saves of the same name both
    succeed and the later rename decides the stored content.
    """

    def __init__(self, namespace_resolver: NamespaceResolver, clock: Clock = utc_now) -> None:
        self._resolver = namespace_resolver
        self._clock = clock

    async def execute(self, owner_id: str | None, input_data: SaveMindMapInput) -> MindMap:
        """Save mind map. Storage failures are logged and re-raised."""
        owner_id = require_owner(owner_id)
        name = MindMapName(input_data.name).value
        key = record_key(name)
        now = self._clock()

        try:
            namespace = await open_namespace(self._resolver, owner_id)
            created_at = now
            if await namespace.has(key):
                created_at = await self._existing_created_at(namespace, key) or now

            mindmap = MindMap(
                name=name,
                content=input_data.content,
                owner_id=owner_id,
                created_at=created_at,
                updated_at=now,
            )
            mindmap.storage_path = await namespace.write(key, encode_record(mindmap))
            return mindmap
        except StorageFailure as e:
            logger.error("Error saving mind map %r for user %s: %s", name, owner_id, e)
            raise

    async def _existing_created_at(self, namespace: Namespace, key: str) -> datetime | None:
        raw = await namespace.read(key)
        try:
            return read_created_at(raw)
        except ValueError as e:
            # Unreadable previous record: overwrite it as a fresh document.
            logger.warning("Ignoring malformed mind map record %s: %s", key, e)
            return None
