"""List mind maps use case."""

import logging

from mindmaps.application.dto.mindmap_record import (
    RECORD_SUFFIX,
    decode_record,
    name_from_key,
)
from mindmaps.application.ports import NamespaceResolver
from mindmaps.application.use_cases.mindmap.common import Clock, require_owner, utc_now
from mindmaps.domain.entities import MindMap
from mindmaps.domain.exceptions import StorageFailure

logger = logging.getLogger(__name__)


class ListMindMapsUseCase:
    """List every decodable mind map in the owner's namespace."""

    def __init__(self, namespace_resolver: NamespaceResolver, clock: Clock = utc_now) -> None:
        self._resolver = namespace_resolver
        self._clock = clock

    async def execute(self, owner_id: str | None) -> list[MindMap]:
        """List mind maps in storage enumeration order."""
        owner_id = require_owner(owner_id)

        try:
            namespace = self._resolver.for_owner(owner_id)
            if not await namespace.exists():
                await namespace.create()
                return []
            keys = await namespace.keys(RECORD_SUFFIX)
        except StorageFailure as e:
            logger.error("Error listing mind maps for user %s: %s", owner_id, e)
            return []

        now = self._clock()
        mindmaps: list[MindMap] = []
        for key in keys:
            try:
                raw = await namespace.read(key)
                mindmaps.append(
                    decode_record(
                        raw,
                        name=name_from_key(key),
                        owner_id=owner_id,
                        storage_path=namespace.path_of(key),
                        fallback_time=now,
                    )
                )
            except (StorageFailure, ValueError) as e:
                logger.warning("Skipping unreadable mind map record %s for user %s: %s", key, owner_id, e)
        return mindmaps
