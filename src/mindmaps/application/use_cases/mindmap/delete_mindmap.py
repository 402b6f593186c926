"""Delete mind map use case."""

import logging

from mindmaps.application.dto.mindmap_record import record_key
from mindmaps.application.ports import NamespaceResolver
from mindmaps.application.use_cases.mindmap.common import require_owner
from mindmaps.domain.exceptions import StorageFailure
from mindmaps.domain.value_objects import MindMapName

logger = logging.getLogger(__name__)


class DeleteMindMapUseCase:
    """Remove a mind map record entirely."""

    def __init__(self, namespace_resolver: NamespaceResolver) -> None:
        self._resolver = namespace_resolver

    async def execute(self, owner_id: str | None, name: str) -> bool:
        """Delete mind map. Returns False if there was nothing to delete."""
        owner_id = require_owner(owner_id)
        name = MindMapName(name).value
        key = record_key(name)

        try:
            namespace = self._resolver.for_owner(owner_id)
            if not await namespace.exists() or not await namespace.has(key):
                return False
            await namespace.remove(key)
            return True
        except StorageFailure as e:
            logger.error("Error deleting mind map %r for user %s: %s", name, owner_id, e)
            return False
