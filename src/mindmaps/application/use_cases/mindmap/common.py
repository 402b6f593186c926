"""Helpers shared by the mind map use cases."""

from collections.abc import Callable
from datetime import UTC, datetime

from mindmaps.application.ports import Namespace, NamespaceResolver
from mindmaps.domain.exceptions import Unauthenticated

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


def require_owner(owner_id: str | None) -> str:
    """Return the owner id or raise Unauthenticated."""
    if not owner_id:
        raise Unauthenticated("User not logged in")
    return owner_id


async def open_namespace(resolver: NamespaceResolver, owner_id: str) -> Namespace:
    """Resolve the owner's namespace, creating it on first use."""
    namespace = resolver.for_owner(owner_id)
    if not await namespace.exists():
        await namespace.create()
    return namespace
