"""Namespace ports - per-owner key/value storage with listing."""

from typing import Protocol


class Namespace(Protocol):
    """Private storage root of one owner. Keys are record file names."""

    async def exists(self) -> bool: ...

    async def create(self) -> None: ...

    async def has(self, key: str) -> bool: ...

    async def read(self, key: str) -> str: ...

    async def write(self, key: str, data: str) -> str:
        """Replace the record atomically and return its resolved path."""
        ...

    async def remove(self, key: str) -> None: ...

    async def keys(self, suffix: str = "") -> list[str]:
        """Record keys in storage enumeration order, optionally filtered by suffix."""
        ...

    def path_of(self, key: str) -> str: ...


class NamespaceResolver(Protocol):
    """Resolves the namespace that belongs to an owner."""

    def for_owner(self, owner_id: str) -> Namespace: ...
