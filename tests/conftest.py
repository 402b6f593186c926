"""Pytest fixtures for mindmaps tests."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import pytest

from mindmaps.domain.exceptions import StorageFailure


# --- Fake namespace storage ---


class FakeNamespace:
    """In-memory namespace. ``fail_on`` names operations that raise StorageFailure."""

    def __init__(self, owner_id: str, store: FakeNamespaceResolver) -> None:
        self._owner_id = owner_id
        self._store = store

    @property
    def records(self) -> dict[str, str]:
        return self._store.namespaces[self._owner_id]

    def _check(self, op: str) -> None:
        if op in self._store.fail_on:
            raise StorageFailure(f"{op} failed")

    async def exists(self) -> bool:
        self._check("exists")
        return self._owner_id in self._store.namespaces

    async def create(self) -> None:
        self._check("create")
        self._store.namespaces.setdefault(self._owner_id, {})

    async def has(self, key: str) -> bool:
        self._check("has")
        return key in self.records

    async def read(self, key: str) -> str:
        self._check("read")
        return self.records[key]

    async def write(self, key: str, data: str) -> str:
        self._check("write")
        self.records[key] = data
        return self.path_of(key)

    async def remove(self, key: str) -> None:
        self._check("remove")
        del self.records[key]

    async def keys(self, suffix: str = "") -> list[str]:
        self._check("keys")
        return [k for k in self.records if k.endswith(suffix)]

    def path_of(self, key: str) -> str:
        return f"/{self._owner_id}/mindmaps/{key}"


class FakeNamespaceResolver:
    """Resolver over a dict of owner id -> {key: raw record}."""

    def __init__(self) -> None:
        self.namespaces: dict[str, dict[str, str]] = {}
        self.fail_on: set[str] = set()

    def for_owner(self, owner_id: str) -> FakeNamespace:
        return FakeNamespace(owner_id, self)


class StepClock:
    """Clock that advances by ``step`` on every call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = start or datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
        self._step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + self._step
        return current


class FakeConfigSource:
    """ConfigSource with fixed values."""

    def __init__(self, secret: str = "s3cret", values: dict[str, str] | None = None) -> None:
        self._secret = secret
        self._values = values or {}

    def get_value(self, app_name: str, key: str, default: str) -> str:
        return self._values.get(key) or default

    def get_secret(self) -> str:
        return self._secret


@dataclass
class FakeUser:
    user_id: str
    display_name: str = ""


# --- Fixtures ---


@pytest.fixture
def resolver() -> FakeNamespaceResolver:
    """Fresh in-memory namespace resolver for each test."""
    return FakeNamespaceResolver()


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


@pytest.fixture
def config_source() -> FakeConfigSource:
    return FakeConfigSource()
