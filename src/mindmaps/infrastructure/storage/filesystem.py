"""Filesystem namespace - one folder per owner, one file per record."""

import asyncio
import contextlib
import os
import tempfile
from pathlib import Path
from urllib.parse import quote

from mindmaps.domain.exceptions import StorageFailure


class FilesystemNamespace:
    """Namespace stored as a directory. Writes go through temp file + rename."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    async def exists(self) -> bool:
        return self._path.is_dir()

    async def create(self) -> None:
        try:
            await asyncio.to_thread(self._path.mkdir, parents=True, exist_ok=True)
        except OSError as e:
            raise StorageFailure(f"Cannot create namespace {self._path}: {e}") from e

    async def has(self, key: str) -> bool:
        return (self._path / key).is_file()

    async def read(self, key: str) -> str:
        try:
            return await asyncio.to_thread((self._path / key).read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageFailure(f"Cannot read {self._path / key}: {e}") from e

    async def write(self, key: str, data: str) -> str:
        target = self._path / key
        try:
            await asyncio.to_thread(self._replace, target, data)
        except OSError as e:
            raise StorageFailure(f"Cannot write {target}: {e}") from e
        return str(target)

    async def remove(self, key: str) -> None:
        try:
            await asyncio.to_thread((self._path / key).unlink)
        except OSError as e:
            raise StorageFailure(f"Cannot delete {self._path / key}: {e}") from e

    async def keys(self, suffix: str = "") -> list[str]:
        try:
            return await asyncio.to_thread(self._scan, suffix)
        except OSError as e:
            raise StorageFailure(f"Cannot list {self._path}: {e}") from e

    def path_of(self, key: str) -> str:
        return str(self._path / key)

    def _scan(self, suffix: str) -> list[str]:
        with os.scandir(self._path) as entries:
            return [
                entry.name
                for entry in entries
                if entry.is_file() and entry.name.endswith(suffix)
            ]

    def _replace(self, target: Path, data: str) -> None:
        # Same directory as the target so os.replace stays on one filesystem; short
        # fixed prefix so long record keys still fit the file name limit.
        fd, tmp_name = tempfile.mkstemp(dir=self._path, prefix=".tmp-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, target)
        except BaseException:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp_name)
            raise


class FilesystemNamespaceResolver:
    """Maps an owner id to ``{root}/{owner}/{folder}``."""

    def __init__(self, root: str | Path, folder: str = "mindmaps") -> None:
        self._root = Path(root)
        self._folder = folder

    @property
    def root(self) -> Path:
        return self._root

    def for_owner(self, owner_id: str) -> FilesystemNamespace:
        return FilesystemNamespace(self._root / _owner_dir(owner_id) / self._folder)


def _owner_dir(owner_id: str) -> str:
    """Directory name for an owner that cannot escape the storage root."""
    encoded = quote(owner_id, safe="")
    if encoded in (".", ".."):
        encoded = encoded.replace(".", "%2E")
    return encoded
