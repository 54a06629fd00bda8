"""In-process object store for development and tests."""

import asyncio

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import StorageUnavailableError

IN_MEMORY_LOCATOR_SCHEME = "memory://"


class InMemoryStorageAdapter:
    """Dictionary-backed ObjectStorageProtocol implementation.

    Set ``available = False`` to simulate an unreachable store.
    """

    def __init__(self, bucket: str = "events") -> None:
        self._bucket = bucket
        self._objects: dict[str, tuple[bytes, str]] = {}
        self._lock = asyncio.Lock()
        self.available = True

    def content_type_of(self, key: str) -> str | None:
        stored = self._objects.get(key)
        return stored[1] if stored else None

    async def put(
        self, key: str, data: bytes, content_type: str
    ) -> Result[str, StorageUnavailableError]:
        if not self.available:
            return Failure(error=self._unavailable(key, "Failed to store materials"))
        async with self._lock:
            self._objects[key] = (bytes(data), content_type)
        return Success(value=f"{IN_MEMORY_LOCATOR_SCHEME}{self._bucket}/{key}")

    async def get(self, key: str) -> Result[bytes, StorageUnavailableError]:
        if not self.available or key not in self._objects:
            return Failure(error=self._unavailable(key, "Failed to retrieve materials"))
        return Success(value=self._objects[key][0])

    @staticmethod
    def _unavailable(key: str, message: str) -> StorageUnavailableError:
        return StorageUnavailableError(
            code=ErrorCode.STORAGE_UNAVAILABLE, message=message, key=key
        )
