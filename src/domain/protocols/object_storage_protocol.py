"""Object storage protocol (port) for event materials.

The storage backend holds opaque bytes under string keys. The Materials
Binder keeps only the returned locator on the Event; bytes never touch the
relational store.

Protocol Pattern:
    - Domain defines the PORT (this protocol)
    - Infrastructure implements ADAPTERS (S3StorageAdapter, InMemoryStorageAdapter)
"""

from typing import Protocol

from src.core.result import Result
from src.domain.errors import StorageUnavailableError


class ObjectStorageProtocol(Protocol):
    """Protocol for blob/object stores.

    Implementations:
        - S3StorageAdapter: AWS S3 or any S3-compatible endpoint (boto3)
        - InMemoryStorageAdapter: Development and tests
    """

    async def put(
        self, key: str, data: bytes, content_type: str
    ) -> Result[str, StorageUnavailableError]:
        """Store bytes under a key, overwriting any existing object.

        Args:
            key: Object key (``{event_id}/{file_name}``).
            data: Raw file contents.
            content_type: MIME type to record with the object.

        Returns:
            Success(locator) with an opaque locator for the stored object.
            Failure(StorageUnavailableError) if the store rejected the write.
        """
        ...

    async def get(self, key: str) -> Result[bytes, StorageUnavailableError]:
        """Fetch the bytes stored under a key.

        Returns:
            Success(bytes) if the object exists.
            Failure(StorageUnavailableError) on any retrieval failure,
            including a missing key.
        """
        ...
