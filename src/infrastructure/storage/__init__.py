"""Object storage adapters implementing ObjectStorageProtocol."""

from src.infrastructure.storage.in_memory_adapter import InMemoryStorageAdapter
from src.infrastructure.storage.s3_adapter import S3StorageAdapter

__all__ = [
    "InMemoryStorageAdapter",
    "S3StorageAdapter",
]
