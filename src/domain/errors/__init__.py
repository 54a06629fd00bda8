"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from src.domain.errors import CapacityExceededError, StorageUnavailableError
"""

from src.domain.errors.dispatch_error import DispatchError
from src.domain.errors.registration_error import CapacityExceededError
from src.domain.errors.secrets_error import SecretsError
from src.domain.errors.storage_error import StorageUnavailableError

__all__ = [
    "CapacityExceededError",
    "DispatchError",
    "SecretsError",
    "StorageUnavailableError",
]
