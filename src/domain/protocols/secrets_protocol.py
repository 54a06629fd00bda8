"""Secrets management protocol (port) for hexagonal architecture.

Secrets are consulted once at startup to bootstrap connection strings and
storage credentials (see Settings.from_secrets_manager).

Protocol Pattern:
    - Domain defines the PORT (this protocol)
    - Infrastructure implements ADAPTERS (EnvAdapter, AWSAdapter)
"""

from typing import Any, Protocol

from src.core.result import Result
from src.domain.errors import SecretsError


class SecretsProtocol(Protocol):
    """Protocol for secrets management systems.

    Applications are READ-ONLY consumers of secrets.

    Implementations:
        - EnvAdapter: Local development (environment variables)
        - AWSAdapter: Production (AWS Secrets Manager)
    """

    def get_secret(self, secret_path: str) -> Result[str, SecretsError]:
        """Get single secret value.

        Args:
            secret_path: Path like 'database/url' or 'storage/access_key_id'.

        Returns:
            Success(secret_value) if found.
            Failure(SecretsError) if not found or access denied.
        """
        ...

    def get_secret_json(self, secret_path: str) -> Result[dict[str, Any], SecretsError]:
        """Get secret as parsed JSON dictionary.

        Returns:
            Success(parsed_json) if valid JSON.
            Failure(SecretsError) if not found, access denied, or invalid JSON.
        """
        ...

    def refresh_cache(self) -> None:
        """Clear cached secrets so the next lookup hits the backend."""
        ...
