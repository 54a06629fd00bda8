"""Shared behaviour for secrets adapters."""

import json
from typing import Any

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import SecretsError


class BaseSecretsAdapter:
    """Base adapter providing get_secret_json on top of get_secret.

    Subclasses implement get_secret() and refresh_cache().
    """

    def get_secret(self, secret_path: str) -> Result[str, SecretsError]:
        raise NotImplementedError("Subclass must implement get_secret()")

    def get_secret_json(self, secret_path: str) -> Result[dict[str, Any], SecretsError]:
        """Get a secret and parse it as a JSON object.

        Args:
            secret_path: Path to a JSON-formatted secret (e.g. 'storage/credentials').

        Returns:
            Success(dict) when the secret exists and holds a JSON object.
            Failure(SecretsError) when missing, inaccessible or not an object.
        """
        match self.get_secret(secret_path):
            case Success(value=raw):
                try:
                    parsed = json.loads(raw)
                except json.JSONDecodeError:
                    parsed = None
                if not isinstance(parsed, dict):
                    return Failure(
                        error=SecretsError(
                            code=ErrorCode.SECRET_INVALID_JSON,
                            message=f"Secret is not a JSON object: {secret_path}",
                        )
                    )
                return Success(value=parsed)
            case Failure(error=error):
                return Failure(error=error)

    def refresh_cache(self) -> None:
        raise NotImplementedError("Subclass must implement refresh_cache()")
