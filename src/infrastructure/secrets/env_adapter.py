"""Secrets read from the process environment.

Secret paths map onto variable names: 'database/url' -> DATABASE_URL,
'storage/access_key_id' -> STORAGE_ACCESS_KEY_ID.
"""

import os

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import SecretsError
from src.infrastructure.secrets.base_adapter import BaseSecretsAdapter


class EnvAdapter(BaseSecretsAdapter):
    """Local and test secrets from environment variables."""

    def get_secret(self, secret_path: str) -> Result[str, SecretsError]:
        env_var_name = secret_path.replace("/", "_").upper()
        secret_value = os.getenv(env_var_name)

        if secret_value is None:
            return Failure(
                error=SecretsError(
                    code=ErrorCode.SECRET_NOT_FOUND,
                    message=f"Environment variable not found: {env_var_name}",
                    details={"secret_path": secret_path},
                )
            )
        return Success(value=secret_value)

    def refresh_cache(self) -> None:
        """No-op; the environment is always read live."""
