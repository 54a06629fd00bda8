"""AWS Secrets Manager adapter.

Secrets are fetched once and cached for the life of the process, which in
practice means one call per secret at startup.
"""

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import SecretsError
from src.infrastructure.secrets.base_adapter import BaseSecretsAdapter

SECRET_PREFIX = "/eventdesk"


class AWSAdapter(BaseSecretsAdapter):
    """Production secrets from AWS Secrets Manager.

    Secrets live under /eventdesk/{environment}/{secret_path}.
    """

    def __init__(
        self,
        environment: str,
        region: str = "us-east-1",
        client: object | None = None,
    ) -> None:
        """Initialize the Secrets Manager client.

        Args:
            environment: Deployment environment used in the secret prefix.
            region: AWS region holding the secrets.
            client: Pre-built boto3 client (tests inject a moto-backed one).
        """
        self.client = client or boto3.client("secretsmanager", region_name=region)
        self.environment = environment
        self._cache: dict[str, str] = {}

    def secret_id(self, secret_path: str) -> str:
        return f"{SECRET_PREFIX}/{self.environment}/{secret_path}"

    def get_secret(self, secret_path: str) -> Result[str, SecretsError]:
        """Get a secret value, from cache when already fetched.

        Returns:
            Success(value) when found.
            Failure(SecretsError) with SECRET_NOT_FOUND or SECRET_ACCESS_DENIED.
        """
        secret_id = self.secret_id(secret_path)
        if secret_id in self._cache:
            return Success(value=self._cache[secret_id])

        try:
            response = self.client.get_secret_value(SecretId=secret_id)  # type: ignore[attr-defined]
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "ResourceNotFoundException":
                return Failure(
                    error=SecretsError(
                        code=ErrorCode.SECRET_NOT_FOUND,
                        message=f"Secret not found in AWS: {secret_id}",
                    )
                )
            return Failure(
                error=SecretsError(
                    code=ErrorCode.SECRET_ACCESS_DENIED,
                    message=f"Failed to access AWS secret: {secret_id}",
                    details={"error": str(e)},
                )
            )
        except BotoCoreError as e:
            return Failure(
                error=SecretsError(
                    code=ErrorCode.SECRET_ACCESS_DENIED,
                    message=f"Failed to access AWS secret: {secret_id}",
                    details={"error": str(e)},
                )
            )

        secret_value: str = response["SecretString"]
        self._cache[secret_id] = secret_value
        return Success(value=secret_value)

    def refresh_cache(self) -> None:
        """Forget cached values so the next lookup hits AWS again."""
        self._cache.clear()
