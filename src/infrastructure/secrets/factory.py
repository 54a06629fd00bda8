"""Secrets adapter selection.

Single place that maps SECRETS_BACKEND onto an adapter. Called by
get_settings() while settings load, before the container exists.
"""

from src.domain.protocols.secrets_protocol import SecretsProtocol


def create_secrets_adapter(
    backend: str,
    environment: str,
    region: str,
) -> SecretsProtocol:
    """Build the secrets adapter for a backend name.

    Args:
        backend: 'env' or 'aws' (already validated by Settings).
        environment: Environment name used in secret ids.
        region: AWS region for Secrets Manager.

    Returns:
        EnvAdapter for 'env', AWSAdapter for 'aws'.

    Raises:
        ValueError: Unknown backend name.
    """
    if backend == "aws":
        from src.infrastructure.secrets.aws_adapter import AWSAdapter

        return AWSAdapter(environment=environment, region=region)

    if backend == "env":
        from src.infrastructure.secrets.env_adapter import EnvAdapter

        return EnvAdapter()

    raise ValueError(f"Unknown secrets backend: {backend}")
