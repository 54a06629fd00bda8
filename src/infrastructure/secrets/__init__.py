"""Secrets adapters implementing SecretsProtocol.

Consulted once, while settings load at startup, to pull credentials for the
database, the object store and the message transport.

- EnvAdapter: process environment (SECRETS_BACKEND=env)
- AWSAdapter: AWS Secrets Manager (SECRETS_BACKEND=aws)

Secret naming: /eventdesk/{environment}/{category}/{name}
"""

from src.infrastructure.secrets.aws_adapter import AWSAdapter
from src.infrastructure.secrets.base_adapter import BaseSecretsAdapter
from src.infrastructure.secrets.env_adapter import EnvAdapter

__all__ = [
    "AWSAdapter",
    "BaseSecretsAdapter",
    "EnvAdapter",
]
