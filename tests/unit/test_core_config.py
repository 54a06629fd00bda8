"""Unit tests for Settings.

Tests cover:
- Backend name validation (storage, transport, secrets)
- URL normalization
- Positive batch sizes
- Environment helpers
- Credential bootstrap from a secrets backend
"""

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from src.core.config import Settings
from src.core.enums import Environment, ErrorCode
from src.core.result import Failure, Success
from src.domain.errors import SecretsError
from src.infrastructure.secrets import EnvAdapter


@pytest.mark.unit
class TestSettingsValidation:
    """Tests for field validators."""

    def test_testing_environment_loaded(self):
        settings = Settings()

        assert settings.environment == Environment.TESTING
        assert settings.is_testing is True
        assert settings.is_production is False

    def test_backend_names_case_insensitive(self):
        settings = Settings(storage_backend="S3", transport_backend="Redis")

        assert settings.storage_backend == "s3"
        assert settings.transport_backend == "redis"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"storage_backend": "azure"},
            {"transport_backend": "servicebus"},
            {"secrets_backend": "vault"},
        ],
    )
    def test_unknown_backend_rejected(self, overrides):
        with pytest.raises(ValidationError):
            Settings(**overrides)

    def test_trailing_slash_removed(self):
        settings = Settings(
            api_base_url="https://api.example.com/",
            storage_endpoint_url="http://minio:9000/",
        )

        assert settings.api_base_url == "https://api.example.com"
        assert settings.storage_endpoint_url == "http://minio:9000"

    @pytest.mark.parametrize(
        "field", ["outbox_relay_batch_size", "notifications_stream_max_len"]
    )
    def test_non_positive_sizes_rejected(self, field):
        with pytest.raises(ValidationError):
            Settings(**{field: 0})


@pytest.mark.unit
class TestFromSecretsManager:
    """Tests for Settings.from_secrets_manager."""

    def test_credentials_applied_from_env_backend(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db/eventdesk")
        monkeypatch.setenv("MESSAGING_REDIS_URL", "redis://broker:6379/1")
        monkeypatch.setenv("STORAGE_ACCESS_KEY_ID", "AKIA-TEST")
        monkeypatch.setenv("STORAGE_SECRET_ACCESS_KEY", "secret")

        settings = Settings.from_secrets_manager(EnvAdapter(), base=Settings())

        assert settings.database_url == "postgresql+asyncpg://u:p@db/eventdesk"
        assert settings.redis_url == "redis://broker:6379/1"
        assert settings.aws_access_key_id == "AKIA-TEST"
        assert settings.aws_secret_access_key == "secret"

    def test_optional_secrets_fall_back(self):
        secrets = MagicMock()

        def get_secret(path):
            if path == "database/url":
                return Success(value="sqlite+aiosqlite:///x.db")
            return Failure(
                error=SecretsError(code=ErrorCode.SECRET_NOT_FOUND, message=path)
            )

        secrets.get_secret.side_effect = get_secret
        base = Settings(redis_url="redis://default:6379/0")

        settings = Settings.from_secrets_manager(secrets, base=base)

        assert settings.database_url == "sqlite+aiosqlite:///x.db"
        assert settings.redis_url == "redis://default:6379/0"
        assert settings.aws_access_key_id is None

    def test_missing_database_url_raises(self):
        secrets = MagicMock()
        secrets.get_secret.return_value = Failure(
            error=SecretsError(code=ErrorCode.SECRET_NOT_FOUND, message="missing")
        )

        with pytest.raises(ValueError, match="database/url"):
            Settings.from_secrets_manager(secrets, base=Settings())
