"""Unit tests for object storage adapters.

Tests cover:
- S3StorageAdapter: bucket auto-creation (default and non-default region),
  put/get round trip, overwrite, content type, missing key, client errors
- InMemoryStorageAdapter: locator format, outage flag, missing key

Architecture:
- moto mocks S3 (no real AWS); boto3 calls run in worker threads
"""

from unittest.mock import MagicMock

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.infrastructure.storage import InMemoryStorageAdapter, S3StorageAdapter


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Fake credentials so boto3 never reaches a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def s3_mock():
    with mock_aws():
        yield


# =============================================================================
# S3StorageAdapter
# =============================================================================


@pytest.mark.unit
class TestS3StorageAdapter:
    """Tests for S3StorageAdapter against moto."""

    async def test_put_creates_bucket_and_stores(self, s3_mock, mock_logger):
        adapter = S3StorageAdapter(bucket="events", logger=mock_logger)

        result = await adapter.put("e1/agenda.pdf", b"%PDF", "application/pdf")

        assert isinstance(result, Success)
        assert result.value.endswith("/events/e1/agenda.pdf")
        client = boto3.client("s3", region_name="us-east-1")
        stored = client.get_object(Bucket="events", Key="e1/agenda.pdf")
        assert stored["Body"].read() == b"%PDF"
        assert stored["ContentType"] == "application/pdf"

    async def test_bucket_created_in_configured_region(self, s3_mock, mock_logger):
        adapter = S3StorageAdapter(
            bucket="events-eu", logger=mock_logger, region="eu-central-1"
        )

        result = await adapter.put("e1/a.pdf", b"x", "application/pdf")

        assert isinstance(result, Success)
        client = boto3.client("s3", region_name="eu-central-1")
        location = client.get_bucket_location(Bucket="events-eu")
        assert location["LocationConstraint"] == "eu-central-1"

    async def test_existing_bucket_reused(self, s3_mock, mock_logger):
        boto3.client("s3", region_name="us-east-1").create_bucket(Bucket="events")
        adapter = S3StorageAdapter(bucket="events", logger=mock_logger)

        result = await adapter.put("e1/a.pdf", b"x", "application/pdf")

        assert isinstance(result, Success)

    async def test_get_returns_bytes(self, s3_mock, mock_logger):
        adapter = S3StorageAdapter(bucket="events", logger=mock_logger)
        await adapter.put("e1/deck.pptx", b"slides", "application/octet-stream")

        assert await adapter.get("e1/deck.pptx") == Success(value=b"slides")

    async def test_reupload_overwrites(self, s3_mock, mock_logger):
        adapter = S3StorageAdapter(bucket="events", logger=mock_logger)
        await adapter.put("e1/a.pdf", b"v1", "application/pdf")
        await adapter.put("e1/a.pdf", b"v2", "application/pdf")

        assert await adapter.get("e1/a.pdf") == Success(value=b"v2")

    async def test_missing_key_is_unavailable(self, s3_mock, mock_logger):
        adapter = S3StorageAdapter(bucket="events", logger=mock_logger)
        await adapter.put("e1/a.pdf", b"x", "application/pdf")

        result = await adapter.get("e1/missing.pdf")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORAGE_UNAVAILABLE
        assert result.error.key == "e1/missing.pdf"

    async def test_client_error_on_put_is_unavailable(self, mock_logger):
        client = MagicMock()
        client.head_bucket.return_value = {}
        client.put_object.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject"
        )
        adapter = S3StorageAdapter(bucket="events", logger=mock_logger, client=client)

        result = await adapter.put("e1/a.pdf", b"x", "application/pdf")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORAGE_UNAVAILABLE
        mock_logger.error.assert_called_once()

    async def test_head_bucket_denied_is_unavailable(self, mock_logger):
        client = MagicMock()
        client.head_bucket.side_effect = ClientError(
            {"Error": {"Code": "403", "Message": "Forbidden"}}, "HeadBucket"
        )
        adapter = S3StorageAdapter(bucket="events", logger=mock_logger, client=client)

        result = await adapter.put("e1/a.pdf", b"x", "application/pdf")

        assert isinstance(result, Failure)
        client.create_bucket.assert_not_called()
        client.put_object.assert_not_called()


# =============================================================================
# InMemoryStorageAdapter
# =============================================================================


@pytest.mark.unit
class TestInMemoryStorageAdapter:
    """Tests for InMemoryStorageAdapter."""

    async def test_put_returns_memory_locator(self):
        adapter = InMemoryStorageAdapter(bucket="events")

        result = await adapter.put("e1/a.pdf", b"x", "application/pdf")

        assert result == Success(value="memory://events/e1/a.pdf")
        assert adapter.content_type_of("e1/a.pdf") == "application/pdf"

    async def test_unavailable_store_fails_both_ways(self):
        adapter = InMemoryStorageAdapter()
        await adapter.put("e1/a.pdf", b"x", "application/pdf")
        adapter.available = False

        assert isinstance(await adapter.put("e1/b.pdf", b"y", "x"), Failure)
        assert isinstance(await adapter.get("e1/a.pdf"), Failure)

    async def test_missing_key_fails(self):
        result = await InMemoryStorageAdapter().get("nope")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORAGE_UNAVAILABLE
