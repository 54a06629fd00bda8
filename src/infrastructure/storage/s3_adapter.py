"""S3 object storage adapter for event materials.

Works against AWS S3 or any S3-compatible endpoint (MinIO, LocalStack) via
``endpoint_url``. boto3 is synchronous, so every call runs in a worker
thread through ``asyncio.to_thread``.

The bucket is created on first use when it does not exist yet.
"""

from __future__ import annotations

import asyncio
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import StorageUnavailableError
from src.domain.protocols.logger_protocol import LoggerProtocol

_MISSING_BUCKET_CODES = frozenset({"404", "NoSuchBucket", "NotFound"})


class S3StorageAdapter:
    """Materials store backed by one S3 bucket.

    Note: Does NOT inherit from ObjectStorageProtocol (structural typing).
    """

    def __init__(
        self,
        *,
        bucket: str,
        logger: LoggerProtocol,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
        client: Any | None = None,
    ) -> None:
        """Initialize the S3 client.

        Args:
            bucket: Bucket holding all materials.
            logger: Structured logger.
            region: AWS region.
            endpoint_url: Custom S3 endpoint; None targets AWS.
            access_key_id: Explicit key; None uses the default credential chain.
            secret_access_key: Explicit secret; None uses the default chain.
            client: Pre-built boto3 S3 client.
        """
        self._bucket = bucket
        self._logger = logger
        self._client = client or boto3.client(
            "s3",
            region_name=region,
            endpoint_url=endpoint_url,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
        )
        self._bucket_ready = False
        self._bucket_lock = asyncio.Lock()

    @property
    def bucket(self) -> str:
        return self._bucket

    def locator_for(self, key: str) -> str:
        """Build the locator recorded on the event for a stored key."""
        endpoint = self._client.meta.endpoint_url.rstrip("/")
        return f"{endpoint}/{self._bucket}/{key}"

    async def put(
        self, key: str, data: bytes, content_type: str
    ) -> Result[str, StorageUnavailableError]:
        """Upload bytes, overwriting any existing object under ``key``."""
        try:
            await self._ensure_bucket()
            await asyncio.to_thread(
                self._client.put_object,
                Bucket=self._bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as e:
            self._logger.error(
                "storage_put_failed", error=e, key=key, bucket=self._bucket
            )
            return Failure(
                error=StorageUnavailableError(
                    code=ErrorCode.STORAGE_UNAVAILABLE,
                    message="Failed to store materials",
                    key=key,
                )
            )

        self._logger.info("storage_put", key=key, bucket=self._bucket, size=len(data))
        return Success(value=self.locator_for(key))

    async def get(self, key: str) -> Result[bytes, StorageUnavailableError]:
        """Download the object under ``key``; a missing key is a failure."""
        try:
            response = await asyncio.to_thread(
                self._client.get_object, Bucket=self._bucket, Key=key
            )
            body = response["Body"]
            try:
                data: bytes = await asyncio.to_thread(body.read)
            finally:
                body.close()
        except (BotoCoreError, ClientError) as e:
            self._logger.warning(
                "storage_get_failed",
                key=key,
                bucket=self._bucket,
                error_type=type(e).__name__,
            )
            return Failure(
                error=StorageUnavailableError(
                    code=ErrorCode.STORAGE_UNAVAILABLE,
                    message="Failed to retrieve materials",
                    key=key,
                )
            )
        return Success(value=data)

    async def _ensure_bucket(self) -> None:
        if self._bucket_ready:
            return
        async with self._bucket_lock:
            if self._bucket_ready:
                return
            try:
                await asyncio.to_thread(self._client.head_bucket, Bucket=self._bucket)
            except ClientError as e:
                if e.response.get("Error", {}).get("Code") not in _MISSING_BUCKET_CODES:
                    raise
                await asyncio.to_thread(self._create_bucket)
                self._logger.info("storage_bucket_created", bucket=self._bucket)
            self._bucket_ready = True

    def _create_bucket(self) -> None:
        region = self._client.meta.region_name
        if region and region != "us-east-1":
            self._client.create_bucket(
                Bucket=self._bucket,
                CreateBucketConfiguration={"LocationConstraint": region},
            )
        else:
            self._client.create_bucket(Bucket=self._bucket)
