"""Factory for building the object store adapter from configuration."""

from __future__ import annotations

from urllib.parse import urlparse

from minio import Minio

from objectstore.core.config import Settings
from objectstore.storage.minio_impl import MinioObjectStoreClient


def _normalize_endpoint(endpoint: str) -> tuple[str, bool]:
    """Extract host:port from endpoint URL and determine if secure (https).

    Returns:
        Tuple of (host:port, secure_flag)
    """
    parsed = urlparse(endpoint)
    secure = parsed.scheme == "https"
    host = parsed.netloc or parsed.path.rstrip("/")
    return host, secure


def build_object_store(settings: Settings | None = None) -> MinioObjectStoreClient:
    """Build a MinioObjectStoreClient from settings.

    Environment variables (when no settings are passed):
        S3_ENDPOINT: Full URL to MinIO/S3 endpoint (e.g., http://localhost:9000)
        S3_ACCESS_KEY: Access key for authentication
        S3_SECRET_KEY: Secret key for authentication
        S3_REGION: Optional region; skips the region lookup request when set
        S3_LIST_PAGE_SIZE: Maximum entries returned by a single listing
        S3_STRICT_BUCKET_CHECK: Match bucket names in bucket_exists

    Buckets are not created here; their lifecycle is managed elsewhere.
    """
    settings = settings or Settings()
    host, secure = _normalize_endpoint(settings.S3_ENDPOINT)
    client = Minio(
        host,
        access_key=settings.S3_ACCESS_KEY,
        secret_key=settings.S3_SECRET_KEY,
        secure=secure,
        region=settings.S3_REGION,
    )
    return MinioObjectStoreClient(
        client,
        strict_bucket_check=settings.S3_STRICT_BUCKET_CHECK,
        list_page_size=settings.S3_LIST_PAGE_SIZE,
    )


__all__ = ["build_object_store"]
