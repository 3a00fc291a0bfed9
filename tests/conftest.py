"""Pytest configuration and fixtures."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from objectstore.storage.minio_impl import MinioObjectStoreClient


def make_item(name: str, etag: str | None = '"abc123"', metadata=None) -> SimpleNamespace:
    """Stand-in for a minio listing entry."""
    return SimpleNamespace(object_name=name, etag=etag, metadata=metadata)


@pytest.fixture
def mock_minio():
    """Create a mock MinIO client."""
    client = MagicMock()
    client.list_buckets.return_value = []
    client.list_objects.return_value = iter([])
    client.remove_objects.return_value = iter([])
    return client


@pytest.fixture
def store(mock_minio):
    """Adapter wrapping the mock MinIO client."""
    return MinioObjectStoreClient(mock_minio)


@pytest.fixture
def upload_file(tmp_path):
    """A local file to publish."""
    path = tmp_path / "index.json"
    path.write_text('{"keys": []}')
    return path
