"""Object store adapter for the distribution pipeline."""

from objectstore.schemas.domain import HeaderOption, StoredObject, UploadHeaders
from objectstore.storage.contracts import ObjectStoreClient, OperationFailure
from objectstore.storage.minio_impl import MinioObjectStoreClient

__all__ = [
    "HeaderOption",
    "MinioObjectStoreClient",
    "ObjectStoreClient",
    "OperationFailure",
    "StoredObject",
    "UploadHeaders",
]
