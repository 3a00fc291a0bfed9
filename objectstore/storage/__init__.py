"""Storage package: object store abstraction."""

from objectstore.storage.contracts import ObjectStoreClient, OperationFailure
from objectstore.storage.minio_impl import MinioObjectStoreClient

__all__ = ["ObjectStoreClient", "OperationFailure", "MinioObjectStoreClient"]
