"""MinIO-backed implementation of the object store interface.

The wrapped ``Minio`` client is thread-safe and shares one urllib3 pool, so a
single adapter instance may be used from several threads at once. The adapter
never closes the client; its lifecycle belongs to whoever built it.
"""

from __future__ import annotations

import itertools
import logging
import os
from typing import Sequence

from minio import Minio
from minio.deleteobjects import DeleteObject
from minio.error import S3Error

from objectstore.schemas.domain import StoredObject, UploadHeaders
from objectstore.storage.contracts import HeadersArg, ObjectStoreClient, OperationFailure

logger = logging.getLogger(__name__)

BUCKET_EXISTS_FAILED = "Failed to determine if bucket exists."
LIST_FAILED = "Failed to list objects from object store."
UPLOAD_FAILED = "Failed to upload object to object store."
REMOVE_FAILED = "Failed to remove objects from object store."

MAX_LIST_PAGE_SIZE = 1000


def _wrap_error(message: str, op: str, bucket: str | None, exc: Exception) -> OperationFailure:
    return OperationFailure(f"{message} {exc}", op=op, bucket=bucket)


def _as_upload_headers(headers: HeadersArg) -> UploadHeaders:
    if isinstance(headers, UploadHeaders):
        return headers
    return UploadHeaders.from_mapping(headers)


class MinioObjectStoreClient(ObjectStoreClient):
    """Object store adapter backed by the MinIO SDK.

    Args:
        client: Configured MinIO client handle.
        strict_bucket_check: When False (default), ``bucket_exists`` reports
            whether any bucket is visible to the credentials in use and ignores
            the requested name. When True, the name must match a visible bucket.
        list_page_size: Upper bound on entries returned by ``get_objects``.
    """

    def __init__(
        self,
        client: Minio,
        *,
        strict_bucket_check: bool = False,
        list_page_size: int = MAX_LIST_PAGE_SIZE,
    ):
        if not 1 <= list_page_size <= MAX_LIST_PAGE_SIZE:
            raise ValueError(f"list_page_size must be between 1 and {MAX_LIST_PAGE_SIZE}")
        self._client = client
        self._strict_bucket_check = strict_bucket_check
        self._list_page_size = list_page_size

    def bucket_exists(self, bucket_name: str) -> bool:
        try:
            buckets = self._client.list_buckets()
        except S3Error as exc:
            raise _wrap_error(BUCKET_EXISTS_FAILED, "bucket_exists", bucket_name, exc) from exc
        except Exception as exc:
            raise _wrap_error(BUCKET_EXISTS_FAILED, "bucket_exists", bucket_name, exc) from exc

        if self._strict_bucket_check:
            return any(bucket.name == bucket_name for bucket in buckets)
        return len(buckets) > 0

    def get_objects(self, bucket: str, prefix: str = "") -> list[StoredObject]:
        logger.debug("Listing objects bucket=%s prefix=%r", bucket, prefix)
        try:
            items = self._client.list_objects(
                bucket_name=bucket,
                prefix=prefix or None,
                recursive=True,
            )
            # The SDK fetches further pages lazily; stop before it asks for one.
            page = list(itertools.islice(items, self._list_page_size))
            return [StoredObject.from_item(item) for item in page]
        except S3Error as exc:
            raise _wrap_error(LIST_FAILED, "get_objects", bucket, exc) from exc
        except Exception as exc:
            raise _wrap_error(LIST_FAILED, "get_objects", bucket, exc) from exc

    def put_object(
        self,
        bucket: str,
        object_name: str,
        file_path: str | os.PathLike[str],
        headers: HeadersArg = None,
    ) -> None:
        metadata = _as_upload_headers(headers).as_metadata()
        logger.debug("Uploading %s to bucket=%s key=%s", file_path, bucket, object_name)
        try:
            self._client.fput_object(
                bucket_name=bucket,
                object_name=object_name,
                file_path=os.fspath(file_path),
                metadata=metadata or None,
            )
        except S3Error as exc:
            raise _wrap_error(UPLOAD_FAILED, "put_object", bucket, exc) from exc
        except Exception as exc:
            raise _wrap_error(UPLOAD_FAILED, "put_object", bucket, exc) from exc

    def remove_objects(self, bucket: str, object_names: Sequence[str]) -> None:
        delete_list = [DeleteObject(name) for name in object_names]
        logger.debug("Removing %d objects from bucket=%s", len(delete_list), bucket)
        try:
            # remove_objects is lazy: the request only goes out while iterating.
            errors = list(self._client.remove_objects(bucket, delete_list))
        except S3Error as exc:
            raise _wrap_error(REMOVE_FAILED, "remove_objects", bucket, exc) from exc
        except Exception as exc:
            raise _wrap_error(REMOVE_FAILED, "remove_objects", bucket, exc) from exc

        if errors:
            summary = [
                {"name": err.name, "code": err.code, "message": err.message} for err in errors
            ]
            logger.error("%s %s", REMOVE_FAILED, summary)
            raise OperationFailure(REMOVE_FAILED, op="remove_objects", bucket=bucket)


__all__ = ["MinioObjectStoreClient"]
