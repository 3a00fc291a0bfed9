"""Domain schemas for the object store adapter."""

from objectstore.schemas.domain import (
    HeaderOption,
    StoredObject,
    UploadHeaders,
    strip_etag,
)

__all__ = [
    "HeaderOption",
    "StoredObject",
    "UploadHeaders",
    "strip_etag",
]
