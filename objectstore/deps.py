"""Shared dependencies for code publishing to the object store."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objectstore.storage.minio_impl import MinioObjectStoreClient

_object_store: "MinioObjectStoreClient | None" = None


def get_object_store() -> "MinioObjectStoreClient":
    """Get or lazily initialize the object store singleton.

    Lazy initialization keeps imports free of configuration and network access.
    """
    global _object_store
    if _object_store is None:
        from objectstore.storage.factory import build_object_store

        _object_store = build_object_store()
    return _object_store


__all__ = ["get_object_store"]
