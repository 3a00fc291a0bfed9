"""Object store interface and error type."""

from __future__ import annotations

import os
from typing import Mapping, Protocol, Sequence, Union, runtime_checkable

from objectstore.schemas.domain import HeaderOption, StoredObject, UploadHeaders


class OperationFailure(Exception):
    """Raised when an object store operation fails; wraps the backend exception."""

    def __init__(self, message: str, *, op: str | None = None, bucket: str | None = None):
        self.message = message
        self.op = op
        self.bucket = bucket
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.op is None:
            return self.message
        bucket_repr = self.bucket or "<unknown>"
        return f"{self.message} (op={self.op} bucket={bucket_repr})"


HeadersArg = Union[Mapping[HeaderOption, str], UploadHeaders, None]


@runtime_checkable
class ObjectStoreClient(Protocol):
    """Contract for object store backends used by the publishing pipeline."""

    def bucket_exists(self, bucket_name: str) -> bool:
        ...

    def get_objects(self, bucket: str, prefix: str = "") -> list[StoredObject]:
        ...

    def put_object(
        self,
        bucket: str,
        object_name: str,
        file_path: str | os.PathLike[str],
        headers: HeadersArg = None,
    ) -> None:
        ...

    def remove_objects(self, bucket: str, object_names: Sequence[str]) -> None:
        ...


__all__ = ["HeadersArg", "ObjectStoreClient", "OperationFailure"]
