"""Domain models for objects held in the object store."""

from __future__ import annotations

import enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


def strip_etag(etag: Optional[str]) -> Optional[str]:
    """Remove the quote characters S3 wraps entity tags in."""
    if etag is None:
        return None
    return etag.replace('"', "")


class StoredObject(BaseModel):
    """An object as discovered on the object store."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    etag: Optional[str] = None
    metadata: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_item(cls, item: Any) -> "StoredObject":
        """Build a StoredObject from a listing entry (as provided by MinIO)."""
        metadata = getattr(item, "metadata", None) or {}
        return cls(
            name=item.object_name,
            etag=strip_etag(item.etag),
            metadata={str(k): str(v) for k, v in dict(metadata).items()},
        )


class HeaderOption(str, enum.Enum):
    """Optional headers that can be attached to an upload."""

    ACL = "x-amz-acl"
    CACHE_CONTROL = "Cache-Control"


class UploadHeaders(BaseModel):
    """Optional upload headers; unset fields are left at backend defaults."""

    model_config = ConfigDict(frozen=True)

    acl: Optional[str] = None
    cache_control: Optional[str] = None

    @classmethod
    def from_mapping(cls, headers: Optional[Mapping[HeaderOption, str]]) -> "UploadHeaders":
        if not headers:
            return cls()
        return cls(
            acl=headers.get(HeaderOption.ACL),
            cache_control=headers.get(HeaderOption.CACHE_CONTROL),
        )

    def as_metadata(self) -> dict[str, str]:
        """Render the set fields as request headers keyed by wire name."""
        metadata: dict[str, str] = {}
        if self.acl is not None:
            metadata[HeaderOption.ACL.value] = self.acl
        if self.cache_control is not None:
            metadata[HeaderOption.CACHE_CONTROL.value] = self.cache_control
        return metadata
