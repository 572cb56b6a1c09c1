"""Images: snapshots, backups and public distribution images."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from oceanapi.core import Method, Request, _many, _one, parse_datetime
from oceanapi.image_action import ImageActions

_SEGMENT = "images"


class ImageGetRequest(ImageActions):
    """Request fetching one image; leads on to its actions."""


class ImageUpdateRequest(Request):
    """Request updating an image."""

    def name(self, value: str) -> "ImageUpdateRequest":
        """The new name for the image."""
        return self.with_field("name", value)


@dataclass(frozen=True)
class Image:
    """A snapshot, backup or public image used as a base for droplets."""

    id: int
    name: str
    kind: str
    distribution: str
    slug: Optional[str]
    public: bool
    regions: list[str]
    min_disk_size: int
    size_gigabytes: Optional[float]
    created_at: datetime

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Image":
        size = data.get("size_gigabytes")
        return cls(
            id=data["id"],
            name=data["name"],
            kind=data["type"],
            distribution=data["distribution"],
            slug=data.get("slug"),
            public=data["public"],
            regions=list(data["regions"]),
            min_disk_size=data["min_disk_size"],
            size_gigabytes=None if size is None else float(size),
            created_at=parse_datetime(data["created_at"]),
        )

    @staticmethod
    def _listing() -> Request:
        return Request((_SEGMENT,), Method.LIST, _many("images", Image))

    @staticmethod
    def list() -> Request:
        """Request all images."""
        return Image._listing()

    @staticmethod
    def distributions() -> Request:
        """Request all distribution images."""
        return Image._listing().with_query("type", "distribution")

    @staticmethod
    def applications() -> Request:
        """Request all application images."""
        return Image._listing().with_query("type", "application")

    @staticmethod
    def user() -> Request:
        """Request the user's private images."""
        return Image._listing().with_query("private", "true")

    @staticmethod
    def get(image_id: Any) -> ImageGetRequest:
        """Request one image by numeric id or slug."""
        return ImageGetRequest((_SEGMENT, str(image_id)), Method.GET, _one("image", Image))

    @staticmethod
    def update(image_id: Any) -> ImageUpdateRequest:
        """Update one image by numeric id or slug."""
        return ImageUpdateRequest(
            (_SEGMENT, str(image_id)), Method.UPDATE, _one("image", Image)
        )

    @staticmethod
    def delete(image_id: Any) -> Request:
        """Delete one image by numeric id or slug."""
        return Request((_SEGMENT, str(image_id)), Method.DELETE, None)