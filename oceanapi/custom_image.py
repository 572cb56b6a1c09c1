"""Custom image records and the request that creates them."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Mapping

from oceanapi.core import Method, Request, _one, parse_datetime


@dataclass(frozen=True)
class CustomImage:
    """An image built from a virtual machine image supplied by the user."""

    id: int
    name: str
    kind: str
    distribution: str
    regions: list[str]
    tags: list[str]
    created_at: datetime
    description: str
    status: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CustomImage":
        return cls(
            id=data["id"],
            name=data["name"],
            kind=data["type"],
            distribution=data["distribution"],
            regions=list(data["regions"]),
            tags=list(data["tags"]),
            created_at=parse_datetime(data["created_at"]),
            description=data["description"],
            status=data["status"],
        )

    @staticmethod
    def create(
        name: str,
        image_url: str,
        region: str,
        distribution: str,
        description: str,
        tags: Iterable[str],
    ) -> Request:
        """Build the request that creates a custom image from ``image_url`` in ``region``."""
        return Request(("images",), Method.CREATE, _one("image", CustomImage)).with_body(
            {
                "name": name,
                "url": image_url,
                "region": region,
                "distribution": distribution,
                "description": description,
                "tags": list(tags),
            }
        )