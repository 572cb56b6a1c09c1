"""Droplets: virtual machines, with their network and backup details."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional

from oceanapi.core import Method, Request, _many, _one, parse_datetime
from oceanapi.droplet_action import DropletActions
from oceanapi.image import Image

_DROPLETS = "droplets"
_REPORTS = "reports"
_DROPLET_NEIGHBORS = "droplet_neighbors"
_NEIGHBORS = "neighbors"
_SNAPSHOTS = "snapshots"
_BACKUPS = "backups"


@dataclass(frozen=True)
class NetworkV4:
    """An IPv4 interface of a droplet."""

    gateway: ipaddress.IPv4Address
    ip_address: ipaddress.IPv4Address
    netmask: ipaddress.IPv4Address
    kind: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NetworkV4":
        return cls(
            gateway=ipaddress.IPv4Address(data["gateway"]),
            ip_address=ipaddress.IPv4Address(data["ip_address"]),
            netmask=ipaddress.IPv4Address(data["netmask"]),
            kind=data["type"],
        )


@dataclass(frozen=True)
class NetworkV6:
    """An IPv6 interface of a droplet."""

    gateway: ipaddress.IPv6Address
    ip_address: ipaddress.IPv6Address
    netmask: int
    kind: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NetworkV6":
        return cls(
            gateway=ipaddress.IPv6Address(data["gateway"]),
            ip_address=ipaddress.IPv6Address(data["ip_address"]),
            netmask=int(data["netmask"]),
            kind=data["type"],
        )


@dataclass(frozen=True)
class Networks:
    """The IPv4 and IPv6 interfaces configured for a droplet."""

    v4: list[NetworkV4]
    v6: list[NetworkV6]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Networks":
        return cls(
            v4=[NetworkV4.from_dict(item) for item in data["v4"]],
            v6=[NetworkV6.from_dict(item) for item in data["v6"]],
        )


@dataclass(frozen=True)
class NextBackupWindow:
    """The window during which the next backup will start."""

    end: datetime
    start: datetime

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NextBackupWindow":
        return cls(end=parse_datetime(data["end"]), start=parse_datetime(data["start"]))


@dataclass(frozen=True)
class Kernel:
    """The kernel a droplet runs."""

    id: int
    name: str
    version: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Kernel":
        return cls(id=data["id"], name=data["name"], version=data["version"])


def _raw_list(key: str):
    """Parser returning the raw objects listed under ``key``."""

    def parse(payload: Mapping[str, Any]) -> list[dict[str, Any]]:
        return [dict(item) for item in payload[key]]

    return parse


@dataclass(frozen=True)
class Droplet:
    """A virtual machine.

    ``region`` and ``size`` hold the objects exactly as the API returns them.
    """

    id: int
    name: str
    memory: int
    vcpus: int
    disk: int
    locked: bool
    created_at: datetime
    status: str
    backup_ids: list[int]
    snapshot_ids: list[int]
    features: list[str]
    region: dict[str, Any]
    image: Image
    size: dict[str, Any]
    size_slug: str
    networks: Networks
    kernel: Optional[Kernel]
    next_backup_window: Optional[NextBackupWindow]
    tags: list[str]
    volume_ids: list[str]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Droplet":
        kernel = data.get("kernel")
        window = data.get("next_backup_window")
        return cls(
            id=data["id"],
            name=data["name"],
            memory=data["memory"],
            vcpus=data["vcpus"],
            disk=data["disk"],
            locked=data["locked"],
            created_at=parse_datetime(data["created_at"]),
            status=data["status"],
            backup_ids=list(data["backup_ids"]),
            snapshot_ids=list(data["snapshot_ids"]),
            features=list(data["features"]),
            region=dict(data["region"]),
            image=Image.from_dict(data["image"]),
            size=dict(data["size"]),
            size_slug=data["size_slug"],
            networks=Networks.from_dict(data["networks"]),
            kernel=None if kernel is None else Kernel.from_dict(kernel),
            next_backup_window=None if window is None else NextBackupWindow.from_dict(window),
            tags=list(data["tags"]),
            volume_ids=list(data["volume_ids"]),
        )

    @staticmethod
    def create(name: str, region: str, size: str, image: Any) -> "DropletCreateRequest":
        """Create a droplet from an image given by id or slug."""
        return DropletCreateRequest(
            (_DROPLETS,), Method.CREATE, _one("droplet", Droplet)
        ).with_body({"name": name, "region": region, "size": size, "image": str(image)})

    @staticmethod
    def create_multiple(
        names: Iterable[str], region: str, size: str, image: Any
    ) -> "DropletCreateRequest":
        """Create several droplets at once, one per name."""
        return DropletCreateRequest(
            (_DROPLETS,), Method.CREATE, _many("droplets", Droplet)
        ).with_body(
            {"names": list(names), "region": region, "size": size, "image": str(image)}
        )

    @staticmethod
    def get(droplet_id: int) -> "DropletGetRequest":
        """Request one droplet by id."""
        return DropletGetRequest(
            (_DROPLETS, str(droplet_id)), Method.GET, _one("droplet", Droplet)
        )

    @staticmethod
    def list() -> Request:
        """Request all droplets."""
        return Request((_DROPLETS,), Method.LIST, _many("droplets", Droplet))

    @staticmethod
    def list_by_tag(name: str) -> Request:
        """Request the droplets carrying a tag."""
        return Droplet.list().with_query("tag_name", name)

    @staticmethod
    def delete(droplet_id: int) -> Request:
        """Delete one droplet by id."""
        return Request((_DROPLETS, str(droplet_id)), Method.DELETE, None)

    @staticmethod
    def delete_by_tag(name: str) -> Request:
        """Delete every droplet carrying a tag."""
        return Request((_DROPLETS,), Method.DELETE, None).with_query("tag_name", name)

    @staticmethod
    def neighbors() -> Request:
        """Request the groups of droplets that share physical hardware."""

        def parse(payload: Mapping[str, Any]) -> list[list[Droplet]]:
            return [
                [Droplet.from_dict(item) for item in group] for group in payload["neighbors"]
            ]

        return Request((_REPORTS, _DROPLET_NEIGHBORS), Method.GET, parse)


class DropletCreateRequest(Request):
    """Request creating one or more droplets, with optional settings."""

    def ssh_keys(self, value: Iterable[Any]) -> "DropletCreateRequest":
        """IDs or fingerprints of SSH keys to embed in the root account."""
        return self.with_field("ssh_keys", list(value))

    def backups(self, value: bool) -> "DropletCreateRequest":
        """Whether automated backups are enabled."""
        return self.with_field("backups", value)

    def ipv6(self, value: bool) -> "DropletCreateRequest":
        """Whether IPv6 is enabled."""
        return self.with_field("ipv6", value)

    def private_networking(self, value: bool) -> "DropletCreateRequest":
        """Whether private networking is enabled."""
        return self.with_field("private_networking", value)

    def user_data(self, value: str) -> "DropletCreateRequest":
        """User data used to configure the droplet on first boot."""
        return self.with_field("user_data", value)

    def monitoring(self, value: bool) -> "DropletCreateRequest":
        """Whether the monitoring agent is installed."""
        return self.with_field("monitoring", value)

    def volumes(self, value: Iterable[str]) -> "DropletCreateRequest":
        """Identifiers of block storage volumes to attach."""
        return self.with_field("volumes", list(value))

    def tags(self, value: Iterable[str]) -> "DropletCreateRequest":
        """Tag names to apply once the droplet is created."""
        return self.with_field("tags", list(value))


class DropletGetRequest(DropletActions):
    """Request fetching one droplet; leads on to its snapshots and actions."""

    def snapshots(self) -> Request:
        """List the snapshots taken of this droplet."""
        return self.with_segments(_SNAPSHOTS).transmute(
            Request, Method.LIST, _raw_list("snapshots")
        )

    def backups(self) -> Request:
        """List the backups taken of this droplet."""
        return self.with_segments(_BACKUPS).transmute(
            Request, Method.LIST, _raw_list("backups")
        )

    def neighbors(self) -> Request:
        """List the droplets sharing hardware with this one."""
        return self.with_segments(_NEIGHBORS).transmute(
            Request, Method.LIST, _many("droplets", Droplet)
        )