"""Floating IPs: static public addresses that can move between droplets."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from oceanapi.core import Method, Request, _many, _one
from oceanapi.droplet import Droplet
from oceanapi.floating_ip_action import FloatingIpActions

_SEGMENT = "floating_ips"

IpAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


class FloatingIpGetRequest(FloatingIpActions):
    """Request fetching one floating IP; leads on to its actions."""


@dataclass(frozen=True)
class FloatingIp:
    """A publicly accessible static IP address bound to a region.

    ``region`` holds the region object exactly as the API returns it.
    """

    ip: IpAddress
    region: dict[str, Any]
    droplet: Optional[Droplet]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FloatingIp":
        droplet = data.get("droplet")
        return cls(
            ip=ipaddress.ip_address(data["ip"]),
            region=dict(data["region"]),
            droplet=None if droplet is None else Droplet.from_dict(droplet),
        )

    @staticmethod
    def list() -> Request:
        """Request all floating IPs."""
        return Request((_SEGMENT,), Method.LIST, _many("floating_ips", FloatingIp))

    @staticmethod
    def for_droplet(droplet_id: int) -> Request:
        """Create a floating IP assigned to a droplet."""
        return Request(
            (_SEGMENT,), Method.CREATE, _one("floating_ip", FloatingIp)
        ).with_body({"droplet_id": droplet_id})

    @staticmethod
    def for_region(region: str) -> Request:
        """Create a floating IP reserved to a region."""
        return Request(
            (_SEGMENT,), Method.CREATE, _one("floating_ip", FloatingIp)
        ).with_body({"region": region})

    @staticmethod
    def get(ip: Any) -> FloatingIpGetRequest:
        """Request one floating IP by address (string or ipaddress object)."""
        address = ipaddress.ip_address(ip)
        return FloatingIpGetRequest(
            (_SEGMENT, str(address)), Method.GET, _one("floating_ip", FloatingIp)
        )

    @staticmethod
    def delete(ip: Any) -> Request:
        """Delete one floating IP by address (string or ipaddress object)."""
        address = ipaddress.ip_address(ip)
        return Request((_SEGMENT, str(address)), Method.DELETE, None)