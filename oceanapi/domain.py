"""Domains managed through the DNS interface."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from oceanapi.core import Method, Request, _many, _one
from oceanapi.domain_record import DomainRecordListRequest, records_request

_SEGMENT = "domains"


class DomainGetRequest(Request):
    """Request fetching one domain; leads on to its records."""

    def records(self) -> DomainRecordListRequest:
        """List the DNS records of this domain."""
        return records_request(self.segments)


@dataclass(frozen=True)
class Domain:
    """A domain name managed through the DNS interface."""

    name: str
    ttl: Optional[int]
    zone_file: Optional[str]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Domain":
        return cls(name=data["name"], ttl=data.get("ttl"), zone_file=data.get("zone_file"))

    @staticmethod
    def create(name: str, ip_address: Any) -> Request:
        """Create a domain pointing at ``ip_address`` (string or ipaddress object)."""
        address = ipaddress.ip_address(ip_address)
        return Request(
            (_SEGMENT,), Method.CREATE, _one("domain", Domain)
        ).with_body({"name": name, "ip_address": str(address)})

    @staticmethod
    def list() -> Request:
        """Request all domains."""
        return Request((_SEGMENT,), Method.LIST, _many("domains", Domain))

    @staticmethod
    def get(name: str) -> DomainGetRequest:
        """Request one domain by name."""
        return DomainGetRequest((_SEGMENT, str(name)), Method.GET, _one("domain", Domain))

    @staticmethod
    def delete(name: str) -> Request:
        """Delete one domain by name."""
        return Request((_SEGMENT, str(name)), Method.DELETE, None)