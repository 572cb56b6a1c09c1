"""DNS records belonging to a domain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from oceanapi.core import Method, Request, _many, _one


@dataclass(frozen=True)
class DomainRecord:
    """A single DNS record configured for a domain."""

    id: int
    kind: str
    name: str
    data: str
    priority: Optional[int]
    port: Optional[int]
    ttl: int
    weight: Optional[int]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DomainRecord":
        return cls(
            id=data["id"],
            kind=data["type"],
            name=data["name"],
            data=data["data"],
            priority=data.get("priority"),
            port=data.get("port"),
            ttl=data["ttl"],
            weight=data.get("weight"),
        )


_record = _one("domain_record", DomainRecord)


class DomainRecordCreateRequest(Request):
    """Request creating a domain record, with optional fields."""

    def priority(self, value: Optional[int]) -> "DomainRecordCreateRequest":
        """The priority for SRV and MX records."""
        return self.with_field("priority", value)

    def port(self, value: Optional[int]) -> "DomainRecordCreateRequest":
        """The port for SRV records."""
        return self.with_field("port", value)

    def ttl(self, value: int) -> "DomainRecordCreateRequest":
        """The time to live for the record, in seconds."""
        return self.with_field("ttl", value)

    def weight(self, value: Optional[int]) -> "DomainRecordCreateRequest":
        """The weight for SRV records."""
        return self.with_field("weight", value)


class DomainRecordUpdateRequest(Request):
    """Request updating a domain record; every field is optional."""

    def kind(self, value: str) -> "DomainRecordUpdateRequest":
        """The record type (A, MX, CNAME, ...)."""
        return self.with_field("type", value)

    def name(self, value: str) -> "DomainRecordUpdateRequest":
        """The host name, alias or service defined by the record."""
        return self.with_field("name", value)

    def data(self, value: str) -> "DomainRecordUpdateRequest":
        """Data whose meaning depends on the record type."""
        return self.with_field("data", value)

    def priority(self, value: Optional[int]) -> "DomainRecordUpdateRequest":
        """The priority for SRV and MX records."""
        return self.with_field("priority", value)

    def port(self, value: Optional[int]) -> "DomainRecordUpdateRequest":
        """The port for SRV records."""
        return self.with_field("port", value)

    def ttl(self, value: int) -> "DomainRecordUpdateRequest":
        """The time to live for the record, in seconds."""
        return self.with_field("ttl", value)

    def weight(self, value: Optional[int]) -> "DomainRecordUpdateRequest":
        """The weight for SRV records."""
        return self.with_field("weight", value)


class DomainRecordListRequest(Request):
    """Request listing a domain's records; the base for record operations."""

    def create(self, kind: str, name: str, data: str) -> DomainRecordCreateRequest:
        """Create a new record of the given type."""
        req = self.transmute(DomainRecordCreateRequest, Method.CREATE, _record)
        return req.with_body({"type": kind, "name": name, "data": data})

    def get(self, record_id: int) -> Request:
        """Fetch one record by id."""
        return self.with_segments(record_id).transmute(Request, Method.GET, _record)

    def update(self, record_id: int) -> DomainRecordUpdateRequest:
        """Update one record by id."""
        return self.with_segments(record_id).transmute(
            DomainRecordUpdateRequest, Method.UPDATE, _record
        )

    def delete(self, record_id: int) -> Request:
        """Delete one record by id."""
        return self.with_segments(record_id).transmute(Request, Method.DELETE, None)


def records_request(domain_segments: tuple[str, ...]) -> DomainRecordListRequest:
    """Build the record-listing request below a domain's path."""
    return DomainRecordListRequest(
        segments=domain_segments + ("records",),
        method=Method.LIST,
        parser=_many("domain_records", DomainRecord),
    )