"""SSL certificates used for termination on load balancers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from oceanapi.core import Method, Request, _many, _one, parse_datetime

_SEGMENT = "certificates"


@dataclass(frozen=True)
class Certificate:
    """An uploaded SSL certificate."""

    id: str
    name: str
    not_after: datetime
    sha1_fingerprint: str
    created_at: datetime

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Certificate":
        return cls(
            id=data["id"],
            name=data["name"],
            not_after=parse_datetime(data["not_after"]),
            sha1_fingerprint=data["sha1_fingerprint"],
            created_at=parse_datetime(data["created_at"]),
        )

    @staticmethod
    def create(name: str, private_key: str, leaf_certificate: str) -> "CertificateCreateRequest":
        """Upload a new certificate."""
        return CertificateCreateRequest(
            (_SEGMENT,), Method.CREATE, _one("certificate", Certificate)
        ).with_body(
            {
                "name": name,
                "private_key": private_key,
                "leaf_certificate": leaf_certificate,
            }
        )

    @staticmethod
    def list() -> Request:
        """Request all certificates."""
        return Request((_SEGMENT,), Method.LIST, _many("certificates", Certificate))

    @staticmethod
    def get(certificate_id: str) -> Request:
        """Request one certificate by id."""
        return Request(
            (_SEGMENT, str(certificate_id)), Method.GET, _one("certificate", Certificate)
        )

    @staticmethod
    def delete(certificate_id: str) -> Request:
        """Delete one certificate by id."""
        return Request((_SEGMENT, str(certificate_id)), Method.DELETE, None)


class CertificateCreateRequest(Request):
    """Request uploading a certificate, with an optional trust chain."""

    def certificate_chain(self, value: str) -> "CertificateCreateRequest":
        """The PEM-formatted trust chain up to the certificate authority."""
        return self.with_field("certificate_chain", value)