"""Request building blocks plus the account and action resources."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Mapping, Optional
from urllib.parse import quote, urlencode

ROOT_URL = "https://api.digitalocean.com/v2"

# Characters left as they are inside a single path segment.
_SEGMENT_SAFE = "!$&'()*+,;=:@"

Parser = Callable[[Mapping[str, Any]], Any]


class Method(Enum):
    """The kind of operation a request performs."""

    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

    @property
    def http_method(self) -> str:
        """The HTTP verb used to send a request of this kind."""
        return {
            Method.LIST: "GET",
            Method.GET: "GET",
            Method.CREATE: "POST",
            Method.UPDATE: "PUT",
            Method.DELETE: "DELETE",
        }[self]


def api_url(*segments: Any) -> str:
    """Build an API URL from path segments, each percent-encoded on its own."""
    parts = [quote(str(segment), safe=_SEGMENT_SAFE) for segment in segments]
    return "/".join([ROOT_URL, *parts])


_ISO_RE = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}(?::\d{2})?)"
    r"(?:\.(?P<frac>\d+))?"
    r"(?P<tz>Z|z|[+-]\d{2}:?\d{2})?$"
)


def parse_datetime(value: str) -> datetime:
    """Parse an ISO 8601 timestamp and return it as an aware UTC datetime."""
    match = _ISO_RE.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise ValueError(f"invalid ISO 8601 timestamp: {value!r}")
    text = match["base"]
    if match["frac"]:
        text += "." + match["frac"][:6].ljust(6, "0")
    tz = match["tz"]
    if tz is None or tz in ("Z", "z"):
        tz = "+00:00"
    elif ":" not in tz:
        tz = f"{tz[:3]}:{tz[3:]}"
    parsed = datetime.fromisoformat(text + tz)
    return parsed.astimezone(timezone.utc)


def _optional_datetime(value: Optional[str]) -> Optional[datetime]:
    return None if value is None else parse_datetime(value)


def _one(key: str, cls: Any) -> Parser:
    """Parser for a response that wraps a single object under ``key``."""

    def parse(payload: Mapping[str, Any]) -> Any:
        return cls.from_dict(payload[key])

    return parse


def _many(key: str, cls: Any) -> Parser:
    """Parser for a response that holds a list of objects under ``key``."""

    def parse(payload: Mapping[str, Any]) -> Any:
        return [cls.from_dict(item) for item in payload[key]]

    return parse


@dataclass(frozen=True)
class Request:
    """An API request: where it goes, what it sends and how to read the reply.

    Builder methods never modify the request; they return a new one.
    """

    segments: tuple[str, ...]
    method: Method
    parser: Optional[Parser] = field(default=None, compare=False, repr=False)
    query: tuple[tuple[str, str], ...] = ()
    body: Optional[dict[str, Any]] = None

    @property
    def url(self) -> str:
        """The full URL of the request, query string included."""
        base = api_url(*self.segments)
        return f"{base}?{urlencode(self.query)}" if self.query else base

    def with_segments(self, *segments: Any) -> "Request":
        """Return a copy with extra path segments appended."""
        return replace(self, segments=self.segments + tuple(str(s) for s in segments))

    def with_query(self, key: str, value: Any) -> "Request":
        """Return a copy with a query pair appended."""
        return replace(self, query=self.query + ((key, str(value)),))

    def with_field(self, key: str, value: Any) -> "Request":
        """Return a copy whose JSON body has ``key`` set to ``value``."""
        body = dict(self.body or {})
        body[key] = value
        return replace(self, body=body)

    def with_body(self, body: Optional[Mapping[str, Any]]) -> "Request":
        """Return a copy whose JSON body is replaced by ``body``."""
        return replace(self, body=None if body is None else dict(body))

    def transmute(self, cls: type, method: Method, parser: Optional[Parser]) -> Any:
        """Return the same URL and body as a request of another kind."""
        return cls(
            segments=self.segments,
            method=method,
            parser=parser,
            query=self.query,
            body=None if self.body is None else dict(self.body),
        )

    def parse(self, payload: Any) -> Any:
        """Turn a decoded (or raw JSON) response into the requested value."""
        if self.parser is None:
            return None
        if isinstance(payload, (str, bytes, bytearray)):
            payload = json.loads(payload)
        return self.parser(payload)


@dataclass(frozen=True)
class Account:
    """The user account."""

    droplet_limit: int
    floating_ip_limit: int
    email: str
    uuid: str
    email_verified: bool
    status: str
    status_message: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Account":
        return cls(
            droplet_limit=data["droplet_limit"],
            floating_ip_limit=data["floating_ip_limit"],
            email=data["email"],
            uuid=data["uuid"],
            email_verified=data["email_verified"],
            status=data["status"],
            status_message=data["status_message"],
        )

    @staticmethod
    def get() -> Request:
        """Request the current user's account information."""
        return Request(("account",), Method.GET, _one("account", Account))


@dataclass(frozen=True)
class Action:
    """A record of an event that occurred on a resource in the account."""

    id: int
    status: str
    started_at: datetime
    completed_at: Optional[datetime]
    resource_id: int
    resource_type: str
    region_slug: Optional[str]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Action":
        return cls(
            id=data["id"],
            status=data["status"],
            started_at=parse_datetime(data["started_at"]),
            completed_at=_optional_datetime(data.get("completed_at")),
            resource_id=data["resource_id"],
            resource_type=data["resource_type"],
            region_slug=data.get("region_slug"),
        )

    @staticmethod
    def get(action_id: int) -> Request:
        """Request a single action by id."""
        return Request(("actions", str(action_id)), Method.GET, _one("action", Action))

    @staticmethod
    def list() -> Request:
        """Request all actions."""
        return Request(("actions",), Method.LIST, _many("actions", Action))