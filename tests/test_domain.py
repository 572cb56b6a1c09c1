import ipaddress

import pytest

from oceanapi.core import Method
from oceanapi.domain import Domain


def test_list_produces_correct_request():
    req = Domain.list()
    assert req.url == "https://api.digitalocean.com/v2/domains"
    assert req.body is None
    assert req.method is Method.LIST


def test_create_produces_correct_request():
    ip = ipaddress.ip_address("192.168.0.1")
    req = Domain.create("example.com", ip)
    assert req.url == "https://api.digitalocean.com/v2/domains"
    assert req.method is Method.CREATE
    assert req.body == {"name": "example.com", "ip_address": "192.168.0.1"}


def test_create_accepts_string_address():
    req = Domain.create("example.com", "192.168.0.1")
    assert req.body["ip_address"] == "192.168.0.1"


def test_create_rejects_invalid_address():
    with pytest.raises(ValueError):
        Domain.create("example.com", "not-an-ip")


def test_get_produces_correct_request():
    req = Domain.get("example.com")
    assert req.url == "https://api.digitalocean.com/v2/domains/example.com"
    assert req.body is None
    assert req.method is Method.GET


def test_delete_produces_correct_request():
    req = Domain.delete("example.com")
    assert req.url == "https://api.digitalocean.com/v2/domains/example.com"
    assert req.body is None
    assert req.method is Method.DELETE
    assert req.parse({}) is None


def test_parse_domain_and_list():
    data = {"name": "example.com", "ttl": 1800, "zone_file": "$ORIGIN example.com."}
    assert Domain.get("example.com").parse({"domain": data}) == Domain(
        "example.com", 1800, "$ORIGIN example.com."
    )
    listed = Domain.list().parse(
        {"domains": [{"name": "example.com", "ttl": None, "zone_file": None}], "links": {}, "meta": {}}
    )
    assert listed == [Domain("example.com", None, None)]