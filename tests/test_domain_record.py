import pytest

from oceanapi.core import Method
from oceanapi.domain import Domain
from oceanapi.domain_record import DomainRecord

BASE = "https://api.digitalocean.com/v2/domains/example.com/records"


def test_list_produces_correct_request():
    req = Domain.get("example.com").records()
    assert req.url == BASE
    assert req.body is None
    assert req.method is Method.LIST


def test_create_produces_correct_request():
    req = Domain.get("example.com").records().create("A", "www", "192.168.0.1").ttl(100)
    assert req.url == BASE
    assert req.method is Method.CREATE
    assert req.body == {"type": "A", "name": "www", "data": "192.168.0.1", "ttl": 100}


def test_create_optional_fields_accept_none():
    req = (
        Domain.get("example.com")
        .records()
        .create("SRV", "_sip", "sip.example.com")
        .priority(None)
        .port(5060)
        .weight(10)
    )
    assert req.body == {
        "type": "SRV",
        "name": "_sip",
        "data": "sip.example.com",
        "priority": None,
        "port": 5060,
        "weight": 10,
    }


def test_get_produces_correct_request():
    req = Domain.get("example.com").records().get(123)
    assert req.url == f"{BASE}/123"
    assert req.body is None
    assert req.method is Method.GET


def test_update_produces_correct_request():
    req = Domain.get("example.com").records().update(123).kind("SRV").name("ww2").ttl(200)
    assert req.url == f"{BASE}/123"
    assert req.method is Method.UPDATE
    assert req.body == {"type": "SRV", "name": "ww2", "ttl": 200}


def test_update_all_fields():
    req = (
        Domain.get("example.com")
        .records()
        .update(1)
        .data("10.0.0.1")
        .priority(5)
        .port(None)
        .weight(None)
    )
    assert req.body == {"data": "10.0.0.1", "priority": 5, "port": None, "weight": None}


def test_delete_produces_correct_request():
    req = Domain.get("example.com").records().delete(123)
    assert req.url == f"{BASE}/123"
    assert req.body is None
    assert req.method is Method.DELETE


RECORD = {
    "id": 28448433,
    "type": "A",
    "name": "www",
    "data": "162.10.66.0",
    "priority": None,
    "port": None,
    "ttl": 1800,
    "weight": None,
}


def test_parse_record_and_list():
    records = Domain.get("example.com").records()
    listed = records.parse({"domain_records": [RECORD], "links": {}, "meta": {"total": 1}})
    assert listed == [DomainRecord.from_dict(RECORD)]
    one = records.get(28448433).parse({"domain_record": RECORD})
    assert one.kind == "A"
    assert one.ttl == 1800


def test_from_dict_missing_field():
    with pytest.raises(KeyError):
        DomainRecord.from_dict({"id": 1})