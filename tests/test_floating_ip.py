import ipaddress

import pytest

from oceanapi.core import Method
from oceanapi.floating_ip import FloatingIp, FloatingIpGetRequest

FLOATING_IP = ipaddress.ip_address("192.168.0.1")


def test_list_produces_correct_request():
    req = FloatingIp.list()
    assert req.url == "https://api.digitalocean.com/v2/floating_ips"
    assert req.body is None
    assert req.method is Method.LIST


def test_for_droplet_produces_correct_request():
    req = FloatingIp.for_droplet(123)
    assert req.url == "https://api.digitalocean.com/v2/floating_ips"
    assert req.body == {"droplet_id": 123}
    assert req.method is Method.CREATE


def test_for_region_produces_correct_request():
    req = FloatingIp.for_region("tor1")
    assert req.url == "https://api.digitalocean.com/v2/floating_ips"
    assert req.body == {"region": "tor1"}


def test_get_produces_correct_request():
    req = FloatingIp.get(FLOATING_IP)
    assert req.url == f"https://api.digitalocean.com/v2/floating_ips/{FLOATING_IP}"
    assert req.body is None
    assert req.method is Method.GET
    assert isinstance(req, FloatingIpGetRequest)


def test_get_accepts_string_address():
    req = FloatingIp.get("192.168.0.1")
    assert req.url == "https://api.digitalocean.com/v2/floating_ips/192.168.0.1"


def test_delete_produces_correct_request():
    req = FloatingIp.delete(FLOATING_IP)
    assert req.url == f"https://api.digitalocean.com/v2/floating_ips/{FLOATING_IP}"
    assert req.body is None
    assert req.method is Method.DELETE


def test_get_rejects_invalid_address():
    with pytest.raises(ValueError):
        FloatingIp.get("not-an-ip")


def test_get_leads_to_actions():
    req = FloatingIp.get(FLOATING_IP).actions()
    assert req.url == "https://api.digitalocean.com/v2/floating_ips/192.168.0.1/actions"
    assert req.body is None


def test_from_dict_without_droplet():
    ip = FloatingIp.from_dict(
        {"ip": "45.55.96.47", "region": {"slug": "nyc3"}, "droplet": None}
    )
    assert ip.ip == ipaddress.IPv4Address("45.55.96.47")
    assert ip.region == {"slug": "nyc3"}
    assert ip.droplet is None


def test_list_parses_response():
    payload = (
        '{"floating_ips": [{"ip": "2001:db8::1", "region": {"slug": "tor1"},'
        ' "droplet": null}], "links": {}, "meta": {"total": 1}}'
    )
    result = FloatingIp.list().parse(payload)
    assert len(result) == 1
    assert result[0].ip == ipaddress.IPv6Address("2001:db8::1")
    assert result[0].region["slug"] == "tor1"


def test_delete_parses_to_none():
    assert FloatingIp.delete(FLOATING_IP).parse({}) is None