from oceanapi.core import Action, Method
from oceanapi.floating_ip_action import FloatingIpActions

IP = "192.168.0.1"
ACTIONS_URL = f"https://api.digitalocean.com/v2/floating_ips/{IP}/actions"


def floating_ip():
    return FloatingIpActions(("floating_ips", IP), Method.GET, None)


def test_list():
    req = floating_ip().actions()
    assert req.url == ACTIONS_URL
    assert req.body is None
    assert req.method is Method.LIST


def test_get():
    req = floating_ip().action(123)
    assert req.url == f"{ACTIONS_URL}/123"
    assert req.body is None
    assert req.method is Method.GET


def test_assign():
    req = floating_ip().assign(123)
    assert req.url == ACTIONS_URL
    assert req.body == {"type": "assign", "droplet_id": 123}
    assert req.method is Method.CREATE


def test_unassign():
    req = floating_ip().unassign()
    assert req.url == ACTIONS_URL
    assert req.body == {"type": "unassign"}
    assert req.method is Method.CREATE


def test_list_parses_actions():
    payload = (
        '{"actions": [{"id": 1, "status": "completed",'
        ' "started_at": "2020-01-01T00:00:00Z",'
        ' "completed_at": "2020-01-01T00:01:00Z",'
        ' "resource_id": 5, "resource_type": "floating_ip",'
        ' "region_slug": null}], "links": {}, "meta": {"total": 1}}'
    )
    result = floating_ip().actions().parse(payload)
    assert len(result) == 1
    assert isinstance(result[0], Action)
    assert result[0].resource_type == "floating_ip"
    assert result[0].completed_at.minute == 1