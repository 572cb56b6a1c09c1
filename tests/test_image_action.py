from oceanapi.core import Method
from oceanapi.image_action import ImageActions


def _image(image_id):
    return ImageActions(("images", str(image_id)), Method.GET)


def test_list_produces_correct_request():
    req = _image(123).actions()
    assert req.url == "https://api.digitalocean.com/v2/images/123/actions"
    assert req.body is None
    assert req.method is Method.LIST


def test_get_produces_correct_request():
    req = _image(123).action(456)
    assert req.url == "https://api.digitalocean.com/v2/images/123/actions/456"
    assert req.body is None
    assert req.method is Method.GET


def test_transfer_produces_correct_request():
    req = _image(123).transfer("tor1")
    assert req.url == "https://api.digitalocean.com/v2/images/123/actions"
    assert req.body == {"type": "transfer", "region": "tor1"}
    assert req.method is Method.CREATE


def test_convert_produces_correct_request():
    req = _image(123).convert()
    assert req.url == "https://api.digitalocean.com/v2/images/123/actions"
    assert req.body == {"type": "convert"}


def test_action_parses_response():
    payload = {
        "action": {
            "id": 36805527,
            "status": "in-progress",
            "started_at": "2014-11-14T16:42:45Z",
            "completed_at": None,
            "resource_id": 7938269,
            "resource_type": "image",
            "region_slug": "nyc3",
        }
    }
    action = _image(7938269).convert().parse(payload)
    assert action.id == 36805527
    assert action.completed_at is None
    assert action.region_slug == "nyc3"