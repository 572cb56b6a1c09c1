# oceanapi

Request builders and typed response models for a cloud provider's v2 REST API.
The API covers accounts, actions, droplets, droplet actions, images, image
actions, custom images, domains, domain records, floating IPs, floating IP
actions and certificates.

Each builder returns a `Request`, which is a frozen dataclass. It holds:

- `method`: a `Method` enum member (`LIST`, `GET`, `CREATE`, `UPDATE` or
  `DELETE`). Its `http_method` property gives the HTTP verb: `GET`, `GET`,
  `POST`, `PUT` or `DELETE`.
- `url`: the full URL, with the query string if there is one. It is built on
  `https://api.digitalocean.com/v2`.
- `body`: the JSON body as a dict, or `None` when there is no body.

You send the request with any HTTP client. You then pass the reply to
`Request.parse`, which returns the matching model objects.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `oceanapi.core` | `Request`, `Method`, `api_url`, `parse_datetime`, `Account`, `Action` |
| `oceanapi.droplet` | `Droplet`, `DropletCreateRequest`, `DropletGetRequest`, `Networks`, `NetworkV4`, `NetworkV6`, `Kernel`, `NextBackupWindow` |
| `oceanapi.droplet_action` | `DropletActions` (reboot, power, resize, snapshot, ...) |
| `oceanapi.image` | `Image`, `ImageGetRequest`, `ImageUpdateRequest` |
| `oceanapi.image_action` | `ImageActions` (transfer, convert, ...) |
| `oceanapi.custom_image` | `CustomImage` |
| `oceanapi.domain` | `Domain`, `DomainGetRequest` |
| `oceanapi.domain_record` | `DomainRecord` and its list, create and update requests |
| `oceanapi.floating_ip` | `FloatingIp`, `FloatingIpGetRequest` |
| `oceanapi.floating_ip_action` | `FloatingIpActions` (assign, unassign, ...) |
| `oceanapi.certificate` | `Certificate`, `CertificateCreateRequest` |

## Building requests

```python
from oceanapi.core import Account, Action
from oceanapi.domain import Domain
from oceanapi.droplet import Droplet
from oceanapi.image import Image
from oceanapi.floating_ip import FloatingIp

req = Account.get()
req.url        # "https://api.digitalocean.com/v2/account"
req.body       # None

req = Droplet.create("bear", "tor1", "5gb", "ubuntu-14-04-x64").backups(True)
req.body       # {"name": "bear", "region": "tor1", "size": "5gb",
               #  "image": "ubuntu-14-04-x64", "backups": True}

req = Droplet.get(123).reboot()
req.url        # "https://api.digitalocean.com/v2/droplets/123/actions"
req.body       # {"type": "reboot"}
req.method.http_method  # "POST"

req = Droplet.list_by_tag("bear")
req.url        # "https://api.digitalocean.com/v2/droplets?tag_name=bear"

req = Domain.get("example.com").records().create("A", "www", "192.168.0.1").ttl(100)
req = Image.get(123).transfer("tor1")
req = FloatingIp.get("192.168.0.1").assign(123)
```

Builders chain. A builder never changes the request it is called on. It
returns a new one, so you can reuse a partly built request. Each path segment
is percent-encoded on its own. `Domain.create`, `FloatingIp.get` and
`FloatingIp.delete` check their address with `ipaddress.ip_address` and raise
`ValueError` if it is not valid.

## Parsing responses

```python
req = Action.get(42)
# ... send req.method.http_method, req.url and req.body, then read the reply ...
action = req.parse(payload)   # -> Action
```

`parse` takes either a decoded dict or the raw JSON text or bytes.

- Single-object requests return one model.
- List requests return a list of models read from the resource's key.
- `Droplet.neighbors()` returns a list of droplet groups.
- Delete requests return `None`.

Timestamps are parsed into aware UTC `datetime` objects.

Some values are kept as plain dicts, exactly as the API sends them:

- the `region` and `size` of a droplet
- the `region` of a floating IP
- the items returned by a droplet's `snapshots()` and `backups()` requests

## What this package does not do

- It sends no HTTP requests, so it needs no API token.
- It does not follow pagination links. A list request parses only the page it
  is given.
- It has no command-line tool.