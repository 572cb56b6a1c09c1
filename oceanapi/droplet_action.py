"""Actions that can be performed on a droplet."""

from __future__ import annotations

from typing import Any

from oceanapi.core import Action, Method, Request, _many, _one

_SEGMENT = "actions"

_parse_action = _one("action", Action)


class DropletActions(Request):
    """Action requests reachable from a request for a single droplet."""

    def _act(self, body: dict[str, Any]) -> Request:
        return (
            self.with_segments(_SEGMENT)
            .transmute(Request, Method.CREATE, _parse_action)
            .with_body(body)
        )

    def actions(self) -> Request:
        """List all actions performed on this droplet."""
        return self.with_segments(_SEGMENT).transmute(
            Request, Method.LIST, _many("actions", Action)
        )

    def enable_backups(self) -> Request:
        """Enable automated backups."""
        return self._act({"type": "enable_backups"})

    def disable_backups(self) -> Request:
        """Disable automated backups."""
        return self._act({"type": "disable_backups"})

    def reboot(self) -> Request:
        """Reboot the droplet gracefully."""
        return self._act({"type": "reboot"})

    def power_cycle(self) -> Request:
        """Power the droplet off and back on."""
        return self._act({"type": "power_cycle"})

    def shutdown(self) -> Request:
        """Shut the droplet down gracefully."""
        return self._act({"type": "shutdown"})

    def power(self, on: bool) -> Request:
        """Power the droplet on when ``on`` is true, off otherwise."""
        return self._act({"type": "power_on" if on else "power_off"})

    def restore(self, image: Any) -> Request:
        """Restore the droplet from an image given by id or slug."""
        return self._act({"type": "restore", "image": str(image)})

    def password_reset(self) -> Request:
        """Reset the root password of the droplet."""
        return self._act({"type": "password_reset"})

    def resize(self, size: str, disk: bool) -> Request:
        """Resize the droplet to ``size``, resizing the disk too if ``disk``."""
        return self._act({"type": "resize", "disk": disk, "size": size})

    def rebuild(self, image: str) -> Request:
        """Rebuild the droplet from an image."""
        return self._act({"type": "rebuild", "image": image})

    def rename(self, name: str) -> Request:
        """Give the droplet a new name."""
        return self._act({"type": "rename", "name": name})

    def kernel(self, kernel_id: int) -> Request:
        """Change the kernel of the droplet."""
        return self._act({"type": "change_kernel", "kernel": kernel_id})

    def enable_ipv6(self) -> Request:
        """Enable IPv6 networking."""
        return self._act({"type": "enable_ipv6"})

    def enable_private_networking(self) -> Request:
        """Enable private networking."""
        return self._act({"type": "enable_private_networking"})

    def snapshot(self, name: str) -> Request:
        """Take a snapshot of the droplet under ``name``."""
        return self._act({"type": "snapshot", "name": name})

    def action(self, action_id: int) -> Request:
        """Fetch one action performed on this droplet."""
        return self.with_segments(_SEGMENT, action_id).transmute(
            Request, Method.GET, _parse_action
        )