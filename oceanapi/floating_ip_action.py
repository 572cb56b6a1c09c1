"""Actions that can be performed on a floating IP."""

from __future__ import annotations

from oceanapi.core import Action, Method, Request, _many, _one

_SEGMENT = "actions"

_parse_action = _one("action", Action)


class FloatingIpActions(Request):
    """Action requests reachable from a request for a single floating IP."""

    def actions(self) -> Request:
        """List all actions performed on this floating IP."""
        return self.with_segments(_SEGMENT).transmute(
            Request, Method.LIST, _many("actions", Action)
        )

    def action(self, action_id: int) -> Request:
        """Fetch one action performed on this floating IP."""
        return self.with_segments(_SEGMENT, action_id).transmute(
            Request, Method.GET, _parse_action
        )

    def unassign(self) -> Request:
        """Unassign the floating IP from its droplet."""
        return (
            self.with_segments(_SEGMENT)
            .transmute(Request, Method.CREATE, _parse_action)
            .with_body({"type": "unassign"})
        )

    def assign(self, droplet_id: int) -> Request:
        """Assign the floating IP to a droplet."""
        return (
            self.with_segments(_SEGMENT)
            .transmute(Request, Method.CREATE, _parse_action)
            .with_body({"type": "assign", "droplet_id": droplet_id})
        )