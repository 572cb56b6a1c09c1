"""Actions that can be performed on an image."""

from __future__ import annotations

from oceanapi.core import Action, Method, Request, _many, _one

_SEGMENT = "actions"


class ImageActions(Request):
    """Action requests reachable from a request for a single image."""

    def actions(self) -> Request:
        """List all actions performed on this image."""
        return self.with_segments(_SEGMENT).transmute(
            Request, Method.LIST, _many("actions", Action)
        )

    def transfer(self, region: str) -> Request:
        """Transfer the image to another region."""
        return (
            self.with_segments(_SEGMENT)
            .transmute(Request, Method.CREATE, _one("action", Action))
            .with_body({"type": "transfer", "region": region})
        )

    def convert(self) -> Request:
        """Convert the image (a backup) into a snapshot."""
        return (
            self.with_segments(_SEGMENT)
            .transmute(Request, Method.CREATE, _one("action", Action))
            .with_body({"type": "convert"})
        )

    def action(self, action_id: int) -> Request:
        """Fetch one action performed on this image."""
        return self.with_segments(_SEGMENT, action_id).transmute(
            Request, Method.GET, _one("action", Action)
        )