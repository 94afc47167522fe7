from __future__ import annotations

from easypanel_sdk.core.client import EasypanelHTTPClient


class Resource:
    """Holds the shared transport; subclasses are one-line route pass-throughs."""

    def __init__(self, client: EasypanelHTTPClient):
        self._client = client
