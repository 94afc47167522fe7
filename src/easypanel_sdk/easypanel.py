from __future__ import annotations

from typing import Optional, Union

from easypanel_sdk import routes
from easypanel_sdk.core.client import EasypanelHTTPClient
from easypanel_sdk.core.config import EndpointConfig, config_from_env
from easypanel_sdk.models import User
from easypanel_sdk.resources import (
    ActionsResource,
    DomainsResource,
    MonitorResource,
    ProjectsResource,
    ServicesResource,
    SettingsResource,
)
from easypanel_sdk.routes import LicenseType, license_route


class Easypanel:
    """
    Entry point for the Easypanel API.

        async with Easypanel("https://panel.example.com", "token") as panel:
            projects = await panel.projects.list()

    Extra keyword arguments (timeout_seconds, retry, logger, http) are passed
    to EasypanelHTTPClient.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        token: Optional[str] = None,
        *,
        config: Optional[EndpointConfig] = None,
        **transport_kwargs,
    ):
        if config is None:
            config = EndpointConfig(endpoint=endpoint or "", token=token or "")
        elif endpoint is not None or token is not None:
            raise ValueError("Pass either endpoint/token or config, not both.")

        self.client = EasypanelHTTPClient(config, **transport_kwargs)
        self.projects = ProjectsResource(self.client)
        self.services = ServicesResource(self.client)
        self.monitor = MonitorResource(self.client)
        self.settings = SettingsResource(self.client)
        self.domains = DomainsResource(self.client)
        self.actions = ActionsResource(self.client)

    @classmethod
    def from_env(cls, *, use_dotenv: bool = True, **transport_kwargs) -> "Easypanel":
        """Build from EASYPANEL_ENDPOINT / EASYPANEL_TOKEN (optional .env)."""
        return cls(config=config_from_env(use_dotenv=use_dotenv), **transport_kwargs)

    @property
    def config(self) -> EndpointConfig:
        return self.client.config

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "Easypanel":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def get_user(self) -> User:
        """The user owning the API token."""
        return await self.client.get(routes.GET_USER, result=User)

    async def get_license_payload(self, kind: Union[LicenseType, str]) -> None:
        await self.client.get(license_route(routes.GET_LICENSE_PAYLOAD, kind))

    async def activate_license(self, kind: Union[LicenseType, str]) -> None:
        await self.client.post(license_route(routes.ACTIVATE_LICENSE, kind))


def create_client_from_env(**kwargs) -> Easypanel:
    """Create an Easypanel client from environment variables."""
    return Easypanel.from_env(**kwargs)


__all__ = ["Easypanel", "create_client_from_env"]
