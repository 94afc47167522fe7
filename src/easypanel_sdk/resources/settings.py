from __future__ import annotations

from easypanel_sdk import routes
from easypanel_sdk.models import (
    ChangeCredentialsParams,
    GithubTokenParams,
    LetsEncryptParams,
    PanelDomain,
    PanelDomainParams,
    PruneDockerDailyParams,
    TraefikConfParams,
)
from easypanel_sdk.resources._base import Resource


class SettingsResource(Resource):
    async def change_credentials(self, params: ChangeCredentialsParams) -> None:
        await self._client.post(routes.CHANGE_CREDENTIALS, params)

    async def get_github_token(self) -> str:
        return await self._client.get(routes.GET_GITHUB_TOKEN, result=str)

    async def get_lets_encrypt_email(self) -> str:
        return await self._client.get(routes.GET_LETS_ENCRYPT_EMAIL, result=str)

    async def get_panel_domain(self) -> PanelDomain:
        return await self._client.get(routes.GET_PANEL_DOMAIN, result=PanelDomain)

    async def get_server_ip(self) -> str:
        return await self._client.get(routes.GET_SERVER_IP, result=str)

    async def get_traefik_custom_config(self) -> str:
        return await self._client.get(routes.GET_TRAEFIK_CUSTOM_CONFIG, result=str)

    async def prune_docker_builder(self) -> str:
        """Prune the Docker build cache; returns the panel's prune report."""
        return await self._client.post(routes.PRUNE_DOCKER_BUILDER, result=str)

    async def prune_docker_images(self) -> str:
        """Prune unused Docker images; returns the panel's prune report."""
        return await self._client.post(routes.PRUNE_DOCKER_IMAGES, result=str)

    async def refresh_server_ip(self) -> None:
        await self._client.post(routes.REFRESH_SERVER_IP)

    async def restart_easypanel(self) -> None:
        await self._client.post(routes.RESTART_EASYPANEL)

    async def restart_traefik(self) -> None:
        await self._client.post(routes.RESTART_TRAEFIK)

    async def set_docker_prune_daily(self, params: PruneDockerDailyParams) -> bool:
        return await self._client.post(
            routes.SET_PRUNE_DOCKER_DAILY, params, result=bool
        )

    async def set_github_token(self, params: GithubTokenParams) -> str:
        return await self._client.post(routes.SET_GITHUB_TOKEN, params, result=str)

    async def set_lets_encrypt_email(self, params: LetsEncryptParams) -> str:
        return await self._client.post(
            routes.SET_LETS_ENCRYPT_EMAIL, params, result=str
        )

    async def set_panel_domain(self, params: PanelDomainParams) -> None:
        await self._client.post(routes.SET_PANEL_DOMAIN, params)

    async def update_traefik_custom_config(self, params: TraefikConfParams) -> None:
        await self._client.post(routes.UPDATE_TRAEFIK_CUSTOM_CONFIG, params)
