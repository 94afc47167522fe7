from __future__ import annotations

import asyncio
from typing import Optional, Union

from easypanel_sdk import routes
from easypanel_sdk.core.streaming import LogStream, open_log_stream
from easypanel_sdk.models import (
    CreateServiceParams,
    DeployParams,
    ExposeServiceParams,
    MountParams,
    SelectService,
    Service,
    StreamLogsParams,
    UpdateAdvancedParams,
    UpdateBackupParams,
    UpdateBasicAuth,
    UpdateBuildParams,
    UpdateEnv,
    UpdateGit,
    UpdateGithub,
    UpdateImage,
    UpdatePorts,
    UpdateRedirects,
    UpdateResources,
    UpdateSourceGitCompose,
    UpdateSourceInline,
)
from easypanel_sdk.resources._base import Resource
from easypanel_sdk.routes import ServiceType, service_route

Kind = Union[ServiceType, str]


class ServicesResource(Resource):
    """
    Service operations. Every call takes the service kind (app, mysql,
    postgres, compose, ...) which selects the services.<kind>.* route.
    """

    async def _action(self, template: str, kind: Kind, params) -> None:
        await self._client.post(service_route(template, kind), params)

    async def create(self, kind: Kind, params: CreateServiceParams) -> Service:
        return await self._client.post(
            service_route(routes.CREATE_SERVICE, kind), params, result=Service
        )

    async def inspect(self, kind: Kind, params: SelectService) -> Service:
        return await self._client.get(
            service_route(routes.INSPECT_SERVICE, kind), params, result=Service
        )

    async def destroy(self, kind: Kind, params: SelectService) -> None:
        await self._action(routes.DESTROY_SERVICE, kind, params)

    async def deploy(self, kind: Kind, params: SelectService) -> None:
        await self._action(routes.DEPLOY_SERVICE, kind, params)

    async def stop(self, kind: Kind, params: SelectService) -> None:
        await self._action(routes.STOP_SERVICE, kind, params)

    async def restart(self, kind: Kind, params: SelectService) -> None:
        await self._action(routes.RESTART_SERVICE, kind, params)

    async def disable(self, kind: Kind, params: SelectService) -> None:
        await self._action(routes.DISABLE_SERVICE, kind, params)

    async def enable(self, kind: Kind, params: SelectService) -> None:
        await self._action(routes.ENABLE_SERVICE, kind, params)

    async def expose(self, kind: Kind, params: ExposeServiceParams) -> None:
        await self._action(routes.EXPOSE_SERVICE, kind, params)

    async def refresh_deploy_token(self, kind: Kind, params: SelectService) -> None:
        await self._action(routes.REFRESH_DEPLOY_TOKEN, kind, params)

    async def update_source_github(self, kind: Kind, params: UpdateGithub) -> None:
        await self._action(routes.UPDATE_SOURCE_GITHUB, kind, params)

    async def update_source_git(self, kind: Kind, params: UpdateGit) -> None:
        await self._action(routes.UPDATE_SOURCE_GIT, kind, params)

    async def update_source_image(self, kind: Kind, params: UpdateImage) -> None:
        await self._action(routes.UPDATE_SOURCE_IMAGE, kind, params)

    async def update_build(self, kind: Kind, params: UpdateBuildParams) -> None:
        await self._action(routes.UPDATE_BUILD, kind, params)

    async def update_env(self, kind: Kind, params: UpdateEnv) -> None:
        await self._action(routes.UPDATE_ENV, kind, params)

    async def update_domains(self, kind: Kind, params: CreateServiceParams) -> None:
        await self._action(routes.UPDATE_DOMAINS, kind, params)

    async def update_redirects(self, kind: Kind, params: UpdateRedirects) -> None:
        await self._action(routes.UPDATE_REDIRECTS, kind, params)

    async def update_basic_auth(self, kind: Kind, params: UpdateBasicAuth) -> None:
        await self._action(routes.UPDATE_BASIC_AUTH, kind, params)

    async def update_mounts(self, kind: Kind, params: MountParams) -> None:
        await self._action(routes.UPDATE_MOUNTS, kind, params)

    async def update_ports(self, kind: Kind, params: UpdatePorts) -> None:
        await self._action(routes.UPDATE_PORTS, kind, params)

    async def update_resources(self, kind: Kind, params: UpdateResources) -> None:
        await self._action(routes.UPDATE_RESOURCES, kind, params)

    async def update_deploy(self, kind: Kind, params: DeployParams) -> None:
        await self._action(routes.UPDATE_DEPLOY, kind, params)

    async def update_backup(self, kind: Kind, params: UpdateBackupParams) -> None:
        await self._action(routes.UPDATE_BACKUP, kind, params)

    async def update_advanced(self, kind: Kind, params: UpdateAdvancedParams) -> None:
        await self._action(routes.UPDATE_ADVANCED, kind, params)

    async def update_source_inline(
        self, kind: Kind, params: UpdateSourceInline
    ) -> None:
        """Set inline docker-compose content (compose services)."""
        await self._action(routes.UPDATE_SOURCE_INLINE, kind, params)

    async def update_source_git_compose(
        self, kind: Kind, params: UpdateSourceGitCompose
    ) -> None:
        """Point a compose service at a Git repo; shares the updateSourceGit route."""
        await self._action(routes.UPDATE_SOURCE_GIT, kind, params)

    async def get_service_logs(self, params: SelectService) -> str:
        """Snapshot of recent logs. Use stream_logs for live output."""
        return await self._client.get(routes.GET_SERVICE_LOGS, params, result=str)

    async def stream_logs(
        self,
        params: StreamLogsParams,
        *,
        cancel: Optional[asyncio.Event] = None,
        strict_frames: bool = False,
        open_timeout: float = 15.0,
    ) -> LogStream:
        """
        Open a live log session for one service.

        `params.token` is the service deploy token (see inspect()), not the
        API token. Setting `cancel` stops delivery and closes the connection.
        """
        return await open_log_stream(
            self._client.config,
            params,
            cancel=cancel,
            strict_frames=strict_frames,
            open_timeout=open_timeout,
        )
