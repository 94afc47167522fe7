from __future__ import annotations

from typing import List

from easypanel_sdk import routes
from easypanel_sdk.models import (
    ProjectInfo,
    ProjectInspect,
    ProjectName,
    ProjectQuery,
    ProjectsWithServices,
)
from easypanel_sdk.resources._base import Resource


class ProjectsResource(Resource):
    async def can_create(self) -> bool:
        """Whether the panel allows creating another project."""
        return await self._client.get(routes.CAN_CREATE_PROJECT, result=bool)

    async def create(self, params: ProjectName) -> ProjectInfo:
        return await self._client.post(
            routes.CREATE_PROJECT, params, result=ProjectInfo
        )

    async def destroy(self, params: ProjectName) -> None:
        await self._client.post(routes.DESTROY_PROJECT, params)

    async def inspect(self, params: ProjectQuery) -> ProjectInspect:
        """Project details including its services."""
        return await self._client.get(
            routes.INSPECT_PROJECT, params, result=ProjectInspect
        )

    async def list(self) -> List[ProjectInfo]:
        return await self._client.get(routes.LIST_PROJECTS, result=List[ProjectInfo])

    async def list_with_services(self) -> ProjectsWithServices:
        return await self._client.get(
            routes.LIST_PROJECTS_AND_SERVICES, result=ProjectsWithServices
        )
