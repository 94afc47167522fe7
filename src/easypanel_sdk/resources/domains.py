from __future__ import annotations

from typing import List

from easypanel_sdk import routes
from easypanel_sdk.models import (
    CreateDomainParams,
    DeleteDomainParams,
    Domain,
    ListDomainsParams,
    UpdateDomainParams,
)
from easypanel_sdk.resources._base import Resource


class DomainsResource(Resource):
    """Domain routing entries (panels >= 2.x manage them outside services)."""

    async def create(self, params: CreateDomainParams) -> Domain:
        return await self._client.post(routes.CREATE_DOMAIN, params, result=Domain)

    async def update(self, params: UpdateDomainParams) -> None:
        await self._client.post(routes.UPDATE_DOMAIN, params)

    async def delete(self, params: DeleteDomainParams) -> None:
        await self._client.post(routes.DELETE_DOMAIN, params)

    async def list(self, params: ListDomainsParams) -> List[Domain]:
        return await self._client.get(routes.LIST_DOMAINS, params, result=List[Domain])
