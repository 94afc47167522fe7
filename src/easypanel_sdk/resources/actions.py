from __future__ import annotations

from typing import List

from easypanel_sdk import routes
from easypanel_sdk.models import (
    Action,
    ActionDetail,
    GetActionParams,
    ListActionsParams,
)
from easypanel_sdk.resources._base import Resource


class ActionsResource(Resource):
    """Deployment actions (build/deploy runs) and their logs."""

    async def list(self, params: ListActionsParams) -> List[Action]:
        return await self._client.get(routes.LIST_ACTIONS, params, result=List[Action])

    async def get(self, params: GetActionParams) -> ActionDetail:
        return await self._client.get(routes.GET_ACTION, params, result=ActionDetail)
