from __future__ import annotations

from typing import List

from easypanel_sdk import routes
from easypanel_sdk.models import (
    AdvancedStats,
    ContainerStats,
    DockerTaskStats,
    SystemStats,
)
from easypanel_sdk.resources._base import Resource


class MonitorResource(Resource):
    async def get_advanced_stats(self) -> AdvancedStats:
        """CPU, disk, memory and network time series."""
        return await self._client.get(routes.GET_ADVANCED_STATS, result=AdvancedStats)

    async def get_docker_task_stats(self) -> DockerTaskStats:
        """Actual/desired task counts keyed by service name."""
        return await self._client.get(
            routes.GET_DOCKER_TASK_STATS, result=DockerTaskStats
        )

    async def get_monitor_table_data(self) -> List[ContainerStats]:
        return await self._client.get(
            routes.GET_MONITOR_TABLE_DATA, result=List[ContainerStats]
        )

    async def get_system_stats(self) -> SystemStats:
        return await self._client.get(routes.GET_SYSTEM_STATS, result=SystemStats)
