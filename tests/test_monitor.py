import pytest
import respx
from easypanel_sdk import Easypanel, EasypanelDecodeError
from easypanel_sdk.core.envelope import wrap_response
from httpx import Response

BASE = "https://panel.test"
TRPC = f"{BASE}/api/trpc"


@pytest.fixture
def panel():
    return Easypanel(BASE, "test-token")


@pytest.mark.asyncio
@respx.mock
async def test_system_stats(panel):
    respx.get(f"{TRPC}/monitor.getSystemStats").mock(
        return_value=Response(
            200,
            json=wrap_response(
                {
                    "uptime": 86400.5,
                    "memInfo": {"totalMemMb": 2048, "usedMemPercentage": 37.5},
                    "diskInfo": {"totalGb": "40", "usedPercentage": "12"},
                    "cpuInfo": {"usedPercentage": 4.2, "count": 2, "loadavg": [0.1]},
                    "network": {"inputMb": 1.5, "outputMb": 0.5},
                }
            ),
        )
    )

    async with panel:
        stats = await panel.monitor.get_system_stats()

    assert stats.uptime == 86400.5
    assert stats.mem_info.total_mem_mb == 2048
    assert stats.disk_info.total_gb == "40"
    assert stats.cpu_info.count == 2
    assert stats.network.input_mb == 1.5


@pytest.mark.asyncio
@respx.mock
async def test_advanced_stats(panel):
    respx.get(f"{TRPC}/monitor.getAdvancedStats").mock(
        return_value=Response(
            200,
            json=wrap_response(
                {
                    "cpu": [{"value": "3.1", "time": "10:00"}],
                    "memory": [],
                    "network": [
                        {"value": {"input": 10, "output": 20}, "time": "10:00"}
                    ],
                }
            ),
        )
    )

    async with panel:
        stats = await panel.monitor.get_advanced_stats()

    assert stats.cpu[0].value == "3.1"
    assert stats.disk == []
    assert stats.network[0].value.output == 20


@pytest.mark.asyncio
@respx.mock
async def test_docker_task_stats_keyed_by_service(panel):
    respx.get(f"{TRPC}/monitor.getDockerTaskStats").mock(
        return_value=Response(
            200,
            json=wrap_response(
                {
                    "alpha_web": {"actual": 1, "desired": 1},
                    "alpha_db": {"actual": 0, "desired": 1},
                }
            ),
        )
    )

    async with panel:
        tasks = await panel.monitor.get_docker_task_stats()

    assert set(tasks) == {"alpha_web", "alpha_db"}
    assert tasks["alpha_db"].actual == 0
    assert tasks["alpha_db"].desired == 1


@pytest.mark.asyncio
@respx.mock
async def test_monitor_table_data(panel):
    respx.get(f"{TRPC}/monitor.getMonitorTableData").mock(
        return_value=Response(
            200,
            json=wrap_response(
                [
                    {
                        "id": "c0ffee",
                        "projectName": "alpha",
                        "serviceName": "web",
                        "containerName": "alpha_web.1",
                        "stats": {
                            "cpu": {"percent": 0.5},
                            "memory": {"usage": 1024, "percent": 1.0},
                            "network": {"in": 100, "out": 200},
                        },
                    }
                ]
            ),
        )
    )

    async with panel:
        rows = await panel.monitor.get_monitor_table_data()

    assert rows[0].container_name == "alpha_web.1"
    assert rows[0].stats.network.in_ == 100
    assert rows[0].stats.memory.usage == 1024


@pytest.mark.asyncio
@respx.mock
async def test_mismatched_stats_shape_is_a_decode_error(panel):
    respx.get(f"{TRPC}/monitor.getSystemStats").mock(
        return_value=Response(200, json=wrap_response({"uptime": "not a number"}))
    )

    async with panel:
        with pytest.raises(EasypanelDecodeError):
            await panel.monitor.get_system_stats()
