import pytest
import respx
from easypanel_sdk import (
    Easypanel,
    EasypanelAPIError,
    EasypanelBuildError,
    EndpointConfig,
    LicenseType,
)
from easypanel_sdk.core.envelope import wrap_response
from easypanel_sdk.resources import (
    ActionsResource,
    DomainsResource,
    MonitorResource,
    ProjectsResource,
    ServicesResource,
    SettingsResource,
)
from httpx import Response

BASE = "https://panel.test"


@pytest.fixture
def panel():
    return Easypanel(BASE, "test-token")


def test_construction_wires_every_resource(panel):
    assert isinstance(panel.projects, ProjectsResource)
    assert isinstance(panel.services, ServicesResource)
    assert isinstance(panel.monitor, MonitorResource)
    assert isinstance(panel.settings, SettingsResource)
    assert isinstance(panel.domains, DomainsResource)
    assert isinstance(panel.actions, ActionsResource)
    assert panel.config == EndpointConfig(endpoint=BASE, token="test-token")


def test_construction_from_config():
    cfg = EndpointConfig(endpoint="http://10.0.0.5:3000/", token="tok")
    panel = Easypanel(config=cfg)
    assert panel.config.endpoint == "http://10.0.0.5:3000"


def test_construction_rejects_config_and_credentials_together():
    cfg = EndpointConfig(endpoint=BASE, token="tok")
    with pytest.raises(ValueError):
        Easypanel(BASE, "tok", config=cfg)


def test_construction_rejects_missing_endpoint():
    with pytest.raises(EasypanelBuildError):
        Easypanel(None, "tok")


@pytest.mark.asyncio
@respx.mock
async def test_get_user(panel):
    route = respx.get(f"{BASE}/api/trpc/auth.getUser").mock(
        return_value=Response(
            200,
            json=wrap_response(
                {
                    "id": "u1",
                    "createdAt": "2024-01-01T00:00:00Z",
                    "email": "admin@example.com",
                    "admin": True,
                }
            ),
        )
    )

    async with panel:
        user = await panel.get_user()

    assert user.email == "admin@example.com"
    assert user.admin is True
    assert user.created_at == "2024-01-01T00:00:00Z"
    request = route.calls.last.request
    assert request.headers["Authorization"] == "test-token"
    assert request.url.params["input"] == '{"json":null}'


@pytest.mark.asyncio
@respx.mock
async def test_get_user_forbidden_surfaces_api_error(panel):
    respx.get(f"{BASE}/api/trpc/auth.getUser").mock(
        return_value=Response(403, json={"ok": False, "errorMessage": "Forbidden"})
    )

    async with panel:
        with pytest.raises(EasypanelAPIError) as excinfo:
            await panel.get_user()

    assert excinfo.value.status_code == 403
    assert excinfo.value.ok is False
    assert str(excinfo.value) == "Forbidden"
    assert len(respx.calls) == 1


@pytest.mark.asyncio
@respx.mock
async def test_license_routes_substitute_kind(panel):
    payload = respx.get(f"{BASE}/api/trpc/lemonLicense.getLicensePayload").mock(
        return_value=Response(200, json=wrap_response({"anything": 1}))
    )
    activate = respx.post(f"{BASE}/api/trpc/portalLicense.activate").mock(
        return_value=Response(200, json=wrap_response(None))
    )

    async with panel:
        assert await panel.get_license_payload(LicenseType.LEMON) is None
        assert await panel.activate_license("portal") is None

    assert payload.called
    assert activate.calls.last.request.content == b""


@pytest.mark.asyncio
async def test_unknown_license_kind_fails_before_sending(panel):
    async with respx.mock(assert_all_called=False) as mock:
        async with panel:
            with pytest.raises(EasypanelBuildError):
                await panel.activate_license("enterprise")
        assert not mock.calls


@pytest.mark.asyncio
async def test_transport_kwargs_reach_client():
    panel = Easypanel(BASE, "tok", timeout_seconds=5.0)
    assert panel.client.timeout_seconds == 5.0
    await panel.aclose()
