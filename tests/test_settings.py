import json

import pytest
import respx
from easypanel_sdk import Easypanel
from easypanel_sdk.core.envelope import wrap_response
from easypanel_sdk.models import (
    ChangeCredentialsParams,
    GithubTokenParams,
    LetsEncryptParams,
    PanelDomainParams,
    PruneDockerDailyParams,
    TraefikConfParams,
)
from httpx import Response

BASE = "https://panel.test"
TRPC = f"{BASE}/api/trpc"


@pytest.fixture
def panel():
    return Easypanel(BASE, "test-token")


def _body(route) -> dict:
    return json.loads(route.calls.last.request.content)


@pytest.mark.asyncio
@respx.mock
async def test_string_getters(panel):
    respx.get(f"{TRPC}/settings.getServerIp").mock(
        return_value=Response(200, json=wrap_response("203.0.113.7"))
    )
    respx.get(f"{TRPC}/settings.getGithubToken").mock(
        return_value=Response(200, json=wrap_response("ghp_example"))
    )
    respx.get(f"{TRPC}/settings.getLetsEncryptEmail").mock(
        return_value=Response(200, json=wrap_response("ops@example.com"))
    )
    respx.get(f"{TRPC}/settings.getTraefikCustomConfig").mock(
        return_value=Response(200, json=wrap_response("http: {}\n"))
    )

    async with panel:
        assert await panel.settings.get_server_ip() == "203.0.113.7"
        assert await panel.settings.get_github_token() == "ghp_example"
        assert await panel.settings.get_lets_encrypt_email() == "ops@example.com"
        assert await panel.settings.get_traefik_custom_config() == "http: {}\n"


@pytest.mark.asyncio
@respx.mock
async def test_panel_domain_round_trip(panel):
    respx.get(f"{TRPC}/settings.getPanelDomain").mock(
        return_value=Response(
            200,
            json=wrap_response(
                {"serveOnIp": True, "panelDomain": "panel.example.com"}
            ),
        )
    )
    setter = respx.post(f"{TRPC}/settings.setPanelDomain").mock(
        return_value=Response(200, json=wrap_response(None))
    )

    async with panel:
        current = await panel.settings.get_panel_domain()
        await panel.settings.set_panel_domain(
            PanelDomainParams(serve_on_ip=False, panel_domain="new.example.com")
        )

    assert current.serve_on_ip is True
    assert current.panel_domain == "panel.example.com"
    assert _body(setter) == {
        "json": {
            "serveOnIp": False,
            "defaultPanelDomain": "",
            "panelDomain": "new.example.com",
        }
    }


@pytest.mark.asyncio
@respx.mock
async def test_setters_with_results(panel):
    github = respx.post(f"{TRPC}/settings.setGithubToken").mock(
        return_value=Response(200, json=wrap_response("ok"))
    )
    email = respx.post(f"{TRPC}/settings.setLetsEncryptEmail").mock(
        return_value=Response(200, json=wrap_response("ops@example.com"))
    )
    prune = respx.post(f"{TRPC}/settings.setPruneDockerDaily").mock(
        return_value=Response(200, json=wrap_response(True))
    )

    async with panel:
        assert (
            await panel.settings.set_github_token(
                GithubTokenParams(github_token="ghp_new")
            )
            == "ok"
        )
        assert (
            await panel.settings.set_lets_encrypt_email(
                LetsEncryptParams(lets_encrypt_email="ops@example.com")
            )
            == "ops@example.com"
        )
        assert (
            await panel.settings.set_docker_prune_daily(
                PruneDockerDailyParams(prune_docker_daily=True)
            )
            is True
        )

    assert _body(github) == {"json": {"githubToken": "ghp_new"}}
    assert _body(email) == {"json": {"letsEncryptEmail": "ops@example.com"}}
    assert _body(prune) == {"json": {"pruneDockerDaily": True}}


@pytest.mark.asyncio
@respx.mock
async def test_prune_returns_report(panel):
    images = respx.post(f"{TRPC}/settings.pruneDockerImages").mock(
        return_value=Response(200, json=wrap_response("Total reclaimed space: 1GB"))
    )
    respx.post(f"{TRPC}/settings.pruneDockerBuilder").mock(
        return_value=Response(200, json=wrap_response("Total: 0B"))
    )

    async with panel:
        report = await panel.settings.prune_docker_images()
        assert report == "Total reclaimed space: 1GB"
        assert await panel.settings.prune_docker_builder() == "Total: 0B"

    assert images.calls.last.request.content == b""


@pytest.mark.asyncio
@respx.mock
async def test_bodyless_actions(panel):
    routes = [
        respx.post(f"{TRPC}/settings.{op}").mock(
            return_value=Response(200, json=wrap_response(None))
        )
        for op in ("restartEasypanel", "restartTraefik", "refreshServerIp")
    ]

    async with panel:
        assert await panel.settings.restart_easypanel() is None
        assert await panel.settings.restart_traefik() is None
        assert await panel.settings.refresh_server_ip() is None

    for route in routes:
        assert route.calls.last.request.content == b""


@pytest.mark.asyncio
@respx.mock
async def test_credentials_and_traefik_config(panel):
    creds = respx.post(f"{TRPC}/settings.changeCredentials").mock(
        return_value=Response(200, json=wrap_response(None))
    )
    traefik = respx.post(f"{TRPC}/settings.updateTraefikCustomConfig").mock(
        return_value=Response(200, json=wrap_response(None))
    )

    async with panel:
        await panel.settings.change_credentials(
            ChangeCredentialsParams(
                email="admin@example.com", old_password="old", new_password="new"
            )
        )
        await panel.settings.update_traefik_custom_config(
            TraefikConfParams(config="http: {}\n")
        )

    assert _body(creds) == {
        "json": {
            "email": "admin@example.com",
            "oldPassword": "old",
            "newPassword": "new",
        }
    }
    assert _body(traefik) == {"json": {"config": "http: {}\n"}}
