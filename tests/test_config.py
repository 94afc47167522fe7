import pytest
from easypanel_sdk import Easypanel, create_client_from_env
from easypanel_sdk.core.config import EndpointConfig, config_from_env, load_env_config


def test_endpoint_is_normalized():
    cfg = EndpointConfig(endpoint=" https://panel.test/ ", token="tok")
    assert cfg.endpoint == "https://panel.test"
    assert cfg.token == "tok"
    assert cfg.is_secure


def test_token_is_kept_verbatim():
    cfg = EndpointConfig(endpoint="https://panel.test", token=" tok\t")
    assert cfg.token == " tok\t"


@pytest.mark.parametrize("token", ["", "   "])
def test_blank_token_rejected(token):
    with pytest.raises(ValueError):
        EndpointConfig(endpoint="https://panel.test", token=token)


def test_plain_http_endpoint_is_not_secure():
    assert not EndpointConfig(endpoint="http://10.0.0.5:3000", token="t").is_secure


def test_repr_hides_token():
    cfg = EndpointConfig(endpoint="https://panel.test", token="super-secret")
    assert "super-secret" not in repr(cfg)


def test_config_is_immutable():
    cfg = EndpointConfig(endpoint="https://panel.test", token="t")
    with pytest.raises(AttributeError):
        cfg.token = "other"  # type: ignore[misc]


@pytest.mark.parametrize("endpoint", ["", "panel.test", "ftp://panel.test", "https://"])
def test_bad_endpoint_rejected(endpoint):
    with pytest.raises(ValueError):
        EndpointConfig(endpoint=endpoint, token="t")


def test_load_env_config(monkeypatch):
    monkeypatch.setenv("EASYPANEL_ENDPOINT", " https://panel.test ")
    monkeypatch.setenv("EASYPANEL_TOKEN", "tok")
    assert load_env_config(use_dotenv=False) == ("https://panel.test", "tok")


def test_config_from_env_missing(monkeypatch):
    monkeypatch.delenv("EASYPANEL_ENDPOINT", raising=False)
    monkeypatch.delenv("EASYPANEL_TOKEN", raising=False)
    with pytest.raises(ValueError) as exc:
        config_from_env(use_dotenv=False)
    assert "EASYPANEL_ENDPOINT" in str(exc.value)


@pytest.mark.asyncio
async def test_create_client_from_env(monkeypatch):
    monkeypatch.setenv("EASYPANEL_ENDPOINT", "https://panel.test")
    monkeypatch.setenv("EASYPANEL_TOKEN", "tok")
    panel = create_client_from_env(use_dotenv=False)
    async with panel:
        assert isinstance(panel, Easypanel)
        expected = EndpointConfig(endpoint="https://panel.test", token="tok")
        assert panel.config == expected
