from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple
from urllib.parse import urlsplit

from dotenv import load_dotenv

from .errors import EasypanelBuildError

ENDPOINT_ENV = "EASYPANEL_ENDPOINT"
TOKEN_ENV = "EASYPANEL_TOKEN"


@dataclass(frozen=True)
class EndpointConfig:
    """Base URL and auth token shared read-only by the transport and log streams."""

    endpoint: str
    token: str

    def __post_init__(self) -> None:
        endpoint = (self.endpoint or "").strip().rstrip("/")

        if not endpoint:
            raise EasypanelBuildError("endpoint must be provided.")
        if not (self.token or "").strip():
            raise EasypanelBuildError("token must be provided.")

        parts = urlsplit(endpoint)
        if parts.scheme not in {"http", "https"} or not parts.netloc:
            raise EasypanelBuildError(f"Invalid endpoint: {self.endpoint!r}")

        # frozen dataclass: normalize through object.__setattr__; token stays verbatim
        object.__setattr__(self, "endpoint", endpoint)

    @property
    def is_secure(self) -> bool:
        return self.endpoint.startswith("https://")

    def __repr__(self) -> str:
        return f"EndpointConfig(endpoint={self.endpoint!r}, token='***')"


def load_env_config(*, use_dotenv: bool = True) -> Tuple[str, str]:
    """Load Easypanel endpoint and token from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    endpoint = os.getenv(ENDPOINT_ENV, "").strip()
    token = os.getenv(TOKEN_ENV, "").strip()
    return endpoint, token


def config_from_env(*, use_dotenv: bool = True) -> EndpointConfig:
    endpoint, token = load_env_config(use_dotenv=use_dotenv)
    if not endpoint or not token:
        raise ValueError(f"Missing {ENDPOINT_ENV} or {TOKEN_ENV} in environment.")
    return EndpointConfig(endpoint=endpoint, token=token)


__all__ = [
    "EndpointConfig",
    "load_env_config",
    "config_from_env",
    "ENDPOINT_ENV",
    "TOKEN_ENV",
]
