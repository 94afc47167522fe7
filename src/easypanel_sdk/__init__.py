"""easypanel_sdk package exports."""

from .core.client import EasypanelHTTPClient, RetryConfig
from .core.config import EndpointConfig
from .core.errors import (
    EasypanelAPIError,
    EasypanelBuildError,
    EasypanelClientError,
    EasypanelDecodeError,
    EasypanelStreamConnectError,
    EasypanelStreamFrameError,
    EasypanelTransportError,
)
from .core.logging import setup_logging
from .core.streaming import LogStream
from .easypanel import Easypanel, create_client_from_env
from .routes import LicenseType, ServiceType

__all__ = [
    # Client
    "Easypanel",
    "EasypanelHTTPClient",
    "EndpointConfig",
    "RetryConfig",
    "LogStream",
    "create_client_from_env",
    # Resource kinds
    "ServiceType",
    "LicenseType",
    # Exceptions
    "EasypanelClientError",
    "EasypanelBuildError",
    "EasypanelTransportError",
    "EasypanelAPIError",
    "EasypanelDecodeError",
    "EasypanelStreamConnectError",
    "EasypanelStreamFrameError",
    # Logging
    "setup_logging",
]
