"""Core transport surface for easypanel-sdk (resource-agnostic)."""

from .client import EasypanelHTTPClient, RetryConfig
from .config import EndpointConfig, config_from_env, load_env_config
from .envelope import decode, decode_input, encode, wrap_response
from .errors import (
    EasypanelAPIError,
    EasypanelBuildError,
    EasypanelClientError,
    EasypanelDecodeError,
    EasypanelStreamConnectError,
    EasypanelStreamFrameError,
    EasypanelTransportError,
)
from .logging import LogfmtFormatter, setup_logging
from .observability import log_event
from .streaming import LogStream, open_log_stream, stream_url

__all__ = [
    # Transport
    "EasypanelHTTPClient",
    "RetryConfig",
    # Config
    "EndpointConfig",
    "config_from_env",
    "load_env_config",
    # Envelope codec
    "encode",
    "decode",
    "decode_input",
    "wrap_response",
    # Exceptions
    "EasypanelClientError",
    "EasypanelBuildError",
    "EasypanelTransportError",
    "EasypanelAPIError",
    "EasypanelDecodeError",
    "EasypanelStreamConnectError",
    "EasypanelStreamFrameError",
    # Streaming
    "LogStream",
    "open_log_stream",
    "stream_url",
    # Logging
    "setup_logging",
    "LogfmtFormatter",
    "log_event",
]
