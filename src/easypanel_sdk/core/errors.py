from __future__ import annotations

from typing import Any, Dict, Optional


class EasypanelClientError(Exception):
    """Base error for client failures."""


class EasypanelBuildError(EasypanelClientError, ValueError):
    """Request could not be built (bad endpoint, payload or resource kind)."""


class EasypanelTransportError(EasypanelClientError):
    """
    No classifiable response was obtained.
    - cause: last underlying exception (connection, timeout, read failure)
    - last_status: status code when the retry budget ran out on a 5xx
    """

    def __init__(
        self,
        message: str,
        *,
        cause: Optional[BaseException] = None,
        last_status: Optional[int] = None,
    ):
        super().__init__(message)
        self.cause = cause
        self.last_status = last_status


class EasypanelAPIError(EasypanelClientError):
    """Non-2xx response decoded (best effort) from the server."""

    def __init__(
        self,
        *,
        status_code: int,
        error_message: str = "",
        ok: Optional[bool] = None,
        response_json: Optional[Dict[str, Any]] = None,
    ):
        self.status_code = status_code
        self.error_message = error_message
        self.ok = ok
        self.response_json = response_json
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.error_message:
            return self.error_message
        return "easypanel: unknown error"


class EasypanelDecodeError(EasypanelClientError):
    """2xx response whose body does not match the expected envelope or type."""


class EasypanelStreamConnectError(EasypanelClientError):
    """Log stream handshake failed; no stream was produced."""


class EasypanelStreamFrameError(EasypanelClientError):
    """A log stream frame could not be decoded."""


__all__ = [
    "EasypanelClientError",
    "EasypanelBuildError",
    "EasypanelTransportError",
    "EasypanelAPIError",
    "EasypanelDecodeError",
    "EasypanelStreamConnectError",
    "EasypanelStreamFrameError",
]
