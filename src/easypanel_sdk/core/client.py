import asyncio
import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from .config import EndpointConfig, config_from_env
from .envelope import decode, encode
from .errors import (
    EasypanelAPIError,
    EasypanelBuildError,
    EasypanelTransportError,
)


@dataclass(frozen=True)
class RetryConfig:
    max_attempts: int = 2  # first try + one retry
    delay_seconds: float = 1.0  # fixed, no backoff
    retry_status_min: int = 500
    retry_status_max: int = 599

    def is_retryable_status(self, status_code: int) -> bool:
        return self.retry_status_min <= status_code <= self.retry_status_max


class EasypanelHTTPClient:
    """
    Shared HTTP transport for the Easypanel tRPC API.
    - Wraps inputs in the {"json": ...} envelope and unwraps result.data.json
    - Sends the token verbatim in Authorization on every attempt
    - One retry on 5xx / network failures after a fixed delay
    - No business logic; resource facades own routes and payload types
    """

    def __init__(
        self,
        config: EndpointConfig,
        *,
        timeout_seconds: float = 30.0,
        retry: Optional[RetryConfig] = None,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        self._config = config
        self.timeout_seconds = timeout_seconds
        self.retry = retry if retry is not None else RetryConfig()
        if self.retry.max_attempts < 1:
            raise ValueError("retry.max_attempts must be >= 1")
        self.log = logger or logging.getLogger("easypanel_sdk.client")

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            base_url=config.endpoint,
            headers={
                "Accept": "application/json",
            },
            timeout=timeout_seconds,
        )

    @classmethod
    def from_env(cls, **kwargs) -> "EasypanelHTTPClient":
        return cls(config_from_env(), **kwargs)

    @property
    def config(self) -> EndpointConfig:
        return self._config

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "EasypanelHTTPClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def get(
        self,
        route: str,
        input: Any = None,
        *,
        result: Any = None,
        deadline: Optional[float] = None,
    ) -> Any:
        """
        Read call. `input` is always sent as ?input={"json": input}, even when None.
        Returns the decoded value as `result`, or None when `result` is None.
        """
        params = {"input": encode(input).decode("utf-8")}
        return await self.request(
            "GET", route, params=params, result=result, deadline=deadline
        )

    async def post(
        self,
        route: str,
        body: Any = None,
        *,
        result: Any = None,
        deadline: Optional[float] = None,
    ) -> Any:
        """
        Write call. A non-None body is sent as {"json": body}; a None body is
        sent as an empty payload without an envelope.
        """
        content = encode(body) if body is not None else b""
        return await self.request(
            "POST", route, content=content, result=result, deadline=deadline
        )

    async def request(
        self,
        method: str,
        route: str,
        *,
        params: Optional[Dict[str, str]] = None,
        content: Optional[bytes] = None,
        result: Any = None,
        deadline: Optional[float] = None,
    ) -> Any:
        """
        Core request method.
        - `content` is fully materialized so a retry resends identical bytes
        - `deadline` bounds both attempts together (the socket timeout still
          applies per attempt)
        - Raises EasypanelAPIError on non-2xx responses (5xx only once retries
          are left, otherwise EasypanelTransportError)
        - Raises EasypanelDecodeError if a 2xx body doesn't match `result`
        """
        method = method.upper()
        call = self._send(
            method, route, params=params, content=content, result=result
        )
        if deadline is None:
            return await call
        try:
            return await asyncio.wait_for(call, timeout=deadline)
        except asyncio.TimeoutError as exc:
            raise EasypanelTransportError(
                f"Deadline of {deadline}s exceeded calling {method} {route}",
                cause=exc,
            ) from exc

    async def _send(
        self,
        method: str,
        route: str,
        *,
        params: Optional[Dict[str, str]],
        content: Optional[bytes],
        result: Any,
    ) -> Any:
        headers = {"Authorization": self._config.token}
        if method != "GET":
            headers["Content-Type"] = "application/json"

        last_error: Optional[EasypanelTransportError] = None

        for attempt in range(self.retry.max_attempts):
            if attempt:
                self.log.warning(
                    "ep.retry",
                    extra={"method": method, "route": route, "attempt": attempt},
                )
                await asyncio.sleep(self.retry.delay_seconds)

            start = time.perf_counter()
            try:
                resp = await self.http.request(
                    method, route, params=params, content=content, headers=headers
                )
            except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
                raise EasypanelBuildError(
                    f"Cannot build request {method} {route}: {exc}"
                ) from exc
            except httpx.HTTPError as exc:
                last_error = EasypanelTransportError(
                    f"Network/timeout error calling {method} {route}: {exc}",
                    cause=exc,
                )
                self.log.debug(
                    "ep.request",
                    extra={
                        "method": method,
                        "route": route,
                        "status": type(exc).__name__,
                        "attempt": attempt,
                    },
                )
                continue

            duration_ms = int((time.perf_counter() - start) * 1000)
            self.log.debug(
                "ep.request",
                extra={
                    "method": method,
                    "route": route,
                    "status": resp.status_code,
                    "duration_ms": duration_ms,
                    "attempt": attempt,
                },
            )

            if self.retry.is_retryable_status(resp.status_code):
                last_error = EasypanelTransportError(
                    f"Server error {resp.status_code} calling {method} {route}",
                    last_status=resp.status_code,
                )
                continue

            if resp.status_code < 200 or resp.status_code >= 300:
                raise self._to_api_error(resp)

            if result is None:
                return None
            return decode(resp.content, result)

        assert last_error is not None
        if last_error.cause is not None:
            raise last_error from last_error.cause
        raise last_error

    @staticmethod
    def _to_api_error(resp: httpx.Response) -> EasypanelAPIError:
        # Try {"ok": bool, "errorMessage": str}; fall back to raw body text.
        response_json: Optional[Dict[str, Any]] = None
        ok: Optional[bool] = None
        message = ""

        try:
            parsed = json.loads(resp.content) if resp.content else None
        except ValueError:
            parsed = None

        if isinstance(parsed, dict):
            response_json = parsed
            if isinstance(parsed.get("ok"), bool):
                ok = parsed["ok"]
            if isinstance(parsed.get("errorMessage"), str):
                message = parsed["errorMessage"]

        if not message:
            message = resp.text or ""

        return EasypanelAPIError(
            status_code=resp.status_code,
            error_message=message,
            ok=ok,
            response_json=response_json,
        )


__all__ = [
    "EasypanelHTTPClient",
    "RetryConfig",
]
