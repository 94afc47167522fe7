"""
Live service log streaming over WebSocket.

A single producer task owns the connection and is its only reader. Messages
are handed to the consumer through a capacity-1 queue, so the producer
blocks until the previous message has been taken.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Optional, Union
from urllib.parse import urlencode

from pydantic import ValidationError
from websockets.asyncio.client import ClientConnection, connect
from websockets.exceptions import (
    ConnectionClosedError,
    InvalidHandshake,
    InvalidURI,
    WebSocketException,
)

from ..models import LogMessage, StreamLogsParams
from ..routes import STREAM_LOGS_PATH
from .config import EndpointConfig
from .errors import EasypanelStreamConnectError, EasypanelStreamFrameError
from .logging import redact
from .observability import log_event

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

_EOF = object()


def stream_url(config: EndpointConfig, params: StreamLogsParams) -> str:
    """Derive the ws(s):// URL for a log session from the HTTP endpoint."""
    if config.is_secure:
        base = "wss://" + config.endpoint[len("https://") :]
    else:
        base = "ws://" + config.endpoint[len("http://") :]
    query = urlencode(
        {
            "token": params.token,
            "service": params.service_id,
            "compose": "true" if params.compose else "false",
        }
    )
    return f"{base}{STREAM_LOGS_PATH}?{query}"


def decode_log_frame(frame: Union[str, bytes]) -> LogMessage:
    try:
        return LogMessage.model_validate_json(frame)
    except ValidationError as exc:
        raise EasypanelStreamFrameError(f"Undecodable log frame: {exc}") from exc


class LogStream:
    """
    Forward-only, non-restartable sequence of LogMessage.

    Use as ``async with`` / ``async for``. Ends when the peer closes, a frame
    can't be decoded, `cancel` is set, or aclose() is called.
    """

    def __init__(
        self,
        connection: ClientConnection,
        *,
        service: str = "",
        cancel: Optional[asyncio.Event] = None,
        strict_frames: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        self._connection = connection
        self.service = service
        self._cancel = cancel
        self.strict_frames = strict_frames
        self.log = logger or logging.getLogger("easypanel_sdk.streaming")

        self._queue: asyncio.Queue = asyncio.Queue(maxsize=1)
        self._producer: Optional[asyncio.Task] = None
        self._watcher: Optional[asyncio.Task] = None
        self._error: Optional[EasypanelStreamFrameError] = None
        self._done = False
        self.delivered = 0

    def start(self) -> None:
        if self._producer is not None:
            raise RuntimeError("LogStream already started")
        self._producer = asyncio.create_task(self._pump())
        if self._cancel is not None:
            self._watcher = asyncio.create_task(self._watch_cancel(self._cancel))

    @property
    def closed(self) -> bool:
        return self._done

    def _cancelled(self) -> bool:
        return self._cancel is not None and self._cancel.is_set()

    async def _watch_cancel(self, cancel: asyncio.Event) -> None:
        await cancel.wait()
        log_event(
            "stream.cancelled",
            self.log,
            service=self.service,
            messages=self.delivered,
        )
        if self._producer is not None:
            self._producer.cancel()
        # wake a consumer blocked on get(); drop anything queued before the cancel
        self._drain()
        self._queue.put_nowait(_EOF)

    async def _pump(self) -> None:
        cancelled = False
        reason = "peer_closed"
        try:
            async for frame in self._connection:
                try:
                    message = decode_log_frame(frame)
                except EasypanelStreamFrameError as exc:
                    log_event(
                        "stream.bad_frame",
                        self.log,
                        level=logging.WARNING,
                        service=self.service,
                    )
                    if self.strict_frames:
                        self._error = exc
                    reason = "bad_frame"
                    break
                await self._queue.put(message)
        except ConnectionClosedError:
            reason = "connection_dropped"
        except (OSError, WebSocketException):
            reason = "read_error"
        except asyncio.CancelledError:
            cancelled = True
            reason = "cancelled"
            raise
        finally:
            log_event("stream.closed", self.log, service=self.service, reason=reason)
            await asyncio.shield(self._connection.close())
            if not cancelled:
                await self._queue.put(_EOF)

    def _drain(self) -> None:
        while not self._queue.empty():
            self._queue.get_nowait()

    def __aiter__(self) -> AsyncIterator[LogMessage]:
        return self

    async def __anext__(self) -> LogMessage:
        if self._done or self._cancelled():
            await self._finish()
            raise StopAsyncIteration

        item = await self._queue.get()
        if item is _EOF or self._cancelled():
            await self._finish()
            if self._error is not None:
                error, self._error = self._error, None
                raise error
            raise StopAsyncIteration

        self.delivered += 1
        return item

    async def _finish(self) -> None:
        if self._done:
            return
        self._done = True
        await self._stop_tasks()

    async def _stop_tasks(self) -> None:
        for task in (self._watcher, self._producer):
            if task is None or task.done():
                continue
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                current = asyncio.current_task()
                if current is not None and current.cancelling():
                    raise

    async def aclose(self) -> None:
        """Stop delivery, release the connection; safe to call more than once."""
        self._done = True
        await self._stop_tasks()

    async def __aenter__(self) -> "LogStream":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


async def open_log_stream(
    config: EndpointConfig,
    params: StreamLogsParams,
    *,
    cancel: Optional[asyncio.Event] = None,
    strict_frames: bool = False,
    open_timeout: float = 15.0,
    logger: Optional[logging.Logger] = None,
) -> LogStream:
    """
    Connect to the log stream of one service and start delivering messages.

    Raises EasypanelStreamConnectError if the handshake fails; no stream is
    produced in that case.
    """
    url = stream_url(config, params)
    log = logger or logging.getLogger("easypanel_sdk.streaming")
    try:
        connection = await asyncio.wait_for(
            connect(url, open_timeout=None, close_timeout=5, max_size=None),
            timeout=open_timeout,
        )
    except asyncio.TimeoutError as err:
        raise EasypanelStreamConnectError("Log stream connection timed out") from err
    except (InvalidHandshake, InvalidURI) as err:
        raise EasypanelStreamConnectError(
            f"Log stream handshake failed: {err}"
        ) from err
    except (OSError, WebSocketException) as err:
        raise EasypanelStreamConnectError(
            f"Log stream connection failed: {err}"
        ) from err

    log_event(
        "stream.open",
        log,
        service=params.service_id,
        compose=params.compose,
        url=redact(url),
    )
    stream = LogStream(
        connection,
        service=params.service_id,
        cancel=cancel,
        strict_frames=strict_frames,
        logger=log,
    )
    stream.start()
    return stream


__all__ = [
    "LogStream",
    "open_log_stream",
    "stream_url",
    "decode_log_frame",
]
