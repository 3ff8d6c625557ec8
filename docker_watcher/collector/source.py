"""Docker engine event stream adapter.

DockerEventSource turns the blocking ``DockerClient.events()`` stream into an
async iterator of ``RuntimeEvent | TransportError`` items, delivered in
engine order with exactly one read in flight.

Stream failures do not end the iterator.  The failure is yielded as a
TransportError, then the source waits (exponential back-off, reset on the
next successful read) and re-subscribes from the last delivered
``timeNano`` so no event is delivered twice.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from typing import Any

import docker
import requests
import structlog

from docker_watcher.errors import TransportError
from docker_watcher.models.config import ReconnectConfig
from docker_watcher.models.events import RuntimeEvent

_log = structlog.get_logger(component="collector.source")

_STREAM_ERRORS = (docker.errors.DockerException, requests.exceptions.RequestException, ValueError)


def _since_param(time_nano: int) -> str | None:
    """Format a nanosecond timestamp as the engine's ``since`` filter."""
    if not time_nano:
        return None
    seconds, nanos = divmod(time_nano, 1_000_000_000)
    return f"{seconds}.{nanos:09d}"


class DockerEventSource:
    """Lazy, infinite sequence of engine events and transport errors.

    Args:
        client:    A ``docker.DockerClient`` (or compatible double).
        reconnect: Back-off settings for re-subscribing after a failure.
    """

    def __init__(self, client: Any, reconnect: ReconnectConfig | None = None) -> None:
        self._client = client
        self._reconnect = reconnect or ReconnectConfig()
        self._stream: Any = None
        self._last_time_nano = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Stop the source.  Closing the open stream unblocks the reader thread."""
        self._closed = True
        self._close_stream()

    async def messages(self) -> AsyncIterator[RuntimeEvent | TransportError]:
        """Yield engine events and transport errors until ``close()`` is called."""
        delay = self._reconnect.initial_delay
        while not self._closed:
            try:
                self._stream = await asyncio.to_thread(
                    self._client.events,
                    decode=True,
                    since=_since_param(self._last_time_nano),
                )
                _log.info("listening for docker events", since=self._last_time_nano or None)
                async for event in self._read(self._stream):
                    delay = self._reconnect.initial_delay
                    yield event
                if self._closed:
                    return
                error = TransportError("event stream closed by the engine")
            except _STREAM_ERRORS as exc:
                if self._closed:
                    return
                error = TransportError(f"event stream failed: {exc}", cause=exc)
            finally:
                self._close_stream()

            yield error
            _log.info("reconnecting to event stream", delay_seconds=delay)
            await asyncio.sleep(delay)
            delay = min(delay * 2, self._reconnect.max_delay)

    async def _read(self, stream: Any) -> AsyncIterator[RuntimeEvent]:
        while not self._closed:
            payload = await asyncio.to_thread(next, stream, None)
            if payload is None:
                return
            event = RuntimeEvent.from_dict(payload)
            if event.time_nano and event.time_nano <= self._last_time_nano:
                _log.debug("skipping replayed event", time_nano=event.time_nano)
                continue
            self._last_time_nano = max(self._last_time_nano, event.time_nano)
            yield event

    def _close_stream(self) -> None:
        stream, self._stream = self._stream, None
        if stream is not None:
            try:
                stream.close()
            except Exception as exc:  # noqa: BLE001
                _log.debug("event stream close raised", error=str(exc))
