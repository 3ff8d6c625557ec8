"""Shared fixtures for docker-watcher integration tests.

Provides engine-shaped payload factories and in-memory doubles for the
event source, inspector and sink so the watch loop can be exercised end to
end without a Docker engine or a DogStatsD agent.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from docker_watcher.errors import TransportError
from docker_watcher.models.events import ContainerEvent, InspectResult, RuntimeEvent
from docker_watcher.notifications.manager import ReportSink

# ---------------------------------------------------------------------------
# Payload factories
# ---------------------------------------------------------------------------


def make_payload(
    action: str = "die",
    container_id: str = "abc123",
    name: str = "web1",
    image: str = "nginx:latest",
    exit_code: str | None = "137",
    type_: str = "container",
    from_: str = "nginx",
    time_nano: int = 1_700_000_000_000_000_000,
    extra_attributes: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Create a decoded engine event payload with sensible defaults."""
    attributes: dict[str, str] = {"name": name, "image": image}
    if exit_code is not None:
        attributes["exitCode"] = exit_code
    attributes.update(extra_attributes or {})
    return {
        "Type": type_,
        "Action": action,
        "Actor": {"ID": container_id, "Attributes": attributes},
        "from": from_,
        "id": container_id,
        "status": action,
        "time": time_nano // 1_000_000_000,
        "timeNano": time_nano,
    }


def make_event(**kwargs: Any) -> RuntimeEvent:
    """Create a RuntimeEvent; accepts the same arguments as make_payload."""
    return RuntimeEvent.from_dict(make_payload(**kwargs))


def make_inspection(
    cmd: list[str] | None = None,
    labels: dict[str, str] | None = None,
    status: str = "exited",
) -> InspectResult:
    """Create an InspectResult backed by an inspect-shaped payload."""
    return InspectResult.from_dict(
        {
            "Config": {
                "Cmd": cmd if cmd is not None else ["nginx", "-g", "daemon off;"],
                "Labels": labels if labels is not None else {"env": "prod"},
            },
            "State": {"Status": status, "ExitCode": 137},
        }
    )


# ---------------------------------------------------------------------------
# Doubles
# ---------------------------------------------------------------------------


class FakeEventSource:
    """Yields a fixed list of messages, then optionally blocks until closed."""

    def __init__(
        self,
        messages: list[RuntimeEvent | TransportError],
        block: bool = False,
    ) -> None:
        self._messages = list(messages)
        self._block = block
        self._closed_event = asyncio.Event()
        self.closed = False

    async def messages(self) -> AsyncIterator[RuntimeEvent | TransportError]:
        for message in self._messages:
            if self.closed:
                return
            yield message
        if self._block:
            await self._closed_event.wait()

    def close(self) -> None:
        self.closed = True
        self._closed_event.set()


class RecordingSink(ReportSink):
    """Keeps every report it receives."""

    def __init__(self) -> None:
        self.reports: list[ContainerEvent] = []

    @property
    def sink_name(self) -> str:
        return "recording"

    async def send(self, report: ContainerEvent) -> None:
        self.reports.append(report)


def make_inspector(result: InspectResult | None = None, error: Exception | None = None) -> MagicMock:
    inspector = MagicMock()
    if error is not None:
        inspector.inspect = AsyncMock(side_effect=error)
    else:
        inspector.inspect = AsyncMock(return_value=result or make_inspection())
    return inspector


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


class FakeStream:
    """Stands in for docker's CancellableStream: iterable, closable, may raise."""

    def __init__(self, items: list[Any]) -> None:
        self._items = list(items)
        self.closed = False

    def __iter__(self) -> FakeStream:
        return self

    def __next__(self) -> Any:
        if self.closed or not self._items:
            raise StopIteration
        item = self._items.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    def close(self) -> None:
        self.closed = True
