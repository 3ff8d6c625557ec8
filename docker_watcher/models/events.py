"""Core event data structures and enumerations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class EventAction(StrEnum):
    """Container actions that can produce a report."""

    DIE = "die"
    EXEC_DIE = "exec_die"


@dataclass(frozen=True)
class Actor:
    """The object an engine event is about (a container, image, network...)."""

    id: str
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RuntimeEvent:
    """One decoded message from the Docker engine event stream.

    Owned by the event source; read-only to every other component.
    """

    type: str
    action: str
    actor: Actor
    from_: str = ""
    time: int = 0
    time_nano: int = 0
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> RuntimeEvent:
        """Build a RuntimeEvent from the engine's JSON payload.

        Newer API versions carry the container id only in ``Actor.ID``;
        older ones also set the top-level ``id``, used as a fallback.
        """
        actor = payload.get("Actor") or {}
        attributes = actor.get("Attributes") or {}
        return cls(
            type=str(payload.get("Type", "")),
            action=str(payload.get("Action", "")),
            actor=Actor(
                id=str(actor.get("ID") or payload.get("id", "")),
                attributes={str(k): str(v) for k, v in attributes.items()},
            ),
            from_=str(payload.get("from", "")),
            time=int(payload.get("time", 0) or 0),
            time_nano=int(payload.get("timeNano", 0) or 0),
            raw=payload,
        )


@dataclass(frozen=True)
class InspectResult:
    """The subset of ``docker inspect`` output used for enrichment."""

    cmd: list[str] = field(default_factory=list)
    labels: dict[str, str] = field(default_factory=dict)
    status: str = ""
    raw: dict[str, Any] = field(default_factory=dict)

    @property
    def command(self) -> str:
        return " ".join(self.cmd)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> InspectResult:
        config = payload.get("Config") or {}
        state = payload.get("State") or {}
        return cls(
            cmd=[str(part) for part in config.get("Cmd") or []],
            labels={str(k): str(v) for k, v in (config.get("Labels") or {}).items()},
            status=str(state.get("Status", "")),
            raw=payload,
        )


@dataclass(frozen=True)
class ContainerEvent:
    """A reportable container exit, ready to be handed to a sink.

    Produced by the report formatter after enrichment succeeds, consumed by
    exactly one sink, then discarded.
    """

    container_id: str
    container_name: str
    image: str
    cmd: str
    exit_code: str
    action: EventAction
    title: str
    body: str
    status: str = ""
    tags: tuple[str, ...] = ()
