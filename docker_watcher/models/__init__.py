"""Core data structures for docker-watcher."""

from docker_watcher.models.config import (
    DebugConfig,
    LogConfig,
    OutputKind,
    ReconnectConfig,
    StatsdConfig,
    WatcherConfig,
)
from docker_watcher.models.events import (
    Actor,
    ContainerEvent,
    EventAction,
    InspectResult,
    RuntimeEvent,
)

__all__ = [
    "Actor",
    "ContainerEvent",
    "DebugConfig",
    "EventAction",
    "InspectResult",
    "LogConfig",
    "OutputKind",
    "ReconnectConfig",
    "RuntimeEvent",
    "StatsdConfig",
    "WatcherConfig",
]
