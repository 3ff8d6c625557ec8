"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class OutputKind(StrEnum):
    """Where reports are sent."""

    DATADOG = "datadog"
    STDOUT = "stdout"


@dataclass(frozen=True)
class StatsdConfig:
    """DogStatsD listener address.

    Either ``host``/``port`` (UDP) or ``socket_path`` (Unix domain socket)
    is used, never both.
    """

    host: str = "localhost"
    port: int = 8125
    socket_path: str = ""

    @property
    def address(self) -> str:
        if self.socket_path:
            return f"unix://{self.socket_path}"
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class ReconnectConfig:
    """Event stream reconnect back-off."""

    initial_delay: float = 1.0
    max_delay: float = 30.0


@dataclass(frozen=True)
class DebugConfig:
    """Raw event / inspect payload dump."""

    enabled: bool = False
    pretty: bool = False


@dataclass(frozen=True)
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    format: str = "json"


@dataclass(frozen=True)
class WatcherConfig:
    """Top-level docker-watcher configuration."""

    output: OutputKind = OutputKind.DATADOG
    statsd: StatsdConfig = field(default_factory=StatsdConfig)
    reconnect: ReconnectConfig = field(default_factory=ReconnectConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)
    log: LogConfig = field(default_factory=LogConfig)
    metrics_port: int = 0
