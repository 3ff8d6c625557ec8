"""Report sinks for docker-watcher.

Exports:
    ReportSink    -- Abstract base for all sinks.
    DogStatsdSink -- Datadog events through the DogStatsD agent.
    ConsoleSink   -- Plain text on stdout.
    build_sink    -- Factory used by the application bootstrap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from datadog import DogStatsd

from docker_watcher.models.config import OutputKind
from docker_watcher.notifications.console import ConsoleSink
from docker_watcher.notifications.dogstatsd import DogStatsdSink
from docker_watcher.notifications.manager import ReportSink

if TYPE_CHECKING:
    from docker_watcher.models.config import StatsdConfig, WatcherConfig

_log = structlog.get_logger(component="notifications")

__all__ = [
    "ConsoleSink",
    "DogStatsdSink",
    "ReportSink",
    "build_sink",
    "build_statsd_client",
]


def build_statsd_client(config: StatsdConfig) -> DogStatsd:
    """Create a DogStatsd client for a UDP address or a Unix socket."""
    if config.socket_path:
        return DogStatsd(socket_path=config.socket_path)
    return DogStatsd(host=config.host, port=config.port)


def build_sink(config: WatcherConfig) -> ReportSink:
    """Build the sink selected by ``config.output``."""
    if config.output == OutputKind.DATADOG:
        _log.info("datadog sink enabled", statsd=config.statsd.address)
        return DogStatsdSink(build_statsd_client(config.statsd))
    _log.info("stdout sink enabled")
    return ConsoleSink()
