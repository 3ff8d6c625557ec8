"""DogStatsD event sink for docker-watcher.

Each report becomes one Datadog event with:

* ``aggregation_key`` -- the container id, so repeated exits of the same
  container are grouped together;
* ``alert_type``      -- ``error``;
* ``source_type_name`` -- ``DOCKER``;
* ``tags``            -- the container labels as ``key=value``.
"""

from __future__ import annotations

from typing import Any

import structlog

from docker_watcher.errors import SinkError
from docker_watcher.models.events import ContainerEvent
from docker_watcher.notifications.manager import ReportSink

_log = structlog.get_logger(component="notifications.dogstatsd")

ALERT_TYPE = "error"
SOURCE_TYPE_NAME = "DOCKER"


class DogStatsdSink(ReportSink):
    """Sends reports as events through a ``datadog.DogStatsd`` client.

    Args:
        statsd: A configured DogStatsd client.
    """

    def __init__(self, statsd: Any) -> None:
        self._statsd = statsd

    @property
    def sink_name(self) -> str:
        return "datadog"

    async def send(self, report: ContainerEvent) -> None:
        """Emit *report* as one Datadog event.

        Raises:
            SinkError: the agent socket could not be opened, or the event
                payload was rejected by the client.
        """
        # event() logs and drops the packet on socket errors; get_socket() raises them.
        try:
            self._statsd.get_socket()
            self._statsd.event(
                report.title,
                report.body,
                alert_type=ALERT_TYPE,
                aggregation_key=report.container_id,
                source_type_name=SOURCE_TYPE_NAME,
                tags=list(report.tags),
            )
        except (OSError, ValueError) as exc:
            raise SinkError(
                f"dogstatsd event failed for container {report.container_id}: {exc}",
                container_id=report.container_id,
            ) from exc
        _log.info("event sent to dogstatsd", container_id=report.container_id, title=report.title)
