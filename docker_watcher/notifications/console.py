"""Standard output sink for docker-watcher."""

from __future__ import annotations

import click
import structlog

from docker_watcher.models.events import ContainerEvent
from docker_watcher.notifications.manager import ReportSink
from docker_watcher.reporting.formatter import render_console

_log = structlog.get_logger(component="notifications.console")


class ConsoleSink(ReportSink):
    """Writes the title and body of each report to stdout.  Never raises."""

    @property
    def sink_name(self) -> str:
        return "stdout"

    async def send(self, report: ContainerEvent) -> None:
        try:
            click.echo(render_console(report))
        except OSError as exc:
            _log.warning("console write failed", container_id=report.container_id, error=str(exc))
