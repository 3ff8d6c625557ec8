"""Report sink abstraction for docker-watcher.

ReportSink -- ABC every sink must implement.  A sink is chosen once at
              startup; every reportable container exit goes to that sink.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from docker_watcher.models.events import ContainerEvent


class ReportSink(ABC):
    """Abstract base class for all report sinks.

    ``send`` either delivers the report or raises SinkError.  Sinks that
    cannot fail the process (the console) handle their own errors.
    """

    @property
    @abstractmethod
    def sink_name(self) -> str:
        """Human-readable sink identifier used in metrics and logs."""

    @abstractmethod
    async def send(self, report: ContainerEvent) -> None:
        """Deliver *report* via this sink.

        Raises:
            SinkError: the report could not be delivered.
        """
