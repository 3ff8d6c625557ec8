"""Prometheus counters for docker-watcher."""

from __future__ import annotations

from prometheus_client import Counter, start_http_server

events_total = Counter(
    "docker_watcher_events_total",
    "Engine events received, by object type",
    ["type"],
)

reports_total = Counter(
    "docker_watcher_reports_total",
    "Reports handed to a sink",
    ["sink", "success"],
)

transport_errors_total = Counter(
    "docker_watcher_transport_errors_total",
    "Event stream errors and disconnects",
)


def start_metrics_server(port: int) -> None:
    """Expose the default registry over HTTP on *port* (0 disables)."""
    if port > 0:
        start_http_server(port)
