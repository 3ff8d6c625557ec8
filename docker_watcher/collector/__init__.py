"""Collector package for docker-watcher.

Talks to the Docker engine: reads the event stream and looks up container
metadata.

Submodules
----------
source   -- DockerEventSource: event stream reader, reconnect with back-off.
enricher -- ContainerInspector: blocking inspect-by-id lookup.
"""

from docker_watcher.collector.enricher import ContainerInspector
from docker_watcher.collector.source import DockerEventSource

__all__ = ["ContainerInspector", "DockerEventSource"]
