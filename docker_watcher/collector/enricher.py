"""Container metadata lookup.

ContainerInspector fetches the current configuration of a container with a
blocking ``inspect_container`` call run in a worker thread.  There is no
retry and no partial result: any failure becomes an EnrichmentError, which
is fatal to the daemon.
"""

from __future__ import annotations

import asyncio
from typing import Any

import docker
import requests
import structlog

from docker_watcher.errors import EnrichmentError
from docker_watcher.models.events import InspectResult

_log = structlog.get_logger(component="collector.enricher")


class ContainerInspector:
    """Looks up command, labels and status for a container id."""

    def __init__(self, client: Any) -> None:
        self._api = client.api

    async def inspect(self, container_id: str) -> InspectResult:
        """Return the inspect result for *container_id*.

        Raises:
            EnrichmentError: the engine lookup failed for any reason.
        """
        try:
            payload = await asyncio.to_thread(self._api.inspect_container, container_id)
        except (docker.errors.DockerException, requests.exceptions.RequestException, ValueError) as exc:
            raise EnrichmentError(
                f"inspect failed for container {container_id}: {exc}",
                container_id=container_id,
            ) from exc

        result = InspectResult.from_dict(payload)
        _log.debug(
            "container inspected",
            container_id=container_id,
            status=result.status,
            label_count=len(result.labels),
        )
        return result
