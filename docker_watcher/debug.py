"""Raw payload dump enabled by the ``DEBUG`` environment variable."""

from __future__ import annotations

import json

import click

from docker_watcher.errors import DebugDumpError
from docker_watcher.models.config import DebugConfig
from docker_watcher.models.events import InspectResult, RuntimeEvent


def render_debug_dump(event: RuntimeEvent, inspection: InspectResult, pretty: bool = False) -> str:
    """JSON-encode the inspect payload followed by the raw event payload.

    Raises:
        DebugDumpError: either payload is not JSON-serialisable.
    """
    indent = 2 if pretty else None
    try:
        inspect_json = json.dumps(inspection.raw, indent=indent)
        event_json = json.dumps(event.raw, indent=indent)
    except (TypeError, ValueError) as exc:
        raise DebugDumpError(
            f"could not encode debug payload: {exc}",
            container_id=event.actor.id,
        ) from exc
    return f"\n{inspect_json}\n{event_json}\n"


def dump_debug(config: DebugConfig, event: RuntimeEvent, inspection: InspectResult) -> None:
    if not config.enabled:
        return
    click.echo(render_debug_dump(event, inspection, pretty=config.pretty), nl=False)
