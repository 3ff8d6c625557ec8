"""Decides whether an engine event is a reportable container exit."""

from __future__ import annotations

from docker_watcher.models.events import EventAction, RuntimeEvent

_CONTAINER_TYPE = "container"
_EXIT_ACTIONS = frozenset(action.value for action in EventAction)


def is_reportable(event: RuntimeEvent) -> bool:
    """Return True for container ``die``/``exec_die`` events with a non-zero exit code.

    An event without an ``exitCode`` attribute is not reportable.
    """
    if event.type != _CONTAINER_TYPE or event.action not in _EXIT_ACTIONS:
        return False
    exit_code = event.actor.attributes.get("exitCode")
    return exit_code is not None and exit_code != "0"
