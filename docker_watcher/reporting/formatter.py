"""Report rendering.

Bodies are an explicit field list in a fixed order, one ``Label: value``
line each, every line newline-terminated::

    Name: web1
    ID: abc123
    Image: nginx:latest
    Cmd: nginx -g daemon off;
    Exit Code: 137
"""

from __future__ import annotations

from docker_watcher.models.events import ContainerEvent, EventAction, InspectResult, RuntimeEvent

_TITLE_TEMPLATES: dict[EventAction, str] = {
    EventAction.DIE: "{source} container exited non-zero: {exit_code}",
    EventAction.EXEC_DIE: "{source} container process exited non-zero: {exit_code}",
}


def _render_body(fields: list[tuple[str, str]]) -> str:
    return "".join(f"{label}: {value}\n" for label, value in fields)


def render_tags(labels: dict[str, str]) -> tuple[str, ...]:
    """Render container labels as ``key=value`` tags, sorted by key."""
    return tuple(f"{key}={value}" for key, value in sorted(labels.items()))


def format_report(event: RuntimeEvent, inspection: InspectResult) -> ContainerEvent:
    """Build the report for a reportable *event* from its inspect result.

    Raises:
        ValueError: the event action is not a container exit action.
    """
    action = EventAction(event.action)
    attributes = event.actor.attributes
    name = attributes.get("name", "")
    image = attributes.get("image", "")
    exit_code = attributes.get("exitCode", "")
    source = event.from_ or image

    body = _render_body(
        [
            ("Name", name),
            ("ID", event.actor.id),
            ("Image", image),
            ("Cmd", inspection.command),
            ("Exit Code", exit_code),
        ]
    )
    return ContainerEvent(
        container_id=event.actor.id,
        container_name=name,
        image=image,
        cmd=inspection.command,
        exit_code=exit_code,
        action=action,
        title=_TITLE_TEMPLATES[action].format(source=source, exit_code=exit_code),
        body=body,
        status=inspection.status,
        tags=render_tags(inspection.labels),
    )


def render_console(report: ContainerEvent) -> str:
    """Title line followed by the body, as written by the console sink."""
    return f"{report.title}\n{report.body}"
