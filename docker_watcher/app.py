"""Application bootstrap and watch loop for docker-watcher.

Startup order: config → logging → metrics → Docker client → sink → watch loop

The watch loop handles one engine message at a time.  Transport errors are
logged and the loop continues; fatal errors (inspect, sink, debug dump)
propagate out of ``WatcherApp.run()`` to ``serve()``, the only place that
decides to end the process.
"""

from __future__ import annotations

import asyncio
import signal
from typing import TYPE_CHECKING, Any

import click

from docker_watcher.debug import dump_debug
from docker_watcher.errors import FatalWatcherError, SinkError, TransportError
from docker_watcher.models.config import DebugConfig, WatcherConfig
from docker_watcher.models.events import RuntimeEvent
from docker_watcher.observability.logging import container_context, get_logger, setup_logging
from docker_watcher.observability.metrics import (
    events_total,
    reports_total,
    start_metrics_server,
    transport_errors_total,
)
from docker_watcher.reporting import format_report, is_reportable

if TYPE_CHECKING:
    from docker_watcher.collector import ContainerInspector, DockerEventSource
    from docker_watcher.notifications import ReportSink


class _ComponentError(Exception):
    """Raised when a mandatory component fails to start."""

    def __init__(self, component: str, cause: Exception) -> None:
        super().__init__(f"Component '{component}' failed to start: {cause}")
        self.component = component
        self.cause = cause


class WatcherApp:
    """Composition root: source → filter → inspector → formatter → sink.

    No state outlives a single message; the loop runs until the source is
    closed or a fatal error is raised.
    """

    def __init__(
        self,
        source: DockerEventSource,
        inspector: ContainerInspector,
        sink: ReportSink,
        debug: DebugConfig | None = None,
    ) -> None:
        self._source = source
        self._inspector = inspector
        self._sink = sink
        self._debug = debug or DebugConfig()
        self._log = get_logger("app")

    @property
    def source(self) -> DockerEventSource:
        return self._source

    @property
    def sink(self) -> ReportSink:
        return self._sink

    async def run(self) -> None:
        """Consume the event source until it is closed.

        Raises:
            FatalWatcherError: inspect, sink or debug dump failed.
        """
        self._log.info("watch loop started", sink=self._sink.sink_name)
        async for message in self._source.messages():
            await self.handle(message)
        self._log.info("watch loop ended")

    async def handle(self, message: RuntimeEvent | TransportError) -> None:
        """Process one message from the event source."""
        if isinstance(message, TransportError):
            transport_errors_total.inc()
            self._log.error("event stream error", error=str(message))
            return
        await self._handle_event(message)

    def stop(self) -> None:
        self._source.close()

    async def _handle_event(self, event: RuntimeEvent) -> None:
        events_total.labels(type=event.type or "unknown").inc()
        if not is_reportable(event):
            return

        with container_context(event.actor.id, event.action):
            self._log.debug("container exited non-zero", exit_code=event.actor.attributes.get("exitCode"))
            inspection = await self._inspector.inspect(event.actor.id)
            dump_debug(self._debug, event, inspection)
            report = format_report(event, inspection)

            try:
                await self._sink.send(report)
            except SinkError:
                reports_total.labels(sink=self._sink.sink_name, success="false").inc()
                raise
            reports_total.labels(sink=self._sink.sink_name, success="true").inc()


def build_app(config: WatcherConfig, docker_client: Any = None) -> WatcherApp:
    """Wire the real Docker client and the configured sink.

    Raises:
        _ComponentError: the Docker client or the sink could not be created.
    """
    from docker_watcher.collector import ContainerInspector, DockerEventSource
    from docker_watcher.notifications import build_sink

    log = get_logger("app")
    if docker_client is None:
        try:
            import docker

            docker_client = docker.from_env(version="auto")
            log.info("docker client configured", api_version=docker_client.api.api_version)
        except Exception as exc:
            raise _ComponentError("docker_client", exc) from exc

    try:
        sink = build_sink(config)
    except Exception as exc:
        raise _ComponentError("sink", exc) from exc

    return WatcherApp(
        source=DockerEventSource(docker_client, config.reconnect),
        inspector=ContainerInspector(docker_client),
        sink=sink,
        debug=config.debug,
    )


def _docker_watcher_version() -> str:
    from docker_watcher import __version__

    return __version__


# ---------------------------------------------------------------------------
# Async entrypoints
# ---------------------------------------------------------------------------


async def serve(app: WatcherApp) -> None:
    """Run *app* until a signal arrives or a fatal error occurs.

    SIGINT/SIGTERM close the event source and end the loop normally.  A
    FatalWatcherError is logged and converted into ``SystemExit(1)``.
    """
    log = get_logger("app")
    loop = asyncio.get_running_loop()
    run_task = asyncio.create_task(app.run(), name="watch-loop")
    shutdown_requested = False

    def _request_shutdown() -> None:
        nonlocal shutdown_requested
        if shutdown_requested or run_task.done():
            return
        shutdown_requested = True
        click.echo("\r- Ctrl+C pressed, exiting")
        app.stop()
        run_task.cancel()

    signals = (signal.SIGTERM, signal.SIGINT)
    for sig in signals:
        loop.add_signal_handler(sig, _request_shutdown)

    try:
        await run_task
    except asyncio.CancelledError:
        if not shutdown_requested:
            raise
        log.info("docker-watcher stopped")
    except FatalWatcherError as exc:
        log.critical(
            "fatal error, exiting",
            error=str(exc),
            error_type=type(exc).__name__,
            container_id=exc.container_id,
        )
        app.stop()
        raise SystemExit(1) from exc
    finally:
        for sig in signals:
            loop.remove_signal_handler(sig)


async def main(config: WatcherConfig) -> None:
    """Configure logging and metrics, build the app and serve it."""
    setup_logging(config.log.level, config.log.format)
    log = get_logger("app")
    log.info(
        "docker-watcher starting",
        version=_docker_watcher_version(),
        output=config.output.value,
        debug=config.debug.enabled,
    )

    try:
        start_metrics_server(config.metrics_port)
        app = build_app(config)
    except _ComponentError as exc:
        log.critical("fatal startup error", component=exc.component, error=str(exc.cause))
        raise SystemExit(1) from exc
    except OSError as exc:
        log.critical("fatal startup error", component="metrics", error=str(exc))
        raise SystemExit(1) from exc

    await serve(app)
