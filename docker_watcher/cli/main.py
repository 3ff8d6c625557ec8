"""``docker-watcher`` command."""

from __future__ import annotations

import asyncio

import click

from docker_watcher import __version__
from docker_watcher.config import default_statsd_host, load_config
from docker_watcher.models.config import OutputKind

_EPILOG = """\b
Environment Variables:
  DEBUG - enable debug mode. set to any non-blank string to enable. set to "pretty" for formatted JSON
  DOGSTATSD_HOST - default for --statsd-host
  DOCKER_HOST, DOCKER_TLS_VERIFY, DOCKER_CERT_PATH - Docker engine connection
  DOCKER_WATCHER_LOG_LEVEL - debug, info, warning or error (default info)
  DOCKER_WATCHER_LOG_FORMAT - json, console or auto (default json)
"""


@click.command(
    name="docker-watcher",
    epilog=_EPILOG,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("--version", "-version", "show_version", is_flag=True, help="show version")
@click.option(
    "--statsd-host",
    "-statsd-host",
    default=default_statsd_host,
    show_default="$DOGSTATSD_HOST or localhost:8125",
    help="address:port for DataDogStatsD listener",
)
@click.option(
    "--output",
    "-output",
    type=click.Choice([kind.value for kind in OutputKind], case_sensitive=False),
    default=OutputKind.DATADOG.value,
    show_default=True,
    help="where to send events",
)
@click.option(
    "--metrics-port",
    type=click.IntRange(0, 65535),
    default=None,
    help="port for the Prometheus metrics endpoint (0 disables)",
)
def cli(show_version: bool, statsd_host: str, output: str, metrics_port: int | None) -> None:
    """Report containers that exit non-zero, from the Docker event stream."""
    if show_version:
        click.echo(__version__)
        return

    try:
        config = load_config(statsd_host=statsd_host, output=output, metrics_port=metrics_port)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    from docker_watcher.app import main

    asyncio.run(main(config))
