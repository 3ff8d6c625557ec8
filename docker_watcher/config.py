"""Configuration loading from environment variables and CLI overrides."""

from __future__ import annotations

import os

from docker_watcher.models.config import (
    DebugConfig,
    LogConfig,
    OutputKind,
    ReconnectConfig,
    StatsdConfig,
    WatcherConfig,
)
from docker_watcher.observability.logging import LOG_FORMATS

DEFAULT_STATSD_HOST = "localhost:8125"


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"DOCKER_WATCHER_{key}", default)


def _env_int(key: str, default: int, min_val: int | None = None, max_val: int | None = None) -> int:
    val = int(_env(key, str(default)))
    if min_val is not None:
        val = max(val, min_val)
    if max_val is not None:
        val = min(val, max_val)
    return val


MIN_RECONNECT_DELAY = 0.1


def _env_float(key: str, default: float, min_val: float = 0.0) -> float:
    return max(float(_env(key, str(default))), min_val)


def _reconnect_config() -> ReconnectConfig:
    initial = _env_float("RECONNECT_INITIAL_DELAY", 1.0, min_val=MIN_RECONNECT_DELAY)
    return ReconnectConfig(
        initial_delay=initial,
        max_delay=_env_float("RECONNECT_MAX_DELAY", 30.0, min_val=initial),
    )


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def _validate_log_format(value: str) -> str:
    if value.lower() not in LOG_FORMATS:
        raise ValueError(f"Invalid log format: {value}. Must be one of {list(LOG_FORMATS)}")
    return value.lower()


def _validate_output(value: str) -> OutputKind:
    try:
        return OutputKind(value.lower())
    except ValueError:
        valid = [kind.value for kind in OutputKind]
        raise ValueError(f"Invalid output: {value}. Must be one of {valid}") from None


def default_statsd_host() -> str:
    """The statsd address used when ``--statsd-host`` is not given."""
    return os.environ.get("DOGSTATSD_HOST", "") or DEFAULT_STATSD_HOST


def parse_statsd_host(value: str) -> StatsdConfig:
    """Parse ``host:port``, ``[ipv6]:port`` or ``unix:///path`` into StatsdConfig.

    Raises:
        ValueError: if the address cannot be parsed.
    """
    if value.startswith("unix://"):
        path = value.removeprefix("unix://")
        if not path:
            raise ValueError(f"Invalid statsd socket address: {value!r}")
        return StatsdConfig(socket_path=path)

    host, sep, port_str = value.rpartition(":")
    if not sep or not host or not port_str.isdigit():
        raise ValueError(f"Invalid statsd address (expected address:port): {value!r}")
    port = int(port_str)
    if not 0 < port < 65536:
        raise ValueError(f"Invalid statsd port: {port}")
    return StatsdConfig(host=host.strip("[]"), port=port)


def _debug_config(value: str) -> DebugConfig:
    return DebugConfig(enabled=bool(value), pretty=value == "pretty")


def load_config(
    *,
    statsd_host: str | None = None,
    output: str | None = None,
    metrics_port: int | None = None,
) -> WatcherConfig:
    """Build the immutable WatcherConfig.

    Keyword arguments are CLI overrides; ``None`` means "use the
    environment or the default".
    """
    return WatcherConfig(
        output=_validate_output(output or OutputKind.DATADOG.value),
        statsd=parse_statsd_host(statsd_host or default_statsd_host()),
        reconnect=_reconnect_config(),
        debug=_debug_config(os.environ.get("DEBUG", "")),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
            format=_validate_log_format(_env("LOG_FORMAT", "json")),
        ),
        metrics_port=(
            metrics_port
            if metrics_port is not None
            else _env_int("METRICS_PORT", 0, min_val=0, max_val=65535)
        ),
    )
