"""Tests for the docker-watcher command line."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from docker_watcher import __version__
from docker_watcher.cli.main import cli
from docker_watcher.models.config import OutputKind, StatsdConfig


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.mark.parametrize("flag", ["-version", "--version"])
def test_version_prints_and_exits(runner: CliRunner, flag: str) -> None:
    with patch("docker_watcher.app.main", new=AsyncMock()) as main:
        result = runner.invoke(cli, [flag])

    assert result.exit_code == 0
    assert result.output == f"{__version__}\n"
    main.assert_not_awaited()


def test_flags_reach_config(runner: CliRunner) -> None:
    with patch("docker_watcher.app.main", new=AsyncMock()) as main:
        result = runner.invoke(cli, ["-statsd-host", "agent:9125", "-output", "stdout"], env={"DEBUG": "pretty"})

    assert result.exit_code == 0, result.output
    config = main.await_args.args[0]
    assert config.output is OutputKind.STDOUT
    assert config.statsd == StatsdConfig(host="agent", port=9125)
    assert config.debug.pretty is True


def test_statsd_host_defaults_from_env(runner: CliRunner) -> None:
    with patch("docker_watcher.app.main", new=AsyncMock()) as main:
        result = runner.invoke(cli, [], env={"DOGSTATSD_HOST": "dd-agent:8125", "DEBUG": ""})

    assert result.exit_code == 0, result.output
    config = main.await_args.args[0]
    assert config.output is OutputKind.DATADOG
    assert config.statsd.host == "dd-agent"


def test_unknown_output_rejected(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--output", "syslog"])
    assert result.exit_code == 2


def test_bad_statsd_host_is_usage_error(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--statsd-host", "no-port"])
    assert result.exit_code == 2
    assert "Invalid statsd address" in result.output


def test_help_documents_debug(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "DEBUG" in result.output
