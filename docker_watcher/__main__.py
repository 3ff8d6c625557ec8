"""Entry point for `python -m docker_watcher`.

Usage:
    python -m docker_watcher --output stdout
    uv run python -m docker_watcher
"""

from __future__ import annotations

from docker_watcher.cli.main import cli

cli()
