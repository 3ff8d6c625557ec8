"""docker-watcher command-line interface.

Exposes:
    cli -- Click command entry point (registered as ``docker-watcher`` script).
"""

from docker_watcher.cli.main import cli

__all__ = ["cli"]
