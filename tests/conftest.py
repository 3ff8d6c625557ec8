"""Session-wide test configuration."""

from __future__ import annotations

import pytest

from docker_watcher.observability.logging import setup_logging


@pytest.fixture(autouse=True, scope="session")
def _configure_logging() -> None:
    # Keep stdout free for the console sink and debug dump assertions.
    setup_logging("debug")
