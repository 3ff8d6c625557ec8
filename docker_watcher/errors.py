"""Error types for docker-watcher.

Two classes of failure exist:

TransportError     -- a problem reading the engine event stream.  Yielded by
                      the event source as a value, logged by the watch loop,
                      never terminates the process.
FatalWatcherError  -- everything else (inspect failure, sink failure, debug
                      dump encoding failure).  Propagates out of the watch
                      loop; ``serve()`` turns it into a non-zero exit.
"""

from __future__ import annotations


class WatcherError(Exception):
    """Base class for all docker-watcher errors."""


class TransportError(WatcherError):
    """The event stream failed or ended."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class FatalWatcherError(WatcherError):
    """An error that must stop the daemon."""

    def __init__(self, message: str, container_id: str = "") -> None:
        super().__init__(message)
        self.container_id = container_id


class EnrichmentError(FatalWatcherError):
    """Container inspect failed."""


class SinkError(FatalWatcherError):
    """A report could not be delivered."""


class DebugDumpError(FatalWatcherError):
    """An event or inspect payload could not be JSON-encoded."""
