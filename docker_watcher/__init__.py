"""docker-watcher: report non-zero container exits from the Docker event stream."""

__version__ = "0.2.0"
