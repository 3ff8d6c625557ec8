"""Logging and metrics for docker-watcher."""
