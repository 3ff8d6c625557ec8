"""Filtering and formatting of container exit reports."""

from docker_watcher.reporting.filter import is_reportable
from docker_watcher.reporting.formatter import format_report, render_console, render_tags

__all__ = ["format_report", "is_reportable", "render_console", "render_tags"]
