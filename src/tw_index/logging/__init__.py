"""Structured logging utilities."""

from .audit import BUILD_LOG_FILE, BuildEvent, JsonlAuditLogger, utc_timestamp

__all__ = ["BUILD_LOG_FILE", "BuildEvent", "JsonlAuditLogger", "utc_timestamp"]
