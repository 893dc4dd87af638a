"""Structured logging utilities."""

from .audit import (
    AUDIT_FILENAME,
    AuditEvent,
    JsonlAuditLogger,
    sanitize_metadata,
    utc_timestamp,
)

__all__ = ["AUDIT_FILENAME", "AuditEvent", "JsonlAuditLogger", "sanitize_metadata", "utc_timestamp"]
