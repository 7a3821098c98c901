"""Audit logging package."""

from hisaab.audit.logger import AuditLogger, configure_logging, create_correlation_id
from hisaab.audit.storage import (
    AuditStorageError,
    AuditStorageInterface,
    InMemoryAuditStorage,
)

__all__ = [
    "AuditLogger",
    "AuditStorageError",
    "AuditStorageInterface",
    "InMemoryAuditStorage",
    "configure_logging",
    "create_correlation_id",
]
