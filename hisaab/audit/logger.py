"""
Audit Logger

DESIGN DECISION: Every conversion applied to user text and every search is
logged. This provides:
1. Traceability of what happened to a field's contents
2. Debugging capability for wrong-glyph reports
3. A history of searches

The audit logger:
- Is synchronous; it sits next to keystroke handlers and does no network I/O
- Gracefully handles failures (doesn't crash the app if storage fails)
- Supports correlation IDs to trace related events
"""

import logging
from typing import Optional
from uuid import UUID, uuid4

import structlog

from hisaab.audit.storage import AuditStorageInterface
from hisaab.config import get_settings
from hisaab.models.audit import AuditEvent, AuditEventBuilder


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer(ensure_ascii=False)
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. An audit storage backend, when one is configured
    """

    def __init__(
        self,
        storage: Optional[AuditStorageInterface] = None,
    ):
        """
        Initialize audit logger.

        Args:
            storage: Storage backend for persistence.
                    If None, only logs locally.
        """
        self._storage = storage
        self._logger = structlog.get_logger("hisaab.audit")

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Persists to storage if available.

        Returns True if storage write succeeded (or no storage configured).
        """
        log_dict = event.to_log_dict()

        # AuditSeverity values match the stdlib level method names
        getattr(self._logger, event.severity.value)("audit_event", **log_dict)

        if self._storage is not None:
            try:
                return self._storage.append_event(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_storage_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    def log_transliteration(
        self,
        field_name: str,
        original: str,
        converted: str,
        trigger: str,
        correlation_id: Optional[UUID] = None,
    ) -> bool:
        """Log a conversion applied to an input field."""
        event = AuditEventBuilder.transliteration_applied(
            field_name=field_name,
            original=original,
            converted=converted,
            trigger=trigger,
            correlation_id=correlation_id,
        )
        return self.log(event)

    def log_language_changed(
        self,
        field_name: str,
        language: str,
        correlation_id: Optional[UUID] = None,
    ) -> bool:
        """Log an input language switch."""
        event = AuditEventBuilder.input_language_changed(
            field_name=field_name,
            language=language,
            correlation_id=correlation_id,
        )
        return self.log(event)

    def log_search(
        self,
        scope: str,
        term: str,
        normalized_term: str,
        result_count: int,
        correlation_id: Optional[UUID] = None,
    ) -> bool:
        """Log a search and how many records it returned."""
        event = AuditEventBuilder.search_executed(
            scope=scope,
            term=term,
            normalized_term=normalized_term,
            result_count=result_count,
            correlation_id=correlation_id,
        )
        return self.log(event)


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this when an editing session or search screen opens and
    pass it through all subsequent calls.
    """
    return uuid4()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Route structlog output through the stdlib root logger.

    Args:
        level: Minimum level name. Defaults to AppSettings.log_level.
    """
    level = level or get_settings().app.log_level
    logging.basicConfig(format="%(message)s", level=level.upper())
