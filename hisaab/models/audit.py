"""
Audit Models for Hisaab

Every user-visible conversion and every search is recorded as an audit
event. This provides:
1. Traceability of what the engine did to the user's text
2. Debugging information for wrong-glyph reports
3. A record of searches and how many records they returned

DESIGN DECISION: Audit logs are append-only. We never delete or modify them.
"""

import json
from datetime import datetime
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Text input
    TRANSLITERATION_APPLIED = "transliteration_applied"
    INPUT_LANGUAGE_CHANGED = "input_language_changed"

    # Search
    SEARCH_EXECUTED = "search_executed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'field', 'search')"
    )
    entity_id: Optional[str] = Field(
        default=None,
        description="Name or ID of the entity this event relates to"
    )

    # Correlation - for tracking related events
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (e.g., one editing session)"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )

    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }

    def to_row(self) -> list[str]:
        """
        Convert to a flat row for tabular export/backup.

        Returns columns in order:
        [event_id, timestamp, event_type, severity, entity_type, entity_id,
         correlation_id, description, details_json, error_message, is_user_action]
        """
        return [
            str(self.event_id),
            self.timestamp.isoformat(),
            self.event_type.value,
            self.severity.value,
            self.entity_type or "",
            self.entity_id or "",
            str(self.correlation_id) if self.correlation_id else "",
            self.description,
            json.dumps(self.details, ensure_ascii=False) if self.details else "",
            self.error_message or "",
            str(self.is_user_action),
        ]


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.transliteration_applied("notes", "ram ", "रम ", "space")
        event = AuditEventBuilder.search_executed("transactions", "Rahul", "rahul", 3)
    """

    @staticmethod
    def transliteration_applied(
        field_name: str,
        original: str,
        converted: str,
        trigger: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSLITERATION_APPLIED,
            entity_type="field",
            entity_id=field_name,
            correlation_id=correlation_id,
            description=f"Transliterated input in '{field_name}' on {trigger}",
            details={
                "original": original,
                "converted": converted,
                "trigger": trigger,
            },
            is_user_action=True,
        )

    @staticmethod
    def input_language_changed(
        field_name: str,
        language: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INPUT_LANGUAGE_CHANGED,
            entity_type="field",
            entity_id=field_name,
            correlation_id=correlation_id,
            description=f"Input language for '{field_name}' set to {language}",
            details={
                "language": language,
            },
            is_user_action=True,
        )

    @staticmethod
    def search_executed(
        scope: str,
        term: str,
        normalized_term: str,
        result_count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SEARCH_EXECUTED,
            entity_type="search",
            entity_id=scope,
            correlation_id=correlation_id,
            description=f"Search over {scope} returned {result_count} results",
            details={
                "term": term,
                "normalized_term": normalized_term,
                "result_count": result_count,
            },
            is_user_action=True,
        )
