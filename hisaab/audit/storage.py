"""
Audit Storage Interface

DESIGN DECISION: Persistence is an external collaborator (the app's local
object store, or a backup file). We only define the one operation the audit
logger needs, so any backend can be plugged in and tests can use memory.
"""

from abc import ABC, abstractmethod
from typing import Optional

from hisaab.models.audit import AuditEvent, AuditEventType


class AuditStorageError(Exception):
    """Raised by storage backends when an event cannot be written."""
    pass


class AuditStorageInterface(ABC):
    """
    Abstract interface for audit log storage.

    Audit logs are append-only - no update or delete operations.
    """

    @abstractmethod
    def append_event(self, event: AuditEvent) -> bool:
        """
        Append an audit event to the log.

        Args:
            event: The audit event to log

        Returns:
            True if appended successfully

        Raises:
            AuditStorageError: If append fails
        """
        pass


class InMemoryAuditStorage(AuditStorageInterface):
    """Audit storage kept in a Python list. Used by tests and previews."""

    def __init__(self):
        self._events: list[AuditEvent] = []

    def append_event(self, event: AuditEvent) -> bool:
        self._events.append(event)
        return True

    def get_events(
        self,
        event_type: Optional[AuditEventType] = None,
    ) -> list[AuditEvent]:
        """Return stored events in insertion order, optionally filtered by type."""
        if event_type is None:
            return list(self._events)
        return [event for event in self._events if event.event_type == event_type]

    def __len__(self) -> int:
        return len(self._events)
