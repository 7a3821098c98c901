"""
Tests for the audit logger and storage

Test strategy:
1. Events reach the configured storage
2. Storage failures never propagate to the caller
3. Correlation IDs tie related events together
"""

import pytest
from uuid import UUID

from structlog.testing import capture_logs

from hisaab.audit import (
    AuditLogger,
    AuditStorageError,
    AuditStorageInterface,
    InMemoryAuditStorage,
    configure_logging,
    create_correlation_id,
)
from hisaab.models.audit import AuditEvent, AuditEventType, AuditSeverity


class FailingStorage(AuditStorageInterface):
    """Storage backend that always fails."""

    def append_event(self, event: AuditEvent) -> bool:
        raise AuditStorageError("disk full")


class TestInMemoryStorage:
    """Tests for the in-memory backend."""

    def test_starts_empty(self):
        """Test that a new store holds nothing."""
        storage = InMemoryAuditStorage()
        assert len(storage) == 0
        assert storage.get_events() == []

    def test_filter_by_event_type(self):
        """Test that get_events filters by type and keeps order."""
        storage = InMemoryAuditStorage()
        logger = AuditLogger(storage)

        logger.log_search("people", "ram", "ram", 2)
        logger.log_language_changed("notes", "hi")
        logger.log_search("transactions", "shyam", "shyam", 0)

        searches = storage.get_events(AuditEventType.SEARCH_EXECUTED)
        assert [event.entity_id for event in searches] == ["people", "transactions"]
        assert len(storage) == 3

    def test_get_events_returns_copy(self):
        """Test that callers cannot mutate the stored list."""
        storage = InMemoryAuditStorage()
        AuditLogger(storage).log_language_changed("notes", "hi")

        storage.get_events().clear()

        assert len(storage) == 1


class TestAuditLogger:
    """Tests for AuditLogger."""

    def test_log_without_storage(self):
        """Test that logging with no backend still succeeds."""
        logger = AuditLogger()
        assert logger.log_transliteration("notes", "ram", "रम", "blur") is True

    def test_log_persists_event(self):
        """Test that the event is appended to storage."""
        storage = InMemoryAuditStorage()
        logger = AuditLogger(storage)

        assert logger.log_transliteration("notes", "ram", "रम", "blur") is True

        event = storage.get_events()[0]
        assert event.event_type == AuditEventType.TRANSLITERATION_APPLIED
        assert event.details["converted"] == "रम"

    def test_storage_failure_returns_false(self):
        """Test that a failing backend is reported, not raised."""
        logger = AuditLogger(FailingStorage())
        assert logger.log_search("people", "ram", "ram", 1) is False

    def test_every_severity_is_logged(self):
        """Test that each severity level is routed without error."""
        storage = InMemoryAuditStorage()
        logger = AuditLogger(storage)

        for severity in AuditSeverity:
            event = AuditEvent(
                event_type=AuditEventType.SEARCH_EXECUTED,
                severity=severity,
                description=f"{severity.value} event",
            )
            assert logger.log(event) is True

        assert len(storage) == len(AuditSeverity)

    def test_severity_selects_log_level(self):
        """Test that an event is logged at the level named by its severity."""
        logger = AuditLogger()
        event = AuditEvent(
            event_type=AuditEventType.SEARCH_EXECUTED,
            severity=AuditSeverity.WARNING,
            description="Slow search",
        )

        with capture_logs() as captured:
            logger.log(event)

        assert captured[0]["event"] == "audit_event"
        assert captured[0]["log_level"] == "warning"

    def test_storage_failure_logged_as_error(self):
        """Test that a failing backend leaves an error entry."""
        logger = AuditLogger(FailingStorage())

        with capture_logs() as captured:
            logger.log_search("people", "ram", "ram", 1)

        assert [entry["log_level"] for entry in captured] == ["info", "error"]
        assert captured[1]["event"] == "audit_storage_failed"
        assert captured[1]["error"] == "disk full"

    def test_correlation_id_carried(self):
        """Test that a correlation ID reaches the stored event."""
        storage = InMemoryAuditStorage()
        correlation_id = create_correlation_id()

        AuditLogger(storage).log_language_changed(
            "payee", "en", correlation_id=correlation_id
        )

        assert storage.get_events()[0].correlation_id == correlation_id


class TestHelpers:
    """Tests for module-level helpers."""

    def test_correlation_ids_are_unique(self):
        """Test that each call gives a fresh UUID."""
        first = create_correlation_id()
        second = create_correlation_id()
        assert isinstance(first, UUID)
        assert first != second

    def test_configure_logging_explicit_level(self):
        """Test that configure_logging accepts a level name."""
        configure_logging("debug")

    def test_configure_logging_from_settings(self):
        """Test that configure_logging falls back to settings."""
        configure_logging()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
