"""
Tests for Hisaab data models

Test strategy:
1. Unit tests for ledger and audit models
2. Validation rules are enforced at construction time
3. No storage involved
"""

import pytest
from datetime import date
from decimal import Decimal
from uuid import uuid4

from hisaab.models import (
    DEFAULT_ACCOUNTS,
    DEFAULT_CATEGORIES,
    Account,
    AccountType,
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
    Category,
    CategoryType,
    Person,
    ScriptLanguage,
    Transaction,
    TransactionType,
)


class TestLedgerModels:
    """Tests for ledger Pydantic models."""

    def test_person_creation(self):
        """Test Person model creation with a Devanagari name."""
        person = Person(name="राहुल")
        assert person.name == "राहुल"
        assert person.id

    def test_person_strips_whitespace(self):
        """Test that whitespace is stripped from names."""
        person = Person(name="  Suresh  ")
        assert person.name == "Suresh"

    def test_person_requires_name(self):
        """Test that an empty name is rejected."""
        with pytest.raises(ValueError):
            Person(name="   ")

    def test_person_ids_are_unique(self):
        """Test that generated IDs differ."""
        assert Person(name="a").id != Person(name="a").id

    def test_transaction_creation(self):
        """Test Transaction model creation."""
        tx = Transaction(
            date=date(2024, 12, 15),
            amount=Decimal("1500.00"),
            type=TransactionType.EXPENSE,
            account_id="acc_cash",
            category_id="cat_food",
            notes="  दूध  ",
        )
        assert tx.amount == Decimal("1500.00")
        assert tx.payee_id is None
        assert tx.notes == "दूध"

    def test_transaction_rejects_negative_amount(self):
        """Test that negative amounts are rejected."""
        with pytest.raises(ValueError):
            Transaction(
                date=date(2024, 12, 15),
                amount=Decimal("-100"),
                type=TransactionType.EXPENSE,
                account_id="acc_cash",
                category_id="cat_food",
            )

    def test_transaction_rejects_fractional_paise(self):
        """Test that amounts are limited to two decimal places."""
        with pytest.raises(ValueError):
            Transaction(
                date=date(2024, 12, 15),
                amount=Decimal("10.005"),
                type=TransactionType.EXPENSE,
                account_id="acc_cash",
                category_id="cat_food",
            )

    def test_transaction_type_from_string(self):
        """Test that plain strings coerce into enums."""
        tx = Transaction(
            date=date(2024, 12, 15),
            amount=Decimal("10"),
            type="income",
            account_id="acc_upi",
            category_id="cat_salary",
        )
        assert tx.type == TransactionType.INCOME

    def test_account_rejects_unknown_type(self):
        """Test that account types are a closed set."""
        with pytest.raises(ValueError):
            Account(name="Wallet", type="crypto")


class TestDefaults:
    """Tests for seeded categories and accounts."""

    def test_default_category_ids_unique(self):
        """Test that default category IDs do not collide."""
        ids = [category.id for category in DEFAULT_CATEGORIES]
        assert len(ids) == len(set(ids))

    def test_default_categories_cover_both_types(self):
        """Test that expense and income defaults both exist."""
        types = {category.type for category in DEFAULT_CATEGORIES}
        assert types == {CategoryType.EXPENSE, CategoryType.INCOME}
        assert all(category.is_default for category in DEFAULT_CATEGORIES)

    def test_default_accounts(self):
        """Test the seeded accounts."""
        assert [account.id for account in DEFAULT_ACCOUNTS] == ["acc_cash", "acc_upi", "acc_bank"]
        assert DEFAULT_ACCOUNTS[1].type == AccountType.UPI

    def test_enum_values(self):
        """Test enum string values."""
        assert TransactionType.TRANSFER.value == "transfer"
        assert ScriptLanguage.HINDI.value == "hi"
        assert ScriptLanguage("en") == ScriptLanguage.ENGLISH

    def test_category_creation(self):
        """Test Category model creation."""
        category = Category(name="किराया", type=CategoryType.EXPENSE)
        assert category.is_default is False


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent model creation."""
        event = AuditEvent(
            event_type=AuditEventType.SEARCH_EXECUTED,
            description="Test search",
        )
        assert event.event_type == AuditEventType.SEARCH_EXECUTED
        assert event.severity == AuditSeverity.INFO

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = AuditEvent(
            event_type=AuditEventType.TRANSLITERATION_APPLIED,
            description="Converted",
            details={"original": "ram", "converted": "रम"},
        )
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "transliteration_applied"
        assert log_dict["details"]["converted"] == "रम"

    def test_audit_event_to_row(self):
        """Test conversion to a flat row."""
        event = AuditEvent(
            event_type=AuditEventType.INPUT_LANGUAGE_CHANGED,
            description="Switched",
            details={"language": "hi"},
            is_user_action=True,
        )
        row = event.to_row()
        assert len(row) == 11
        assert row[2] == "input_language_changed"
        assert row[8] == '{"language": "hi"}'
        assert row[10] == "True"

    def test_row_keeps_devanagari_readable(self):
        """Test that details JSON is not ASCII-escaped."""
        event = AuditEventBuilder.transliteration_applied(
            field_name="notes",
            original="ram",
            converted="रम",
            trigger="blur",
        )
        assert "रम" in event.to_row()[8]

    def test_builder_transliteration_applied(self):
        """Test AuditEventBuilder.transliteration_applied."""
        correlation_id = uuid4()
        event = AuditEventBuilder.transliteration_applied(
            field_name="payee",
            original="suresh ",
            converted="सुरेश ",
            trigger="space",
            correlation_id=correlation_id,
        )
        assert event.event_type == AuditEventType.TRANSLITERATION_APPLIED
        assert event.entity_type == "field"
        assert event.entity_id == "payee"
        assert event.correlation_id == correlation_id
        assert event.is_user_action is True

    def test_builder_search_executed(self):
        """Test AuditEventBuilder.search_executed."""
        event = AuditEventBuilder.search_executed(
            scope="transactions",
            term="Raahul",
            normalized_term="rahul",
            result_count=3,
        )
        assert event.event_type == AuditEventType.SEARCH_EXECUTED
        assert event.details["result_count"] == 3
        assert "3 results" in event.description


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
