"""
Data Models Package

This package contains all Pydantic models used in Hisaab.
Records handed to search and events written to the audit trail
must conform to these schemas.
"""

from hisaab.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)
from hisaab.models.language import ScriptLanguage
from hisaab.models.ledger import (
    DEFAULT_ACCOUNTS,
    DEFAULT_CATEGORIES,
    Account,
    AccountType,
    Category,
    CategoryType,
    Person,
    Transaction,
    TransactionType,
)

__all__ = [
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
    # Input
    "ScriptLanguage",
    # Ledger models
    "DEFAULT_ACCOUNTS",
    "DEFAULT_CATEGORIES",
    "Account",
    "AccountType",
    "Category",
    "CategoryType",
    "Person",
    "Transaction",
    "TransactionType",
]
