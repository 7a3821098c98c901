"""
Ledger Data Models for Hisaab

These models define the records that bilingual search runs over.
Names and notes may be typed in Roman letters or Devanagari; the models
store exactly what the user entered and never transliterate on their own.

DESIGN DECISION: Storage is an external collaborator. These models only
describe the shape of records handed to the search layer.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def _new_id() -> str:
    return str(uuid4())


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class TransactionType(str, Enum):
    """Direction of money for a transaction."""
    EXPENSE = "expense"
    INCOME = "income"
    TRANSFER = "transfer"


class AccountType(str, Enum):
    """Where the money sits."""
    CASH = "cash"
    BANK = "bank"
    CARD = "card"
    UPI = "upi"


class CategoryType(str, Enum):
    """Categories are either spending or earning buckets."""
    EXPENSE = "expense"
    INCOME = "income"


# =============================================================================
# LEDGER RECORDS
# =============================================================================

class Person(BaseModel):
    """
    A payee/party the user keeps a running balance with.

    Names are frequently typed in Hindi, which is why search
    goes through normalize_for_search rather than plain lower().
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    id: str = Field(default_factory=_new_id)
    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Person or firm name, in either script"
    )
    created_at: datetime = Field(
        default_factory=datetime.utcnow
    )


class Category(BaseModel):
    """Transaction category."""
    model_config = ConfigDict(str_strip_whitespace=True)

    id: str = Field(default_factory=_new_id)
    name: str = Field(
        ...,
        min_length=1,
        max_length=100
    )
    type: CategoryType
    is_default: bool = False


class Account(BaseModel):
    """Money account (cash box, bank, card, UPI)."""
    model_config = ConfigDict(str_strip_whitespace=True)

    id: str = Field(default_factory=_new_id)
    name: str = Field(
        ...,
        min_length=1,
        max_length=100
    )
    type: AccountType


class Transaction(BaseModel):
    """
    A single ledger entry.

    payee_id links the entry to a Person; when it is None the entry is a
    general expense/income.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    id: str = Field(default_factory=_new_id)
    date: date
    amount: Decimal = Field(
        ...,
        ge=0,
        decimal_places=2,
        description="Amount in INR"
    )
    type: TransactionType
    account_id: str = Field(..., min_length=1)
    category_id: str = Field(..., min_length=1)
    payee_id: Optional[str] = None
    notes: Optional[str] = Field(
        default=None,
        max_length=1000,
        description="Free text, in either script"
    )
    created_at: datetime = Field(
        default_factory=datetime.utcnow
    )


# =============================================================================
# DEFAULTS - seeded on first run
# =============================================================================

DEFAULT_CATEGORIES: tuple[Category, ...] = (
    Category(id="cat_food", name="Food & Dining", type=CategoryType.EXPENSE, is_default=True),
    Category(id="cat_transport", name="Transportation", type=CategoryType.EXPENSE, is_default=True),
    Category(id="cat_groceries", name="Groceries", type=CategoryType.EXPENSE, is_default=True),
    Category(id="cat_utilities", name="Utilities", type=CategoryType.EXPENSE, is_default=True),
    Category(id="cat_entertainment", name="Entertainment", type=CategoryType.EXPENSE, is_default=True),
    Category(id="cat_health", name="Health", type=CategoryType.EXPENSE, is_default=True),
    Category(id="cat_settlement", name="Settlement / Debt", type=CategoryType.EXPENSE, is_default=True),
    Category(id="cat_salary", name="Salary", type=CategoryType.INCOME, is_default=True),
    Category(id="cat_freelance", name="Freelance", type=CategoryType.INCOME, is_default=True),
    Category(id="cat_settlement_in", name="Settlement / Debt", type=CategoryType.INCOME, is_default=True),
)

DEFAULT_ACCOUNTS: tuple[Account, ...] = (
    Account(id="acc_cash", name="Cash", type=AccountType.CASH),
    Account(id="acc_upi", name="UPI", type=AccountType.UPI),
    Account(id="acc_bank", name="Bank Account", type=AccountType.BANK),
)
