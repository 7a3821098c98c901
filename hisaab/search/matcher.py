"""
Bilingual Record Search

DESIGN DECISION: Search compares normalized keys, never raw text.
Both the user's term and every searchable field go through
normalize_for_search, so "rahul", "Raahul" and "राहुल" all find the same
person, and a note typed in Devanagari is found by a Roman query.

The matching is a plain substring test on the keys. Vowel length and
whitespace are ignored, so unrelated names can collide on the same key.
"""

from typing import Callable, Iterable, Optional, TypeVar
from uuid import UUID

from hisaab.audit import AuditLogger
from hisaab.config import SearchSettings, get_settings
from hisaab.models.ledger import (
    DEFAULT_ACCOUNTS,
    DEFAULT_CATEGORIES,
    Account,
    Category,
    Person,
    Transaction,
)
from hisaab.transliteration import normalize_for_search


RecordT = TypeVar("RecordT")

UNKNOWN_PERSON = "Unknown"


def _key_matches(
    key: str,
    fields: Iterable[Optional[str]],
    min_term_length: int,
) -> bool:
    """Check a normalized term against raw field values."""
    if len(key) < max(min_term_length, 1):
        return True

    return any(
        key in normalize_for_search(field)
        for field in fields
        if field
    )


def matches_search(
    term: str,
    *fields: Optional[str],
    min_term_length: int = 1,
) -> bool:
    """
    Check if a search term matches any of the given fields, in either script.

    An empty term (after normalization) matches everything, as does a term
    shorter than min_term_length. Empty or None fields never match.

    Examples:
        matches_search("rahul", "राहुल")          -> True
        matches_search("raahul", "Rahul Sharma")  -> True
        matches_search("suresh", "Ramesh")        -> False
    """
    return _key_matches(normalize_for_search(term), fields, min_term_length)


class LedgerSearch:
    """
    Filters ledger records by a free-text term.

    Transactions are matched on their category name, account name,
    payee name and notes. Names are resolved from the lookup records
    given at construction time.
    """

    def __init__(
        self,
        people: Iterable[Person] = (),
        categories: Iterable[Category] = DEFAULT_CATEGORIES,
        accounts: Iterable[Account] = DEFAULT_ACCOUNTS,
        settings: Optional[SearchSettings] = None,
        audit_logger: Optional[AuditLogger] = None,
        correlation_id: Optional[UUID] = None,
    ):
        self._person_names = {person.id: person.name for person in people}
        self._category_names = {category.id: category.name for category in categories}
        self._account_names = {account.id: account.name for account in accounts}

        self._settings = settings or get_settings().search
        self._audit_logger = audit_logger
        self._correlation_id = correlation_id

    def person_name(self, payee_id: Optional[str]) -> str:
        """Resolve a payee ID. No payee -> "", unknown payee -> "Unknown"."""
        if not payee_id:
            return ""
        return self._person_names.get(payee_id, UNKNOWN_PERSON)

    def category_name(self, category_id: str) -> str:
        return self._category_names.get(category_id, "")

    def account_name(self, account_id: str) -> str:
        return self._account_names.get(account_id, "")

    def filter_transactions(
        self,
        transactions: Iterable[Transaction],
        term: str,
    ) -> list[Transaction]:
        """Return transactions matching term, in input order."""
        return self._filter(
            scope="transactions",
            records=transactions,
            term=term,
            fields=lambda tx: (
                self.category_name(tx.category_id),
                self.account_name(tx.account_id),
                self.person_name(tx.payee_id),
                tx.notes,
            ),
        )

    def filter_people(
        self,
        people: Iterable[Person],
        term: str,
    ) -> list[Person]:
        """Return people whose name matches term."""
        return self._filter(
            scope="people",
            records=people,
            term=term,
            fields=lambda person: (person.name,),
        )

    def filter_categories(
        self,
        categories: Iterable[Category],
        term: str,
    ) -> list[Category]:
        """Return categories whose name matches term."""
        return self._filter(
            scope="categories",
            records=categories,
            term=term,
            fields=lambda category: (category.name,),
        )

    def _filter(
        self,
        scope: str,
        records: Iterable[RecordT],
        term: str,
        fields: Callable[[RecordT], tuple[Optional[str], ...]],
    ) -> list[RecordT]:
        """Apply the term to every record and cap the result size."""
        key = normalize_for_search(term)
        min_length = self._settings.min_term_length

        results = [
            record for record in records
            if _key_matches(key, fields(record), min_length)
        ][:self._settings.max_results]

        if self._audit_logger and term.strip():
            self._audit_logger.log_search(
                scope=scope,
                term=term,
                normalized_term=key,
                result_count=len(results),
                correlation_id=self._correlation_id,
            )

        return results
