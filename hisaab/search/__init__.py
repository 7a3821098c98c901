"""Bilingual search package."""

from hisaab.search.matcher import LedgerSearch, matches_search

__all__ = ["LedgerSearch", "matches_search"]
