"""
Hisaab - Bilingual Bookkeeping Core

Phonetic Hindi typing and script-agnostic search for a personal /
small-business ledger. Users type Roman letters and get Devanagari;
searches typed in either script find records stored in either script.

DESIGN PRINCIPLES:
1. The transliteration engine is pure: strings in, strings out
2. Never fail on user text - unknown characters pass through
3. No silent double conversion - Devanagari input is left alone
4. Every applied conversion and search is auditable
5. Storage and UI are swappable collaborators
"""

from hisaab.transliteration import (
    normalize_for_search,
    transliterate,
    transliterate_sentence,
)

__version__ = "1.0.0"
__author__ = "Hisaab Team"

__all__ = [
    "normalize_for_search",
    "transliterate",
    "transliterate_sentence",
]
