"""
Transliteration Package

Roman-keyboard -> Devanagari phonetic transliteration and the inverse
script-agnostic search normalization.
"""

from hisaab.transliteration.engine import (
    has_roman_letters,
    normalize_for_search,
    transliterate,
    transliterate_sentence,
)
from hisaab.transliteration.tables import (
    CONSONANTS,
    DEVANAGARI_TO_ROMAN,
    INDEPENDENT_VOWELS,
    MATRAS,
    VIRAMA,
)

__all__ = [
    # Engine
    "has_roman_letters",
    "normalize_for_search",
    "transliterate",
    "transliterate_sentence",
    # Tables
    "CONSONANTS",
    "DEVANAGARI_TO_ROMAN",
    "INDEPENDENT_VOWELS",
    "MATRAS",
    "VIRAMA",
]
