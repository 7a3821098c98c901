"""
Phonetic Transliteration Engine

Converts Roman-keyboard input to Devanagari and reduces either script to a
simplified Roman key for bilingual search.

DESIGN DECISION: Tokenization is an explicit ordered loop (try 3, then 2,
then 1 letters) instead of a regular expression. Longest match always wins,
so "chh" is never mis-read as "ch" + "h".

GUARANTEES:
- Pure functions, no shared mutable state (safe from any thread)
- Never raises: unrecognized characters pass through verbatim
- Text without ASCII letters is returned unchanged
"""

import re
import unicodedata
from typing import Mapping

from hisaab.transliteration.tables import (
    CONSONANTS,
    DEVANAGARI_TO_ROMAN,
    INDEPENDENT_VOWELS,
    MATRAS,
    MAX_CONSONANT_LENGTH,
    MAX_VOWEL_LENGTH,
    NUKTA_TO_ROMAN,
    VIRAMA,
)


_ASCII_LETTER = re.compile(r"[A-Za-z]")
_WHITESPACE_RUN = re.compile(r"(\s+)")
_WHITESPACE = re.compile(r"\s+")
_VOWEL_RUN = re.compile(r"([aeiou])[aeiou]+")


def has_roman_letters(text: str) -> bool:
    """Check if text contains at least one ASCII letter."""
    return bool(text) and _ASCII_LETTER.search(text) is not None


def _match_consonant(text: str, pos: int) -> tuple[str, int]:
    """
    Find the longest consonant grapheme starting at pos.

    The exact-case key is tried before the lower-cased one so that the
    reserved retroflex keys (T, D, N) keep their meaning.

    Returns: (devanagari, length) or ("", 0) if nothing matched
    """
    for length in range(MAX_CONSONANT_LENGTH, 0, -1):
        part = text[pos:pos + length]
        if len(part) < length:
            continue

        glyph = CONSONANTS.get(part) or CONSONANTS.get(part.lower())
        if glyph:
            return glyph, length

    return "", 0


def _match_vowel(
    text: str,
    pos: int,
    table: Mapping[str, str],
) -> tuple[str, int]:
    """
    Find the longest vowel grapheme starting at pos (case-insensitive).

    Returns: (devanagari, length) or ("", 0) if nothing matched.
    The inherent "a" in MATRAS matches as ("", 1).
    """
    for length in range(MAX_VOWEL_LENGTH, 0, -1):
        part = text[pos:pos + length]
        if len(part) < length:
            continue

        part = part.lower()
        if part in table:
            return table[part], length

    return "", 0


def transliterate(text: str) -> str:
    """
    Transliterate a single Roman word to Devanagari.

    Each consonant takes the vowel sign that follows it. A consonant with no
    following vowel gets a virama, unless it ends the word (end of text or
    whitespace next), in which case it prints bare.

    Examples:
        transliterate("ka")      -> "क"
        transliterate("kaa")     -> "का"
        transliterate("namaste") -> "नमस्ते"
        transliterate("123")     -> "123"
    """
    if not has_roman_letters(text):
        return text

    result = []
    i = 0

    while i < len(text):
        # 1. Consonant, with its vowel sign if one follows
        consonant, length = _match_consonant(text, i)
        if length:
            next_i = i + length
            matra, vowel_length = _match_vowel(text, next_i, MATRAS)

            if vowel_length:
                result.append(consonant + matra)
                i = next_i + vowel_length
            else:
                is_word_end = next_i >= len(text) or text[next_i].isspace()
                result.append(consonant if is_word_end else consonant + VIRAMA)
                i = next_i
            continue

        # 2. Standalone vowel
        vowel, length = _match_vowel(text, i, INDEPENDENT_VOWELS)
        if length:
            result.append(vowel)
            i += length
            continue

        # 3. Anything else passes through
        result.append(text[i])
        i += 1

    return "".join(result)


def transliterate_sentence(sentence: str) -> str:
    """
    Transliterate every word of a sentence, preserving whitespace exactly.

    Words that are already Devanagari (or digits/punctuation) are left alone,
    so calling this repeatedly on a growing input never converts twice.
    """
    tokens = _WHITESPACE_RUN.split(sentence)

    return "".join(
        transliterate(token) if has_roman_letters(token) else token
        for token in tokens
    )


def _romanize(text: str) -> str:
    """Map Devanagari to simplified Roman, reading base + nukta as one letter."""
    result = []
    i = 0

    while i < len(text):
        pair = NUKTA_TO_ROMAN.get(text[i:i + 2])
        if pair is not None:
            result.append(pair)
            i += 2
            continue

        result.append(DEVANAGARI_TO_ROMAN.get(text[i], text[i]))
        i += 1

    return "".join(result)


def normalize_for_search(text: str) -> str:
    """
    Reduce Devanagari or Roman text to a script-agnostic search key.

    Steps:
    1. Trim, lower-case and NFD-decompose
    2. Map Devanagari characters to simplified Roman (unknown chars kept),
       reading base + nukta pairs as one letter
    3. Drop whitespace
    4. Collapse vowel runs to their first vowel ("aa" -> "a", "ee" -> "e")

    The key is only for equality/substring comparison, never for display.

    Examples:
        normalize_for_search("Raahul") -> "rahul"
        normalize_for_search("राहुल")  -> "rahul"
    """
    if not text:
        return ""

    lowered = unicodedata.normalize("NFD", text.strip().lower())
    romanized = _romanize(lowered)

    # Collapsing first would map "ra ahul" to "raahul", which re-normalizes to "rahul"
    compact = _WHITESPACE.sub("", romanized)
    return _VOWEL_RUN.sub(r"\1", compact)
