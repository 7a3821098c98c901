"""
Phonetic Lookup Tables

Static Roman <-> Devanagari tables used by the transliteration engine.

DESIGN DECISION: The tables are hand-authored for informal typing conventions
("kh" -> ख, "aa" -> आ), not a scholarly romanization scheme. They are wrapped
in MappingProxyType so no caller can mutate them at runtime.

Only three consonant keys are case-sensitive: T, D and N select the retroflex
series. Every other key is lower-case and matched case-insensitively.
"""

from types import MappingProxyType


VIRAMA = "्"
NUKTA = "़"

# Longest grapheme in CONSONANTS / vowel tables
MAX_CONSONANT_LENGTH = 3
MAX_VOWEL_LENGTH = 2


# =============================================================================
# FORWARD TABLES (Roman -> Devanagari)
# =============================================================================

CONSONANTS = MappingProxyType({
    # Aspirates and digraphs
    "kh": "ख", "gh": "घ", "chh": "छ", "ch": "च", "jh": "झ", "nh": "न्ह",
    "thh": "ठ", "dhh": "ढ", "th": "थ", "dh": "ध", "ph": "फ", "bh": "भ",
    "sh": "श",

    # Plain consonants
    "k": "क", "g": "ग", "j": "ज", "t": "त", "d": "द", "n": "न",
    "p": "प", "b": "ब", "m": "म", "y": "य", "r": "र", "l": "ल",
    "v": "व", "w": "व", "s": "स", "h": "ह",

    # Nukta forms (base consonant + U+093C)
    "z": "ज" + NUKTA, "f": "फ" + NUKTA, "q": "क" + NUKTA,
    "x": "क्ष",

    # Retroflex (case-sensitive)
    "T": "ट", "D": "ड", "N": "ण",
})


MATRAS = MappingProxyType({
    "aa": "ा", "ai": "ै", "au": "ौ", "ee": "ी", "oo": "ू",
    "a": "",  # inherent vowel, no visible sign
    "i": "ि", "e": "े", "o": "ो", "u": "ु",
})

INDEPENDENT_VOWELS = MappingProxyType({
    "aa": "आ", "ai": "ऐ", "au": "औ", "ee": "ई", "oo": "ऊ",
    "a": "अ", "i": "इ", "e": "ए", "o": "ओ", "u": "उ",
})


# =============================================================================
# REVERSE TABLE (Devanagari -> simplified Roman, for search keys)
# =============================================================================

DEVANAGARI_TO_ROMAN = MappingProxyType({
    # Consonants - aspiration stays distinct, retroflex folds into dental
    "क": "k", "ख": "kh", "ग": "g", "घ": "gh",
    "च": "ch", "छ": "chh", "ज": "j", "झ": "jh",
    "ट": "t", "ठ": "th", "ड": "d", "ढ": "dh", "ण": "n",
    "त": "t", "थ": "th", "द": "d", "ध": "dh", "न": "n",
    "प": "p", "फ": "ph", "ब": "b", "भ": "bh", "म": "m",
    "य": "y", "र": "r", "ल": "l", "व": "v",
    "श": "sh", "ष": "sh", "स": "s", "ह": "h",

    # Vowel signs - long vowels shortened
    "ा": "a", "ि": "i", "ी": "i", "ु": "u", "ू": "u",
    "े": "e", "ै": "ai", "ो": "o", "ौ": "au", "ृ": "ri",

    # Independent vowels
    "अ": "a", "आ": "a", "इ": "i", "ई": "i", "उ": "u", "ऊ": "u",
    "ए": "e", "ऐ": "ai", "ओ": "o", "औ": "au", "ऋ": "ri",

    # Marks
    VIRAMA: "", NUKTA: "",
    "ं": "n", "ँ": "n", "ः": "h",
})


# Nukta letters as base + NUKTA. Text is NFD-decomposed before lookup, so the
# precomposed U+0958..U+095F forms arrive here as the same two characters.
NUKTA_TO_ROMAN = MappingProxyType({
    "क" + NUKTA: "q", "ख" + NUKTA: "kh", "ग" + NUKTA: "g", "ज" + NUKTA: "z",
    "ड" + NUKTA: "d", "ढ" + NUKTA: "dh", "फ" + NUKTA: "f", "य" + NUKTA: "y",
})
