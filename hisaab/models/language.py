"""Input language model."""

from enum import Enum


class ScriptLanguage(str, Enum):
    """
    Language the user is typing in.

    HINDI means Roman keystrokes are converted to Devanagari
    at word boundaries. ENGLISH leaves input untouched.
    """
    ENGLISH = "en"
    HINDI = "hi"
