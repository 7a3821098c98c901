"""
Transliterated Input Field

Models the word-boundary policy for Hindi typing: the user types Roman
letters, and the field converts its text to Devanagari when a word is
finished (a trailing space) or when the field loses focus.

DESIGN DECISION: This class holds no UI code. Any front end forwards its
change/blur events here and renders whatever value comes back. Conversion
always runs over the whole value through transliterate_sentence, which
leaves already-Devanagari words alone, so committing twice is harmless.
"""

from typing import Optional, Union
from uuid import UUID

from hisaab.audit import AuditLogger
from hisaab.config import InputSettings, get_settings
from hisaab.models.language import ScriptLanguage
from hisaab.transliteration import transliterate_sentence


class TransliteratedField:
    """
    State of one text input that may convert Roman typing to Devanagari.

    Flow:
    1. on_change() on every edit - converts when the value ends in a space
    2. on_blur() when focus leaves - converts the remaining text
    3. set_value() to sync from outside without converting
    """

    def __init__(
        self,
        name: str,
        value: str = "",
        language: Optional[Union[ScriptLanguage, str]] = None,
        settings: Optional[InputSettings] = None,
        audit_logger: Optional[AuditLogger] = None,
        correlation_id: Optional[UUID] = None,
    ):
        """
        Initialize the field.

        Args:
            name: Field name used in audit events (e.g. "notes")
            value: Initial text, stored as-is
            language: Input language; defaults to InputSettings.language
            settings: Input settings; defaults to the cached app settings
            audit_logger: Receives an event for every applied conversion
            correlation_id: Ties this field's events to one editing session
        """
        self._settings = settings or get_settings().input
        self._audit_logger = audit_logger
        self._correlation_id = correlation_id

        self.name = name
        self._value = value
        self._language = ScriptLanguage(language or self._settings.language)

    @property
    def value(self) -> str:
        return self._value

    @property
    def language(self) -> ScriptLanguage:
        return self._language

    @property
    def is_hindi(self) -> bool:
        return self._language == ScriptLanguage.HINDI

    def on_change(self, new_value: str) -> str:
        """
        Handle an edit. Returns the value the UI should now display.

        In Hindi mode a trailing space means the last word is complete,
        so the whole value is converted.
        """
        self._value = new_value

        if (
            self.is_hindi
            and self._settings.transliterate_on_space
            and new_value.endswith(" ")
        ):
            return self._commit(trigger="space")

        return self._value

    def on_blur(self) -> str:
        """Handle focus loss. Converts any unconverted words in Hindi mode."""
        if self.is_hindi and self._settings.transliterate_on_blur:
            return self._commit(trigger="blur")
        return self._value

    def set_value(self, value: str) -> None:
        """Replace the value without converting (e.g. loading a saved record)."""
        self._value = value

    def set_language(self, language: Union[ScriptLanguage, str]) -> None:
        """
        Switch input language.

        Raises:
            ValueError: If language is not a known ScriptLanguage value
        """
        language = ScriptLanguage(language)
        if language == self._language:
            return

        self._language = language
        if self._audit_logger:
            self._audit_logger.log_language_changed(
                field_name=self.name,
                language=language.value,
                correlation_id=self._correlation_id,
            )

    def _commit(self, trigger: str) -> str:
        """Convert the current value and audit the change if anything moved."""
        original = self._value
        converted = transliterate_sentence(original)

        if converted != original:
            self._value = converted
            if self._audit_logger:
                self._audit_logger.log_transliteration(
                    field_name=self.name,
                    original=original,
                    converted=converted,
                    trigger=trigger,
                    correlation_id=self._correlation_id,
                )

        return self._value
