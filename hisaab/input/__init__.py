"""Transliterated text input package."""

from hisaab.input.field import TransliteratedField

__all__ = ["TransliteratedField"]
