"""Language utilities for passforge.

This module centralizes the language options supported across the
application. Keeping it in the domain layer allows both CLI and service
layers to share a single source of truth without creating circular
imports with adapters.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for user-facing output."""

    ENGLISH = "en"
    CHINESE = "zh"

    @classmethod
    def default(cls) -> "Language":
        """Return the default language used across the application."""

        return cls.ENGLISH

    @classmethod
    def from_bool(cls, chinese: bool) -> "Language":
        """Derive a language value from a boolean flag."""

        return cls.CHINESE if chinese else cls.ENGLISH

    def toggle(self) -> "Language":
        """Return the other supported language (UI language switch)."""

        return Language.ENGLISH if self is Language.CHINESE else Language.CHINESE

    def label(self) -> str:
        """Human readable label for prompts and logging."""

        return "Chinese" if self is Language.CHINESE else "English"
