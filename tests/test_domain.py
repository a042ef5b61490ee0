"""Tests for domain value objects and the message catalogue."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.domain.charsets import SYMBOLS, CharacterClass
from core.domain.language import Language
from core.domain.messages import message
from core.domain.models import PasswordOptions, StrengthResult, PasswordStrength, UuidOptions


class TestOptions:
    def test_defaults(self):
        options = PasswordOptions()
        assert options.length == 16
        assert options.enabled_classes() == list(CharacterClass)
        assert UuidOptions() == UuidOptions(quantity=1, uppercase=False)

    def test_enabled_classes_keep_canonical_order(self):
        options = PasswordOptions(include_uppercase=False, include_numbers=False)
        assert options.enabled_classes() == [CharacterClass.LOWERCASE, CharacterClass.SYMBOLS]

    def test_frozen(self):
        options = PasswordOptions()
        with pytest.raises(ValidationError):
            options.length = 8  # type: ignore[misc]
        assert options.model_copy(update={"length": 8}).length == 8

    def test_score_is_bounded(self):
        with pytest.raises(ValidationError):
            StrengthResult(score=101, strength=PasswordStrength.LEGENDARY)


class TestCharsets:
    def test_symbol_set(self):
        assert SYMBOLS == "!@#$%^&*()_+~`|}{[]:;?><,./-="
        assert CharacterClass.SYMBOLS.characters == SYMBOLS
        assert CharacterClass.NUMBERS.contains("7")
        assert not CharacterClass.UPPERCASE.contains("a")


class TestLanguage:
    def test_default_and_toggle(self):
        assert Language.default() is Language.ENGLISH
        assert Language.ENGLISH.toggle() is Language.CHINESE
        assert Language.CHINESE.toggle() is Language.ENGLISH
        assert Language.from_bool(True) is Language.CHINESE

    def test_messages(self):
        assert message("time.days") == "days"
        assert message("time.days", Language.CHINESE) == "天"
        with pytest.raises(KeyError):
            message("does.not.exist")
