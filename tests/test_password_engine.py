"""Tests for the password engine."""

from __future__ import annotations

import itertools
import string

import pytest

from adapters.secure_random import SystemRandomSource
from core.domain.charsets import SYMBOLS, CharacterClass
from core.domain.errors import SecureRandomUnavailableError
from core.domain.models import PasswordOptions
from core.services import password_engine

ALL_FLAG_COMBINATIONS = [
    combo for combo in itertools.product([True, False], repeat=4) if any(combo)
]


def _options(length: int, upper=True, lower=True, numbers=True, symbols=True) -> PasswordOptions:
    return PasswordOptions(
        length=length,
        include_uppercase=upper,
        include_lowercase=lower,
        include_numbers=numbers,
        include_symbols=symbols,
    )


class TestBuildCharset:
    def test_canonical_order(self):
        charset = password_engine.build_charset(_options(16))
        assert charset == string.ascii_uppercase + string.ascii_lowercase + string.digits + SYMBOLS
        assert len(charset) == 26 + 26 + 10 + 29

    def test_order_ignores_which_flags_are_off(self):
        charset = password_engine.build_charset(_options(16, upper=False, lower=True, numbers=False, symbols=True))
        assert charset == string.ascii_lowercase + SYMBOLS

    def test_nothing_enabled(self):
        assert password_engine.build_charset(_options(16, False, False, False, False)) == ""


class TestGenerate:
    def test_all_disabled_is_empty_and_draws_nothing(self, failing_source):
        options = _options(16, False, False, False, False)
        assert password_engine.generate(options, rng=failing_source) == ""

    @pytest.mark.parametrize("flags", ALL_FLAG_COMBINATIONS)
    def test_length_and_class_coverage(self, flags):
        options = _options(12, *flags)
        classes = options.enabled_classes()
        pw = password_engine.generate(options, rng=SystemRandomSource())

        assert len(pw) == 12
        for cls in classes:
            assert any(cls.contains(c) for c in pw), cls
        allowed = password_engine.build_charset(options)
        assert all(c in allowed for c in pw)

    @pytest.mark.parametrize("flags", ALL_FLAG_COMBINATIONS)
    def test_disabled_classes_never_appear(self, flags):
        options = _options(64, *flags)
        disabled = [cls for cls in CharacterClass if cls not in options.enabled_classes()]
        pw = password_engine.generate(options)
        for cls in disabled:
            assert not any(cls.contains(c) for c in pw)

    def test_minimum_length_still_covers_every_class(self):
        for _ in range(50):
            pw = password_engine.generate(_options(4))
            assert any(c.isupper() for c in pw)
            assert any(c.islower() for c in pw)
            assert any(c.isdigit() for c in pw)
            assert any(c in SYMBOLS for c in pw)

    def test_mandatory_characters_are_shuffled(self, zero_source):
        # Zero bytes: every pick is index 0 and every swap targets position 0.
        # Before the shuffle the list is A, a, 0, !, A, A.
        pw = password_engine.generate(_options(6), rng=zero_source)
        assert pw == "a0!AAA"

    def test_length_below_class_count_truncates_shuffled_prefix(self, zero_source):
        pw = password_engine.generate(_options(2), rng=zero_source)
        assert pw == "a0"

    def test_length_below_class_count_has_distinct_classes(self):
        pw = password_engine.generate(_options(3))
        assert len(pw) == 3
        hit = [cls for cls in CharacterClass if any(cls.contains(c) for c in pw)]
        assert len(hit) == 3

    def test_negative_length_is_clamped_to_zero(self, zero_source):
        assert password_engine.generate(_options(-5), rng=zero_source) == ""

    def test_uses_injected_source_for_every_decision(self, zero_source):
        password_engine.generate(_options(10), rng=zero_source)
        # 4 mandatory + 6 fill + 9 shuffle swaps
        assert zero_source.calls == 4 + 6 + 9

    def test_fails_closed_without_secure_source(self, failing_source):
        with pytest.raises(SecureRandomUnavailableError):
            password_engine.generate(_options(16), rng=failing_source)

    def test_default_source_fails_closed(self, monkeypatch):
        import secrets

        def boom(n):
            raise NotImplementedError("no urandom")

        monkeypatch.setattr(secrets, "token_bytes", boom)
        with pytest.raises(SecureRandomUnavailableError):
            password_engine.generate(_options(16))

    def test_two_calls_differ(self):
        options = _options(32)
        assert password_engine.generate(options) != password_engine.generate(options)
