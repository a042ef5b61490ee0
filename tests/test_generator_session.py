"""Tests for the session orchestration (engine -> analyzer -> ledger)."""

from __future__ import annotations

import logging

import pytest

from core.config import AppSettings
from core.domain.charsets import SYMBOLS
from core.domain.errors import SecureRandomUnavailableError
from core.domain.language import Language
from core.domain.messages import message
from core.domain.models import PasswordOptions, PasswordStrength, UuidOptions
from core.services.generator_session import GeneratorSession


class TestPasswordFlow:
    def test_full_options_scenario(self):
        session = GeneratorSession()
        result = session.generate_password(PasswordOptions(length=16))

        pw = result.password
        assert len(pw) == 16
        assert any(c.isupper() for c in pw)
        assert any(c.islower() for c in pw)
        assert any(c.isdigit() for c in pw)
        assert any(c in SYMBOLS for c in pw)
        assert result.charset_size == 91
        assert result.strength.score >= 80
        assert result.analysis is not None
        assert result.analysis.entropy == pytest.approx(16 * 6.5078, abs=0.01)

        assert [e.value for e in session.history] == [pw]

    def test_empty_result_is_not_recorded(self, failing_source):
        session = GeneratorSession(rng=failing_source)
        options = PasswordOptions(
            include_uppercase=False,
            include_lowercase=False,
            include_numbers=False,
            include_symbols=False,
        )
        result = session.generate_password(options)
        assert result.password == ""
        assert result.strength.score == 0
        assert result.strength.strength is PasswordStrength.WEAK
        assert result.analysis is None
        assert session.history == []

    def test_language_flows_into_analysis(self):
        session = GeneratorSession(language=Language.CHINESE)
        result = session.generate_password(PasswordOptions(length=64))
        assert result.analysis is not None
        # Every class is mandatory, so a 64-char password always has digits and symbols.
        assert result.analysis.tips == [message("tips.perfect", Language.CHINESE)]
        assert result.analysis.cracking_time == message("time.forever", Language.CHINESE)

    def test_fails_closed(self, failing_source):
        session = GeneratorSession(rng=failing_source)
        with pytest.raises(SecureRandomUnavailableError):
            session.generate_password(PasswordOptions())
        assert session.history == []

    def test_secrets_are_not_logged(self, caplog):
        session = GeneratorSession()
        with caplog.at_level(logging.DEBUG):
            result = session.generate_password(PasswordOptions(length=32))
            batch = session.generate_uuids(UuidOptions(quantity=2))
        assert result.password not in caplog.text
        for value in batch.values:
            assert value not in caplog.text


class TestUuidFlow:
    def test_batch_records_only_first_value(self):
        session = GeneratorSession()
        batch = session.generate_uuids(UuidOptions(quantity=3))
        assert len(batch.values) == 3
        assert len(session.history) == 1
        assert session.history[0].value == batch.values[0]
        assert batch.tips == [message("tips.uuid_info")]
        assert batch.joined() == "\n".join(batch.values)

    def test_shared_ledger_across_engines(self):
        session = GeneratorSession()
        session.generate_password(PasswordOptions(length=8))
        batch = session.generate_uuids(UuidOptions(quantity=2, uppercase=True))
        assert session.history[0].value == batch.values[0]
        assert len(session.history) == 2

    def test_history_is_bounded(self):
        session = GeneratorSession()
        for _ in range(7):
            session.generate_uuids(UuidOptions())
        assert len(session.history) == 5


class TestDefaults:
    def test_defaults_come_from_settings(self, monkeypatch):
        monkeypatch.setenv("PASSFORGE_DEFAULT_LENGTH", "24")
        monkeypatch.setenv("PASSFORGE_INCLUDE_SYMBOLS", "false")
        monkeypatch.setenv("PASSFORGE_UUID_QUANTITY", "4")
        monkeypatch.setenv("PASSFORGE_DEFAULT_LANGUAGE", "zh")
        session = GeneratorSession(settings=AppSettings())

        options = session.default_password_options()
        assert options.length == 24
        assert options.include_symbols is False
        assert session.default_uuid_options().quantity == 4
        assert session.language is Language.CHINESE

    def test_explicit_language_wins(self):
        session = GeneratorSession(settings=AppSettings(default_language=Language.CHINESE), language=Language.ENGLISH)
        assert session.language is Language.ENGLISH
