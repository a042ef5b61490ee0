"""Generation session orchestration.

This module wires the engines, the analyzer and the history ledger the way
a single UI session uses them. The CLI delegates every generation through
`GeneratorSession`, which keeps printing and prompting out of the core and
makes the same flow reusable from tests or other entry-points.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from core.config import AppSettings
from core.domain.language import Language
from core.domain.messages import message
from core.domain.models import (
    HistoryEntry,
    PasswordOptions,
    PasswordResult,
    PasswordStrength,
    StrengthResult,
    UuidBatch,
    UuidOptions,
)
from core.interfaces.random_source import SecureRandomSource
from core.services import password_engine, strength, uuid_engine
from core.services.history import HistoryLedger

logger = logging.getLogger(__name__)

_EMPTY_STRENGTH = StrengthResult(score=0, strength=PasswordStrength.WEAK)


@dataclass
class GeneratorSession:
    """State owned by one caller session: language, random source and history."""

    settings: AppSettings = field(default_factory=AppSettings)
    rng: SecureRandomSource | None = None
    ledger: HistoryLedger = field(default_factory=HistoryLedger)
    language: Language | None = None

    def __post_init__(self) -> None:
        if self.language is None:
            self.language = self.settings.default_language

    @property
    def history(self) -> list[HistoryEntry]:
        return self.ledger.entries()

    def default_password_options(self) -> PasswordOptions:
        return PasswordOptions(
            length=self.settings.default_length,
            include_uppercase=self.settings.include_uppercase,
            include_lowercase=self.settings.include_lowercase,
            include_numbers=self.settings.include_numbers,
            include_symbols=self.settings.include_symbols,
        )

    def default_uuid_options(self) -> UuidOptions:
        return UuidOptions(
            quantity=self.settings.uuid_quantity,
            uppercase=self.settings.uuid_uppercase,
        )

    def generate_password(self, options: PasswordOptions) -> PasswordResult:
        """Generate, score, analyze and record a password.

        An empty result (no class enabled) scores 0/weak, carries no
        analysis and is not recorded in the history.
        """

        charset_size = len(password_engine.build_charset(options))
        password = password_engine.generate(options, rng=self.rng)
        if not password:
            return PasswordResult(password="", charset_size=charset_size, strength=_EMPTY_STRENGTH)

        result = PasswordResult(
            password=password,
            charset_size=charset_size,
            strength=strength.score(password),
            analysis=strength.analyze(password, charset_size, self.language),
        )
        self.ledger.record_value(password)
        logger.info(
            "Password generated: length=%d strength=%s",
            len(password),
            result.strength.strength.value,
        )
        return result

    def generate_uuids(self, options: UuidOptions) -> UuidBatch:
        """Generate a UUID batch; only its first value enters the history."""

        values = uuid_engine.generate(options, rng=self.rng)
        if values:
            self.ledger.record_value(values[0])
        logger.info("UUID batch generated: quantity=%d", len(values))
        return UuidBatch(values=values, tips=[message("tips.uuid_info", self.language)])
