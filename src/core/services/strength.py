"""Strength scoring and local entropy analysis.

Two independent computations over the same password:

- `score` is a heuristic point system based on length tiers and which
  character classes appear in the password.
- `analyze` is information-theoretic: `length * log2(charset_size)` bits,
  a brute-force time at a fixed offline guess rate, and regex-style tips.

They are intentionally not merged; a long password from a small charset
can have high entropy and still only score "good".
"""

from __future__ import annotations

import math
import re

from core.domain.language import Language
from core.domain.messages import message
from core.domain.models import (
    CrackTimeBucket,
    CrackTimeEstimate,
    LocalAnalysis,
    PasswordStrength,
    StrengthResult,
    Tip,
)

# Offline fast-hash attacker.
GUESSES_PER_SECOND = 100e9

_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SYMBOL_RE = re.compile(r"[^A-Za-z0-9]")

_LENGTH_TIERS: tuple[tuple[int, int], ...] = ((8, 20), (12, 15), (20, 15))
_CLASS_POINTS: tuple[tuple[re.Pattern[str], int], ...] = (
    (_UPPER_RE, 10),
    (_LOWER_RE, 10),
    (_DIGIT_RE, 15),
    (_SYMBOL_RE, 15),
)
_STRENGTH_BUCKETS: tuple[tuple[int, PasswordStrength], ...] = (
    (40, PasswordStrength.WEAK),
    (60, PasswordStrength.FAIR),
    (80, PasswordStrength.GOOD),
    (95, PasswordStrength.STRONG),
)

# (upper bound in seconds, bucket, unit size in seconds)
_CRACK_TIME_THRESHOLDS: tuple[tuple[float, CrackTimeBucket, float], ...] = (
    (60, CrackTimeBucket.SECONDS, 1),
    (3_600, CrackTimeBucket.MINUTES, 60),
    (86_400, CrackTimeBucket.HOURS, 3_600),
    (31_536_000, CrackTimeBucket.DAYS, 86_400),
    (3_153_600_000, CrackTimeBucket.YEARS, 31_536_000),
    (3_153_600_000_000, CrackTimeBucket.CENTURIES, 3_153_600_000),
)


def strength_for_score(points: int) -> PasswordStrength:
    for upper, strength in _STRENGTH_BUCKETS:
        if points < upper:
            return strength
    return PasswordStrength.LEGENDARY


def score(password: str) -> StrengthResult:
    """Heuristic score (0..100) and its strength bucket."""

    points = 0
    for min_length, bonus in _LENGTH_TIERS:
        if len(password) >= min_length:
            points += bonus
    for pattern, bonus in _CLASS_POINTS:
        if pattern.search(password):
            points += bonus
    return StrengthResult(score=points, strength=strength_for_score(points))


def entropy(length: int, charset_size: int) -> float:
    """Bits of entropy: `length * log2(charset_size)`; 0 for empty input."""

    if length <= 0 or charset_size <= 0:
        return 0.0
    return length * math.log2(charset_size)


def estimate_crack_time(bits: float) -> CrackTimeEstimate:
    try:
        seconds = 2.0**bits / GUESSES_PER_SECOND
    except OverflowError:
        seconds = math.inf

    if seconds < 1:
        return CrackTimeEstimate(seconds=seconds, bucket=CrackTimeBucket.INSTANT)
    for upper, bucket, unit in _CRACK_TIME_THRESHOLDS:
        if seconds < upper:
            return CrackTimeEstimate(seconds=seconds, bucket=bucket, count=math.floor(seconds / unit))
    return CrackTimeEstimate(seconds=seconds, bucket=CrackTimeBucket.FOREVER)


def format_crack_time(estimate: CrackTimeEstimate, language: Language | None = None) -> str:
    label = message(f"time.{estimate.bucket.value}", language)
    if estimate.count is None:
        return label
    return f"{estimate.count} {label}"


def collect_tips(password: str) -> list[Tip]:
    """Tips checked against the password itself, not the options used."""

    tips: list[Tip] = []
    if len(password) < 12:
        tips.append(Tip.LENGTH)
    if not _SYMBOL_RE.search(password):
        tips.append(Tip.SYMBOLS)
    if not _DIGIT_RE.search(password):
        tips.append(Tip.NUMBERS)
    if not tips:
        tips.append(Tip.PERFECT)
    return tips


def analyze(password: str, charset_size: int, language: Language | None = None) -> LocalAnalysis:
    bits = entropy(len(password), charset_size)
    estimate = estimate_crack_time(bits)
    return LocalAnalysis(
        entropy=bits,
        cracking_time=format_crack_time(estimate, language),
        tips=[message(f"tips.{tip.value}", language) for tip in collect_tips(password)],
    )
