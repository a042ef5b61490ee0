"""Password generation from constrained character classes.

The engine is a pure function of (options, secure random source):

1. build the active charset from the enabled classes in canonical order;
2. draw one mandatory character per enabled class;
3. fill the remaining positions from the combined charset;
4. Fisher-Yates shuffle every position so mandatory characters are not
   front-loaded;
5. truncate to the requested length.

Every random decision goes through `SecureRandomSource`. Indices are taken
as `uint32 % n`; the resulting modulo bias is an accepted approximation.
"""

from __future__ import annotations

import logging

from adapters.secure_random import resolve_random_source
from core.domain.models import PasswordOptions
from core.interfaces.random_source import SecureRandomSource, random_below

logger = logging.getLogger(__name__)


def build_charset(options: PasswordOptions) -> str:
    """Concatenate the enabled classes (uppercase, lowercase, digits, symbols)."""

    return "".join(cls.characters for cls in options.enabled_classes())


def _pick(source: SecureRandomSource, charset: str) -> str:
    return charset[random_below(source, len(charset))]


def shuffle(chars: list[str], source: SecureRandomSource) -> None:
    """In-place Fisher-Yates shuffle driven by the secure source."""

    for i in range(len(chars) - 1, 0, -1):
        j = random_below(source, i + 1)
        chars[i], chars[j] = chars[j], chars[i]


def generate(options: PasswordOptions, *, rng: SecureRandomSource | None = None) -> str:
    """Generate a password for `options`.

    Returns an empty string when no class is enabled. Never raises for any
    options value; only a failing secure source propagates
    (`SecureRandomUnavailableError`).
    """

    length = max(0, options.length)
    classes = options.enabled_classes()
    charset = build_charset(options)
    if not charset:
        logger.debug("No character class enabled; returning empty password")
        return ""

    source = resolve_random_source(rng)

    result = [_pick(source, cls.characters) for cls in classes]
    remaining = max(0, length - len(result))
    result.extend(_pick(source, charset) for _ in range(remaining))

    shuffle(result, source)

    logger.debug(
        "Generated password: length=%d classes=%s charset_size=%d",
        min(length, len(result)),
        ",".join(cls.value for cls in classes),
        len(charset),
    )
    return "".join(result[:length])
