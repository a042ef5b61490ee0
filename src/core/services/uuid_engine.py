"""Version-4 UUID batches.

One construction path only: 16 secure random bytes with the version and
variant bits applied as fixed masks by `uuid.UUID(..., version=4)`.
"""

from __future__ import annotations

import logging
import uuid

from adapters.secure_random import resolve_random_source
from core.domain.models import UuidOptions
from core.interfaces.random_source import SecureRandomSource

logger = logging.getLogger(__name__)


def new_uuid4(source: SecureRandomSource) -> str:
    """Canonical 8-4-4-4-12 lowercase form of a fresh v4 UUID."""

    return str(uuid.UUID(bytes=source.token_bytes(16), version=4))


def generate(options: UuidOptions, *, rng: SecureRandomSource | None = None) -> list[str]:
    quantity = max(0, options.quantity)
    if quantity == 0:
        return []

    source = resolve_random_source(rng)
    values = [new_uuid4(source) for _ in range(quantity)]
    if options.uppercase:
        values = [value.upper() for value in values]

    logger.debug("Generated %d UUID(s) uppercase=%s", quantity, options.uppercase)
    return values
