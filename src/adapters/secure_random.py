"""Fuente de aleatoriedad del sistema operativo.

Por qué está en adapters:
- `secrets`/`os.urandom` son detalles de plataforma; el Core solo conoce
  `SecureRandomSource`.
- Falla cerrado: si el SO no expone una fuente segura se lanza
  `SecureRandomUnavailableError` y no se genera nada.
"""

from __future__ import annotations

import logging
import secrets

from core.domain.errors import SecureRandomUnavailableError
from core.interfaces.random_source import SecureRandomSource

logger = logging.getLogger(__name__)


class SystemRandomSource:
    """Implementa `SecureRandomSource` sobre `secrets.token_bytes`."""

    def token_bytes(self, n: int) -> bytes:
        try:
            return secrets.token_bytes(n)
        except (NotImplementedError, OSError) as exc:
            logger.error("Secure random source unavailable: %s", exc)
            raise SecureRandomUnavailableError(
                "The operating system did not provide a secure random source."
            ) from exc


def default_random_source() -> SystemRandomSource:
    return SystemRandomSource()


def check_secure_random(source: SecureRandomSource | None = None) -> tuple[bool, str]:
    """Diagnóstico para `doctor`: intenta leer 32 bytes seguros."""

    source = resolve_random_source(source)
    try:
        data = source.token_bytes(32)
    except SecureRandomUnavailableError as exc:
        return False, str(exc)
    if len(data) != 32:
        return False, f"short read ({len(data)} bytes)"
    return True, "OK"


def resolve_random_source(rng: SecureRandomSource | None = None) -> SecureRandomSource:
    """Devuelve `rng` si se inyecta; si no, la fuente del sistema."""

    return rng if rng is not None else default_random_source()
