"""Contrato de la fuente de aleatoriedad segura.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Los motores dependen de la abstracción; los tests inyectan fuentes
  deterministas y producción usa `adapters.secure_random`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SecureRandomSource(Protocol):
    """Contrato mínimo para una fuente de bytes criptográficamente segura.

    Reglas de diseño:
    - `token_bytes` es síncrono y devuelve exactamente `n` bytes.
    - Si la plataforma no puede servir bytes seguros debe lanzar
      `SecureRandomUnavailableError`, nunca devolver bytes no seguros.
    """

    def token_bytes(self, n: int) -> bytes:
        ...


def random_uint32(source: SecureRandomSource) -> int:
    """Entero uniforme de 32 bits (big-endian) leído de `source`."""

    return int.from_bytes(source.token_bytes(4), "big")


def random_below(source: SecureRandomSource, upper: int) -> int:
    """Índice en [0, upper) por reducción módulo de un uint32.

    El sesgo de módulo es < upper / 2**32 (≈2e-8 para los 91 caracteres) y se
    acepta como aproximación; no hay muestreo por rechazo.
    """

    if upper <= 0:
        raise ValueError("upper must be positive")
    return random_uint32(source) % upper
