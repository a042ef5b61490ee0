"""Errores del dominio.

Por qué una jerarquía propia:
- La CLI distingue fallos fatales (aleatoriedad segura) de avisos (portapapeles).
- Evita que los adaptadores filtren excepciones de librerías al Core.
"""

from __future__ import annotations


class PassforgeError(Exception):
    """Base de todos los errores de la aplicación."""


class SecureRandomUnavailableError(PassforgeError):
    """La fuente de aleatoriedad criptográfica del sistema no está disponible.

    Nunca se degrada a un generador no seguro: sin fuente segura no hay salida.
    """


class ClipboardUnavailableError(PassforgeError):
    """No hay backend de portapapeles utilizable (xclip/xsel/pbcopy...)."""
