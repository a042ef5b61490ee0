"""Copia al portapapeles (pyperclip).

Por qué está en adapters:
- El portapapeles es un colaborador externo de la UI, no parte del motor.
- Un fallo aquí nunca invalida lo ya generado: la CLI lo muestra como aviso.
"""

from __future__ import annotations

import logging

import pyperclip

from core.domain.errors import ClipboardUnavailableError

logger = logging.getLogger(__name__)


def copy_text(text: str) -> None:
    """Copia `text` al portapapeles del sistema."""

    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        logger.warning("Clipboard copy failed: %s", exc)
        raise ClipboardUnavailableError(
            "No clipboard backend available (install xclip/xsel on Linux)."
        ) from exc
    logger.debug("Copied %d characters to clipboard", len(text))


def check_clipboard() -> tuple[bool, str]:
    """Diagnóstico para `doctor` sin tocar el contenido del portapapeles."""

    try:
        pyperclip.paste()
    except pyperclip.PyperclipException as exc:
        return False, str(exc)
    return True, "OK"
