"""Clases de caracteres para la generación de contraseñas.

El orden de declaración del Enum es el orden canónico con el que se
concatena el charset activo (mayúsculas, minúsculas, dígitos, símbolos).
"""

from __future__ import annotations

import string
from enum import Enum

SYMBOLS = "!@#$%^&*()_+~`|}{[]:;?><,./-="


class CharacterClass(str, Enum):
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    NUMBERS = "numbers"
    SYMBOLS = "symbols"

    @property
    def characters(self) -> str:
        return _CLASS_CHARACTERS[self]

    def contains(self, char: str) -> bool:
        return char in _CLASS_CHARACTERS[self]


_CLASS_CHARACTERS: dict[CharacterClass, str] = {
    CharacterClass.UPPERCASE: string.ascii_uppercase,
    CharacterClass.LOWERCASE: string.ascii_lowercase,
    CharacterClass.NUMBERS: string.digits,
    CharacterClass.SYMBOLS: SYMBOLS,
}
