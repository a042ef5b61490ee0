"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a la CLI ni a ningún modelo de estado reactivo.
- Los modelos son inmutables (`frozen=True`): el llamador posee el ciclo de
  vida y vuelve a invocar el motor cuando cambia la configuración.

Nota:
- Los rangos de la UI (longitud 4..64, cantidad 1..50) los impone el llamador;
  los motores solo fuerzan `>= 0`.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.charsets import CharacterClass

PASSWORD_LENGTH_MIN = 4
PASSWORD_LENGTH_MAX = 64
UUID_QUANTITY_MIN = 1
UUID_QUANTITY_MAX = 50


class GeneratorMode(str, Enum):
    PASSWORD = "password"
    UUID = "uuid"


class PasswordStrength(str, Enum):
    WEAK = "weak"
    FAIR = "fair"
    GOOD = "good"
    STRONG = "strong"
    LEGENDARY = "legendary"


class CrackTimeBucket(str, Enum):
    """Rangos de tiempo de crackeo, en orden ascendente."""

    INSTANT = "instant"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    YEARS = "years"
    CENTURIES = "centuries"
    FOREVER = "forever"


class Tip(str, Enum):
    LENGTH = "length"
    SYMBOLS = "symbols"
    NUMBERS = "numbers"
    PERFECT = "perfect"


class PasswordOptions(BaseModel):
    """Configuración de clases de caracteres para una contraseña."""

    model_config = ConfigDict(frozen=True)

    length: int = Field(
        default=16,
        description="Longitud solicitada (la UI la limita a 4..64).",
    )
    include_uppercase: bool = Field(default=True, description="Incluir A-Z.")
    include_lowercase: bool = Field(default=True, description="Incluir a-z.")
    include_numbers: bool = Field(default=True, description="Incluir 0-9.")
    include_symbols: bool = Field(default=True, description="Incluir símbolos.")

    def enabled_classes(self) -> list[CharacterClass]:
        """Clases activas en orden canónico (mayús, minús, dígitos, símbolos)."""

        flags = {
            CharacterClass.UPPERCASE: self.include_uppercase,
            CharacterClass.LOWERCASE: self.include_lowercase,
            CharacterClass.NUMBERS: self.include_numbers,
            CharacterClass.SYMBOLS: self.include_symbols,
        }
        return [cls for cls in CharacterClass if flags[cls]]


class UuidOptions(BaseModel):
    """Configuración de un lote de UUID v4 (no hay otras versiones)."""

    model_config = ConfigDict(frozen=True)

    quantity: int = Field(
        default=1,
        description="Número de UUIDs (la UI lo limita a 1..50).",
    )
    uppercase: bool = Field(
        default=False,
        description="Pasar a mayúsculas el UUID completo tras generarlo.",
    )


class StrengthResult(BaseModel):
    """Puntuación heurística (longitud + composición de clases)."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=100, description="Puntos acumulados (0..100).")
    strength: PasswordStrength = Field(..., description="Bucket derivado del score.")


class CrackTimeEstimate(BaseModel):
    model_config = ConfigDict(frozen=True)

    seconds: float = Field(..., ge=0.0, description="Segundos estimados (puede ser inf).")
    bucket: CrackTimeBucket
    count: int | None = Field(
        default=None,
        ge=0,
        description="floor(segundos / unidad); None para instant/forever.",
    )


class LocalAnalysis(BaseModel):
    """Análisis local: entropía, tiempo de crackeo y consejos.

    Usa señales distintas a `StrengthResult`; ambos pueden discrepar para
    entradas límite y eso es el comportamiento esperado.
    """

    model_config = ConfigDict(frozen=True)

    entropy: float = Field(..., ge=0.0, description="Bits de entropía estimados.")
    cracking_time: str = Field(..., description="Bucket de tiempo ya formateado.")
    tips: list[str] = Field(default_factory=list, description="Consejos en orden.")


class HistoryEntry(BaseModel):
    """Resultado reciente (contraseña o primer UUID de un lote)."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Token opaco y único.")
    value: str = Field(..., description="Valor generado.")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Momento de creación (UTC).",
    )

    @classmethod
    def create(cls, value: str) -> "HistoryEntry":
        return cls(id=uuid.uuid4().hex, value=value)


class PasswordResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    password: str = Field(..., description="Contraseña generada (posiblemente vacía).")
    charset_size: int = Field(..., ge=0, description="Tamaño del charset combinado.")
    strength: StrengthResult
    analysis: LocalAnalysis | None = Field(
        default=None,
        description="Ausente cuando no hay salida (ninguna clase activa).",
    )


class UuidBatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    values: list[str] = Field(default_factory=list, description="UUIDs en orden de generación.")
    tips: list[str] = Field(default_factory=list)

    def joined(self) -> str:
        """Todos los UUIDs separados por saltos de línea ("copiar todo")."""

        return "\n".join(self.values)
