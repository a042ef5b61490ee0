"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que la sesión y la CLI lean los valores por defecto de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    DotEnvSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from core.domain.language import Language
from core.domain.models import (
    PASSWORD_LENGTH_MAX,
    PASSWORD_LENGTH_MIN,
    UUID_QUANTITY_MAX,
    UUID_QUANTITY_MIN,
)

APP_NAME = "passforge"
ENV_PREFIX = "PASSFORGE_"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# passforge user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI y sesión.

    Nota: aquí solo hay preferencias; nunca se guardan secretos generados.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        env_file_encoding="utf-8",
    )

    default_language: Language = Field(
        default=Language.ENGLISH,
        description="Idioma por defecto para tiempos de crackeo y consejos (en/zh).",
    )

    default_length: int = Field(
        default=16,
        ge=PASSWORD_LENGTH_MIN,
        le=PASSWORD_LENGTH_MAX,
        description="Longitud de contraseña por defecto.",
    )
    include_uppercase: bool = Field(default=True, description="Incluir A-Z por defecto.")
    include_lowercase: bool = Field(default=True, description="Incluir a-z por defecto.")
    include_numbers: bool = Field(default=True, description="Incluir 0-9 por defecto.")
    include_symbols: bool = Field(default=True, description="Incluir símbolos por defecto.")

    uuid_quantity: int = Field(
        default=1,
        ge=UUID_QUANTITY_MIN,
        le=UUID_QUANTITY_MAX,
        description="Cantidad de UUIDs por defecto.",
    )
    uuid_uppercase: bool = Field(default=False, description="UUIDs en mayúsculas por defecto.")

    show_banner: bool = Field(
        default=True,
        description="Mostrar el banner en modos interactivos.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Resuelve los `.env` en cada construcción, no al importar el módulo.

        Orden: proyecto primero (dev), luego config global de usuario; el
        último archivo gana, y las env vars ganan a ambos.
        """

        user_dotenv = DotEnvSettingsSource(
            settings_cls,
            env_file=(".env", get_user_env_file()),
        )
        return init_settings, env_settings, user_dotenv, file_secret_settings
