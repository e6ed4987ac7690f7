"""Configuración del Core.

Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
Flags given on the command line take precedence over these values.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AppSettings(BaseSettings):
    """Configuración central de la aplicación."""

    model_config = SettingsConfigDict(
        env_prefix="BYTEPIPE_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    log_level: LogLevel = Field(
        default="WARNING",
        description="Nivel de logging cuando no se usa --verbose.",
    )
    create_output_dirs: bool = Field(
        default=False,
        description="Crear los directorios padre de --output si no existen.",
    )
    trace: bool = Field(
        default=False,
        description="Mostrar la tabla de etapas en stderr aunque no se pase --trace.",
    )
