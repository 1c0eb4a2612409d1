"""Configuración del Core.

- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Resuelve el directorio de datos por usuario donde vive la wordlist cacheada.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.errors import ConfigError

APP_ORGANIZATION = "kioku"
APP_NAME = "kioku"

DEFAULT_WORDLIST_URL = (
    "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"
)


def _home() -> Path:
    try:
        return Path.home()
    except RuntimeError as exc:
        raise ConfigError("Could not determine the user home directory") from exc


def get_user_data_dir() -> Path:
    """Directorio de datos por usuario (cross-platform, sin dependencias).

    Se indexa por organización/aplicación:
    - Windows: %APPDATA%/<org>/<app>/data
    - macOS:   ~/Library/Application Support/org.<org>.<app>
    - resto:   $XDG_DATA_HOME/<app> o ~/.local/share/<app>
    """

    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else _home() / "AppData" / "Roaming"
        return base / APP_ORGANIZATION / APP_NAME / "data"
    if sys.platform == "darwin":
        return _home() / "Library" / "Application Support" / f"org.{APP_ORGANIZATION}.{APP_NAME}"

    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return _home() / ".local" / "share" / APP_NAME


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Los flags de la CLI tienen prioridad sobre estos valores.
    """

    model_config = SettingsConfigDict(
        env_prefix="KIOKU_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    wordlist_url: str = Field(
        default=DEFAULT_WORDLIST_URL,
        min_length=8,
        description="URL de la wordlist por defecto (texto plano, una palabra por línea).",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout de la descarga (segundos).",
    )
    user_agent: str = Field(
        default="kioku/0.1",
        min_length=1,
        description="User-Agent para la descarga de la wordlist.",
    )
    data_dir: Path | None = Field(
        default=None,
        description="Sustituye el directorio de datos por usuario (caché de la wordlist).",
    )
    default_length: int = Field(
        default=3,
        ge=0,
        le=64,
        description="Número de palabras por nombre cuando no se pasa --length.",
    )

    def resolve_data_dir(self) -> Path:
        return self.data_dir if self.data_dir is not None else get_user_data_dir()
