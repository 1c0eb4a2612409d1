"""Wordlist por defecto: ubicación, descarga en el primer uso y borrado.

La wordlist no se incluye en el paquete; se descarga a
`<data dir>/wordlist.txt` tras confirmación del usuario y se reutiliza en
las ejecuciones siguientes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import httpx

from adapters.http_client import build_client
from adapters.wordlist_fetcher import fetch_wordlist
from core.config import AppSettings
from core.domain.errors import ConfigError, FileError

logger = logging.getLogger(__name__)

WORDLIST_FILENAME = "wordlist.txt"


def get_default_wordlist_path(settings: AppSettings | None = None) -> Path:
    settings = settings or AppSettings()
    return settings.resolve_data_dir() / WORDLIST_FILENAME


def ensure_default_wordlist(
    settings: AppSettings | None = None,
    *,
    confirm: Callable[[str], bool],
    client: httpx.Client | None = None,
) -> Path:
    """Devuelve la ruta de la wordlist cacheada, descargándola si falta.

    `confirm` recibe la URL y decide si se permite la descarga.

    Raises:
        ConfigError: el usuario rechazó la descarga.
        FetchError: fallo de red o respuesta vacía.
        FileError: no se pudo escribir la caché.
    """

    settings = settings or AppSettings()
    path = get_default_wordlist_path(settings)
    if path.is_file():
        return path

    url = settings.wordlist_url
    if not confirm(url):
        raise ConfigError(
            "No default wordlist available; pass --words or allow the download"
        )

    if client is not None:
        return fetch_wordlist(url, path, client)
    with build_client(settings) as owned:
        return fetch_wordlist(url, path, owned)


def remove_default_wordlist(settings: AppSettings | None = None) -> bool:
    """Borra la wordlist cacheada. Devuelve False si no existía."""

    path = get_default_wordlist_path(settings)
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as exc:
        raise FileError(path, exc, action="remove wordlist") from exc
    logger.debug("Removed cached wordlist %s", path)
    return True
