"""Carga y validación de wordlists.

Política única (lenient):
- cada entrada se recorta (strip)
- se descartan las entradas vacías o con caracteres que no sean letras ASCII
- se emite un único aviso por carga si algo se descartó
- si no sobrevive ninguna palabra, la carga falla con `ValidationError`
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable

from core.domain.errors import FileError, ValidationError

logger = logging.getLogger(__name__)

INVALID_WORDS_WARNING = "Wordlist contains invalid words, discarding"

_ASCII_LETTERS = frozenset(string.ascii_letters)


def is_valid_word(word: str) -> bool:
    return bool(word) and all(ch in _ASCII_LETTERS for ch in word)


def parse_words(
    lines: Iterable[str],
    *,
    warning: Callable[[str], None] | None = None,
) -> list[str]:
    """Aplica la política de validación y devuelve las palabras en orden."""

    words: list[str] = []
    warned = False
    for raw in lines:
        word = raw.strip()
        if is_valid_word(word):
            words.append(word)
            continue
        if not warned:
            warned = True
            if warning is not None:
                warning(INVALID_WORDS_WARNING)
            else:
                logger.warning(INVALID_WORDS_WARNING)
    return words


def load_wordlist(
    path: str | Path,
    *,
    warning: Callable[[str], None] | None = None,
) -> list[str]:
    """Lee un fichero de una palabra por línea.

    Raises:
        FileError: el fichero no existe o no se puede leer.
        ValidationError: ninguna línea es una palabra válida.
    """

    path = Path(path)
    try:
        # Undecodable bytes become surrogates, which `is_valid_word` rejects.
        with path.open("r", encoding="utf-8", errors="surrogateescape") as fh:
            words = parse_words(fh, warning=warning)
    except OSError as exc:
        raise FileError(path, exc, action="read wordlist") from exc

    if not words:
        raise ValidationError("contains no valid words", path=path)
    logger.debug("Loaded %d words from %s", len(words), path)
    return words


@dataclass(frozen=True)
class WordSource:
    """Where the wordlist comes from.

    `path is None` means the cached default wordlist, resolved (and fetched
    on first use) by `core.resources_loader`.
    """

    path: Path | None = None

    @classmethod
    def default(cls) -> "WordSource":
        return cls()

    @classmethod
    def from_path(cls, path: str | Path) -> "WordSource":
        return cls(path=Path(path))

    @property
    def is_default(self) -> bool:
        return self.path is None


def load_source(
    source: WordSource,
    *,
    resolve_default: Callable[[], Path],
    warning: Callable[[str], None] | None = None,
) -> list[str]:
    """Carga la wordlist de `source`.

    `resolve_default` devuelve la ruta de la wordlist por defecto; solo se
    llama cuando `source.is_default`.
    """

    if source.path is not None:
        return load_wordlist(source.path, warning=warning)
    return load_wordlist(resolve_default(), warning=warning)
