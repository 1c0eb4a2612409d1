"""Descarga de la wordlist por defecto."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import httpx

from core.domain.errors import FetchError, FileError
from core.wordlist import parse_words

logger = logging.getLogger(__name__)


def fetch_wordlist(url: str, dest: Path, client: httpx.Client) -> Path:
    """GET `url` and store the body at `dest`.

    The body goes to a sibling temp file first and is renamed into place,
    so an interrupted download never leaves a truncated cache behind.
    """

    logger.debug("Fetching wordlist from %s", url)
    try:
        resp = client.get(url)
        resp.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise FetchError(
            f"Failed to download wordlist from {url}: HTTP {exc.response.status_code}"
        ) from exc
    except httpx.HTTPError as exc:
        raise FetchError(f"Failed to download wordlist from {url}: {exc}") from exc

    text = resp.text
    if not text.strip():
        raise FetchError(f"Downloaded wordlist from {url} is empty")
    # Invalid entries are reported when the cache is loaded.
    if not parse_words(text.splitlines(), warning=lambda _msg: None):
        raise FetchError(f"Downloaded wordlist from {url} contains no valid words")

    tmp = dest.with_name(dest.name + ".part")
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(text, encoding="utf-8")
        os.replace(tmp, dest)
    except OSError as exc:
        tmp.unlink(missing_ok=True)
        raise FileError(dest, exc, action="write wordlist") from exc

    logger.debug("Saved wordlist (%d bytes) to %s", len(text), dest)
    return dest
