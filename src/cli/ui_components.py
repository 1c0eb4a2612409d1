"""Componentes de UI para la CLI (Rich).

Todo lo que no es el nombre generado va a stderr, para que stdout se
pueda usar en pipelines (`RUN=$(kioku)`).
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

err_console = Console(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    """Instala un `RichHandler` en el logger raíz (stderr)."""

    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    handler = RichHandler(console=err_console, show_time=False, show_path=verbose)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def print_error(message: str) -> None:
    err_console.print(Text(message, style="red"), soft_wrap=True)


def print_warning(message: str) -> None:
    err_console.print(Text(message, style="yellow"), soft_wrap=True)


def print_info(message: str) -> None:
    err_console.print(Text(message, style="dim"), soft_wrap=True)


def confirm_download(url: str) -> bool:
    """Pregunta si se puede descargar la wordlist por defecto.

    Sin terminal interactiva (EOF en stdin) se interpreta como "no".
    """

    print_warning("No default wordlist found.")
    try:
        return typer.confirm(f"Download it from {url}?", default=False, err=True)
    except typer.Abort:
        return False
