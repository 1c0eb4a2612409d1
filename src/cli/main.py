"""CLI de kioku (Typer).

Orden de ejecución:
wordlist -> nombre -> stdout -> (opcional) revisión + metadata.
"""

from __future__ import annotations

import os
import random
import sys
from contextlib import suppress
from importlib import metadata
from pathlib import Path
from typing import Optional

import pydantic
import typer

from adapters.metadata_writer import write_metadata
from adapters.revision import probe_revision
from cli.ui_components import (
    configure_logging,
    confirm_download,
    print_error,
    print_info,
    print_warning,
)
from core.config import AppSettings
from core.domain.errors import BrokenOutput, ConfigError, KiokuError
from core.namegen import generate_name
from core.resources_loader import (
    ensure_default_wordlist,
    get_default_wordlist_path,
    remove_default_wordlist,
)
from core.wordlist import WordSource, load_source

BROKEN_PIPE_EXIT_CODE = 141

app = typer.Typer(
    add_completion=False,
    help="Generate random human-readable strings for naming experiments and log associated metadata.",
)


def _version() -> str:
    try:
        return metadata.version("kioku")
    except metadata.PackageNotFoundError:
        return "unknown"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"kioku {_version()}")
        raise typer.Exit()


def load_settings() -> AppSettings:
    try:
        return AppSettings()
    except pydantic.ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def _emit(name: str) -> None:
    try:
        sys.stdout.write(name + "\n")
        sys.stdout.flush()
    except BrokenPipeError as exc:
        raise BrokenOutput() from exc


def _silence_stdout() -> None:
    # Python flushes stdout again at exit; point it at devnull so that flush
    # does not raise a second BrokenPipeError.
    with suppress(OSError, ValueError):
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


def generate(
    *,
    settings: AppSettings,
    length: int,
    output: str | None,
    words: Path | None,
    assume_yes: bool,
    seed: int | None,
) -> str:
    source = WordSource.from_path(words) if words is not None else WordSource.default()

    def resolve_default() -> Path:
        return ensure_default_wordlist(
            settings,
            confirm=(lambda _url: True) if assume_yes else confirm_download,
        )

    wordlist = load_source(source, resolve_default=resolve_default, warning=print_warning)
    rng = random.Random(seed) if seed is not None else None
    name = generate_name(wordlist, length, rng)
    _emit(name)

    if output is not None:
        write_metadata(output, name, probe_revision())
    return name


@app.command()
def main(
    length: Optional[int] = typer.Option(
        None,
        "--length",
        "-l",
        min=0,
        metavar="LENGTH",
        help="Length of the generated name in words [default: 3]",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        metavar="FILE",
        help="Output metadata in JSON format to FILE (.jsonl appends)",
    ),
    words: Optional[Path] = typer.Option(
        None,
        "--words",
        "-w",
        metavar="WORDLIST",
        help="Specify wordlist to use (one word per line)",
    ),
    remove_default: bool = typer.Option(
        False,
        "--remove-default",
        help="Remove the cached default wordlist and exit",
    ),
    assume_yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Download the default wordlist without asking",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed the random source for reproducible names",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr"),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Print version and exit",
    ),
) -> None:
    """Print a random name such as `amber-falcon-river`."""

    configure_logging(verbose)
    hidden_path: Path | None = None

    try:
        settings = load_settings()
        if words is None:
            hidden_path = get_default_wordlist_path(settings)

        if remove_default:
            if remove_default_wordlist(settings):
                print_info("Removed cached default wordlist")
            else:
                print_info("No cached default wordlist to remove")
            return

        generate(
            settings=settings,
            length=settings.default_length if length is None else length,
            output=output,
            words=words,
            assume_yes=assume_yes,
            seed=seed,
        )
    except BrokenOutput:
        _silence_stdout()
        raise typer.Exit(code=BROKEN_PIPE_EXIT_CODE)
    except KiokuError as exc:
        show_path = exc.path is None or exc.path != hidden_path
        print_error(exc.describe(show_path=show_path))
        raise typer.Exit(code=1)


def run() -> None:
    app()
