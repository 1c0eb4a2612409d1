"""Errores del dominio.

Taxonomía:
- `FileError`: fallo de I/O sobre un fichero concreto (ruta + causa).
- `ValidationError`: la wordlist no cumple el formato.
- `ConfigError`: no se puede resolver una ubicación necesaria.
- `FetchError`: la descarga de la wordlist por defecto falló.
- `BrokenOutput`: quien lee stdout cerró el pipe; no es un error de usuario.
"""

from __future__ import annotations

from pathlib import Path


class KiokuError(Exception):
    """Base de todos los errores que la CLI convierte en exit code 1.

    `path` es el fichero implicado, si lo hay.
    """

    path: Path | None = None

    def describe(self, *, show_path: bool = True) -> str:
        return str(self)


class FileError(KiokuError):
    """I/O failure on a named file.

    `describe(show_path=False)` drops the filename, used for files in
    system-managed locations such as the cached default wordlist.
    """

    def __init__(self, path: str | Path, cause: OSError, *, action: str = "read") -> None:
        self.path = Path(path)
        self.cause = cause
        self.action = action
        super().__init__(self.describe())

    def describe(self, *, show_path: bool = True) -> str:
        reason = self.cause.strerror or str(self.cause)
        if show_path:
            return f"Failed to {self.action} file {self.path}: {reason}"
        return f"Failed to {self.action} file: {reason}"


class ValidationError(KiokuError):
    """Wordlist content fails the format rules."""

    def __init__(self, reason: str, *, path: str | Path | None = None) -> None:
        self.reason = reason
        self.path = Path(path) if path is not None else None
        super().__init__(self.describe())

    def describe(self, *, show_path: bool = True) -> str:
        if show_path and self.path is not None:
            return f"Wordlist {self.path} {self.reason}"
        return f"Wordlist {self.reason}"


class ConfigError(KiokuError):
    """A required directory or location cannot be resolved."""


class FetchError(KiokuError):
    """Network acquisition of the default wordlist failed."""


class BrokenOutput(KiokuError):
    """Standard output was closed by its consumer."""
