"""Modelos del dominio (Pydantic v2).

- `MetadataRecord`: procedencia de un nombre generado (label, revisión, timestamp).
- `WriteMode`: decisión explícita truncate/append según la extensión del fichero.

Estos modelos describen *qué* se escribe, no *cómo* se abre el fichero.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

JSON_SUFFIX = ".json"
JSONL_SUFFIX = ".jsonl"


class MetadataRecord(BaseModel):
    """One generated name and where it came from."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(
        ...,
        description="Nombre generado (palabras unidas por '-').",
    )
    revision: str | None = Field(
        default=None,
        description="Commit del repositorio que contiene el cwd; null si no hay.",
    )
    timestamp: str = Field(
        ...,
        min_length=1,
        description="Hora local en formato RFC 3339.",
    )

    @classmethod
    def now(cls, label: str, revision: str | None = None) -> "MetadataRecord":
        """Build a record stamped with the current local time."""

        return cls(
            label=label,
            revision=revision,
            timestamp=datetime.now().astimezone().isoformat(),
        )


class WriteMode(str, Enum):
    """How the metadata file is opened."""

    TRUNCATE = "truncate"
    APPEND = "append"

    @classmethod
    def for_path(cls, path: str | Path) -> "WriteMode":
        """`.jsonl` accumulates records; anything else is overwritten."""

        return cls.APPEND if str(path).endswith(JSONL_SUFFIX) else cls.TRUNCATE

    def open_flag(self) -> str:
        return "a" if self is WriteMode.APPEND else "w"


def resolve_metadata_path(path: str | Path) -> Path:
    """Append `.json` unless the name already ends in `.json` or `.jsonl`."""

    name = str(path)
    if name.endswith(JSONL_SUFFIX) or name.endswith(JSON_SUFFIX):
        return Path(name)
    return Path(name + JSON_SUFFIX)
