"""Escritura del registro de metadata.

- `.json`: un objeto JSON con indentación; el fichero se trunca en cada ejecución.
- `.jsonl`: un objeto compacto por línea; el fichero crece con cada ejecución.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from core.domain.errors import FileError
from core.domain.models import MetadataRecord, WriteMode, resolve_metadata_path

logger = logging.getLogger(__name__)


def serialize_record(record: MetadataRecord, mode: WriteMode) -> str:
    payload = record.model_dump(mode="json")
    if mode is WriteMode.APPEND:
        return json.dumps(payload, ensure_ascii=False) + "\n"
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


def write_metadata(
    path: str | Path,
    label: str,
    revision: str | None = None,
    *,
    record: MetadataRecord | None = None,
) -> Path:
    """Escribe el registro de `label` y devuelve la ruta resuelta.

    Si se pasa `record` se usa tal cual (útil para timestamps fijos en tests).

    Raises:
        FileError: directorio inexistente, permisos o error de disco.
    """

    target = resolve_metadata_path(path)
    mode = WriteMode.for_path(target)
    record = record or MetadataRecord.now(label, revision)
    text = serialize_record(record, mode)

    try:
        with target.open(mode.open_flag(), encoding="utf-8") as fh:
            fh.write(text)
    except OSError as exc:
        raise FileError(target, exc, action="write metadata") from exc

    logger.debug("Wrote metadata (%s) to %s", mode.value, target)
    return target
