"""Ejecuta kioku desde un checkout: `python -m main -l 4 -o runs.jsonl`.

Equivale al script `kioku` instalado; añade `src/` al path para los
paquetes `cli`, `core` y `adapters`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    # UnicodeEncodeError en terminales Windows (cp1252 vs utf-8).
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
