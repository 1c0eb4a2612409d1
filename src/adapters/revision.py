"""Revisión del control de versiones (best-effort)."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def probe_revision(cwd: str | Path | None = None) -> str | None:
    """Commit id of HEAD for the repository enclosing `cwd`.

    git walks upward from `cwd` to find the repository. No repository,
    an unborn HEAD, a missing git binary or any other failure yields None.
    """

    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--verify", "--quiet", "HEAD"],
            cwd=str(cwd) if cwd is not None else None,
            text=True,
            stderr=subprocess.DEVNULL,
        ).strip()
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("No revision available: %s", exc)
        return None
    return out or None
