"""Generación de nombres legibles a partir de una wordlist."""

from __future__ import annotations

import random
from typing import Sequence

from core.domain.errors import ValidationError

SEPARATOR = "-"


def generate_name(
    wordlist: Sequence[str],
    length: int,
    rng: random.Random | None = None,
) -> str:
    """Draw `length` words uniformly (with replacement) and join them with '-'.

    `length == 0` yields an empty string. No uniqueness is guaranteed
    across calls. Pass a seeded `random.Random` for reproducible names.
    """

    if length < 0:
        raise ValueError("length must be >= 0")
    if length == 0:
        return ""
    if not wordlist:
        raise ValidationError("is empty, cannot generate a name")

    rng = rng or random.Random()
    count = len(wordlist)
    return SEPARATOR.join(wordlist[rng.randrange(count)] for _ in range(length))
