"""
Unit tests for name generation.
"""

import random

import pytest

from core.domain.errors import ValidationError
from core.namegen import SEPARATOR, generate_name

WORDS = ["alpha", "beta", "gamma", "delta"]


@pytest.mark.parametrize("length", [1, 2, 3, 7])
def test_name_has_requested_word_count(length):
    name = generate_name(WORDS, length)
    parts = name.split(SEPARATOR)
    assert len(parts) == length
    assert name.count(SEPARATOR) == length - 1
    assert all(part in WORDS for part in parts)
    assert not name.startswith(SEPARATOR) and not name.endswith(SEPARATOR)


def test_zero_length_is_empty():
    assert generate_name(WORDS, 0) == ""
    assert generate_name([], 0) == ""


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        generate_name(WORDS, -1)


def test_empty_wordlist_rejected():
    with pytest.raises(ValidationError):
        generate_name([], 2)


def test_seeded_source_is_reproducible():
    words = ["alpha", "beta"]
    first = generate_name(words, 6, random.Random(1234))
    second = generate_name(words, 6, random.Random(1234))
    assert first == second

    replay = random.Random(1234)
    expected = "-".join(words[replay.randrange(len(words))] for _ in range(6))
    assert first == expected


def test_single_word_list_repeats():
    assert generate_name(["solo"], 3) == "solo-solo-solo"


def test_draws_cover_the_list():
    rng = random.Random(7)
    seen = set()
    for _ in range(200):
        seen.update(generate_name(WORDS, 2, rng).split(SEPARATOR))
    assert seen == set(WORDS)
