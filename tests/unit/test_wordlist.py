"""
Unit tests for wordlist loading and validation.
"""

import logging

import pytest

from core.domain.errors import FileError, ValidationError
from core.wordlist import (
    INVALID_WORDS_WARNING,
    WordSource,
    is_valid_word,
    load_source,
    load_wordlist,
    parse_words,
)


class TestParseWords:
    def test_trims_and_keeps_order(self):
        assert parse_words(["  foo \n", "Bar\r\n", "qux"]) == ["foo", "Bar", "qux"]

    def test_discards_whitespace_entry_with_single_warning(self):
        warnings = []
        words = parse_words(["foo", "bar baz", "qux"], warning=warnings.append)
        assert words == ["foo", "qux"]
        assert warnings == [INVALID_WORDS_WARNING]

    def test_warns_once_for_many_invalid_entries(self):
        warnings = []
        words = parse_words(["ok", "", "d'oh", "naïve", "x1", "fine"], warning=warnings.append)
        assert words == ["ok", "fine"]
        assert len(warnings) == 1

    def test_no_warning_for_clean_input(self):
        warnings = []
        parse_words(["a", "b"], warning=warnings.append)
        assert warnings == []

    def test_falls_back_to_logger(self, caplog):
        with caplog.at_level(logging.WARNING, logger="core.wordlist"):
            parse_words(["good", "not good"])
        assert INVALID_WORDS_WARNING in caplog.text

    @pytest.mark.parametrize("word", ["abc", "ABC", "MiXeD"])
    def test_valid_words(self, word):
        assert is_valid_word(word)

    @pytest.mark.parametrize("word", ["", "a b", "a-b", "é", "42", "tab\tbed"])
    def test_invalid_words(self, word):
        assert not is_valid_word(word)


class TestLoadWordlist:
    def test_reads_one_word_per_line(self, wordlist_file):
        assert load_wordlist(wordlist_file) == ["alpha", "beta", "gamma"]

    def test_lenient_policy_on_file(self, tmp_path):
        path = tmp_path / "mixed.txt"
        path.write_text("foo\nbar baz\nqux", encoding="utf-8")
        warnings = []
        assert load_wordlist(path, warning=warnings.append) == ["foo", "qux"]
        assert len(warnings) == 1

    def test_missing_file_raises_file_error(self, tmp_path):
        path = tmp_path / "nope.txt"
        with pytest.raises(FileError) as excinfo:
            load_wordlist(path)
        assert excinfo.value.path == path
        assert isinstance(excinfo.value.cause, FileNotFoundError)
        assert str(path) in excinfo.value.describe()
        assert str(path) not in excinfo.value.describe(show_path=False)

    def test_directory_raises_file_error(self, tmp_path):
        with pytest.raises(FileError):
            load_wordlist(tmp_path)

    def test_no_valid_words_raises_validation_error(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("1\n2 3\n\n", encoding="utf-8")
        with pytest.raises(ValidationError) as excinfo:
            load_wordlist(path, warning=lambda _msg: None)
        assert excinfo.value.path == path
        assert str(path) in excinfo.value.describe()
        assert str(path) not in excinfo.value.describe(show_path=False)

    def test_undecodable_line_is_discarded(self, tmp_path):
        path = tmp_path / "w.txt"
        path.write_bytes(b"alpha\n\xff\xfe\nbeta\n")
        warnings = []
        assert load_wordlist(path, warning=warnings.append) == ["alpha", "beta"]
        assert warnings == [INVALID_WORDS_WARNING]


class TestLoadSource:
    def test_explicit_path_skips_default(self, wordlist_file):
        def resolve_default():
            raise AssertionError("default should not be resolved")

        source = WordSource.from_path(wordlist_file)
        assert not source.is_default
        assert load_source(source, resolve_default=resolve_default) == ["alpha", "beta", "gamma"]

    def test_default_uses_resolver(self, wordlist_file):
        source = WordSource.default()
        assert source.is_default
        assert load_source(source, resolve_default=lambda: wordlist_file) == [
            "alpha",
            "beta",
            "gamma",
        ]
