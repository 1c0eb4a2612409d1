"""
Pytest configuration and shared fixtures for kioku tests.
"""

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every test in a scratch cwd with its own data dir and no git above it."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    for key in ("KIOKU_WORDLIST_URL", "KIOKU_DEFAULT_LENGTH", "KIOKU_HTTP_TIMEOUT_SECONDS"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("KIOKU_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    return workdir


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def wordlist_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("alpha\nbeta\ngamma\n", encoding="utf-8")
    return path
