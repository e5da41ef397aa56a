import os

import pytest

from eslib.folder import opendir


@pytest.fixture
def populated(tmp_path):
    (tmp_path / "a").write_text("a")
    (tmp_path / "b").mkdir()
    return tmp_path


def test_lists_all_entries(populated):
    with opendir(populated) as d:
        names = {entry.name for entry in d}
    assert names == {".", "..", "a", "b"}


def test_dot_entries_come_first(populated):
    with opendir(populated) as d:
        first = d.readdir()
        second = d.readdir()
    assert (first.name, second.name) == (".", "..")
    assert first.ino == os.stat(populated).st_ino
    assert second.ino == os.stat(populated.parent).st_ino


def test_inode_matches_stat(populated):
    with opendir(populated) as d:
        entries = {entry.name: entry.ino for entry in d}
    assert entries["a"] == os.stat(populated / "a").st_ino


def test_readdir_returns_none_at_end(tmp_path):
    with opendir(tmp_path) as d:
        entries = list(d)
        assert d.readdir() is None
    assert len(entries) == 2


def test_not_a_directory(tmp_path):
    path = tmp_path / "file"
    path.write_text("x")
    with pytest.raises(NotADirectoryError):
        opendir(path)


def test_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        opendir(tmp_path / "missing")


def test_closed_directory(tmp_path):
    d = opendir(tmp_path)
    d.close()
    assert d.closed
    with pytest.raises(ValueError):
        d.readdir()
    with pytest.raises(ValueError):
        d.close()