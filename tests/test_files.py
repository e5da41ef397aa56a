import errno
import os

import pytest

from eslib.files import SEEK_SET, File, fopen, open_flags, remove
from eslib.fmt import FormatError


def test_write_rewind_read_seek(tmp_path):
    path = tmp_path / "testfile"
    data = bytes([1, 2, 3, 4])
    f = fopen(path, "w+")
    assert f.write(data, 1) == 4
    f.rewind()
    assert f.read(1, 4) == data
    assert f.seek(1, SEEK_SET) == 1
    assert f.tell() == 1
    assert f.read(1, 2) == bytes([2, 3])
    f.close()
    remove(path)
    with pytest.raises(FileNotFoundError) as info:
        fopen(path, "r")
    assert info.value.errno == errno.ENOENT


def test_append_position(tmp_path):
    path = tmp_path / "testfile"
    data = bytes([1, 2, 3, 4])
    with fopen(path, "w+") as f:
        assert f.write(data) == 4
    with fopen(path, "a+") as f:
        assert f.write(data) == 4
        assert f.tell() == 8
    assert path.read_bytes() == data + data


def test_write_counts_whole_items(tmp_path):
    with fopen(tmp_path / "items", "w") as f:
        assert f.write(b"abcde", 2) == 2


def test_open_flags():
    assert open_flags("r") == os.O_RDONLY
    assert open_flags("r+") == os.O_RDWR
    assert open_flags("w") == os.O_CREAT | os.O_TRUNC | os.O_WRONLY
    assert open_flags("a+") == os.O_CREAT | os.O_APPEND | os.O_RDWR


def test_invalid_mode():
    with pytest.raises(ValueError):
        open_flags("x")


def test_printf_puts_putc(tmp_path):
    path = tmp_path / "out"
    with fopen(path, "w") as f:
        assert f.printf("%d-%s/%c", 1001, "epcss", "u") == len("1001-epcss/u")
        assert f.puts(" abc") == 0
        assert f.putc(ord("!")) == ord("!")
    assert path.read_text() == "1001-epcss/u abc!"


def test_printf_bad_format(tmp_path):
    with fopen(tmp_path / "out", "w") as f:
        with pytest.raises(FormatError):
            f.printf("%lq", 1)


def test_truncate_on_write_mode(tmp_path):
    path = tmp_path / "t"
    path.write_bytes(b"old contents")
    with fopen(path, "w") as f:
        f.write(b"new")
    assert path.read_bytes() == b"new"


def test_closed_file_rejects_operations(tmp_path):
    f = fopen(tmp_path / "c", "w")
    f.close()
    assert f.closed
    with pytest.raises(ValueError):
        f.write(b"x")
    with pytest.raises(ValueError):
        f.close()


def test_remove_directory(tmp_path):
    folder = tmp_path / "dir"
    folder.mkdir()
    remove(folder)
    assert not folder.exists()


def test_remove_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        remove(tmp_path / "missing")


def test_file_wraps_descriptor(tmp_path):
    path = tmp_path / "raw"
    fd = os.open(path, os.O_CREAT | os.O_RDWR, 0o644)
    with File(fd) as f:
        assert f.fd == fd
        f.write(b"xyz")
    assert path.read_bytes() == b"xyz"