"""Unbuffered file streams over raw file descriptors.

A ``File`` wraps one descriptor; every write goes straight to it.
``fopen`` picks the open flags from a mode string the way the stream
library does: the first of ``r``, ``w`` or ``a`` found in the mode
decides, and a ``+`` anywhere makes the stream read-write.
"""

from __future__ import annotations

import os
from typing import Any, Union

from eslib.fmt import snprintf

__all__ = [
    "File",
    "open_flags",
    "fopen",
    "remove",
    "stdin",
    "stdout",
    "stderr",
    "SEEK_SET",
    "SEEK_CUR",
    "SEEK_END",
]

SEEK_SET = os.SEEK_SET
SEEK_CUR = os.SEEK_CUR
SEEK_END = os.SEEK_END

_CREATE_MODE = 0o644
_PRINTF_BUFFER = 32768


def open_flags(mode: str) -> int:
    """Open flags for the stream mode ``mode``; an unknown mode raises ``ValueError``."""
    noplus = "+" not in mode
    access = os.O_WRONLY if noplus else os.O_RDWR
    if "r" in mode:
        return os.O_RDONLY if noplus else os.O_RDWR
    if "w" in mode:
        return os.O_CREAT | os.O_TRUNC | access
    if "a" in mode:
        return os.O_CREAT | os.O_APPEND | access
    raise ValueError(f"invalid file mode: {mode!r}")


def _encode(text: Union[str, bytes, bytearray]) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)


class File:
    """A stream bound to the descriptor ``fd``."""

    def __init__(self, fd: int) -> None:
        self._fd = fd
        self.closed = False

    @property
    def fd(self) -> int:
        """The descriptor; raises ``ValueError`` once the stream is closed."""
        if self.closed:
            raise ValueError("I/O operation on closed file")
        return self._fd

    def read(self, size: int, nmemb: int = 1) -> bytes:
        """Read up to ``nmemb`` items of ``size`` bytes; returns the bytes read."""
        if size <= 0 or nmemb < 0:
            raise ValueError("item size must be positive and count not negative")
        return os.read(self.fd, size * nmemb)

    def write(self, data: Union[bytes, bytearray, str], size: int = 1) -> int:
        """Write ``data``; returns the number of whole ``size``-byte items written."""
        if size <= 0:
            raise ValueError("item size must be positive")
        written = os.write(self.fd, _encode(data))
        return written // size

    def printf(self, fmt: str, *args: Any) -> int:
        """Format ``args`` into the stream; returns the number of characters formatted."""
        text = snprintf(_PRINTF_BUFFER, fmt, *args)
        os.write(self.fd, _encode(text))
        return len(text)

    def putc(self, c: Union[int, str]) -> Union[int, str]:
        """Write one character and return it."""
        data = _encode(c) if isinstance(c, str) else bytes([int(c) & 0xFF])
        os.write(self.fd, data)
        return c

    def puts(self, s: Union[str, bytes]) -> int:
        """Write ``s`` without a newline; returns 0."""
        os.write(self.fd, _encode(s))
        return 0

    def seek(self, offset: int, whence: int = SEEK_SET) -> int:
        """Move the file position; returns the new position."""
        return os.lseek(self.fd, offset, whence)

    def tell(self) -> int:
        """Current file position."""
        return os.lseek(self.fd, 0, SEEK_CUR)

    def rewind(self) -> None:
        """Move back to the start of the file."""
        os.lseek(self.fd, 0, SEEK_SET)

    def flush(self) -> None:
        """Check the stream is open; writes are unbuffered, so nothing waits."""
        self.fd  # noqa: B018

    def close(self) -> None:
        """Close the descriptor."""
        fd = self.fd
        self.closed = True
        os.close(fd)

    def __enter__(self) -> "File":
        return self

    def __exit__(self, *args: Any) -> None:
        if not self.closed:
            self.close()


def fopen(pathname: Union[str, os.PathLike], mode: str) -> File:
    """Open ``pathname`` as a stream; new files get mode 0644."""
    fd = os.open(pathname, open_flags(mode), _CREATE_MODE)
    return File(fd)


def remove(path: Union[str, os.PathLike]) -> None:
    """Remove a file, or an empty directory if ``path`` is not a file."""
    try:
        os.unlink(path)
    except OSError:
        os.rmdir(path)


stdin = File(0)
stdout = File(1)
stderr = File(2)