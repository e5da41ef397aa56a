"""Reading directory entries one at a time.

Entries come in the order the file system gives them, with ``.`` and
``..`` first. Names longer than 255 characters are cut short.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Union

__all__ = ["DirEntry", "Dir", "opendir"]

_NAME_MAX = 255
_O_DIRECTORY = getattr(os, "O_DIRECTORY", 0)


@dataclass(frozen=True)
class DirEntry:
    """One directory entry: its inode number and name."""

    ino: int
    name: str


class Dir:
    """An open directory stream."""

    def __init__(self, fd: int) -> None:
        self._fd = fd
        self.closed = False
        self._scan = os.scandir(fd)
        self._entries = self._generate()

    def _generate(self) -> Iterator[DirEntry]:
        yield DirEntry(os.fstat(self._fd).st_ino, ".")
        yield DirEntry(os.stat("..", dir_fd=self._fd).st_ino, "..")
        for entry in self._scan:
            yield DirEntry(entry.inode(), entry.name[:_NAME_MAX])

    def readdir(self) -> Optional[DirEntry]:
        """Next entry, or ``None`` once the directory is exhausted."""
        if self.closed:
            raise ValueError("read from closed directory")
        return next(self._entries, None)

    def close(self) -> None:
        """Close the directory stream."""
        if self.closed:
            raise ValueError("directory already closed")
        self.closed = True
        self._scan.close()
        os.close(self._fd)

    def __iter__(self) -> Iterator[DirEntry]:
        while (entry := self.readdir()) is not None:
            yield entry

    def __enter__(self) -> "Dir":
        return self

    def __exit__(self, *args: Any) -> None:
        if not self.closed:
            self.close()


def opendir(name: Union[str, os.PathLike]) -> Dir:
    """Open the directory ``name`` for reading."""
    fd = os.open(name, os.O_RDONLY | _O_DIRECTORY)
    try:
        return Dir(fd)
    except BaseException:
        os.close(fd)
        raise