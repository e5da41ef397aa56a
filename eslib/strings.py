"""String and memory routines with NUL-terminated string semantics.

String arguments may be ``str``, ``bytes`` or ``bytearray``; a NUL
character ends a string as it would in memory. Searches return the
index of the match, or ``None`` when there is none.
"""

from __future__ import annotations

from typing import Optional, Union

__all__ = [
    "strlen",
    "strcmp",
    "strncmp",
    "memcmp",
    "memmove",
    "strchr",
    "strrchr",
    "strstr",
    "strncpy",
]

Text = Union[str, bytes, bytearray]


def _terminated(s: Text) -> Text:
    nul = "\0" if isinstance(s, str) else b"\0"
    return s.split(nul, 1)[0]


def _codes(s: Text) -> list[int]:
    text = _terminated(s)
    if isinstance(text, str):
        return [ord(ch) for ch in text]
    return list(text)


def _needle(s: Text, c: Union[int, str]) -> Optional[Text]:
    code = ord(c) if isinstance(c, str) else int(c)
    if code <= 0:
        return None
    if isinstance(s, str):
        return chr(code)
    if code > 0xFF:
        return None
    return bytes([code])


def strlen(s: Text) -> int:
    """Length of ``s`` up to its first NUL."""
    return len(_terminated(s))


def strcmp(s1: Text, s2: Text) -> int:
    """Difference of the first differing characters, or 0 if equal."""
    for c1, c2 in zip(_codes(s1) + [0], _codes(s2) + [0]):
        if c1 != c2 or not c1:
            return c1 - c2
    return 0


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Like ``strcmp`` but looks at no more than ``n`` characters."""
    if n <= 0:
        return 0
    pairs = zip(_codes(s1) + [0], _codes(s2) + [0])
    for count, (c1, c2) in enumerate(pairs, start=1):
        if not c1 or c1 != c2 or count == n:
            return c1 - c2
    return 0


def memcmp(s1: bytes, s2: bytes, n: int) -> int:
    """Compare the first ``n`` bytes: -1, 0 or 1."""
    if n < 0 or n > len(s1) or n > len(s2):
        raise ValueError(f"cannot compare {n} bytes")
    a = bytes(s1[:n])
    b = bytes(s2[:n])
    return (a > b) - (a < b)


def memmove(buf: bytearray, dest: int, src: int, n: int) -> int:
    """Copy ``n`` bytes within ``buf`` from ``src`` to ``dest``; overlap is safe.

    Returns ``dest``.
    """
    if n < 0 or min(dest, src) < 0 or max(dest, src) + n > len(buf):
        raise ValueError("memmove range outside buffer")
    buf[dest:dest + n] = buf[src:src + n]
    return dest


def strchr(s: Text, c: Union[int, str]) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or ``None``."""
    needle = _needle(s, c)
    if needle is None:
        return None
    index = _terminated(s).find(needle)
    return index if index >= 0 else None


def strrchr(s: Text, c: Union[int, str]) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or ``None``."""
    needle = _needle(s, c)
    if needle is None:
        return None
    index = _terminated(s).rfind(needle)
    return index if index >= 0 else None


def strstr(haystack: Text, needle: Text) -> Optional[int]:
    """Index of the first occurrence of ``needle`` in ``haystack``, or ``None``."""
    index = _terminated(haystack).find(_terminated(needle))
    return index if index >= 0 else None


def strncpy(src: Text, n: int) -> Text:
    """Exactly ``n`` characters: ``src`` cut at NUL or ``n``, padded with NULs."""
    if n < 0:
        raise ValueError("negative length")
    text = _terminated(src)[:n]
    pad = "\0" if isinstance(text, str) else b"\0"
    return text + pad * (n - len(text))