"""Character classification and case mapping for the ASCII range.

Each function takes a character code (an ``int``) or a one-character
string. Case mapping returns the same kind of value it was given.
Only ASCII letters, digits and the listed blanks count; codes outside
the ASCII range never belong to a class. Note that ``isspace`` is
narrow on purpose: only space and tab are spaces.
"""

from __future__ import annotations

from typing import Union

__all__ = [
    "toupper",
    "tolower",
    "isalnum",
    "isalpha",
    "isdigit",
    "islower",
    "isprint",
    "isspace",
    "isupper",
    "isxdigit",
    "isascii",
    "isblank",
    "class_mask",
]

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _build_table() -> tuple[int, ...]:
    """Class masks for codes 0..127, in the big-endian bit layout."""
    table = [0x200] * 128
    table[ord("\t")] = 0x320
    table[ord("\n"):ord("\r") + 1] = [0x220] * 4
    table[ord(" ")] = 0x160
    table[ord("!"):ord("~") + 1] = [0x4C0] * (ord("~") - ord("!") + 1)
    table[ord("0"):ord("9") + 1] = [0x8D8] * 10
    table[ord("A"):ord("F") + 1] = [0x8D5] * 6
    table[ord("G"):ord("Z") + 1] = [0x8C5] * 20
    table[ord("a"):ord("f") + 1] = [0x8D6] * 6
    table[ord("g"):ord("z") + 1] = [0x8C6] * 20
    return tuple(table)


_CLASS_TABLE = _build_table()


def _shift_case(c: CharLike, low: str, high: str, delta: int) -> CharLike:
    code = _code(c)
    if not ord(low) <= code <= ord(high):
        return c
    shifted = code + delta
    return chr(shifted) if isinstance(c, str) else shifted


def toupper(c: CharLike) -> CharLike:
    """Map a lower-case ASCII letter to upper case; leave anything else."""
    return _shift_case(c, "a", "z", ord("A") - ord("a"))


def tolower(c: CharLike) -> CharLike:
    """Map an upper-case ASCII letter to lower case; leave anything else."""
    return _shift_case(c, "A", "Z", ord("a") - ord("A"))


def _between(c: CharLike, low: str, high: str) -> bool:
    return ord(low) <= _code(c) <= ord(high)


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isdigit(c) or isalpha(c)


def isalpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    return islower(c) or isupper(c)


def isdigit(c: CharLike) -> bool:
    """True for the decimal digits."""
    return _between(c, "0", "9")


def islower(c: CharLike) -> bool:
    """True for lower-case ASCII letters."""
    return _between(c, "a", "z")


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, space included."""
    return 0x20 <= _code(c) <= 0x7E


def isspace(c: CharLike) -> bool:
    """True for space and tab only."""
    return _code(c) in (ord(" "), ord("\t"))


def isupper(c: CharLike) -> bool:
    """True for upper-case ASCII letters."""
    return _between(c, "A", "Z")


def isxdigit(c: CharLike) -> bool:
    """True for hexadecimal digits in either case."""
    return isdigit(c) or _between(c, "a", "f") or _between(c, "A", "F")


def isascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isblank(c: CharLike) -> bool:
    """True for space and tab."""
    return _code(c) in (ord(" "), ord("\t"))


def class_mask(c: CharLike) -> int:
    """Return the class bit mask of ``c`` from the classification table.

    The table covers codes -128 to 255; only 0 to 127 have classes.
    """
    code = _code(c)
    if not -128 <= code <= 255:
        raise ValueError(f"character code out of table range: {code}")
    return _CLASS_TABLE[code] if 0 <= code < 128 else 0