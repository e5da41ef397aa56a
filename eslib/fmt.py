"""Formatted output and simple numeric scanning.

The formatter understands ``%c``, ``%s``, ``%d``/``%i``, ``%u``, ``%x``,
``%o``, their ``l`` forms and ``%%``. Width, precision and ``-`` flags
are accepted and ignored. Any other conversion letter consumes an
argument and produces nothing. Plain conversions work on 32-bit
values, ``l`` conversions on 64-bit values; arguments wrap to those
widths.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional, Sequence

__all__ = [
    "FormatError",
    "snprintf",
    "sprintf",
    "printf",
    "sscanf",
    "strtol",
    "perror",
    "puts",
]

_INT_BITS = 32
_LONG_BITS = 64
_PRINTF_BUFFER = 2048
_FLAG_CHARS = frozenset("0123456789-.")
_WHITESPACE = "\n\r \t"


class FormatError(ValueError):
    """Raised when a format is invalid, arguments are missing or output does not fit."""


def _unsigned(value: int, bits: int) -> int:
    return int(value) & ((1 << bits) - 1)


def _signed(value: int, bits: int) -> int:
    value = _unsigned(value, bits)
    return value - (1 << bits) if value >> (bits - 1) else value


def _cstring(value: Any) -> str:
    if value is None:
        return "(null)"
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("latin-1")
    return str(value).split("\0", 1)[0]


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c needs a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _plain(conv: str, take: Callable[[], Any]) -> str:
    if conv == "%":
        return "%"
    arg = take()
    if conv == "c":
        return _char(arg)
    if conv in "id":
        return str(_signed(arg, _INT_BITS))
    if conv == "u":
        return str(_unsigned(arg, _INT_BITS))
    if conv == "s":
        return _cstring(arg)
    if conv == "x":
        return format(_unsigned(arg, _INT_BITS), "x")
    if conv == "o":
        return format(_unsigned(arg, _INT_BITS), "o")
    return ""


def _long(conv: str, take: Callable[[], Any]) -> str:
    if conv in "id":
        return str(_signed(take(), _LONG_BITS))
    if conv == "u":
        return str(_unsigned(take(), _LONG_BITS))
    if conv == "x":
        return format(_unsigned(take(), _LONG_BITS), "x")
    if conv == "o":
        return format(_unsigned(take(), _LONG_BITS), "o")
    raise FormatError(f"unsupported conversion: %l{conv}")


def _pieces(fmt: str, args: Sequence[Any]) -> Iterator[str]:
    pending = iter(args)

    def take() -> Any:
        try:
            return next(pending)
        except StopIteration:
            raise FormatError("not enough arguments for format") from None

    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        conv = next(chars, None)
        while conv is not None and conv in _FLAG_CHARS:
            conv = next(chars, None)
        if conv is None:
            raise FormatError("format ends inside a conversion")
        if conv == "l":
            conv = next(chars, None)
            if conv is None:
                raise FormatError("format ends inside a conversion")
            yield _long(conv, take)
        else:
            yield _plain(conv, take)


def _format(fmt: str, args: Sequence[Any], size: Optional[int]) -> str:
    if size is not None and size <= 0:
        raise FormatError("buffer size must be positive")
    out: list[str] = []
    length = 0
    for piece in _pieces(fmt, args):
        length += len(piece)
        if size is not None and length >= size:
            raise FormatError(f"output does not fit in {size} bytes")
        out.append(piece)
    return "".join(out)


def snprintf(size: int, fmt: str, *args: Any) -> str:
    """Format ``args``; the result plus a terminator must fit in ``size``."""
    return _format(fmt, args, size)


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` with no size limit."""
    return _format(fmt, args, None)


def printf(fmt: str, *args: Any) -> int:
    """Format to standard output; returns the number of characters written."""
    text = _format(fmt, args, _PRINTF_BUFFER)
    sys.stdout.write(text)
    return len(text)


def _digit(ch: str, base: int) -> Optional[int]:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if base == 16 and "a" <= ch.lower() <= "f":
        return ord(ch.lower()) - ord("a") + 10
    return None


def _scan_digits(text: str, base: int) -> tuple[int, int]:
    """Value and count of the leading digits of ``text``."""
    value = 0
    count = 0
    for ch in text:
        digit = _digit(ch, base)
        if digit is None:
            break
        value = value * base + digit
        count += 1
    return value, count


_SCAN_FORMATS: dict[str, tuple[int, int, bool]] = {
    "%u": (10, _INT_BITS, False),
    "%i": (10, _INT_BITS, True),
    "%d": (10, _INT_BITS, True),
    "%x": (16, _INT_BITS, False),
    "%o": (8, _INT_BITS, False),
    "%lu": (10, _LONG_BITS, False),
    "%li": (10, _LONG_BITS, True),
    "%ld": (10, _LONG_BITS, True),
    "%lx": (16, _LONG_BITS, False),
    "%lo": (8, _LONG_BITS, False),
}


def sscanf(s: str, fmt: str) -> int:
    """Read one number from ``s`` with a single-conversion ``fmt``.

    Leading blanks and line breaks are skipped; reading stops at the
    first character that is not a digit. Octal and decimal reads take
    the digits 0 to 9 alike.
    """
    try:
        base, bits, signed = _SCAN_FORMATS[fmt]
    except KeyError:
        raise FormatError(f"unsupported scan format: {fmt!r}") from None
    text = s.lstrip(_WHITESPACE)
    negative = signed and text.startswith("-")
    if negative:
        text = text[1:]
    value, count = _scan_digits(text, base)
    if not count:
        raise FormatError(f"no number in {s!r}")
    if negative:
        value = -value
    return _signed(value, bits) if signed else _unsigned(value, bits)


def strtol(s: str, base: int = 10) -> tuple[int, int]:
    """Parse an unsigned number at the start of ``s``.

    Returns the value and the index where parsing stopped. Blank input
    gives zero; any other input without a leading digit is an error.
    """
    text = s.lstrip(_WHITESPACE)
    offset = len(s) - len(text)
    if not text:
        return 0, len(s)
    value, count = _scan_digits(text, base)
    if not count:
        raise FormatError(f"no number in {s!r}")
    return _signed(value, _LONG_BITS), offset + count


def perror(s: Optional[str], errnum: int = 0) -> None:
    """Write a failure line naming ``s`` and ``errnum`` to standard error."""
    try:
        text = snprintf(_PRINTF_BUFFER, "fail: %s (%i)\n", s, errnum)
    except FormatError:
        return
    sys.stderr.write(text)


def puts(s: str) -> int:
    """Write ``s`` and a newline to standard output; return the count written."""
    text = _cstring(s)
    sys.stdout.write(text)
    sys.stdout.write("\n")
    return len(text) + 1