"""Unsigned and signed integer division on fixed-width machine words.

These routines follow the runtime helpers a compiler calls when the
hardware has no divide instruction for a given width. Arguments wrap
to the word width, as C conversions do. The 32-bit helpers and
``udivdi3`` return a quotient of 0 for a zero divisor. The
double-word and quad-word ``divmod`` helpers raise
``ZeroDivisionError`` instead.
"""

from __future__ import annotations

__all__ = [
    "udivdi3",
    "udivmodti4",
    "udivti3",
    "udivsi3",
    "udivmodsi4",
    "aeabi_uidiv",
    "udivmoddi4",
    "aeabi_idiv",
]

_WORD_BITS = 32
_DWORD_BITS = 64
_TWORD_BITS = 128


def _wrap(value: int, bits: int) -> int:
    return int(value) & ((1 << bits) - 1)


def _signed(value: int, bits: int) -> int:
    value = _wrap(value, bits)
    return value - (1 << bits) if value >> (bits - 1) else value


def _divmod(a: int, b: int, bits: int) -> tuple[int, int]:
    a = _wrap(a, bits)
    b = _wrap(b, bits)
    if not b:
        raise ZeroDivisionError(f"{bits}-bit unsigned division by zero")
    return divmod(a, b)


def udivdi3(num: int, den: int) -> int:
    """64-bit unsigned quotient; a zero divisor gives 0."""
    num = _wrap(num, _DWORD_BITS)
    den = _wrap(den, _DWORD_BITS)
    return num // den if den else 0


def udivmodti4(a: int, b: int) -> tuple[int, int]:
    """128-bit unsigned quotient and remainder."""
    return _divmod(a, b, _TWORD_BITS)


def udivti3(a: int, b: int) -> int:
    """128-bit unsigned quotient."""
    return udivmodti4(a, b)[0]


def udivsi3(n: int, d: int) -> int:
    """32-bit unsigned quotient; a zero divisor gives 0."""
    n = _wrap(n, _WORD_BITS)
    d = _wrap(d, _WORD_BITS)
    return n // d if d else 0


def udivmodsi4(a: int, b: int) -> tuple[int, int]:
    """32-bit unsigned quotient and remainder.

    With a zero divisor the quotient is 0 and the remainder is ``a``.
    """
    a = _wrap(a, _WORD_BITS)
    b = _wrap(b, _WORD_BITS)
    quotient = udivsi3(a, b)
    return quotient, _wrap(a - quotient * b, _WORD_BITS)


def aeabi_uidiv(num: int, den: int) -> int:
    """32-bit unsigned quotient, as the ARM EABI helper computes it."""
    return udivmodsi4(num, den)[0]


def udivmoddi4(a: int, b: int) -> tuple[int, int]:
    """64-bit unsigned quotient and remainder."""
    return _divmod(a, b, _DWORD_BITS)


def aeabi_idiv(num: int, den: int) -> int:
    """32-bit signed quotient, truncated toward zero.

    The result wraps to 32 bits, so the most negative value divided
    by -1 gives itself. A zero divisor gives 0.
    """
    num = _signed(num, _WORD_BITS)
    den = _signed(den, _WORD_BITS)
    negative = (num < 0) != (den < 0)
    quotient = _signed(aeabi_uidiv(abs(num), abs(den)), _WORD_BITS)
    return _signed(-quotient if negative else quotient, _WORD_BITS)