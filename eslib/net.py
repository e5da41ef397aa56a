"""Byte-order helpers and IPv4 address parsing.

``htons``/``htonl`` and their inverses convert between host and network
(big-endian) order using the byte order of the running machine.
"""

from __future__ import annotations

import sys

__all__ = [
    "AF_INET",
    "PF_INET",
    "bswap16",
    "bswap32",
    "bswap64",
    "htons",
    "ntohs",
    "htonl",
    "ntohl",
    "inet_pton",
    "gethostbyname",
]

PF_INET = 2
AF_INET = PF_INET

_LITTLE_ENDIAN = sys.byteorder == "little"


def _swap(value: int, nbytes: int) -> int:
    value = int(value) & ((1 << (8 * nbytes)) - 1)
    return int.from_bytes(value.to_bytes(nbytes, "little"), "big")


def bswap16(x: int) -> int:
    """Swap the two bytes of a 16-bit value."""
    return _swap(x, 2)


def bswap32(x: int) -> int:
    """Reverse the four bytes of a 32-bit value."""
    return _swap(x, 4)


def bswap64(x: int) -> int:
    """Reverse the eight bytes of a 64-bit value."""
    return _swap(x, 8)


def htons(x: int) -> int:
    """Host to network order for a 16-bit value."""
    return bswap16(x) if _LITTLE_ENDIAN else int(x) & 0xFFFF


def ntohs(x: int) -> int:
    """Network to host order for a 16-bit value."""
    return htons(x)


def htonl(x: int) -> int:
    """Host to network order for a 32-bit value."""
    return bswap32(x) if _LITTLE_ENDIAN else int(x) & 0xFFFFFFFF


def ntohl(x: int) -> int:
    """Network to host order for a 32-bit value."""
    return htonl(x)


def _octet(part: str, src: str) -> int:
    value = 0
    for ch in part:
        if not "0" <= ch <= "9":
            raise ValueError(f"invalid IPv4 address: {src!r}")
        value = value * 10 + ord(ch) - ord("0")
        if value > 255:
            raise ValueError(f"invalid IPv4 address: {src!r}")
    return value


def inet_pton(af: int, src: str) -> bytes:
    """Parse a dotted IPv4 address into its four bytes in network order.

    Only ``AF_INET`` is supported. An empty part between dots reads as 0.
    """
    if af != AF_INET:
        raise ValueError(f"unsupported address family: {af}")
    parts = src.split(".", 3)
    if len(parts) != 4:
        raise ValueError(f"invalid IPv4 address: {src!r}")
    return bytes(_octet(part, src) for part in parts)


def gethostbyname(name: str) -> None:
    """Host name lookup; there is no resolver, so every lookup fails."""
    raise LookupError(f"cannot resolve {name!r}: no resolver available")