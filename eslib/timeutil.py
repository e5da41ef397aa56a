"""Broken-down UTC time and a small ``strftime``.

``Tm`` follows the classic layout: ``year`` counts from 1900, ``mon``
from 0 and ``wday`` from Sunday. No time zones exist here, so local
time is UTC.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

__all__ = ["Tm", "gmtime", "localtime", "strftime"]

_SECONDS_PER_DAY = 24 * 60 * 60
_TIME_MAX = 2**64 - 1


@dataclass
class Tm:
    """Broken-down time."""

    sec: int = 0
    min: int = 0
    hour: int = 0
    mday: int = 0
    mon: int = 0
    year: int = 0
    wday: int = 0
    yday: int = 0
    isdst: int = 0


def gmtime(t: int) -> Tm:
    """Break ``t`` seconds since the epoch into UTC fields."""
    t = int(t)
    if not 0 <= t <= _TIME_MAX:
        raise ValueError(f"time out of range: {t}")
    day, secs = divmod(t, _SECONDS_PER_DAY)
    mins, sec = divmod(secs, 60)
    hour, minute = divmod(mins, 60)
    wday = (day + 4) % 7
    years = (day * 4 + 2) // 1461
    tm_year = years + 70
    leap = 0 if tm_year & 3 else 1
    day -= (years * 1461 + 1) // 4
    yday = day
    if day > 58 + leap:
        day += 1 if leap else 2
    mon = (day * 12 + 6) // 367
    mday = day + 1 - (mon * 367 + 5) // 12
    return Tm(sec=sec, min=minute, hour=hour, mday=mday, mon=mon,
              year=tm_year, wday=wday, yday=yday, isdst=0)


def localtime(t: int) -> Tm:
    """Same as ``gmtime``: local time is UTC."""
    return gmtime(t)


_FIELDS: dict[str, Callable[[Tm], int]] = {
    "Y": lambda tm: tm.year + 1900,
    "m": lambda tm: tm.mon + 1,
    "d": lambda tm: tm.mday,
    "H": lambda tm: tm.hour,
    "M": lambda tm: tm.min,
    "S": lambda tm: tm.sec,
}


def strftime(fmt: str, tm: Tm, maxsize: Optional[int] = None) -> str:
    """Format ``tm`` with ``%Y %m %d %H %M %S``; other ``%x`` give ``x``.

    Numbers are padded to two digits. With ``maxsize`` the result plus
    a terminator must fit in that many characters.
    """
    if maxsize is not None and maxsize <= 0:
        raise ValueError("maxsize must be positive")
    out: list[str] = []
    length = 0
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            piece = ch
        else:
            conv = next(chars, None)
            if conv is None:
                raise ValueError("format ends with '%'")
            field = _FIELDS.get(conv)
            piece = conv if field is None else f"{field(tm) & 0xFFFFFFFF:02d}"
        length += len(piece)
        if maxsize is not None and length >= maxsize:
            raise ValueError(f"result does not fit in {maxsize} characters")
        out.append(piece)
    return "".join(out)