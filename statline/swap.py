"""Components reporting swap usage from /proc/meminfo."""

from __future__ import annotations

import re

from statline.util import fmt_human, warn

MEMINFO = "/proc/meminfo"

_FIELDS = {
    "SwapTotal": "total",
    "SwapFree": "free",
    "SwapCached": "cached",
}

_NUMBER = re.compile(r"\s*([+-]?\d+)")


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def swap_info(path: str) -> dict[str, int] | None:
    """Read the swap fields of a meminfo file.

    Returns a mapping with the keys 'total', 'free' and 'cached' for the
    fields that were found, in kilobytes, or None if the file cannot be read.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            lines = handle.read().splitlines()
    except OSError:
        warn(f"fopen '{path}':")
        return None

    info: dict[str, int] = {}
    for line in lines:
        if len(info) == len(_FIELDS):
            break
        for name, key in _FIELDS.items():
            if line.startswith(name):
                match = _NUMBER.match(line, len(name) + 1)
                if match is not None:
                    info[key] = int(match.group(1))
                break
    return info


def _fields(*keys: str) -> list[int] | None:
    info = swap_info(MEMINFO)
    if info is None:
        return None
    try:
        return [info[key] for key in keys]
    except KeyError:
        return None


def swap_free(unused: object = None) -> str | None:
    """Return the free swap space."""
    values = _fields("free")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_perc(unused: object = None) -> str | None:
    """Return the swap space in use, in percent."""
    values = _fields("total", "free", "cached")
    if values is None:
        return None
    total, free, cached = values
    if total == 0:
        return None
    return str(_truncating_div(100 * (total - free - cached), total))


def swap_total(unused: object = None) -> str | None:
    """Return the total swap space."""
    values = _fields("total")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_used(unused: object = None) -> str | None:
    """Return the swap space in use."""
    values = _fields("total", "free", "cached")
    if values is None:
        return None
    total, free, cached = values
    return fmt_human((total - free - cached) * 1024, 1024)