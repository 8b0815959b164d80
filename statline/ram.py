"""Components reporting memory usage from /proc/meminfo."""

from __future__ import annotations

from statline.util import fmt_human, warn

MEMINFO = "/proc/meminfo"


def read_meminfo(path: str) -> dict[str, int] | None:
    """Parse a meminfo file into a mapping of field name to kilobytes."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            lines = handle.read().splitlines()
    except OSError:
        warn(f"fopen '{path}':")
        return None

    fields: dict[str, int] = {}
    for line in lines:
        name, sep, rest = line.partition(":")
        if not sep:
            continue
        parts = rest.split()
        if parts and parts[0].isdigit():
            fields[name.strip()] = int(parts[0])
    return fields


def _fields(*names: str) -> list[int] | None:
    info = read_meminfo(MEMINFO)
    if info is None:
        return None
    try:
        return [info[name] for name in names]
    except KeyError:
        return None


def ram_free(unused: object = None) -> str | None:
    """Return the memory available for new programs."""
    values = _fields("MemAvailable")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_perc(unused: object = None) -> str | None:
    """Return the memory in use, not counting buffers and cache, in percent."""
    values = _fields("MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    if total == 0:
        return None
    return str(100 * ((total - free) - (buffers + cached)) // total)


def ram_total(unused: object = None) -> str | None:
    """Return the total memory in whole GiB."""
    values = _fields("MemTotal")
    if values is None:
        return None
    return f"{values[0] // 1024 // 1024}G"


def ram_used(unused: object = None) -> str | None:
    """Return the memory in use, not counting buffers and cache, in whole GiB."""
    values = _fields("MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    return f"{(total - free - buffers - cached) // 1024 // 1024}G"