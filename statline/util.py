"""Shared helpers: warnings, human-readable sizes and small file readers."""

from __future__ import annotations

import re
import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

# Longest line a component reads from a file or a pipe.
_LINE_MAX = 1022

_UINT = re.compile(r"\s*\+?(\d+)")


def warn(message: str) -> None:
    """Write a warning to stderr.

    A message ending in ':' is followed by a description of the exception
    currently being handled, if there is one.
    """
    if message.endswith(":"):
        exc = sys.exc_info()[1]
        if exc is not None:
            detail = getattr(exc, "strerror", None) or str(exc)
            sys.stderr.write(f"{message} {detail}\n")
            return
    sys.stderr.write(f"{message}\n")


def fmt_human(num: float, base: int) -> str | None:
    """Scale num by powers of base and append the matching unit prefix."""
    prefixes = _PREFIXES.get(base)
    if prefixes is None:
        warn("fmt_human: Invalid base")
        return None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def read_first_line(path: str) -> str | None:
    """Return the first line of a file without its newline.

    Returns None when the file cannot be read or holds nothing.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            line = handle.readline(_LINE_MAX)
    except OSError:
        warn(f"fopen '{path}':")
        return None
    if not line:
        return None
    cut = line.rfind("\n")
    return line[:cut] if cut >= 0 else line


def read_uint(path: str) -> int | None:
    """Read the unsigned integer at the start of a file, or None."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read(4096)
    except OSError:
        warn(f"fopen '{path}':")
        return None
    match = _UINT.match(text)
    if match is None:
        return None
    return int(match.group(1))