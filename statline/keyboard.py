"""Formatting of keyboard lock indicators and parsing of XKB symbol names."""

from __future__ import annotations

# Bits of the keyboard LED mask.
CAPS_LOCK = 1 << 0
NUM_LOCK = 1 << 1

# Only this many characters of an indicator format are looked at.
_FMT_MAX = 4

# Symbols in the XKB rules that name no layout or variant.
_INVALID_SYMBOLS = ("evdev", "inet", "pc", "base")

_DIGITS = "0123456789"


def format_indicators(fmt: str, led_mask: int) -> str:
    """Render caps and num lock state according to fmt.

    fmt holds 'c' for caps lock and/or 'n' for num lock, in either case,
    each optionally followed by '?'. With '?', the letter is shown as
    written only while the lock is on. Without it, the letter is always
    shown: lower case when the lock is off, upper case when it is on.
    """
    fmt = fmt[:_FMT_MAX]
    out = []
    for pos, char in enumerate(fmt):
        key = char.lower()
        if key not in ("c", "n"):
            continue
        conditional = pos + 1 < len(fmt) and fmt[pos + 1] == "?"
        is_set = bool(led_mask & (NUM_LOCK if key == "n" else CAPS_LOCK))
        if not conditional:
            out.append(key.upper() if is_set else key)
        elif is_set:
            out.append(char)
    return "".join(out)


def valid_layout_or_variant(sym: str) -> bool:
    """Tell whether a symbol token names a keyboard layout or variant."""
    return not any(sym.startswith(bad) for bad in _INVALID_SYMBOLS)


def get_layout(syms: str, group: int) -> str | None:
    """Return the layout of a keyboard group from an XKB symbols name.

    syms is a string such as 'pc+us+de:2+inet(evdev)'. If there are fewer
    layouts than group + 1, the last one is returned; None if there is none.
    """
    layout = None
    seen = 0
    for token in (part for chunk in syms.split("+") for part in chunk.split(":")):
        if seen > group:
            break
        if not token:
            continue
        if not valid_layout_or_variant(token):
            continue
        if len(token) == 1 and token in _DIGITS:
            # :2, :3, :4 select additional layout groups
            continue
        layout = token
        seen += 1
    return layout