"""Components reporting battery charge and state from the power supply class."""

from __future__ import annotations

import os
import re

from statline.util import warn

POWER_SUPPLY = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}

_INT = re.compile(r"\s*([+-]?\d+)")
_UINT = re.compile(r"\s*\+?(\d+)")
_STATE = re.compile(r"[a-zA-Z ]{1,12}")


def _supply_file(bat: str, name: str) -> str:
    return os.path.join(POWER_SUPPLY, bat, name)


def _read(path: str) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read(4096)
    except OSError:
        warn(f"fopen '{path}':")
        return None


def _read_number(path: str, pattern: re.Pattern[str]) -> int | None:
    text = _read(path)
    if text is None:
        return None
    match = pattern.match(text)
    return int(match.group(1)) if match else None


def _read_state(bat: str) -> str | None:
    text = _read(_supply_file(bat, "status"))
    if text is None:
        return None
    match = _STATE.match(text)
    return match.group(0) if match else None


def _pick(bat: str, first: str, second: str) -> str | None:
    """Return the path of the first of two supply files that is readable."""
    for name in (first, second):
        path = _supply_file(bat, name)
        if os.access(path, os.R_OK):
            return path
    return None


def battery_perc(bat: str) -> str | None:
    """Return the battery capacity in percent."""
    capacity = _read_number(_supply_file(bat, "capacity"), _INT)
    return None if capacity is None else str(capacity)


def battery_state(bat: str) -> str | None:
    """Return '+' when charging, '-' when discharging, 'o' when full, '?' otherwise."""
    state = _read_state(bat)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str) -> str | None:
    """Return the time left on battery as hours and minutes.

    Returns an empty string when the battery is not discharging.
    """
    state = _read_state(bat)
    if state is None:
        return None

    path = _pick(bat, "charge_now", "energy_now")
    if path is None:
        return None
    charge_now = _read_number(path, _UINT)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    path = _pick(bat, "current_now", "power_now")
    if path is None:
        return None
    current_now = _read_number(path, _UINT)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"