"""Components describing the running system and the current user."""

from __future__ import annotations

import os
import platform
import pwd
import socket
import sys
import time

from statline.util import read_uint, warn

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"

_BUF_SIZE = 1024


def datetime(fmt: str) -> str | None:
    """Format the current local time with a strftime format."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result) >= _BUF_SIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def hostname(unused: object = None) -> str | None:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError:
        warn("gethostbyname:")
        return None


def kernel_release(unused: object = None) -> str | None:
    """Return the kernel release, as `uname -r` prints it."""
    release = platform.release()
    if not release:
        warn("uname:")
        return None
    return release


def load_avg(unused: object = None) -> str | None:
    """Return the 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def format_uptime(seconds: float) -> str:
    """Render a number of seconds as hours and minutes."""
    seconds = int(seconds)
    return f"{seconds // 3600}h {seconds % 3600 // 60}m"


def _uptime_clock() -> int:
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME", "CLOCK_MONOTONIC"):
        clock = getattr(time, name, None)
        if clock is not None:
            return clock
    raise OSError("no uptime clock available")


def uptime(unused: object = None) -> str | None:
    """Return the system uptime as hours and minutes."""
    try:
        clock = _uptime_clock()
        seconds = time.clock_gettime(clock)
    except OSError:
        warn("clock_gettime:")
        return None
    return format_uptime(seconds)


def gid(unused: object = None) -> str:
    """Return the real group id of the current process."""
    return str(os.getgid())


def uid(unused: object = None) -> str:
    """Return the effective user id of the current process."""
    return str(os.geteuid())


def username(unused: object = None) -> str | None:
    """Return the name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': no such user")
        return None


def entropy(unused: object = None) -> str | None:
    """Return the kernel's available entropy, or infinity on the BSDs."""
    if sys.platform.startswith("linux"):
        value = read_uint(ENTROPY_AVAIL)
        return None if value is None else str(value)
    return "\u221e"


def temp(file: str) -> str | None:
    """Read a millidegree sensor file and return whole degrees Celsius."""
    value = read_uint(file)
    if value is None:
        return None
    return str(value // 1000)