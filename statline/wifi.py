"""Components reporting wireless link quality and network name."""

from __future__ import annotations

import array
import fcntl
import re
import socket
import struct

from statline.util import _LINE_MAX, warn

NET_OPERSTATE = "/sys/class/net/{}/operstate"
PROC_NET_WIRELESS = "/proc/net/wireless"

SIOCGIWESSID = 0x8B1B
IW_ESSID_MAX_SIZE = 32

_IFNAMSIZ = 16
_IWREQ_SIZE = 32

# Maximum link quality reported by /proc/net/wireless.
_QUALITY_MAX = 70

_QUALITY = re.compile(r"\s*[+-]?\d+\s*([+-]?\d+)")


def rssi_to_perc(rssi: int) -> int:
    """Map a signal strength in dBm onto 0..100 percent."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def wifi_perc(interface: str) -> str | None:
    """Return the link quality of a wireless interface in percent."""
    path = NET_OPERSTATE.format(interface)
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            status = handle.readline(4)
    except OSError:
        warn(f"fopen '{path}':")
        return None
    if status != "up\n":
        return None

    try:
        with open(PROC_NET_WIRELESS, encoding="utf-8", errors="replace") as handle:
            lines = [handle.readline(_LINE_MAX) for _ in range(3)]
    except OSError:
        warn(f"fopen '{PROC_NET_WIRELESS}':")
        return None

    line = lines[2]
    if not line:
        return None
    start = line.find(interface)
    if start < 0:
        return None

    match = _QUALITY.match(line, start + len(interface) + 2)
    if match is None:
        return None
    quality = int(match.group(1))
    return str(int(quality / _QUALITY_MAX * 100))


def wifi_essid(interface: str) -> str | None:
    """Return the network name a wireless interface is associated with."""
    name = interface.encode()
    if len(name) >= _IFNAMSIZ:
        warn("vsnprintf: Output truncated")
        return None

    essid = array.array("B", bytes(IW_ESSID_MAX_SIZE + 1))
    address = essid.buffer_info()[0]
    request = bytearray(
        struct.pack("16sPHH", name, address, IW_ESSID_MAX_SIZE + 1, 0)
    )
    request.extend(bytes(max(0, _IWREQ_SIZE - len(request))))

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError:
        warn("socket 'AF_INET':")
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), SIOCGIWESSID, request, True)
        except OSError:
            warn("ioctl 'SIOCGIWESSID':")
            return None

    value = essid.tobytes().split(b"\0", 1)[0]
    if not value:
        return None
    return value.decode("utf-8", errors="replace")