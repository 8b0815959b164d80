"""Components reporting interface addresses."""

from __future__ import annotations

import socket

import psutil

from statline.util import warn


def _address(interface: str, family: int) -> str | None:
    try:
        interfaces = psutil.net_if_addrs()
    except OSError:
        warn("getifaddrs:")
        return None
    for entry in interfaces.get(interface, ()):
        if entry.family == family and entry.address:
            return entry.address
    return None


def ipv4(interface: str) -> str | None:
    """Return the first IPv4 address of an interface."""
    return _address(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """Return the first IPv6 address of an interface."""
    return _address(interface, socket.AF_INET6)