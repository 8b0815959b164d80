"""Components reporting network throughput of an interface."""

from __future__ import annotations

from statline.util import fmt_human, read_uint

NET_RX_BYTES = "/sys/class/net/{}/statistics/rx_bytes"
NET_TX_BYTES = "/sys/class/net/{}/statistics/tx_bytes"

# Update interval in milliseconds assumed between two readings.
INTERVAL = 1000

_WRAP = 1 << 64


class ByteCounter:
    """Remembers a byte counter between calls to turn it into a rate."""

    def __init__(self, template: str) -> None:
        self.template = template
        self.count = 0

    def speed(self, interface: str, interval: int) -> str | None:
        """Bytes per second since the previous reading, over interval ms."""
        previous = self.count
        current = read_uint(self.template.format(interface))
        if current is None:
            return None
        self.count = current
        if previous == 0:
            return None
        delta = (current - previous) % _WRAP
        return fmt_human(delta * 1000 // interval, 1024)


_rx = ByteCounter(NET_RX_BYTES)
_tx = ByteCounter(NET_TX_BYTES)


def netspeed_rx(interface: str) -> str | None:
    """Return the receive rate of an interface."""
    return _rx.speed(interface, INTERVAL)


def netspeed_tx(interface: str) -> str | None:
    """Return the transmit rate of an interface."""
    return _tx.speed(interface, INTERVAL)