"""Components reporting processor frequency and load."""

from __future__ import annotations

import psutil

from statline.util import fmt_human, read_uint, warn

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"

# user nice system idle iowait irq softirq
_FIELDS = 7
_BUSY = (0, 1, 2, 5, 6)


class CpuMeter:
    """Measures processor usage between successive readings of /proc/stat."""

    def __init__(self, path: str | None = None) -> None:
        self.path = path
        self._last: list[float] = [0.0] * _FIELDS

    def _sample(self) -> list[float] | None:
        path = self.path or PROC_STAT
        try:
            with open(path, encoding="utf-8", errors="replace") as handle:
                line = handle.readline()
        except OSError:
            warn(f"fopen '{path}':")
            return None
        tokens = line.split()[1 : 1 + _FIELDS]
        try:
            values = [float(token) for token in tokens]
        except ValueError:
            return None
        return values if len(values) == _FIELDS else None

    def percent(self) -> str | None:
        """Usage in percent since the previous call; None on the first call."""
        previous = self._last
        current = self._sample()
        if current is None:
            return None
        self._last = current

        if previous[0] == 0:
            return None
        total = sum(previous) - sum(current)
        if total == 0:
            return None
        busy = sum(previous[i] for i in _BUSY) - sum(current[i] for i in _BUSY)
        return str(int(100 * busy / total))


_meter = CpuMeter()


def cpu_freq(unused: object = None) -> str | None:
    """Return the current frequency of the first processor."""
    khz = read_uint(CPU_FREQ)
    if khz is not None:
        return fmt_human(khz * 1000, 1000)
    try:
        freq = psutil.cpu_freq()
    except (OSError, NotImplementedError, AttributeError):
        return None
    if freq is None or not freq.current:
        return None
    return fmt_human(freq.current * 1e6, 1000)


def cpu_perc(unused: object = None) -> str | None:
    """Return the processor usage in percent since the previous call."""
    return _meter.percent()