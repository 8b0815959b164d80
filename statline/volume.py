"""Component reporting the master volume of an OSS mixer device."""

from __future__ import annotations

import fcntl
import os
import struct

from statline.util import warn

SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic",
    "cd", "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2",
    "line3", "dig1", "dig2", "dig3", "phin", "phout", "video", "radio",
    "monitor",
)


def _mixer_read(channel: int) -> int:
    """Request number reading one int from the mixer."""
    size = struct.calcsize("i")
    return (2 << 30) | (size << 16) | (ord("M") << 8) | channel


SOUND_MIXER_READ_DEVMASK = _mixer_read(0xFE)


def _read_int(fd: int, request: int) -> int:
    result = fcntl.ioctl(fd, request, struct.pack("i", 0))
    return struct.unpack("i", result)[0]


def vol_perc(card: str) -> str | None:
    """Return the master volume of the mixer device at card, in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError:
        warn(f"open '{card}':")
        return None

    level = None
    try:
        try:
            devmask = _read_int(fd, SOUND_MIXER_READ_DEVMASK)
        except OSError:
            warn("ioctl 'SOUND_MIXER_READ_DEVMASK':")
            return None
        for channel, name in enumerate(SOUND_DEVICE_NAMES):
            if devmask & (1 << channel) and name == "vol":
                try:
                    level = _read_int(fd, _mixer_read(channel))
                except OSError:
                    warn(f"ioctl 'MIXER_READ({channel})':")
                    return None
    finally:
        os.close(fd)

    if level is None:
        return None
    return str(level & 0xFF)