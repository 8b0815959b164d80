"""The status line command: renders components and publishes the result."""

from __future__ import annotations

import os
import re
import signal
import socket
import struct
import sys
import threading
import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from statline.cpu import cpu_perc
from statline.system import datetime, uptime
from statline.util import warn

PROG = "statline"
VERSION = "1.0"

# Interval between updates, in milliseconds.
INTERVAL = 1000
# Text shown when a component yields no value.
UNKNOWN_STR = "n/a"
# Size of the status buffer in bytes, terminator included.
MAXLEN = 2048

_CONVERSION = re.compile(r"%(.?)", re.DOTALL)


class ExitRequest(Exception):
    """The command line asks the program to stop with a message."""


class UsageError(ExitRequest):
    """The command line is malformed."""


class VersionRequest(ExitRequest):
    """The version was asked for."""


class _Fatal(Exception):
    pass


def _check_format(fmt: str) -> None:
    for match in _CONVERSION.finditer(fmt):
        if match.group(1) not in ("s", "%"):
            raise ValueError(f"unsupported conversion in format {fmt!r}")


def _apply_format(fmt: str, value: str) -> str:
    return _CONVERSION.sub(lambda m: value if m.group(1) == "s" else "%", fmt)


@dataclass(frozen=True)
class Component:
    """A status component: a value function, a printf-style format and an argument."""

    func: Callable[[Any], str | None]
    fmt: str
    arg: Any = None

    def __post_init__(self) -> None:
        _check_format(self.fmt)

    def render(self, unknown: str) -> str:
        """Call the function and place its value, or unknown, into the format."""
        value = self.func(self.arg)
        if value is None:
            value = unknown
        return _apply_format(self.fmt, value)


COMPONENTS = (
    Component(cpu_perc, "[ %s%%]"),
    Component(uptime, "[%s]"),
    Component(datetime, "  %s", "%m-%d-%Y %I:%M%p "),
)


def render_status(components: Iterable[Component], unknown: str, maxlen: int) -> str:
    """Join the rendered components into a status of fewer than maxlen bytes.

    A component that does not fit is cut short and ends the status.
    """
    status = bytearray()
    for component in components:
        piece = component.render(unknown).encode("utf-8")
        room = maxlen - len(status)
        if len(piece) >= room:
            warn("vsnprintf: Output truncated")
            status += piece[: max(room - 1, 0)]
            break
        status += piece
    return status.decode("utf-8", errors="ignore")


@dataclass(frozen=True)
class Options:
    """Command line settings."""

    stdout: bool = False
    once: bool = False


def _usage() -> UsageError:
    return UsageError(f"usage: {PROG} [-v] [-s] [-1]")


def parse_args(argv: Iterable[str]) -> Options:
    """Parse the command line flags -v, -s and -1."""
    args = list(argv)
    stdout = once = False
    while args and args[0].startswith("-") and len(args[0]) > 1:
        arg = args.pop(0)
        if arg == "--":
            break
        for flag in arg[1:]:
            if flag == "v":
                raise VersionRequest(f"{PROG}-{VERSION}")
            if flag == "1":
                once = True
                stdout = True
            elif flag == "s":
                stdout = True
            else:
                raise _usage()
    if args:
        raise _usage()
    return Options(stdout=stdout, once=once)


def _pad(length: int) -> int:
    return -length % 4


def _recv_exact(sock: socket.socket, size: int) -> bytes:
    data = bytearray()
    while len(data) < size:
        part = sock.recv(size - len(data))
        if not part:
            raise OSError("connection closed by X server")
        data += part
    return bytes(data)


def _parse_display(name: str) -> tuple[str, int, int]:
    host, sep, rest = name.rpartition(":")
    if not sep or not rest:
        raise OSError(f"invalid display {name!r}")
    number, _, screen = rest.partition(".")
    try:
        return host, int(number), int(screen or 0)
    except ValueError as exc:
        raise OSError(f"invalid display {name!r}") from exc


def _xauth_entries(data: bytes) -> Iterator[tuple[bytes, bytes, bytes]]:
    pos = 0
    while pos + 2 <= len(data):
        pos += 2  # family
        fields = []
        for _ in range(4):
            if pos + 2 > len(data):
                return
            (length,) = struct.unpack_from(">H", data, pos)
            fields.append(data[pos + 2 : pos + 2 + length])
            pos += 2 + length
        _, number, name, cookie = fields
        yield number, name, cookie


def _read_cookie(number: int) -> tuple[bytes, bytes]:
    path = os.environ.get("XAUTHORITY") or os.path.expanduser("~/.Xauthority")
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError:
        return b"", b""
    wanted = str(number).encode()
    for entry_number, name, cookie in _xauth_entries(data):
        if entry_number in (b"", wanted) and name == b"MIT-MAGIC-COOKIE-1":
            return name, cookie
    return b"", b""


class _XConnection:
    """A minimal X11 client able to set the root window's name."""

    _CHANGE_PROPERTY = 18
    _WM_NAME = 39
    _STRING = 31

    def __init__(self, display: str | None = None) -> None:
        name = display if display is not None else os.environ.get("DISPLAY", "")
        host, number, screen = _parse_display(name)
        self._sock = self._connect(host, number)
        try:
            self.root = self._setup(number, screen)
        except (OSError, struct.error) as exc:
            self._sock.close()
            raise OSError(str(exc)) from exc

    @staticmethod
    def _connect(host: str, number: int) -> socket.socket:
        if host in ("", "unix") or host.startswith("/"):
            path = host if host.startswith("/") else f"/tmp/.X11-unix/X{number}"
            sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
            try:
                sock.connect(path)
            except OSError:
                sock.close()
                raise
            return sock
        return socket.create_connection((host, 6000 + number))

    def _setup(self, number: int, screen: int) -> int:
        name, cookie = _read_cookie(number)
        request = (
            struct.pack("<BxHHHH2x", 0x6C, 11, 0, len(name), len(cookie))
            + name
            + bytes(_pad(len(name)))
            + cookie
            + bytes(_pad(len(cookie)))
        )
        self._sock.sendall(request)
        status, reason_len, _, _, extra = struct.unpack(
            "<BBHHH", _recv_exact(self._sock, 8)
        )
        body = _recv_exact(self._sock, extra * 4)
        if status != 1:
            reason = body[:reason_len] if status == 0 else body
            text = reason.decode("latin-1").strip("\0 \n")
            raise OSError(text or "connection refused by X server")

        (vendor_len,) = struct.unpack_from("<H", body, 16)
        num_screens, num_formats = struct.unpack_from("<BB", body, 20)
        if screen >= num_screens:
            raise OSError(f"no screen {screen}")
        pos = 32 + vendor_len + _pad(vendor_len) + 8 * num_formats
        for _ in range(screen):
            num_depths = body[pos + 39]
            pos += 40
            for _ in range(num_depths):
                (num_visuals,) = struct.unpack_from("<H", body, pos + 2)
                pos += 8 + 24 * num_visuals
        (root,) = struct.unpack_from("<I", body, pos)
        return root

    def store_name(self, text: str) -> None:
        """Set the WM_NAME property of the root window."""
        data = text.encode("utf-8")
        units = 6 + (len(data) + _pad(len(data))) // 4
        if units > 0xFFFF:
            raise OSError("request too long")
        header = struct.pack(
            "<BBHIIIB3xI",
            self._CHANGE_PROPERTY,
            0,
            units,
            self.root,
            self._WM_NAME,
            self._STRING,
            8,
            len(data),
        )
        self._sock.sendall(header + data + bytes(_pad(len(data))))

    def close(self) -> None:
        self._sock.close()


class _Signals:
    """Installs handlers that stop the loop or wake it from its sleep."""

    _STOP = (signal.SIGINT, signal.SIGTERM)

    def __init__(self, done: bool) -> None:
        self.done = done
        self._wake = threading.Event()
        self._saved: dict[int, Any] = {}

    def _handle(self, signo: int, frame: object) -> None:
        if signo != signal.SIGUSR1:
            self.done = True
        self._wake.set()

    def __enter__(self) -> _Signals:
        for signo in (*self._STOP, signal.SIGUSR1):
            self._saved[signo] = signal.signal(signo, self._handle)
        return self

    def __exit__(self, *exc_info: object) -> None:
        for signo, handler in self._saved.items():
            signal.signal(signo, handler)

    def sleep(self, seconds: float) -> None:
        self._wake.wait(seconds)
        self._wake.clear()


def _publish(options: Options, display: _XConnection | None, status: str) -> None:
    if display is None:
        try:
            print(status, flush=True)
        except OSError as exc:
            raise _Fatal(f"puts: {exc.strerror or exc}") from exc
    else:
        try:
            display.store_name(status)
        except OSError as exc:
            raise _Fatal("XStoreName: Allocation failed") from exc


def _run(options: Options, signals: _Signals) -> None:
    display = None
    if not options.stdout:
        try:
            display = _XConnection()
        except OSError as exc:
            raise _Fatal("XOpenDisplay: Failed to open display") from exc

    try:
        while True:
            start = time.monotonic()
            status = render_status(COMPONENTS, UNKNOWN_STR, MAXLEN)
            _publish(options, display, status)
            if signals.done:
                break
            remaining = INTERVAL / 1000 - (time.monotonic() - start)
            if remaining >= 0:
                signals.sleep(remaining)
            if signals.done:
                break
        if display is not None:
            try:
                display.store_name("")
            except OSError:
                pass
    finally:
        if display is not None:
            try:
                display.close()
            except OSError as exc:
                raise _Fatal("XCloseDisplay: Failed to close display") from exc


def main(argv: Iterable[str] | None = None) -> int:
    """Run the status line; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_args(args)
    except ExitRequest as exc:
        sys.stderr.write(f"{exc}\n")
        return 1

    try:
        with _Signals(done=options.once) as signals:
            _run(options, signals)
    except _Fatal as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    return 0