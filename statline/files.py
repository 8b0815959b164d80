"""Components that read files, directories and command output."""

from __future__ import annotations

import os
import subprocess

from statline.util import _LINE_MAX, read_first_line, warn


def cat(path: str) -> str | None:
    """Return the first line of the file at path, or None if it is empty."""
    return read_first_line(path) or None


def num_files(path: str) -> str | None:
    """Count the entries of a directory."""
    try:
        with os.scandir(path) as entries:
            count = sum(1 for _ in entries)
    except OSError:
        warn(f"opendir '{path}':")
        return None
    return str(count)


def run_command(cmd: str) -> str | None:
    """Run a shell command and return the first line it prints."""
    try:
        proc = subprocess.Popen(cmd, shell=True, stdout=subprocess.PIPE)
    except OSError:
        warn(f"popen '{cmd}':")
        return None

    with proc:
        assert proc.stdout is not None
        raw = proc.stdout.readline(_LINE_MAX)
        proc.stdout.close()
        proc.wait()

    if not raw:
        return None
    line = raw.decode("utf-8", errors="replace")
    cut = line.rfind("\n")
    if cut >= 0:
        line = line[:cut]
    return line or None