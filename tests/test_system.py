import os
import platform
import pwd
import re
import socket
import sys
import time

from statline import system


def test_datetime_year():
    assert system.datetime("%Y") == time.strftime("%Y")


def test_datetime_empty_format_is_none(capsys):
    assert system.datetime("") is None
    assert "strftime" in capsys.readouterr().err


def test_datetime_too_long():
    assert system.datetime("%Y" * 600) is None


def test_hostname():
    assert system.hostname(None) == socket.gethostname()


def test_kernel_release():
    assert system.kernel_release(None) == platform.release()


def test_load_avg_shape():
    result = system.load_avg(None)
    parts = result.split(" ")
    assert len(parts) == 3
    for part in parts:
        whole, _, fraction = part.partition(".")
        assert whole.isdigit()
        assert len(fraction) == 2 and fraction.isdigit()
        assert float(part) >= 0.0


def test_format_uptime():
    assert system.format_uptime(3661) == "1h 1m"


def test_format_uptime_minutes_below_sixty():
    for seconds in (0, 59, 3599, 86399, 10**6):
        hours, minutes = re.fullmatch(r"(\d+)h (\d+)m", system.format_uptime(seconds)).groups()
        assert int(minutes) < 60
        assert int(hours) * 3600 + int(minutes) * 60 <= seconds


def test_uptime_shape():
    result = system.uptime(None)
    hours_part, minutes_part = result.split(" ")
    assert hours_part.endswith("h")
    assert minutes_part.endswith("m")
    hours = int(hours_part[:-1])
    minutes = int(minutes_part[:-1])
    assert hours >= 0
    assert 0 <= minutes < 60


def test_ids_and_username():
    assert system.gid(None) == str(os.getgid())
    assert system.uid(None) == str(os.geteuid())
    assert system.username(None) == pwd.getpwuid(os.geteuid()).pw_name


def test_entropy_on_bsd(monkeypatch):
    monkeypatch.setattr(sys, "platform", "openbsd7")
    assert system.entropy(None) == "\u221e"


def test_entropy_on_linux(monkeypatch, tmp_path):
    path = tmp_path / "entropy_avail"
    path.write_text("256\n")
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(system, "ENTROPY_AVAIL", str(path))
    assert system.entropy(None) == "256"


def test_entropy_on_linux_unreadable(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(system, "ENTROPY_AVAIL", str(tmp_path / "missing"))
    assert system.entropy(None) is None


def test_temp(tmp_path):
    path = tmp_path / "temp"
    path.write_text("45000\n")
    assert system.temp(str(path)) == "45"


def test_temp_below_one_degree(tmp_path):
    path = tmp_path / "temp"
    path.write_text("999\n")
    assert system.temp(str(path)) == "0"


def test_temp_missing(tmp_path):
    assert system.temp(str(tmp_path / "missing")) is None