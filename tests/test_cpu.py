import pytest

from statline import cpu


def write_stat(path, values):
    path.write_text("cpu  " + " ".join(str(v) for v in values) + " 0 0 0\ncpu0 1 2 3\n")


@pytest.fixture
def stat(tmp_path):
    return tmp_path / "stat"


def test_first_reading_is_none(stat):
    write_stat(stat, [100, 0, 100, 0, 0, 0, 0])
    meter = cpu.CpuMeter(str(stat))
    assert meter.percent() is None


def test_half_busy(stat):
    meter = cpu.CpuMeter(str(stat))
    write_stat(stat, [100, 0, 100, 0, 0, 0, 0])
    meter.percent()
    write_stat(stat, [150, 0, 150, 100, 0, 0, 0])
    assert meter.percent() == "50"


def test_fully_idle_is_zero(stat):
    meter = cpu.CpuMeter(str(stat))
    write_stat(stat, [100, 10, 100, 500, 0, 0, 0])
    meter.percent()
    write_stat(stat, [100, 10, 100, 900, 0, 0, 0])
    assert meter.percent() == "0"


def test_fully_busy_is_hundred(stat):
    meter = cpu.CpuMeter(str(stat))
    write_stat(stat, [100, 10, 100, 500, 0, 0, 0])
    meter.percent()
    write_stat(stat, [300, 10, 300, 500, 0, 0, 0])
    assert meter.percent() == "100"


def test_no_change_is_none(stat):
    meter = cpu.CpuMeter(str(stat))
    write_stat(stat, [100, 10, 100, 500, 5, 1, 1])
    meter.percent()
    assert meter.percent() is None


def test_percent_within_bounds(stat):
    meter = cpu.CpuMeter(str(stat))
    write_stat(stat, [1000, 50, 400, 9000, 30, 5, 7])
    meter.percent()
    write_stat(stat, [1300, 80, 500, 9900, 60, 9, 12])
    value = int(meter.percent())
    assert 0 <= value <= 100


def test_short_line_is_none(stat):
    stat.write_text("cpu 1 2 3\n")
    meter = cpu.CpuMeter(str(stat))
    assert meter.percent() is None


def test_missing_file(tmp_path):
    meter = cpu.CpuMeter(str(tmp_path / "absent"))
    assert meter.percent() is None


def test_cpu_perc_missing_stat(tmp_path, monkeypatch):
    monkeypatch.setattr(cpu, "PROC_STAT", str(tmp_path / "absent"))
    assert cpu.cpu_perc(None) is None


def test_cpu_freq_from_sysfs(tmp_path, monkeypatch):
    freq = tmp_path / "scaling_cur_freq"
    freq.write_text("1800000\n")
    monkeypatch.setattr(cpu, "CPU_FREQ", str(freq))
    assert cpu.cpu_freq(None) == "1.8 G"