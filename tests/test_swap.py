import pytest

from statline import swap
from statline.util import fmt_human


def _write(tmp_path, total, free, cached):
    path = tmp_path / "meminfo"
    path.write_text(
        "MemTotal:       16000 kB\n"
        f"SwapCached:     {cached} kB\n"
        "Active:          1000 kB\n"
        f"SwapTotal:      {total} kB\n"
        f"SwapFree:       {free} kB\n"
    )
    return path


@pytest.fixture
def meminfo(tmp_path, monkeypatch):
    def make(total, free, cached):
        path = _write(tmp_path, total, free, cached)
        monkeypatch.setattr(swap, "MEMINFO", str(path))
        return path

    return make


def test_swap_info_reads_fields(tmp_path):
    path = _write(tmp_path, 2048, 1024, 16)
    assert swap.swap_info(str(path)) == {"total": 2048, "free": 1024, "cached": 16}


def test_swap_info_missing_file(tmp_path):
    assert swap.swap_info(str(tmp_path / "absent")) is None


def test_swap_info_ignores_other_lines(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("MemTotal: 5 kB\nSwapTotal: 7 kB\n")
    assert swap.swap_info(str(path)) == {"total": 7}


def test_swap_total_and_free(meminfo):
    meminfo(2048, 1024, 0)
    assert swap.swap_total() == fmt_human(2048 * 1024, 1024)
    assert swap.swap_free() == fmt_human(1024 * 1024, 1024)


def test_swap_used_equals_total_when_nothing_free(meminfo):
    meminfo(4096, 0, 0)
    assert swap.swap_used() == swap.swap_total()


def test_swap_perc_full(meminfo):
    meminfo(4096, 0, 0)
    assert swap.swap_perc() == "100"


def test_swap_perc_empty(meminfo):
    meminfo(4096, 4096, 0)
    assert swap.swap_perc() == "0"


def test_swap_perc_zero_total(meminfo):
    meminfo(0, 0, 0)
    assert swap.swap_perc() is None


def test_missing_meminfo(tmp_path, monkeypatch):
    monkeypatch.setattr(swap, "MEMINFO", str(tmp_path / "absent"))
    assert swap.swap_total() is None
    assert swap.swap_free() is None
    assert swap.swap_used() is None
    assert swap.swap_perc() is None


def test_missing_field(tmp_path, monkeypatch):
    path = tmp_path / "meminfo"
    path.write_text("SwapTotal: 100 kB\n")
    monkeypatch.setattr(swap, "MEMINFO", str(path))
    assert swap.swap_free() is None
    assert swap.swap_total() == fmt_human(100 * 1024, 1024)