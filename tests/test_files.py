from statline.files import cat, num_files, run_command


def test_cat_returns_first_line(tmp_path):
    path = tmp_path / "value"
    path.write_text("value\nmore\n")
    assert cat(str(path)) == "value"


def test_cat_empty_file(tmp_path):
    path = tmp_path / "empty"
    path.write_text("")
    assert cat(str(path)) is None


def test_cat_blank_line(tmp_path):
    path = tmp_path / "blank"
    path.write_text("\nsecond\n")
    assert cat(str(path)) is None


def test_cat_missing(tmp_path, capsys):
    missing = tmp_path / "missing"
    assert cat(str(missing)) is None
    assert f"fopen '{missing}':" in capsys.readouterr().err


def test_num_files_counts_entries(tmp_path):
    for name in ("a", "b", "c"):
        (tmp_path / name).write_text(name)
    (tmp_path / "sub").mkdir()
    assert num_files(str(tmp_path)) == "4"


def test_num_files_empty_dir(tmp_path):
    assert num_files(str(tmp_path)) == "0"


def test_num_files_missing(tmp_path, capsys):
    assert num_files(str(tmp_path / "nope")) is None
    assert "opendir" in capsys.readouterr().err


def test_run_command_first_line():
    assert run_command("echo hello; echo world") == "hello"


def test_run_command_no_output():
    assert run_command("true") is None


def test_run_command_empty_first_line():
    assert run_command("echo; echo later") is None