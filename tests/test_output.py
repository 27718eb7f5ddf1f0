from minesweep.output import OUTPUT_LOG, write_to_file


def test_write_creates_file(tmp_path):
    target = tmp_path / "log.txt"
    assert write_to_file(str(target), "hello") is True
    assert target.read_text(encoding="utf-8") == "hello"


def test_write_appends(tmp_path):
    target = tmp_path / "log.txt"
    write_to_file(str(target), "first")
    write_to_file(str(target), "\nsecond")
    assert target.read_text(encoding="utf-8") == "first\nsecond"


def test_write_to_missing_directory_fails(tmp_path):
    target = tmp_path / "missing" / "log.txt"
    assert write_to_file(str(target), "data") is False
    assert not target.exists()


def test_default_log_path_writes_in_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert OUTPUT_LOG == "./log.txt"
    assert write_to_file(OUTPUT_LOG, "entry") is True
    assert (tmp_path / "log.txt").read_text(encoding="utf-8") == "entry"