import io
import os
import stat

import pytest

from utils.errors import InputUnreadable, OutputUnwritable
from utils.text_io import read_files_as_texts, read_text_file, write_result

def test_read_text_file(tmp_path):
    p = tmp_path / "input.txt"
    p.write_text("测试文本内容\r\nsecond line", encoding="utf-8")
    assert read_text_file(str(p)) == "测试文本内容\r\nsecond line"

def test_read_missing_file(tmp_path):
    with pytest.raises(InputUnreadable) as exc:
        read_text_file(str(tmp_path / "non_existent.txt"))
    assert exc.value.path.endswith("non_existent.txt")

def test_read_bad_encoding(tmp_path):
    p = tmp_path / "latin.txt"
    p.write_bytes(b"caf\xe9")
    with pytest.raises(InputUnreadable):
        read_text_file(str(p))
    assert read_text_file(str(p), "latin-1") == "café"

def test_read_directory(tmp_path):
    with pytest.raises(InputUnreadable):
        read_text_file(str(tmp_path))

def test_write_result(tmp_path):
    out = tmp_path / "test_output.txt"
    assert write_result(str(out), 0.856) == "85.60%"
    assert out.read_text(encoding="utf-8") == "85.60%"
    write_result(str(out), 1.0)
    assert out.read_text(encoding="utf-8") == "100.00%"
    assert os.listdir(tmp_path) == ["test_output.txt"]

def test_write_result_missing_dir(tmp_path):
    out = tmp_path / "missing" / "result.txt"
    with pytest.raises(OutputUnwritable):
        write_result(str(out), 0.5)
    assert not out.exists()

def test_write_result_onto_directory(tmp_path):
    target = tmp_path / "taken"
    target.mkdir()
    with pytest.raises(OutputUnwritable):
        write_result(str(target), 0.5)
    assert os.listdir(tmp_path) == ["taken"]

def test_write_result_keeps_existing_mode(tmp_path):
    out = tmp_path / "ans.txt"
    out.write_text("old", encoding="utf-8")
    os.chmod(out, 0o644)
    write_result(str(out), 0.5)
    assert out.read_text(encoding="utf-8") == "50.00%"
    assert stat.S_IMODE(os.stat(out).st_mode) == 0o644

def test_write_result_new_file_follows_umask(tmp_path):
    out = tmp_path / "ans.txt"
    old = os.umask(0o022)
    try:
        write_result(str(out), 0.5)
    finally:
        os.umask(old)
    assert stat.S_IMODE(os.stat(out).st_mode) == 0o644

def test_read_files_as_texts():
    f = io.BytesIO("héllo".encode("utf-8"))
    f.name = "a.txt"
    texts, names = read_files_as_texts([f])
    assert texts == ["héllo"]
    assert names == ["a.txt"]
    assert read_files_as_texts(None) == ([], [])

def test_read_files_as_texts_rejects_bad_bytes():
    f = io.BytesIO(b"caf\xe9 menu")
    f.name = "menu.txt"
    with pytest.raises(InputUnreadable) as exc:
        read_files_as_texts([f])
    assert exc.value.path == "menu.txt"
    f.seek(0)
    assert read_files_as_texts([f], "latin-1")[0] == ["café menu"]
