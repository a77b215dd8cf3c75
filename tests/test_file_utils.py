import os

import pytest

from d3util import file_utils


def test_file_and_directory_exists(tmp_path):
    target = tmp_path / "data.txt"
    assert file_utils.file_exists(target) is False
    target.write_text("x")
    assert file_utils.file_exists(target) is True
    assert file_utils.directory_exists(target) is False
    assert file_utils.directory_exists(tmp_path) is True
    assert file_utils.file_exists(tmp_path) is False


def test_create_directory_recursive(tmp_path):
    nested = tmp_path / "a" / "b" / "c"
    file_utils.create_directory(nested)
    assert file_utils.directory_exists(nested)
    file_utils.create_directory(nested)
    assert file_utils.directory_exists(nested)


def test_create_directory_non_recursive_requires_parent(tmp_path):
    nested = tmp_path / "missing" / "child"
    with pytest.raises(FileNotFoundError):
        file_utils.create_directory(nested, recursive=False)
    single = tmp_path / "single"
    file_utils.create_directory(single, recursive=False)
    assert file_utils.directory_exists(single)


def test_create_directory_over_file_raises(tmp_path):
    target = tmp_path / "occupied"
    target.write_text("content")
    with pytest.raises(FileExistsError):
        file_utils.create_directory(target)


def test_write_and_read_round_trip(tmp_path):
    target = tmp_path / "sub" / "file.txt"
    content = "line one\r\nline two\nünïcode"
    file_utils.write_file(target, content)
    assert file_utils.read_file(target) == content


def test_write_append(tmp_path):
    target = tmp_path / "append.txt"
    file_utils.write_file(target, "first")
    file_utils.write_file(target, "second", append=True)
    assert file_utils.read_file(target) == "first" + "second"
    file_utils.write_file(target, "third")
    assert file_utils.read_file(target) == "third"


def test_write_bytes(tmp_path):
    target = tmp_path / "raw.bin"
    file_utils.write_file(target, b"\x00\x01abc")
    assert target.read_bytes() == b"\x00\x01abc"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        file_utils.read_file(tmp_path / "nope.txt")
    with pytest.raises(FileNotFoundError):
        file_utils.read_file_lines(tmp_path / "nope.txt")


def test_lines_round_trip(tmp_path):
    target = tmp_path / "deep" / "lines.txt"
    lines = ["alpha", "", "gamma"]
    file_utils.write_file_lines(target, lines)
    assert file_utils.read_file_lines(target) == lines
    file_utils.write_file_lines(target, ["delta"], append=True)
    assert file_utils.read_file_lines(target) == lines + ["delta"]


def test_read_lines_without_trailing_newline(tmp_path):
    target = tmp_path / "plain.txt"
    file_utils.write_file(target, "a\nb")
    assert file_utils.read_file_lines(target) == ["a", "b"]


def test_read_lines_empty_file(tmp_path):
    target = tmp_path / "empty.txt"
    file_utils.write_file(target, "")
    assert file_utils.read_file_lines(target) == []


def test_delete_file(tmp_path):
    target = tmp_path / "gone.txt"
    target.write_text("bye")
    assert file_utils.delete_file(target) is True
    assert not target.exists()
    assert file_utils.delete_file(target) is False


def test_delete_empty_directory(tmp_path):
    folder = tmp_path / "empty_dir"
    folder.mkdir()
    assert file_utils.delete_file(folder) is True
    assert not folder.exists()


def test_delete_non_empty_directory_raises(tmp_path):
    folder = tmp_path / "full"
    folder.mkdir()
    (folder / "inner.txt").write_text("x")
    with pytest.raises(OSError):
        file_utils.delete_file(folder)
    assert folder.exists()


def test_basename_and_dirname_of_joined_path():
    joined = file_utils.join_path("dir", "file.txt")
    assert file_utils.get_basename(joined) == "file.txt"
    assert file_utils.get_dirname(joined) == "dir"


def test_basename_of_directory_path_is_empty():
    assert file_utils.get_basename("some/dir/") == ""


def test_extension():
    assert file_utils.get_extension("archive.tar.gz") == ".gz"
    assert file_utils.get_extension(".bashrc") == ""
    assert file_utils.get_extension("noext") == ""
    assert file_utils.get_extension(file_utils.join_path("x.d", "plain")) == ""


def test_normalize_path_removes_dots():
    assert file_utils.normalize_path("a/./b/../c") == "a/c"
    assert file_utils.normalize_path("a//b") == file_utils.join_path("a", "b")


def test_normalize_path_edge_cases():
    assert file_utils.normalize_path("") == ""
    assert file_utils.normalize_path("a/..") == "."
    assert file_utils.normalize_path("/..") == "/"
    assert file_utils.normalize_path("../..") == "../.."
    assert file_utils.normalize_path("a/b/..") == "a/"


def test_normalize_path_is_idempotent():
    for raw in ["a/./b/../c", "/x/../y/./z/", "../a/../b", "./", "a/b/c/../../d"]:
        once = file_utils.normalize_path(raw)
        assert file_utils.normalize_path(once) == once


def test_join_path_forms_agree():
    assert file_utils.join_path(["a", "b", "c"]) == file_utils.join_path("a", "b", "c")
    assert file_utils.join_path(("a", "b")) == file_utils.join_path("a", "b")


def test_join_path_empty_and_absolute():
    assert file_utils.join_path() == ""
    assert file_utils.join_path([]) == ""
    absolute = os.path.abspath("elsewhere")
    assert file_utils.join_path("base", absolute) == absolute
    assert file_utils.join_path("", "b") == "b"


def test_join_path_with_real_files(tmp_path):
    target = file_utils.join_path(str(tmp_path), "nested", "note.txt")
    file_utils.write_file(target, "hello")
    assert file_utils.file_exists(target)
    assert file_utils.read_file(target) == "hello"
    assert file_utils.directory_exists(file_utils.get_dirname(target))