"""Tests for the directory-backed key/value file store."""

import pytest

from filestore import FileStore


def test_write_read_delete(tmp_path):
    store = FileStore(tmp_path / "data")
    store.write("a.json", "[]")
    assert store.read("a.json") == "[]"
    assert store.list_keys() == ["a.json"]

    store.delete("a.json")
    assert store.list_keys() == []
    store.delete("a.json")


def test_write_replaces_without_leaving_temp_files(tmp_path):
    store = FileStore(tmp_path)
    store.write("a.json", "first")
    store.write("a.json", "second")
    assert store.read("a.json") == "second"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["a.json"]


def test_read_missing_key_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileStore(tmp_path).read("missing.json")


def test_list_keys_on_missing_directory(tmp_path):
    assert FileStore(tmp_path / "nope").list_keys() == []


def test_list_keys_skips_directories_and_temp_files(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "a.json.tmp").write_text("partial")
    (tmp_path / "b.json").write_text("[]")
    assert FileStore(tmp_path).list_keys() == ["b.json"]


@pytest.mark.parametrize("key", ["", "../escape.json", "a/b.json", "a\\b.json", ".", ".."])
def test_rejects_keys_that_are_not_bare_names(tmp_path, key):
    store = FileStore(tmp_path)
    with pytest.raises(ValueError):
        store.write(key, "[]")


def test_failed_write_removes_temp_file_and_keeps_old_record(tmp_path):
    store = FileStore(tmp_path)
    store.write("a.json", "old")
    with pytest.raises(UnicodeEncodeError):
        store.write("a.json", "\ud800")
    assert store.read("a.json") == "old"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["a.json"]
