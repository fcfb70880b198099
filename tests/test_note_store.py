# pylint: disable=missing-module-docstring, missing-function-docstring
import json
import os
from unittest.mock import patch

import pytest

from note import Note
from note_store import NoteStore


@pytest.fixture
def store(tmp_path):
    return NoteStore(tmp_path / "pastenotes.json")


def test_missing_file_loads_empty(store):
    assert store.load() == []


def test_save_then_load_round_trip(store):
    notes = [Note(content="newest"), Note(content="older\nline", title="Custom")]
    store.save(notes)

    loaded = store.load()
    assert loaded == notes
    assert [n.id for n in loaded] == [n.id for n in notes]
    assert [n.date for n in loaded] == [n.date for n in notes]


def test_file_is_json_array_of_notes(store):
    note = Note(content="hello")
    store.save([note])

    with open(store.path, encoding="utf-8") as f:
        data = json.load(f)

    assert data == [
        {
            "id": note.id,
            "title": "hello",
            "content": "hello",
            "date": note.date.isoformat(),
        }
    ]


def test_save_overwrites_previous_contents(store):
    store.save([Note(content="a"), Note(content="b")])
    store.save([Note(content="c")])
    assert [n.content for n in store.load()] == ["c"]


def test_save_leaves_no_temp_files(store, tmp_path):
    store.save([Note(content="a")])
    assert sorted(os.listdir(tmp_path)) == ["pastenotes.json"]


def test_empty_file_loads_empty(store):
    store.path.write_text("", encoding="utf-8")
    assert store.load() == []


def test_corrupt_file_loads_empty_and_is_backed_up(store):
    store.path.write_text("{not json", encoding="utf-8")

    assert store.load() == []
    backup = store.path.with_name("pastenotes.json.bak")
    assert backup.exists()
    assert backup.read_text(encoding="utf-8") == "{not json"
    assert not store.path.exists()


def test_wrong_shape_loads_empty(store):
    store.path.write_text(json.dumps({"notes": []}), encoding="utf-8")
    assert store.load() == []


def test_invalid_entry_loads_empty(store):
    store.path.write_text(json.dumps([{"id": "1", "content": "x"}]), encoding="utf-8")
    assert store.load() == []


def test_unreadable_file_loads_empty(store):
    store.path.write_text("[]", encoding="utf-8")
    with patch("builtins.open", side_effect=PermissionError("denied")):
        assert store.load() == []


def test_save_failure_raises_and_cleans_up(store, tmp_path):
    with patch("note_store.os.replace", side_effect=OSError("read-only")):
        with pytest.raises(OSError):
            store.save([Note(content="a")])
    assert os.listdir(tmp_path) == []


def test_default_path_is_in_app_dir(tmp_path):
    with patch("note_store.get_app_dir", return_value=tmp_path):
        assert NoteStore().path == tmp_path / "pastenotes.json"


def test_deeply_nested_file_loads_empty_and_is_backed_up(store):
    store.path.write_text("[" * 200000, encoding="utf-8")

    assert store.load() == []
    assert store.path.with_name("pastenotes.json.bak").exists()
    assert not store.path.exists()
