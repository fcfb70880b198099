# pylint: disable=missing-module-docstring, missing-function-docstring, redefined-outer-name, protected-access
from unittest.mock import MagicMock

import pytest

from note import Note
from ui_manager import UIManager


@pytest.fixture
def ui(history):
    manager = UIManager(MagicMock(), history)
    manager.initialize_views(
        on_copy_callback=MagicMock(),
        on_share_callback=MagicMock(),
        on_delete_callback=MagicMock(),
        on_clear_all_callback=MagicMock(),
        on_rename_callback=MagicMock(),
        on_toggle_clipboard_callback=MagicMock(),
    )
    return manager


def rendered_notes(ui):
    return [
        c.note for c in ui.list_view.notes_list.controls if hasattr(c, "note")
    ]


def test_initialize_builds_layout(ui):
    assert ui.app_layout is not None
    assert ui.app_layout.sidebar_container.content is ui.list_view
    assert ui.app_layout.content_area.content is ui.detail_view


def test_refresh_shows_history(ui, history):
    a, b = Note(content="a"), Note(content="b")
    history.insert(a)
    history.insert(b)
    ui.refresh()
    assert rendered_notes(ui) == [b, a]


def test_search_filters_list(ui, history):
    history.insert(Note(content="apple pie"))
    history.insert(Note(content="banana"))
    ui.set_search_query("APPLE")
    assert [n.content for n in rendered_notes(ui)] == ["apple pie"]

    ui.set_search_query("")
    assert len(rendered_notes(ui)) == 2


def test_select_note_shows_detail(ui, history):
    note = Note(content="detail")
    history.insert(note)
    ui.select_note(note)

    assert ui.selected_note_id == note.id
    assert ui.detail_view.note is note
    assert ui.get_selected_note() is note


def test_selection_cleared_when_note_deleted(ui, history):
    note = Note(content="gone soon")
    history.insert(note)
    ui.select_note(note)

    history.delete(note.id)
    ui.refresh()

    assert ui.selected_note_id is None
    assert ui.detail_view.note is None


def test_selection_survives_other_changes(ui, history):
    keep = Note(content="keep")
    history.insert(keep)
    ui.select_note(keep)

    history.insert(Note(content="new clip"))
    ui.refresh()

    assert ui.selected_note_id == keep.id
    assert ui.detail_view.note is keep


def test_get_selected_note_without_selection(ui):
    assert ui.get_selected_note() is None


def test_text_input_focus_tracking(ui, history):
    assert not ui.is_text_input_focused()

    ui.list_view._set_search_focused(True)
    assert ui.is_text_input_focused()
    ui.list_view._set_search_focused(False)

    note = Note(content="editing")
    history.insert(note)
    ui.select_note(note)
    ui.detail_view._set_title_focused(True)
    assert ui.is_text_input_focused()

    history.delete(note.id)
    ui.refresh()
    assert not ui.is_text_input_focused()
