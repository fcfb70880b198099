"""Views package for PasteNotes."""

from views.base_view import BaseView
from views.note_detail_view import NoteDetailView
from views.notes_list_view import NotesListView

__all__ = [
    "BaseView",
    "NoteDetailView",
    "NotesListView",
]
