"""
History manager for the clipboard note history.

Owns the ordered, deduplicated list of notes and keeps its durable copy in
sync through a debounced save.
"""

import logging
import threading
from typing import Callable, List, Optional

from clipboard_backend import ClipboardError
from debouncer import Debouncer
from note import Note
from note_store import NoteStore

logger = logging.getLogger(__name__)


class HistoryManager:
    """
    Thread-safe manager for the note history.

    Notes are kept newest first and no two notes share the same content.
    Every mutation notifies listeners and restarts the save debounce timer.
    """

    DEFAULT_SAVE_DEBOUNCE = 0.5  # seconds

    def __init__(
        self,
        store: Optional[NoteStore] = None,
        clipboard=None,
        save_debounce: float = DEFAULT_SAVE_DEBOUNCE,
        debouncer_factory: Callable[..., Debouncer] = Debouncer,
    ):
        self._store = store if store is not None else NoteStore()
        self._clipboard = clipboard
        self._notes: List[Note] = []
        self._lock = threading.RLock()
        self._save_lock = threading.Lock()
        self._dirty = False

        self._listeners: List[Callable[[], None]] = []
        self._listeners_lock = threading.Lock()

        self._saver = debouncer_factory(save_debounce, self.save)

    @property
    def store(self) -> NoteStore:
        return self._store

    @property
    def has_pending_changes(self) -> bool:
        """True when a mutation has not been written to disk yet."""
        with self._lock:
            return self._dirty

    # --- Listeners ---

    def add_listener(self, listener: Callable[[], None]):
        """Add a listener callback for history changes."""
        with self._listeners_lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[], None]):
        """Remove a listener callback."""
        with self._listeners_lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def _notify_listeners_safe(self):
        """Notify listeners without holding the history lock."""
        with self._listeners_lock:
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener()
            except Exception as e:  # pylint: disable=broad-exception-caught
                logger.error("Error in history listener: %s", e)

    def _mark_changed(self):
        """Common tail of every mutation. Call without holding the lock."""
        self._saver.trigger()
        self._notify_listeners_safe()

    # --- Reads ---

    def get_all(self) -> List[Note]:
        """Get a copy of the current history, newest first."""
        with self._lock:
            return list(self._notes)

    def get_by_id(self, note_id: str) -> Optional[Note]:
        with self._lock:
            for note in self._notes:
                if note.id == note_id:
                    return note
        return None

    def filter(self, query: Optional[str]) -> List[Note]:
        """Notes whose title or content contains query, ignoring case."""
        with self._lock:
            notes = list(self._notes)
        if not query or not query.strip():
            return notes
        return [note for note in notes if note.matches(query)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._notes)

    # --- Mutations ---

    def insert(self, note: Note) -> bool:
        """
        Prepend a note unless one with identical content already exists.

        Returns:
            bool: True if the note was inserted.
        """
        if not isinstance(note, Note):
            raise TypeError("insert() expects a Note")

        with self._lock:
            if any(existing.content == note.content for existing in self._notes):
                logger.debug("Duplicate clipboard content ignored")
                return False
            self._notes.insert(0, note)
            self._dirty = True

        logger.info("Note added (%d chars)", len(note.content))
        self._mark_changed()
        return True

    def delete(self, note_id: str) -> bool:
        """Remove the note with the given id. Missing ids are a no-op."""
        with self._lock:
            for idx, note in enumerate(self._notes):
                if note.id == note_id:
                    del self._notes[idx]
                    self._dirty = True
                    break
            else:
                logger.debug("Delete requested for unknown note id %s", note_id)
                return False

        logger.info("Note deleted: %s", note_id)
        self._mark_changed()
        return True

    def clear_all(self):
        """Remove every note."""
        with self._lock:
            count = len(self._notes)
            self._notes.clear()
            self._dirty = True

        logger.info("History cleared (%d notes removed)", count)
        self._mark_changed()

    def rename_note(self, note_id: str, new_title: str) -> bool:
        """Change a note's title. Returns False if the id is unknown."""
        if not isinstance(new_title, str):
            raise TypeError("Title must be a string")

        with self._lock:
            note = self.get_by_id(note_id)
            if note is None:
                logger.debug("Rename requested for unknown note id %s", note_id)
                return False
            if note.title == new_title:
                return True
            note.title = new_title
            self._dirty = True

        self._mark_changed()
        return True

    def copy_to_clipboard(self, note: Note) -> bool:
        """
        Put a note's content on the clipboard. History is not modified.

        The monitor will see this write on its next tick; the content
        already exists in history so no duplicate is created.
        """
        if self._clipboard is None:
            logger.warning("No clipboard backend attached, cannot copy")
            return False
        try:
            self._clipboard.write_text(note.content)
            logger.debug("Copied note %s to clipboard", note.id)
            return True
        except (ClipboardError, OSError) as e:
            logger.error("Failed to copy note to clipboard: %s", e)
            return False

    # --- Persistence ---

    def load(self):
        """Replace the in-memory history with the stored one."""
        loaded = self._store.load()

        notes: List[Note] = []
        seen = set()
        for note in loaded:
            if note.content in seen:
                logger.warning("Dropping duplicate stored note %s", note.id)
                continue
            seen.add(note.content)
            notes.append(note)

        with self._lock:
            self._notes = notes
            self._dirty = False

        self._notify_listeners_safe()

    def save(self):
        """
        Write the current history to disk. Failures are logged only.

        Writes are serialized and land on disk in snapshot order.
        """
        with self._save_lock:
            with self._lock:
                snapshot = list(self._notes)
                self._dirty = False

            try:
                self._store.save(snapshot)
            except Exception as e:  # pylint: disable=broad-exception-caught
                logger.error("Failed to save history: %s", e)
                with self._lock:
                    self._dirty = True

    def flush(self):
        """Save immediately if a debounced save is pending."""
        self._saver.cancel()
        if self.has_pending_changes:
            self.save()
