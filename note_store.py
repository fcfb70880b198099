"""
JSON persistence for the note history.

The whole history is written as one JSON array on every save, through a
temporary file and an atomic replace.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional

from app_paths import get_app_dir
from note import Note

logger = logging.getLogger(__name__)

NOTES_FILENAME = "pastenotes.json"


class NoteStore:
    """Reads and writes the history file."""

    def __init__(self, path: Optional[Path] = None):
        self._path = Path(path) if path else get_app_dir() / NOTES_FILENAME

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> List[Note]:
        """
        Load notes from disk.

        A missing, empty, unreadable or malformed file yields an empty list.
        A malformed file is moved aside to '<name>.bak' before returning.
        """
        path = self._path
        if not path.exists():
            logger.info("No history file at %s, starting empty", path)
            return []

        try:
            if path.stat().st_size == 0:
                logger.warning("History file is empty, starting empty")
                return []

            with open(path, encoding="utf-8") as f:
                data = json.load(f)

            if not isinstance(data, list):
                raise ValueError("History file must contain a JSON array")
            notes = [Note.from_dict(entry) for entry in data]
        except (
            json.JSONDecodeError,
            UnicodeDecodeError,
            ValueError,
            TypeError,
            RecursionError,
        ) as e:
            logger.warning("History file corrupted/invalid (%s), starting empty", e)
            self._backup_corrupt_file()
            return []
        except OSError as e:
            logger.error("Failed to read history file %s: %s", path, e)
            return []

        logger.info("Loaded %d notes from %s", len(notes), path)
        return notes

    def save(self, notes: List[Note]) -> None:
        """
        Overwrite the history file with the given notes.

        Raises:
            OSError: If the file cannot be written.
        """
        path = self._path
        temp_path = None

        try:
            if not path.parent.exists():
                path.parent.mkdir(parents=True, exist_ok=True)

            fd, temp_path = tempfile.mkstemp(
                dir=str(path.parent), prefix=".pastenotes_tmp_", suffix=".json"
            )
            os.chmod(temp_path, 0o600)

            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump([note.to_dict() for note in notes], f, indent=2)
                f.flush()
                os.fsync(f.fileno())

            os.replace(temp_path, str(path))
            logger.debug("Saved %d notes to %s", len(notes), path)
        finally:
            if temp_path and os.path.exists(temp_path):
                try:
                    os.unlink(temp_path)
                except OSError as exc:
                    logger.warning(
                        "Failed to remove temp history file %s: %s", temp_path, exc
                    )

    def _backup_corrupt_file(self):
        backup = self._path.with_suffix(self._path.suffix + ".bak")
        try:
            os.replace(self._path, backup)
            logger.info("Corrupted history moved to %s", backup)
        except OSError as exc:
            logger.warning("Failed to backup corrupted history: %s", exc)
