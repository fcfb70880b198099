"""
Note entity.

A note is one stored clipboard snippet. Identity is the UUID assigned at
creation; title is the only field that may change afterwards.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

UNTITLED = "Untitled"


def default_title(content: str) -> str:
    """Return the first non-blank line of content, trimmed, or 'Untitled'."""
    for line in content.splitlines():
        stripped = line.strip()
        if stripped:
            return stripped
    return UNTITLED


@dataclass
class Note:
    """A single clipboard snippet."""

    content: str
    title: str = ""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    date: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        if not isinstance(self.content, str):
            raise TypeError("Note content must be a string")
        if not isinstance(self.title, str):
            raise TypeError("Note title must be a string")
        if not self.title:
            self.title = default_title(self.content)

    @classmethod
    def from_clipboard(cls, text: Optional[str]) -> Optional["Note"]:
        """
        Build a note from raw clipboard text.

        Returns None when there is no text or it is blank after trimming.
        """
        if not text:
            return None
        cleaned = text.strip()
        if not cleaned:
            return None
        return cls(content=cleaned)

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match against title or content."""
        needle = query.casefold()
        return needle in self.title.casefold() or needle in self.content.casefold()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "date": self.date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Note":
        """
        Rebuild a note from its stored form.

        Raises:
            ValueError: If a field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError("Note entry must be an object")

        for key in ("id", "title", "content", "date"):
            if not isinstance(data.get(key), str):
                raise ValueError(f"Note field '{key}' must be a string")

        try:
            date = datetime.fromisoformat(data["date"])
        except ValueError as e:
            raise ValueError(f"Invalid note date: {data['date']}") from e

        note = cls(content=data["content"], title=data["title"], id=data["id"], date=date)
        # Keep a stored empty title as-is rather than re-deriving it
        note.title = data["title"]
        return note
