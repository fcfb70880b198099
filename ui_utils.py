"""
Helpers shared by the views and the controller.
"""

import logging
from datetime import datetime
from typing import Optional
from urllib.parse import quote

import flet as ft

logger = logging.getLogger(__name__)

# mailto URLs get truncated by some mail clients beyond this size
MAX_SHARE_LENGTH = 1800


def format_note_date(date: datetime) -> str:
    """Abbreviated date with short time, e.g. 'Oct 19, 2026 14:05'."""
    return date.strftime("%b %d, %Y %H:%M")


def preview_text(content: str, max_lines: int = 2, max_chars: int = 160) -> str:
    """First lines of a note for the list pane."""
    lines = content.splitlines()[:max_lines]
    preview = "\n".join(lines)
    if len(preview) > max_chars:
        preview = preview[: max_chars - 1].rstrip() + "…"
    return preview


def build_share_url(content: str, subject: str = "") -> str:
    """Build a mailto: URL carrying the note content as the body."""
    body = content
    if len(body) > MAX_SHARE_LENGTH:
        body = body[:MAX_SHARE_LENGTH]
    params = [f"body={quote(body)}"]
    if subject:
        params.insert(0, f"subject={quote(subject)}")
    return "mailto:?" + "&".join(params)


def share_text(content: str, page: Optional[ft.Page], subject: str = "") -> bool:
    """
    Hands note content to the platform's default mail client.

    Args:
        content: Text to share.
        page: Flet page used to launch the URL.
    """
    if not content or not page:
        return False
    try:
        page.launch_url(build_share_url(content, subject))
        return True
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.error("Failed to share note: %s", e)
        return False
