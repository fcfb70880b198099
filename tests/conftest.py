import logging
import os
import sys
import tempfile
from unittest.mock import MagicMock

import pytest

logger = logging.getLogger(__name__)


def pytest_configure(config):
    """
    Point the app data directory at a throwaway home and make flet importable.

    AppState is created at import time and reads config and history from the
    user's home, so HOME must be redirected before any app module is imported.
    If flet cannot be imported (headless CI without shared libs) it is mocked
    so that tests can still be collected.
    """
    os.environ["HOME"] = tempfile.mkdtemp(prefix="pastenotes_test_home_")

    try:
        import flet as ft

        _ = ft.Icons.CONTENT_PASTE
    except (ImportError, OSError, AttributeError) as e:
        logger.warning(
            f"Flet import failed: {e}. Mocking flet and dependencies for tests."
        )
        mock_dependencies()


def mock_dependencies():
    """Mocks flet and other runtime dependencies in sys.modules."""
    flet_mock = MagicMock()

    class MockControl:
        def __init__(self, *args, **kwargs):
            self.content = kwargs.get("content")
            self.controls = kwargs.get("controls", [])
            self.value = kwargs.get("value")
            self.page = None

            # Handle positional args for controls list (Row, Column, ListView)
            if not self.controls and args and isinstance(args[0], list):
                self.controls = args[0]

            for k, v in kwargs.items():
                setattr(self, k, v)

        def update(self):
            pass

    class MockContainer(MockControl):
        pass

    class MockSnackBar(MockControl):
        def __init__(self, content=None, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self.content = content

    class MockText(MockControl):
        def __init__(self, value=None, *args, **kwargs):
            super().__init__(*args, **kwargs)
            if value is not None:
                self.value = value

    class MockTextField(MockControl):
        pass

    class MockSwitch(MockControl):
        pass

    class MockListView(MockControl):
        pass

    class MockPage(MockControl):
        platform = "linux"

        def launch_url(self, url):
            pass

        def open(self, control):
            pass

        def close(self, control):
            pass

    class MockRow(MockControl):
        pass

    class MockColumn(MockControl):
        pass

    class MockIcon(MockControl):
        def __init__(self, name=None, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self.name = name

    class MockButton(MockControl):
        def __init__(self, *args, **kwargs):
            text_or_icon = args[0] if args and not isinstance(args[0], list) else None
            super().__init__(**kwargs)
            self.text = text_or_icon

    class MockAlertDialog(MockControl):
        pass

    flet_mock.Container = MockContainer
    flet_mock.Page = MockPage
    flet_mock.Control = MockControl
    flet_mock.SnackBar = MockSnackBar
    flet_mock.Text = MockText
    flet_mock.TextField = MockTextField
    flet_mock.Switch = MockSwitch
    flet_mock.ListView = MockListView
    flet_mock.Row = MockRow
    flet_mock.Column = MockColumn
    flet_mock.Icon = MockIcon
    flet_mock.TextButton = MockButton
    flet_mock.IconButton = MockButton
    flet_mock.OutlinedButton = MockButton
    flet_mock.AlertDialog = MockAlertDialog

    sys.modules["flet"] = flet_mock

    if "pyperclip" not in sys.modules:
        pyperclip_mock = MagicMock()

        class MockPyperclipException(Exception):
            pass

        pyperclip_mock.PyperclipException = MockPyperclipException
        sys.modules["pyperclip"] = pyperclip_mock


class FakeClipboard:
    """In-memory clipboard with an explicit change counter."""

    def __init__(self, text=None):
        self.text = text
        self.change_count = 0
        self.writes = []
        self.fail_writes = False

    def set(self, text):
        """Simulate a user copying text in another application."""
        self.text = text
        self.change_count += 1

    def change_token(self):
        return self.change_count

    def read_text(self):
        return self.text

    def write_text(self, text):
        from clipboard_backend import ClipboardError

        if self.fail_writes:
            raise ClipboardError("clipboard locked")
        self.writes.append(text)
        self.set(text)


class FakeDebouncer:
    """Debouncer stand-in that records triggers and fires on demand."""

    def __init__(self, delay_seconds, callback):
        self.delay = delay_seconds
        self.callback = callback
        self.triggers = 0
        self.pending = False

    def trigger(self):
        self.triggers += 1
        self.pending = True

    def cancel(self):
        was_pending = self.pending
        self.pending = False
        return was_pending

    def fire(self):
        self.pending = False
        self.callback()


@pytest.fixture
def fake_clipboard():
    return FakeClipboard()


@pytest.fixture
def history(tmp_path, fake_clipboard):
    """HistoryManager on a temp file with a manually fired save debouncer."""
    from history_manager import HistoryManager
    from note_store import NoteStore

    return HistoryManager(
        store=NoteStore(tmp_path / "pastenotes.json"),
        clipboard=fake_clipboard,
        debouncer_factory=FakeDebouncer,
    )
