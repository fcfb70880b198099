# pylint: disable=missing-module-docstring, missing-function-docstring, protected-access, redefined-outer-name
from unittest.mock import MagicMock, patch

import pytest

from clipboard_backend import ClipboardError
from clipboard_monitor import ClipboardMonitor


@pytest.fixture
def monitor(fake_clipboard, history):
    mon = ClipboardMonitor(fake_clipboard, history, poll_interval=1.0)
    mon.prime()
    return mon


def test_distinct_copies_newest_first(monitor, fake_clipboard, history):
    for text in ("alpha", "beta", "gamma"):
        fake_clipboard.set(text)
        monitor.poll_once()

    assert [n.content for n in history.get_all()] == ["gamma", "beta", "alpha"]


def test_unchanged_token_is_noop(monitor, fake_clipboard, history):
    fake_clipboard.set("once")
    assert monitor.poll_once() is not None

    # Same token, even if the text were re-read it must not be inserted again
    history.clear_all()
    assert monitor.poll_once() is None
    assert len(history) == 0


def test_same_text_copied_twice_no_duplicate(monitor, fake_clipboard, history):
    fake_clipboard.set("repeat")
    monitor.poll_once()
    fake_clipboard.set("repeat")
    assert monitor.poll_once() is None
    assert len(history) == 1


def test_text_is_trimmed(monitor, fake_clipboard, history):
    fake_clipboard.set("  hello\n")
    note = monitor.poll_once()
    assert note.content == "hello"
    assert history.get_all()[0].content == "hello"


def test_whitespace_only_is_skipped(monitor, fake_clipboard, history):
    fake_clipboard.set(" \n\t ")
    assert monitor.poll_once() is None
    assert len(history) == 0


def test_no_text_representation_is_skipped(monitor, fake_clipboard, history):
    fake_clipboard.set(None)
    assert monitor.poll_once() is None
    assert len(history) == 0


def test_title_derived_from_first_line(monitor, fake_clipboard):
    fake_clipboard.set("first line\nsecond line")
    assert monitor.poll_once().title == "first line"


def test_copy_back_does_not_duplicate(monitor, fake_clipboard, history):
    fake_clipboard.set("one")
    monitor.poll_once()
    fake_clipboard.set("two")
    monitor.poll_once()

    history.copy_to_clipboard(history.get_all()[1])
    assert monitor.poll_once() is None
    assert [n.content for n in history.get_all()] == ["two", "one"]


def test_prime_ignores_existing_clipboard(fake_clipboard, history):
    fake_clipboard.set("copied before launch")
    mon = ClipboardMonitor(fake_clipboard, history)
    mon.prime()
    assert mon.poll_once() is None


def test_inactive_monitor_tracks_token_without_capturing(monitor, fake_clipboard, history):
    monitor.active = False
    fake_clipboard.set("while paused")
    assert monitor.poll_once() is None

    monitor.active = True
    assert monitor.poll_once() is None
    assert len(history) == 0


def test_invalid_poll_interval(fake_clipboard, history):
    with pytest.raises(ValueError):
        ClipboardMonitor(fake_clipboard, history, poll_interval=0)


def test_start_success(fake_clipboard, history):
    mon = ClipboardMonitor(fake_clipboard, history)
    with patch("clipboard_monitor.threading.Thread") as mock_thread_cls:
        assert mon.start() is True
        mock_thread_cls.assert_called_once()
        mock_thread_cls.return_value.start.assert_called_once()


def test_start_twice_is_noop(fake_clipboard, history):
    mon = ClipboardMonitor(fake_clipboard, history)
    with patch("clipboard_monitor.threading.Thread") as mock_thread_cls:
        mock_thread_cls.return_value.is_alive.return_value = True
        mon.start()
        assert mon.start() is True
        mock_thread_cls.assert_called_once()


def test_start_failure_when_clipboard_unavailable(history):
    clipboard = MagicMock()
    clipboard.change_token.side_effect = ClipboardError("no clipboard mechanism")
    mon = ClipboardMonitor(clipboard, history)
    assert mon.start() is False
    assert not mon.is_running


def test_loop_survives_errors(fake_clipboard, history):
    mon = ClipboardMonitor(fake_clipboard, history)
    mon._stop_event = MagicMock()
    mon._stop_event.wait.side_effect = [False, False, False, True]

    with patch.object(
        mon,
        "poll_once",
        side_effect=[ClipboardError("busy"), RuntimeError("unexpected"), None],
    ) as mock_poll:
        mon._clipboard_loop()

    assert mock_poll.call_count == 3
    mon._stop_event.wait.assert_called_with(1.0)


def test_start_and_stop_real_thread(fake_clipboard, history):
    mon = ClipboardMonitor(fake_clipboard, history, poll_interval=0.01)
    assert mon.start()
    assert mon.is_running
    mon.stop()
    assert not mon.is_running
