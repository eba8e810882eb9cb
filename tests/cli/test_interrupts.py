"""Unit tests for interruption tracking in treee CLI."""

import signal
from unittest.mock import patch

import pytest

from treee.cli.interrupts import Interrupts, install_handlers, interrupts


@pytest.fixture
def tracker():
    """A fresh tracker, so the shared instance is never touched."""
    return Interrupts()


@pytest.fixture
def mock_signal():
    with patch("treee.cli.interrupts.signal.signal", return_value=signal.SIG_IGN) as mock:
        yield mock


def test_nothing_received(tracker):
    assert not tracker.interrupted()
    assert tracker.exit_status() is None


@pytest.mark.parametrize("signum,status", [(signal.SIGPIPE, 141), (signal.SIGINT, 130)])
def test_exit_status_follows_shell_convention(tracker, mock_signal, signum, status):
    tracker.record(signum, None)
    assert tracker.interrupted()
    assert tracker.exit_status() == status


def test_first_signal_wins(tracker, mock_signal):
    tracker.record(signal.SIGPIPE, None)
    tracker.record(signal.SIGINT, None)
    assert tracker.exit_status() == 141


def test_install_remembers_previous_handlers(tracker, mock_signal):
    tracker.install()

    mock_signal.assert_any_call(signal.SIGPIPE, tracker.record)
    mock_signal.assert_any_call(signal.SIGINT, tracker.record)

    mock_signal.reset_mock()
    tracker.record(signal.SIGINT, None)
    mock_signal.assert_called_once_with(signal.SIGINT, signal.SIG_IGN)


def test_record_without_install_restores_default(tracker, mock_signal):
    tracker.record(signal.SIGPIPE, None)
    mock_signal.assert_called_once_with(signal.SIGPIPE, signal.SIG_DFL)


def test_install_handlers_uses_shared_tracker(mock_signal):
    install_handlers()
    mock_signal.assert_any_call(signal.SIGPIPE, interrupts.record)
    mock_signal.assert_any_call(signal.SIGINT, interrupts.record)
