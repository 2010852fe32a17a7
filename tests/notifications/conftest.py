"""
Notifications Test Configuration and Fixtures

Shared fixtures for notifications module tests.
"""

import pytest

from notifications.controllers.notification_manager import NotificationManager
from notifications.implementations.mock_notifier import MockNotifier

# =============================================================================
# NOTIFIER FIXTURES
# =============================================================================


@pytest.fixture
def mock_notifier():
    """
    Provide MockNotifier.

    Usage:
        def test_send(mock_notifier):
            mock_notifier.script_actions(ActionInvoked(1, "copy-path"))
    """
    return MockNotifier()


@pytest.fixture
def file_actions():
    """
    Provide a FileActions stand-in that records calls.

    Usage:
        def test_dispatch(file_actions):
            ...
            assert file_actions.calls == [("copy_path", "/tmp/a.mp4")]
    """

    class RecordingFileActions:
        def __init__(self):
            self.calls = []
            self.error = None

        def copy_path(self, file_path):
            self._record("copy_path", file_path)

        def open_file(self, file_path):
            self._record("open_file", file_path)

        def _record(self, name, file_path):
            self.calls.append((name, file_path))
            if self.error is not None:
                raise self.error

    return RecordingFileActions()


@pytest.fixture
def notification_manager(mock_notifier, file_actions):
    """Provide NotificationManager wired to the mock notifier."""
    return NotificationManager(mock_notifier, file_actions=file_actions, action_timeout=0.5)


@pytest.fixture
def saved_file(tmp_path):
    """Provide an existing recording file."""
    path = tmp_path / "screen-record-2025-01-15_14-30-22.mp4"
    path.write_bytes(b"\x00")
    return path


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """
    Configure pytest with custom markers for notification tests.
    """
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "unit_integration: Integration tests")
