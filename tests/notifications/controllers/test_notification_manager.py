"""
Notification Manager Tests

Tests for NotificationManager showing:
- Error and saved notification content
- Failures logged, never raised
- announce_recording_saved runs the action listener

To run:
    pytest tests/notifications/controllers/test_notification_manager.py -v
"""

import pytest

from notifications.constants import ListenerOutcome
from notifications.interfaces.notifier_interface import ActionInvoked


@pytest.mark.unit
def test_notify_error(notification_manager, mock_notifier):
    """Test error notification content."""
    notification_id = notification_manager.notify_error("No region selected")

    assert notification_id == 1
    notification = mock_notifier.sent[0]
    assert notification.app_name == "niri-screen-recorder"
    assert notification.summary == "Screen Recorder Error"
    assert notification.body == "No region selected"
    assert notification.icon == "dialog-error"
    assert notification.flat_actions() == []
    assert notification.expire_timeout_ms == 5000


@pytest.mark.unit
def test_notify_recording_saved(notification_manager, mock_notifier):
    """Test saved notification content."""
    notification_manager.notify_recording_saved("/tmp/a.mp4")

    notification = mock_notifier.sent[0]
    assert notification.summary == "Recording Saved"
    assert notification.body == "Saved to: /tmp/a.mp4"
    assert notification.icon == "video-x-generic"
    assert notification.replaces_id == 0
    assert notification.flat_actions() == ["copy-path", "Copy Path", "open-file", "Open File"]


@pytest.mark.unit
def test_send_failure_returns_none(notification_manager, mock_notifier):
    """Test a missing notification service doesn't raise."""
    mock_notifier.simulate_send_failure()

    assert notification_manager.notify_error("boom") is None
    assert notification_manager.notify_recording_saved("/tmp/a.mp4") is None


@pytest.mark.unit
def test_announce_runs_listener(notification_manager, mock_notifier, file_actions):
    """Test the listener correlates with the id the service assigned."""
    mock_notifier.script_actions(ActionInvoked(1, "copy-path"))

    outcome = notification_manager.announce_recording_saved("/tmp/a.mp4")

    assert outcome == ListenerOutcome.DISPATCHED
    assert file_actions.calls == [("copy_path", "/tmp/a.mp4")]


@pytest.mark.unit
def test_announce_without_notification_skips_listener(notification_manager, mock_notifier):
    """Test no listener is started when the notification wasn't shown."""
    mock_notifier.simulate_send_failure()

    assert notification_manager.announce_recording_saved("/tmp/a.mp4") is None
    assert mock_notifier.subscriptions == []


@pytest.mark.unit
def test_listener_uses_manager_timeout(notification_manager):
    """Test created listeners inherit the action timeout."""
    listener = notification_manager.create_listener(5, "/tmp/a.mp4")

    assert listener.notification_id == 5
    assert listener.timeout == 0.5
