"""
Notification Manager

High-level notification API used by the recording controller.

Notification failures are logged and never raised: a missing
notification daemon must not break recording.
"""

import logging
from typing import Optional

from config.settings import ACTION_TIMEOUT_SECONDS
from notifications.constants import (
    ListenerOutcome,
    build_error_notification,
    build_saved_notification,
)
from notifications.controllers.action_listener import NotificationActionListener
from notifications.interfaces.notifier_interface import (
    Notification,
    NotificationError,
    NotifierInterface,
)
from notifications.utils.file_actions import FileActions


class NotificationManager:
    """
    Sends the daemon's notifications.

    Usage:
        manager = NotificationManager(notifier)
        manager.notify_error("Region selection cancelled")

        # On a background task: notify, then wait for a button click
        manager.announce_recording_saved("/home/me/Videos/Screencasts/a.mp4")
    """

    def __init__(
        self,
        notifier: NotifierInterface,
        file_actions: Optional[FileActions] = None,
        action_timeout: float = ACTION_TIMEOUT_SECONDS,
    ):
        self.logger = logging.getLogger(__name__)
        self.notifier = notifier
        self.file_actions = file_actions or FileActions()
        self.action_timeout = action_timeout

    def notify_error(self, message: str) -> Optional[int]:
        """Show an error notification. Returns its id, or None on failure."""
        return self._send(build_error_notification(message))

    def notify_recording_saved(self, file_path: str) -> Optional[int]:
        """Show the "Recording Saved" notification with its action buttons."""
        return self._send(build_saved_notification(file_path))

    def announce_recording_saved(self, file_path: str) -> Optional[ListenerOutcome]:
        """
        Show the saved notification and handle its buttons.

        Blocks until an action is handled or the listener gives up, so
        run it on a background task.

        Returns:
            The listener outcome, or None if the notification wasn't shown
        """
        notification_id = self.notify_recording_saved(file_path)
        if notification_id is None:
            return None

        outcome = self.create_listener(notification_id, file_path).run()
        self.logger.debug(f"Action listener for #{notification_id} finished: {outcome.value}")
        return outcome

    def create_listener(self, notification_id: int, file_path: str) -> NotificationActionListener:
        return NotificationActionListener(
            self.notifier,
            notification_id,
            file_path,
            file_actions=self.file_actions,
            timeout=self.action_timeout,
        )

    def _send(self, notification: Notification) -> Optional[int]:
        try:
            return self.notifier.send(notification)
        except NotificationError as e:
            self.logger.error(f"Failed to send notification '{notification.summary}': {e}")
            return None
