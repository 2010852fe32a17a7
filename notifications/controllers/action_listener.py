"""
Notification Action Listener

Waits for the user to click a button on one "Recording Saved"
notification and runs the matching file action.

Runs on a background task; it never blocks the recording controls.
"""

import logging
from typing import Callable, Dict, Optional

from config.settings import ACTION_TIMEOUT_SECONDS
from notifications.constants import ACTION_COPY_PATH, ACTION_OPEN_FILE, ListenerOutcome
from notifications.interfaces.notifier_interface import (
    ActionStreamClosed,
    FileActionError,
    NotificationError,
    NotifierInterface,
)
from notifications.utils.file_actions import FileActions


class NotificationActionListener:
    """
    Listener for a single notification's action buttons.

    Events for other notifications are skipped. The timeout applies to
    each wait, so it restarts after every skipped event.

    Usage:
        listener = NotificationActionListener(notifier, notification_id, file_path)
        outcome = listener.run()
    """

    def __init__(
        self,
        notifier: NotifierInterface,
        notification_id: int,
        file_path: str,
        file_actions: Optional[FileActions] = None,
        timeout: float = ACTION_TIMEOUT_SECONDS,
    ):
        self.logger = logging.getLogger(__name__)
        self.notifier = notifier
        self.notification_id = notification_id
        self.file_path = file_path
        self.file_actions = file_actions or FileActions()
        self.timeout = timeout

    def run(self) -> ListenerOutcome:
        """
        Listen until one matching event is handled, or give up.

        Returns:
            How the listener finished
        """
        try:
            subscription = self.notifier.subscribe_actions()
        except NotificationError as e:
            self.logger.error(f"Could not listen for notification actions: {e}")
            return ListenerOutcome.FAILED

        with subscription:
            while True:
                try:
                    event = subscription.next_action(self.timeout)
                except ActionStreamClosed:
                    self.logger.debug(
                        f"Action stream closed before notification #{self.notification_id} was used"
                    )
                    return ListenerOutcome.STREAM_CLOSED
                except NotificationError as e:
                    self.logger.error(f"Error while waiting for notification actions: {e}")
                    return ListenerOutcome.FAILED

                if event is None:
                    self.logger.debug(
                        f"No action on notification #{self.notification_id} within {self.timeout}s"
                    )
                    return ListenerOutcome.TIMED_OUT

                if event.notification_id != self.notification_id:
                    continue

                return self._dispatch(event.action_key)

    def _dispatch(self, action_key: str) -> ListenerOutcome:
        handlers: Dict[str, Callable[[str], None]] = {
            ACTION_COPY_PATH: self.file_actions.copy_path,
            ACTION_OPEN_FILE: self.file_actions.open_file,
        }

        handler = handlers.get(action_key)
        if handler is None:
            self.logger.warning(f"Unknown notification action: {action_key}")
            return ListenerOutcome.IGNORED_ACTION

        try:
            handler(self.file_path)
        except FileActionError as e:
            self.logger.error(f"Notification action '{action_key}' failed: {e}")
            return ListenerOutcome.FAILED

        return ListenerOutcome.DISPATCHED
