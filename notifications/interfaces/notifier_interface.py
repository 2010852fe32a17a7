"""
Notifier Interface

Abstract interface for desktop notification backends.
Covers the two things the daemon needs from the notification service:
sending a notification and listening for its action buttons.

High-level code (NotificationManager, NotificationActionListener) depends
on this abstraction, not on D-Bus directly.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple

from config.settings import APP_NAME, NOTIFICATION_EXPIRE_TIMEOUT_MS


@dataclass(frozen=True)
class Notification:
    """
    A desktop notification to send.

    Attributes:
        summary: Title line
        body: Message text
        icon: Freedesktop icon name
        actions: (key, label) pairs shown as buttons
        app_name: Sending application name
        replaces_id: Id of a notification to replace (0 = new)
        expire_timeout_ms: Display time in milliseconds
    """

    summary: str
    body: str
    icon: str
    actions: Tuple[Tuple[str, str], ...] = ()
    app_name: str = APP_NAME
    replaces_id: int = 0
    expire_timeout_ms: int = NOTIFICATION_EXPIRE_TIMEOUT_MS

    def flat_actions(self) -> List[str]:
        """Actions in the wire format: [key1, label1, key2, label2, ...]."""
        return [item for pair in self.actions for item in pair]


@dataclass(frozen=True)
class ActionInvoked:
    """The user clicked an action button on a notification."""

    notification_id: int
    action_key: str


class ActionSubscription(ABC):
    """
    A live subscription to ActionInvoked events.

    Each subscription owns its own connection, independent of the one
    used to send notifications. Always close() it (or use it as a
    context manager).
    """

    @abstractmethod
    def next_action(self, timeout: float) -> Optional[ActionInvoked]:
        """
        Wait for the next action event.

        Args:
            timeout: Seconds to wait for this event

        Returns:
            The event, or None if the timeout elapsed

        Raises:
            ActionStreamClosed: If the underlying stream has closed
        """

    @abstractmethod
    def close(self) -> None:
        """Release the subscription. Must be safe to call twice."""

    def __enter__(self) -> "ActionSubscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class NotifierInterface(ABC):
    """
    Abstract base class for notification backends.

    Calls are BLOCKING and are made from worker threads, never from the
    event loop the backend may be running on.
    """

    @abstractmethod
    def send(self, notification: Notification) -> int:
        """
        Show a notification.

        Returns:
            Id assigned by the notification service

        Raises:
            NotificationError: If the service can't be reached or refuses
        """

    @abstractmethod
    def subscribe_actions(self) -> ActionSubscription:
        """
        Open a fresh subscription to action events.

        Raises:
            NotificationError: If the subscription can't be set up
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if a notification service is running.

        Returns:
            True if notifications can be shown, False otherwise
        """


class NotificationError(Exception):
    """
    Exception raised for notification errors.

    Examples:
    - Session bus not reachable
    - No notification daemon running
    - Bus call timed out
    """


class ActionStreamClosed(NotificationError):
    """The action event stream ended (connection closed)"""


class FileActionError(NotificationError):
    """A notification action (copy path, open file) could not be carried out"""
