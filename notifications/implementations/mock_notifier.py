"""
Mock Notifier Implementation

Simulated notification service for development and testing.
Records sent notifications and replays scripted action events
instead of talking to a real notification daemon.
"""

import itertools
import logging
import threading
from typing import List, Optional, Union

from notifications.interfaces.notifier_interface import (
    ActionInvoked,
    ActionStreamClosed,
    ActionSubscription,
    Notification,
    NotificationError,
    NotifierInterface,
)

# Script markers for MockActionSubscription
TIMEOUT = "timeout"
CLOSE = "close"

ScriptedEvent = Union[ActionInvoked, str]


class MockActionSubscription(ActionSubscription):
    """
    Subscription that replays a fixed list of events.

    Each script entry is an ActionInvoked, TIMEOUT (next_action returns
    None) or CLOSE (next_action raises ActionStreamClosed). Once the
    script runs out every call behaves like a timeout.
    """

    def __init__(self, events: Optional[List[ScriptedEvent]] = None):
        self._events = list(events or [])
        self.waits: List[float] = []
        self.closed = False

    def next_action(self, timeout: float) -> Optional[ActionInvoked]:
        self.waits.append(timeout)

        if self.closed:
            raise ActionStreamClosed("Subscription already closed")

        if not self._events:
            return None

        event = self._events.pop(0)
        if event == CLOSE:
            raise ActionStreamClosed("[MOCK] Action stream closed")
        if event == TIMEOUT:
            return None
        return event

    def close(self) -> None:
        self.closed = True


class MockNotifier(NotifierInterface):
    """
    Mock notifier that logs instead of showing notifications.

    Usage:
        notifier = MockNotifier()
        notifier.script_actions(ActionInvoked(1, "copy-path"))
        notification_id = notifier.send(notification)   # -> 1
        subscription = notifier.subscribe_actions()     # replays the script
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

        # Track what happened (useful for testing)
        self.sent: List[Notification] = []
        self.subscriptions: List[MockActionSubscription] = []

        self._scripted: List[ScriptedEvent] = []

        # Test configuration
        self._should_fail_send = False
        self._should_fail_subscribe = False

        self.logger.info("Mock Notifier initialized")

    def send(self, notification: Notification) -> int:
        if self._should_fail_send:
            raise NotificationError("[MOCK] Simulated notification failure")

        with self._lock:
            notification_id = next(self._ids)
            self.sent.append(notification)

        self.logger.info(
            f"[MOCK NOTIFY] #{notification_id} {notification.summary}: {notification.body}"
        )
        return notification_id

    def subscribe_actions(self) -> MockActionSubscription:
        if self._should_fail_subscribe:
            raise NotificationError("[MOCK] Simulated subscription failure")

        with self._lock:
            subscription = MockActionSubscription(self._scripted)
            self._scripted = []
            self.subscriptions.append(subscription)
        return subscription

    def is_available(self) -> bool:
        """Mock notifier is always available"""
        return True

    # =========================================================================
    # TEST HELPERS
    # =========================================================================

    def script_actions(self, *events: ScriptedEvent) -> None:
        """Queue events for the next subscription."""
        self._scripted.extend(events)

    @property
    def sent_count(self) -> int:
        return len(self.sent)

    def simulate_send_failure(self) -> None:
        self._should_fail_send = True

    def simulate_subscribe_failure(self) -> None:
        self._should_fail_subscribe = True

    def reset_test_config(self) -> None:
        self._should_fail_send = False
        self._should_fail_subscribe = False
        self._scripted = []
