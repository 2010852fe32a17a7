"""
Notification Implementations Package

Concrete notifier backends (session bus and mock).
"""

from notifications.implementations.dbus_notifier import DbusActionSubscription, DbusNotifier
from notifications.implementations.mock_notifier import MockActionSubscription, MockNotifier

__all__ = [
    "DbusActionSubscription",
    "DbusNotifier",
    "MockActionSubscription",
    "MockNotifier",
]
