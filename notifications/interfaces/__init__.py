"""
Notification Interfaces Package

Exposes the notifier contract and its data types.
"""

from notifications.interfaces.notifier_interface import (
    ActionInvoked,
    ActionStreamClosed,
    ActionSubscription,
    FileActionError,
    Notification,
    NotificationError,
    NotifierInterface,
)

# Public API (sorted alphabetically)
__all__ = [
    "ActionInvoked",
    "ActionStreamClosed",
    "ActionSubscription",
    "FileActionError",
    "Notification",
    "NotificationError",
    "NotifierInterface",
]
