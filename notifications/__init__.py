"""
Notifications Module

Desktop notifications for the recorder: error popups and the
"Recording Saved" popup with Copy Path / Open File buttons.

Public API:
    - NotificationManager: Sends notifications, runs action listeners
    - NotificationActionListener: Handles one notification's buttons
    - NotificationFactory: Creates D-Bus or mock notifiers
    - NotifierInterface: Notifier contract
    - ListenerOutcome: How an action listener finished

Usage:
    from notifications import NotificationFactory, NotificationManager

    notifier = NotificationFactory.create_notifier(loop=loop)
    manager = NotificationManager(notifier)
    manager.notify_error("Region selection cancelled")
"""

from notifications.constants import ListenerOutcome
from notifications.controllers.action_listener import NotificationActionListener
from notifications.controllers.notification_manager import NotificationManager
from notifications.factory import NotificationFactory
from notifications.interfaces.notifier_interface import NotificationError, NotifierInterface

__all__ = [
    "ListenerOutcome",
    "NotificationActionListener",
    "NotificationError",
    "NotificationFactory",
    "NotificationManager",
    "NotifierInterface",
]
