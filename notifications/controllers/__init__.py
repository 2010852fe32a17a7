"""
Notification Controllers Package
"""

from notifications.controllers.action_listener import NotificationActionListener
from notifications.controllers.notification_manager import NotificationManager

__all__ = [
    "NotificationActionListener",
    "NotificationManager",
]
