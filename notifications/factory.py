"""
Notification Factory

Picks the D-Bus notifier or the mock.
"""

import asyncio
import logging
from typing import Literal, Optional

from notifications.implementations.dbus_notifier import DbusNotifier
from notifications.implementations.mock_notifier import MockNotifier
from notifications.interfaces.notifier_interface import NotifierInterface

NotifierMode = Literal["real", "mock"]


class NotificationFactory:
    """
    Factory for creating notifier implementations.

    Usage:
        notifier = NotificationFactory.create_notifier(loop=loop)
        notifier = NotificationFactory.create_notifier(mode="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_notifier(
        cls,
        mode: NotifierMode = "real",
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> NotifierInterface:
        """
        Create a notifier.

        Args:
            mode: "real" (session bus) or "mock"
            loop: Running event loop the D-Bus notifier schedules onto

        Raises:
            ValueError: If mode="real" without a loop
        """
        if mode == "mock":
            cls._logger.info("Creating Mock Notifier")
            return MockNotifier()

        if loop is None:
            raise ValueError("D-Bus notifier needs the daemon's event loop")

        cls._logger.info("Creating D-Bus Notifier")
        return DbusNotifier(loop)
