"""
D-Bus Notifier Implementation

Talks to org.freedesktop.Notifications on the session bus via dbus-next.

dbus-next is asyncio based, while the rest of the daemon calls the
notifier from worker threads. Every call is therefore scheduled onto
the daemon's event loop with run_coroutine_threadsafe and waited on
with a timeout. Never call these methods from the loop thread itself.

Each send and each action subscription uses its own bus connection.
"""

import asyncio
import concurrent.futures
import logging
import queue
from typing import Coroutine, Optional

from dbus_next import Message, MessageType
from dbus_next.aio import MessageBus
from dbus_next.errors import AuthError, DBusError, InvalidAddressError

from config.settings import (
    BUS_CALL_TIMEOUT_SECONDS,
    NOTIFICATIONS_INTERFACE,
    NOTIFICATIONS_PATH,
    NOTIFICATIONS_SERVICE,
)
from notifications.interfaces.notifier_interface import (
    ActionInvoked,
    ActionStreamClosed,
    ActionSubscription,
    Notification,
    NotificationError,
    NotifierInterface,
)

logger = logging.getLogger(__name__)

DBUS_SERVICE = "org.freedesktop.DBus"
DBUS_PATH = "/org/freedesktop/DBus"
DBUS_INTERFACE = "org.freedesktop.DBus"

ACTION_INVOKED = "ActionInvoked"
ACTION_MATCH_RULE = (
    f"type='signal',interface='{NOTIFICATIONS_INTERFACE}',"
    f"path='{NOTIFICATIONS_PATH}',member='{ACTION_INVOKED}'"
)

# Queue marker pushed when the subscription's connection goes away
_CLOSED = object()


def _check_reply(reply: Message, what: str) -> Message:
    if reply.message_type == MessageType.ERROR:
        detail = reply.body[0] if reply.body else ""
        raise NotificationError(f"{what} failed: {reply.error_name} {detail}".strip())
    return reply


class DbusActionSubscription(ActionSubscription):
    """
    ActionInvoked events from the notification service.

    Signals arrive on the event loop and are handed to the listener
    thread through a queue.Queue.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop):
        self._loop = loop
        self._events: "queue.Queue[object]" = queue.Queue()
        self._bus: Optional[MessageBus] = None
        self._closed = False

    async def connect(self) -> None:
        """Open the connection and register the match rule (runs on the loop)."""
        bus = await MessageBus().connect()

        try:
            reply = await bus.call(
                Message(
                    destination=DBUS_SERVICE,
                    path=DBUS_PATH,
                    interface=DBUS_INTERFACE,
                    member="AddMatch",
                    signature="s",
                    body=[ACTION_MATCH_RULE],
                )
            )
            _check_reply(reply, "AddMatch")
        except BaseException:
            bus.disconnect()
            raise

        bus.add_message_handler(self._on_message)
        self._bus = bus
        asyncio.ensure_future(self._watch_disconnect(bus))

    async def _watch_disconnect(self, bus: MessageBus) -> None:
        try:
            await bus.wait_for_disconnect()
        except Exception as e:
            logger.debug(f"Action subscription connection lost: {e}")
        self._events.put(_CLOSED)

    def _on_message(self, message: Message) -> None:
        if (
            message.message_type == MessageType.SIGNAL
            and message.interface == NOTIFICATIONS_INTERFACE
            and message.member == ACTION_INVOKED
        ):
            notification_id, action_key = message.body
            self._events.put(ActionInvoked(notification_id, action_key))

    def next_action(self, timeout: float) -> Optional[ActionInvoked]:
        try:
            event = self._events.get(timeout=timeout)
        except queue.Empty:
            return None

        if event is _CLOSED:
            # Keep reporting closed on later calls too
            self._events.put(_CLOSED)
            raise ActionStreamClosed("Notification action stream closed")
        return event

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._bus is not None:
            self._loop.call_soon_threadsafe(self._bus.disconnect)


class DbusNotifier(NotifierInterface):
    """
    Freedesktop notifications over the session bus.

    Usage:
        notifier = DbusNotifier(loop)          # loop runs in another thread
        notification_id = notifier.send(notification)
        with notifier.subscribe_actions() as subscription:
            event = subscription.next_action(timeout=6.0)
    """

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        call_timeout: float = BUS_CALL_TIMEOUT_SECONDS,
    ):
        self.logger = logging.getLogger(__name__)
        self._loop = loop
        self.call_timeout = call_timeout

    def send(self, notification: Notification) -> int:
        notification_id = self._run(self._notify(notification), "Notify")
        self.logger.debug(f"Notification #{notification_id} sent: {notification.summary}")
        return notification_id

    def subscribe_actions(self) -> DbusActionSubscription:
        subscription = DbusActionSubscription(self._loop)
        self._run(subscription.connect(), "Action subscription")
        return subscription

    def is_available(self) -> bool:
        try:
            return self._run(self._has_owner(), "NameHasOwner")
        except NotificationError as e:
            self.logger.debug(f"Notification service check failed: {e}")
            return False

    def _run(self, coro: Coroutine, what: str):
        """Run a coroutine on the loop and block for its result."""
        future = asyncio.run_coroutine_threadsafe(coro, self._loop)
        try:
            return future.result(timeout=self.call_timeout)
        except concurrent.futures.TimeoutError as e:
            future.cancel()
            raise NotificationError(f"{what} timed out after {self.call_timeout}s") from e
        except NotificationError:
            raise
        except (AuthError, DBusError, InvalidAddressError, OSError, ValueError) as e:
            raise NotificationError(f"{what} failed: {e}") from e

    async def _notify(self, notification: Notification) -> int:
        bus = await MessageBus().connect()
        try:
            reply = await bus.call(
                Message(
                    destination=NOTIFICATIONS_SERVICE,
                    path=NOTIFICATIONS_PATH,
                    interface=NOTIFICATIONS_INTERFACE,
                    member="Notify",
                    signature="susssasa{sv}i",
                    body=[
                        notification.app_name,
                        notification.replaces_id,
                        notification.icon,
                        notification.summary,
                        notification.body,
                        notification.flat_actions(),
                        {},
                        notification.expire_timeout_ms,
                    ],
                )
            )
        finally:
            bus.disconnect()

        return _check_reply(reply, "Notify").body[0]

    async def _has_owner(self) -> bool:
        bus = await MessageBus().connect()
        try:
            reply = await bus.call(
                Message(
                    destination=DBUS_SERVICE,
                    path=DBUS_PATH,
                    interface=DBUS_INTERFACE,
                    member="NameHasOwner",
                    signature="s",
                    body=[NOTIFICATIONS_SERVICE],
                )
            )
        finally:
            bus.disconnect()

        return bool(_check_reply(reply, "NameHasOwner").body[0])
