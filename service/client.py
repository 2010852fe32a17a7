"""
Recorder Client

Calls the running daemon over the session bus. Used by the
start/stop/toggle/status subcommands.
"""

import asyncio
import logging
from typing import Any, List, Optional, Tuple

from dbus_next import Message, MessageType
from dbus_next.aio import MessageBus
from dbus_next.errors import AuthError, InvalidAddressError

from config.settings import BUS_NAME, INTERFACE_NAME, OBJECT_PATH


class DaemonUnreachableError(Exception):
    """
    The daemon could not be called.

    Examples:
    - No session bus
    - Daemon not running (name has no owner)
    - Call timed out
    """


class RecorderClient:
    """
    Blocking client for the recorder daemon.

    Each public method opens its own bus connection.

    Usage:
        client = RecorderClient()
        if client.start_recording():
            print("Recording started")
        recording, file_path = client.get_status()
    """

    def __init__(self, timeout: Optional[float] = None):
        """
        Args:
            timeout: Per-call timeout in seconds (None waits for the
                daemon, which may be waiting on region selection)
        """
        self.logger = logging.getLogger(__name__)
        self.timeout = timeout

    def start_recording(self) -> bool:
        return self._call_one("StartRecording")

    def stop_recording(self) -> bool:
        return self._call_one("StopRecording")

    def toggle_recording(self) -> bool:
        return self._call_one("ToggleRecording")

    def is_recording(self) -> bool:
        return self._call_one("IsRecording")

    def get_current_file(self) -> str:
        return self._call_one("GetCurrentFile")

    def get_status(self) -> Tuple[bool, str]:
        """
        Recording flag and current file, read over one connection.

        Returns:
            (is_recording, current_file)
        """
        recording, file_path = asyncio.run(self._call("IsRecording", "GetCurrentFile"))
        return recording, file_path

    def _call_one(self, member: str) -> Any:
        return asyncio.run(self._call(member))[0]

    async def _call(self, *members: str) -> List[Any]:
        try:
            bus = await MessageBus().connect()
        except (AuthError, InvalidAddressError, OSError) as e:
            raise DaemonUnreachableError(f"Failed to connect to session bus: {e}") from e

        try:
            results = []
            for member in members:
                self.logger.debug(f"Calling {member}")
                call = bus.call(
                    Message(
                        destination=BUS_NAME,
                        path=OBJECT_PATH,
                        interface=INTERFACE_NAME,
                        member=member,
                    )
                )
                reply = await asyncio.wait_for(call, self.timeout)

                if reply.message_type == MessageType.ERROR:
                    detail = reply.body[0] if reply.body else ""
                    raise DaemonUnreachableError(f"{reply.error_name}: {detail}".rstrip(": "))
                results.append(reply.body[0])
            return results

        except asyncio.TimeoutError as e:
            raise DaemonUnreachableError(f"Call timed out after {self.timeout}s") from e
        finally:
            bus.disconnect()
