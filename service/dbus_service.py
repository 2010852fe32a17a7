"""
D-Bus Service

Publishes the SessionController on the session bus.

The bus runs on an asyncio loop (dbus-next). Method handlers hand the
blocking controller calls to a thread pool so region selection and the
graceful capture wait never stall the bus. Signals raised from those
worker threads are marshalled back onto the loop.

Methods: StartRecording, StopRecording, ToggleRecording -> b
         IsRecording -> b, GetCurrentFile -> s
Signals: RecordingStarted(), RecordingStopped(s)
"""

import asyncio
import logging
import signal
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional, TypeVar

from dbus_next import BusType, NameFlag, RequestNameReply
from dbus_next.aio import MessageBus
from dbus_next.errors import AuthError, DBusError, InvalidAddressError
from dbus_next.service import ServiceInterface, method, signal as dbus_signal

from config.settings import BUS_NAME, INTERFACE_NAME, OBJECT_PATH, SERVICE_WORKER_THREADS
from notifications import NotificationFactory, NotificationManager
from recording import RecordingFactory, SessionController, SessionStore
from recording.factory import CaptureMode
from recording.interfaces.signal_emitter_interface import SignalEmitterInterface

T = TypeVar("T")


class RecorderInterface(ServiceInterface):
    """
    The org.niri_screen_recorder.Recorder bus interface.

    Usage:
        interface = RecorderInterface(controller, executor)
        bus.export(OBJECT_PATH, interface)
    """

    def __init__(self, controller: SessionController, executor: ThreadPoolExecutor):
        super().__init__(INTERFACE_NAME)
        self.logger = logging.getLogger(__name__)
        self.controller = controller
        self.executor = executor

    async def _call(self, func: Callable[[], T]) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self.executor, func)

    @method(name="StartRecording")
    async def start_recording(self) -> "b":
        self.logger.debug("StartRecording called")
        return await self._call(self.controller.start_recording)

    @method(name="StopRecording")
    async def stop_recording(self) -> "b":
        self.logger.debug("StopRecording called")
        return await self._call(self.controller.stop_recording)

    @method(name="ToggleRecording")
    async def toggle_recording(self) -> "b":
        self.logger.debug("ToggleRecording called")
        return await self._call(self.controller.toggle_recording)

    @method(name="IsRecording")
    async def is_recording(self) -> "b":
        return await self._call(self.controller.is_recording)

    @method(name="GetCurrentFile")
    async def get_current_file(self) -> "s":
        return await self._call(self.controller.get_current_file)

    @dbus_signal(name="RecordingStarted")
    def recording_started_signal(self):
        return None

    @dbus_signal(name="RecordingStopped")
    def recording_stopped_signal(self, file_path: str) -> "s":
        return file_path


class DbusSignalEmitter(SignalEmitterInterface):
    """
    Emits the interface's signals from any thread.

    The interface is attached after construction since the interface
    needs the controller, which needs this emitter.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop, interface: Optional[RecorderInterface] = None):
        self.logger = logging.getLogger(__name__)
        self._loop = loop
        self.interface = interface

    def attach(self, interface: RecorderInterface) -> None:
        self.interface = interface

    def recording_started(self) -> None:
        if self.interface is None:
            self.logger.warning("RecordingStarted dropped: no interface attached")
            return
        self._loop.call_soon_threadsafe(self.interface.recording_started_signal)

    def recording_stopped(self, file_path: str) -> None:
        if self.interface is None:
            self.logger.warning("RecordingStopped dropped: no interface attached")
            return
        self._loop.call_soon_threadsafe(self.interface.recording_stopped_signal, file_path)


class RecorderDaemon:
    """
    Long-running daemon process.

    Wires together:
    - Region selector and capture (real tools or mocks)
    - Notifications over the session bus
    - SessionController exported on the bus

    Usage:
        daemon = RecorderDaemon()
        exit_code = daemon.run()  # Blocks until SIGINT/SIGTERM
    """

    def __init__(self, mode: CaptureMode = "real"):
        self.logger = logging.getLogger(__name__)
        self.mode = mode
        self.controller: Optional[SessionController] = None
        self._stop_event: Optional[asyncio.Event] = None

    def run(self) -> int:
        """Run the daemon until shutdown. Returns the process exit code."""
        return asyncio.run(self.serve())

    async def serve(self) -> int:
        loop = asyncio.get_running_loop()

        try:
            selector = RecordingFactory.create_region_selector(mode=self.mode)
            capture = RecordingFactory.create_capture(mode=self.mode)
        except RuntimeError as e:
            self.logger.error(f"Cannot start daemon: {e}")
            return 1

        try:
            bus = await MessageBus(bus_type=BusType.SESSION).connect()
        except (AuthError, InvalidAddressError, OSError) as e:
            self.logger.error(f"Failed to connect to the session bus: {e}")
            return 1

        notifier = NotificationFactory.create_notifier(
            mode="mock" if self.mode == "mock" else "real",
            loop=loop,
        )
        emitter = DbusSignalEmitter(loop)
        self.controller = SessionController(
            SessionStore(),
            selector,
            capture,
            NotificationManager(notifier),
            signals=emitter,
        )

        executor = ThreadPoolExecutor(
            max_workers=SERVICE_WORKER_THREADS,
            thread_name_prefix="RecorderMethod",
        )
        interface = RecorderInterface(self.controller, executor)
        emitter.attach(interface)

        try:
            bus.export(OBJECT_PATH, interface)
            reply = await bus.request_name(BUS_NAME, NameFlag.DO_NOT_QUEUE)
        except DBusError as e:
            self.logger.error(f"Failed to register {BUS_NAME}: {e}")
            self._close(bus, executor)
            return 1

        if reply != RequestNameReply.PRIMARY_OWNER:
            self.logger.error(f"Bus name {BUS_NAME} is already taken, is another daemon running?")
            self._close(bus, executor)
            return 1

        self._stop_event = asyncio.Event()
        for signum in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(signum, self._signal_handler, signum)
        watcher = asyncio.ensure_future(self._watch_bus(bus))

        self.logger.info(f"D-Bus service registered as {BUS_NAME}, waiting for requests...")

        await self._stop_event.wait()

        self.logger.info("Shutting down...")
        watcher.cancel()
        for signum in (signal.SIGINT, signal.SIGTERM):
            loop.remove_signal_handler(signum)

        try:
            await loop.run_in_executor(executor, self.controller.cleanup)
        except Exception as e:
            self.logger.error(f"Error during cleanup: {e}", exc_info=True)

        self._close(bus, executor)
        self.logger.info("Daemon stopped")
        return 0

    def _signal_handler(self, signum: int) -> None:
        self.logger.info(f"Received {signal.Signals(signum).name}")
        if self._stop_event is not None:
            self._stop_event.set()

    async def _watch_bus(self, bus: MessageBus) -> None:
        try:
            await bus.wait_for_disconnect()
        except Exception as e:
            self.logger.error(f"Session bus connection lost: {e}")
        else:
            self.logger.error("Session bus connection closed")
        if self._stop_event is not None:
            self._stop_event.set()

    @staticmethod
    def _close(bus: MessageBus, executor: ThreadPoolExecutor) -> None:
        executor.shutdown(wait=False)
        bus.disconnect()


def run_daemon(mode: CaptureMode = "real") -> int:
    """Run the recorder daemon. Returns the process exit code."""
    return RecorderDaemon(mode=mode).run()
