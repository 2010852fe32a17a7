"""
Session Controller

The recording state machine behind the daemon's bus methods.

IDLE --start ok--> RECORDING --stop--> IDLE. Everything else is a no-op
that returns False. Every mutating operation holds the store lock for
its whole duration, including the blocking region selection, so
concurrent requests are serialized.

No exception crosses this class: failures become False plus a log line
(and, for start failures, an error notification).
"""

import logging
from typing import Any, Dict, Optional

from core.task_spawner import TaskSpawner, ThreadTaskSpawner
from notifications.controllers.notification_manager import NotificationManager
from recording.constants import RecordingState, format_duration
from recording.controllers.session_store import SessionRecord, SessionStore
from recording.interfaces.region_selector_interface import RegionSelectorInterface
from recording.interfaces.signal_emitter_interface import (
    LoggingSignalEmitter,
    SignalEmitterInterface,
)
from recording.interfaces.video_capture_interface import (
    CaptureError,
    VideoCaptureInterface,
)


class SessionController:
    """
    Starts and stops screen recordings.

    Usage:
        controller = SessionController(
            SessionStore(), selector, capture, NotificationManager(notifier),
            signals=emitter,
        )

        if controller.start_recording():
            print(controller.get_current_file())

        controller.stop_recording()
    """

    def __init__(
        self,
        store: SessionStore,
        selector: RegionSelectorInterface,
        capture: VideoCaptureInterface,
        notifications: NotificationManager,
        signals: Optional[SignalEmitterInterface] = None,
        spawner: Optional[TaskSpawner] = None,
    ):
        """
        Initialize session controller.

        Args:
            store: Shared session record
            selector: Interactive region selector
            capture: Capture process supervisor
            notifications: Desktop notifications
            signals: Bus signal emitter (default: log only)
            spawner: Runs background tasks (default: daemon threads)
        """
        self.logger = logging.getLogger(__name__)
        self.store = store
        self.selector = selector
        self.capture = capture
        self.notifications = notifications
        self.signals = signals or LoggingSignalEmitter()
        self.spawner = spawner or ThreadTaskSpawner()

        self.logger.info("Session Controller initialized")

    # =========================================================================
    # CONTROL OPERATIONS
    # =========================================================================

    def start_recording(self) -> bool:
        """
        Select a region and start capturing it.

        Returns:
            True if a recording started, False otherwise
        """
        with self.store.locked() as record:
            if record.recording:
                self.logger.warning("Already recording")
                return False

            try:
                region = self.selector.select_region()
            except CaptureError as e:
                self.logger.error(f"Region selection failed: {e}")
                self._notify_error(str(e))
                return False
            except Exception as e:
                self.logger.error(f"Unexpected error selecting region: {e}", exc_info=True)
                self._notify_error(f"Region selection failed: {e}")
                return False

            self.logger.info(f"Selected region: {region}")

            try:
                handle = self.capture.start(region)
            except CaptureError as e:
                self.logger.error(f"Failed to start recording: {e}")
                self._notify_error(str(e))
                return False
            except Exception as e:
                self.logger.error(f"Unexpected error starting capture: {e}", exc_info=True)
                self._notify_error(f"Failed to start recording: {e}")
                return False

            record.begin(handle)
            self.logger.info(f"Recording started: {handle.output_file}")

            self._emit_started()
            return True

    def stop_recording(self) -> bool:
        """
        Stop the active recording.

        Returns:
            True if a recording was stopped, False if none was active
        """
        with self.store.locked() as record:
            if not record.recording:
                self.logger.info("No recording in progress")
                return False

            file_path = self._stop_locked(record)

            self._emit_stopped(file_path)
            self.spawner.spawn(
                self.notifications.announce_recording_saved,
                file_path,
                name="NotificationActionListener",
            )
            return True

    def toggle_recording(self) -> bool:
        """
        Stop if recording, start otherwise.

        The check and the action are two separate lock acquisitions, so a
        concurrent request may slip in between; start and stop both
        re-check under the lock.

        Returns:
            Result of the delegated start or stop
        """
        if self.is_recording():
            return self.stop_recording()
        return self.start_recording()

    # =========================================================================
    # QUERIES
    # =========================================================================

    def is_recording(self) -> bool:
        with self.store.locked() as record:
            return record.recording

    def get_current_file(self) -> str:
        """Output path of the active recording, or "" when idle."""
        with self.store.locked() as record:
            return record.current_file or ""

    def get_state(self) -> RecordingState:
        with self.store.locked() as record:
            return record.state

    def get_status(self) -> Dict[str, Any]:
        """
        Get controller status.

        Returns:
            Dictionary with status information
        """
        record = self.store.snapshot()
        handle = record.process_handle

        return {
            "state": record.state.value,
            "recording": record.recording,
            "output_file": record.current_file,
            "region": handle.region if handle else None,
            "pid": handle.pid if handle else None,
            "elapsed": format_duration(handle.duration()) if handle else None,
        }

    def cleanup(self) -> None:
        """
        Stop an active recording so the capture tool finalizes its file.

        Called on daemon shutdown. No notification is shown since the
        event loop it would need is going away.
        """
        self.logger.info("Cleaning up Session Controller")

        with self.store.locked() as record:
            if record.recording:
                self.logger.info("Recording active at shutdown, stopping it")
                file_path = self._stop_locked(record)
                self._emit_stopped(file_path)

        self.logger.info("Session Controller cleanup complete")

    # =========================================================================
    # INTERNAL
    # =========================================================================

    def _stop_locked(self, record: SessionRecord) -> str:
        """Stop the capture and reset the record. Caller holds the lock."""
        file_path = record.current_file or ""
        handle = record.process_handle

        self.logger.info(f"Stopping recording: {file_path}")

        try:
            if handle is not None:
                self.capture.stop(handle)
        except (CaptureError, OSError) as e:
            self.logger.error(f"Error stopping capture process: {e}")
        except Exception as e:
            self.logger.error(f"Unexpected error stopping capture process: {e}", exc_info=True)
        finally:
            record.clear()

        self.logger.info(f"Recording stopped: {file_path}")
        return file_path

    def _notify_error(self, message: str) -> None:
        self.spawner.spawn(
            self.notifications.notify_error,
            message,
            name="ErrorNotification",
        )

    def _emit_started(self) -> None:
        try:
            self.signals.recording_started()
        except Exception as e:
            self.logger.error(f"Error emitting RecordingStarted: {e}")

    def _emit_stopped(self, file_path: str) -> None:
        try:
            self.signals.recording_stopped(file_path)
        except Exception as e:
            self.logger.error(f"Error emitting RecordingStopped: {e}")
