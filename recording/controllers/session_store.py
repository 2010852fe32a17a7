"""
Session Store

The single shared record of the daemon's recording state, guarded by one
lock. Only the SessionController reads or writes it.

One store is created per daemon (or per test) and injected into the
controller; there is no module-level instance.
"""

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from recording.constants import RecordingState
from recording.interfaces.video_capture_interface import CaptureHandle


@dataclass
class SessionRecord:
    """
    In-memory recording state.

    Invariant: recording, current_file and process_handle are either all
    set or all cleared. Use begin() and clear() to change them together.
    """

    recording: bool = False
    current_file: Optional[str] = None
    process_handle: Optional[CaptureHandle] = None

    @property
    def state(self) -> RecordingState:
        return RecordingState.RECORDING if self.recording else RecordingState.IDLE

    def begin(self, handle: CaptureHandle) -> None:
        """Take ownership of a live capture."""
        self.recording = True
        self.current_file = handle.output_file
        self.process_handle = handle

    def clear(self) -> Optional[CaptureHandle]:
        """
        Reset to idle.

        Returns:
            The handle the record owned, if any
        """
        handle = self.process_handle
        self.recording = False
        self.current_file = None
        self.process_handle = None
        return handle

    def is_consistent(self) -> bool:
        """Check the all-or-nothing invariant."""
        return (
            self.recording
            == (self.current_file is not None)
            == (self.process_handle is not None)
        )


class SessionStore:
    """
    Lock-guarded owner of the SessionRecord.

    Usage:
        store = SessionStore()
        with store.locked() as record:
            if not record.recording:
                record.begin(handle)
    """

    def __init__(self):
        self._record = SessionRecord()
        self._lock = threading.Lock()

    @contextmanager
    def locked(self) -> Iterator[SessionRecord]:
        """Hold exclusive access to the record for the with-block."""
        with self._lock:
            yield self._record

    def snapshot(self) -> SessionRecord:
        """Copy of the record taken under the lock (handle shared, not copied)."""
        with self._lock:
            return SessionRecord(
                recording=self._record.recording,
                current_file=self._record.current_file,
                process_handle=self._record.process_handle,
            )
