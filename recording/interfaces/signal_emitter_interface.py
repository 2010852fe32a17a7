"""
Signal Emitter Interface

Outbound events the SessionController raises after each successful
transition. The D-Bus front door turns these into bus signals; tests
record them.
"""

import logging
from abc import ABC, abstractmethod


class SignalEmitterInterface(ABC):
    """Receiver for session transition events."""

    @abstractmethod
    def recording_started(self) -> None:
        """Called once after a recording has started."""

    @abstractmethod
    def recording_stopped(self, file_path: str) -> None:
        """
        Called once after a recording has stopped.

        Args:
            file_path: File the stopped recording was written to
        """


class LoggingSignalEmitter(SignalEmitterInterface):
    """Emitter that only logs. Used when no transport is attached."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def recording_started(self) -> None:
        self.logger.debug("Signal: RecordingStarted")

    def recording_stopped(self, file_path: str) -> None:
        self.logger.debug(f"Signal: RecordingStopped({file_path})")
