"""
Video Capture Interface

Abstract interface for screen capture implementations.
Defines the contract that the SessionController relies on to start and
stop the external capture process.

This demonstrates Dependency Inversion Principle - the SessionController
depends on this abstraction, not on gpu-screen-recorder directly.

Why an interface?
1. Testability: Can use MockCapture instead of a real capture process
2. Flexibility: Easy to swap gpu-screen-recorder for wf-recorder, etc.
3. Clear contract: Documents exactly what a capture system must do
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class CaptureHandle:
    """
    Live capture process returned by start().

    Owned by the session record while recording, then handed back to
    stop() exactly once.

    Attributes:
        process: Popen-like object (needs pid, poll(), wait(), send_signal())
        output_file: Path of the file being written
        region: Geometry string the capture was started with
        started_at: time.time() when the process was spawned
    """

    process: Any
    output_file: str
    region: str
    started_at: float = field(default_factory=time.time)

    @property
    def pid(self) -> int:
        return self.process.pid

    def duration(self) -> float:
        """Seconds since the capture process was spawned."""
        return time.time() - self.started_at


class VideoCaptureInterface(ABC):
    """
    Abstract base class for screen capture systems.

    Any capture implementation must implement all these methods to work
    with SessionController.
    """

    @abstractmethod
    def start(self, region: str) -> CaptureHandle:
        """
        Start capturing the given screen region to a new file.

        This should be NON-BLOCKING - returns as soon as the capture
        process is spawned. The output path is chosen by the
        implementation (configured directory + timestamped filename).

        Args:
            region: Geometry string "WxH+X+Y" from the region selector

        Returns:
            Handle owning the live capture process

        Raises:
            OutputDirectoryError: If the output directory can't be created
            CaptureToolNotFoundError: If the capture tool isn't installed
            CaptureProcessError: If the process can't be spawned

        Example:
            handle = capture.start("1920x1080+0+0")
            print(f"Recording to: {handle.output_file}")
        """

    @abstractmethod
    def stop(self, handle: CaptureHandle) -> None:
        """
        Stop a capture gracefully and wait for it to exit.

        Must use an interrupt-style signal (never a forced kill) so the
        capture tool can finalize the container. Blocks until the process
        has fully exited.

        Args:
            handle: Handle returned by start()

        Raises:
            CaptureProcessError: If the signal can't be delivered or the
                wait fails

        Example:
            capture.stop(handle)  # Waits for file to be finalized
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the capture tool is installed.

        Returns:
            True if capture can be used, False otherwise
        """


class CaptureError(Exception):
    """
    Exception raised for capture and region selection errors.

    Examples:
    - Region selection cancelled
    - gpu-screen-recorder not installed
    - Output directory not writable
    """


class RegionSelectionError(CaptureError):
    """Region selection was cancelled, failed, or returned nothing"""


class CaptureToolNotFoundError(CaptureError):
    """External command (selector or capture tool) not found on PATH"""


class CaptureProcessError(CaptureError):
    """Error spawning, signalling, or waiting for the capture process"""


class OutputDirectoryError(CaptureError):
    """Output directory could not be created"""
