"""
Mock Capture Implementations

Simulated capture tool and region selector for testing without a Wayland
session, slurp or gpu-screen-recorder.

These are "Fakes" (test doubles) - they have working logic but spawn no
real processes.
"""

import itertools
import logging
import signal
from pathlib import Path
from typing import List, Optional

from recording.interfaces.region_selector_interface import RegionSelectorInterface
from recording.interfaces.video_capture_interface import (
    CaptureHandle,
    CaptureProcessError,
    CaptureToolNotFoundError,
    RegionSelectionError,
    VideoCaptureInterface,
)
from recording.utils.recording_utils import ensure_output_dir, generate_filename

_pids = itertools.count(40000)


class MockProcess:
    """
    Popen look-alike for MockCapture.

    Exits with code 0 when it receives SIGINT, like the real capture tool.
    """

    def __init__(self):
        self.pid = next(_pids)
        self.returncode: Optional[int] = None
        self.signals: List[int] = []

    def poll(self) -> Optional[int]:
        return self.returncode

    def send_signal(self, sig: int) -> None:
        self.signals.append(sig)
        if sig == signal.SIGINT and self.returncode is None:
            self.returncode = 0

    def wait(self, timeout: Optional[float] = None) -> int:
        if self.returncode is None:
            # Nothing would ever make this process exit
            raise CaptureProcessError("Mock process never exits without a signal")
        return self.returncode

    def exit(self, returncode: int = 1) -> None:
        """Simulate the process dying on its own."""
        self.returncode = returncode


class MockCapture(VideoCaptureInterface):
    """
    Mock capture for testing.

    Creates an empty output file and a MockProcess per start, and keeps a
    history of every start/stop so tests can assert on them.

    Usage:
        capture = MockCapture(output_dir=tmp_path)
        handle = capture.start("1920x1080+0+0")
        capture.stop(handle)
        assert capture.start_count == 1
    """

    def __init__(self, output_dir: Optional[Path] = None, create_files: bool = True):
        """
        Initialize mock capture.

        Args:
            output_dir: Directory for fake recordings (default: configured)
            create_files: If True, touch the output file on start
        """
        self.logger = logging.getLogger(__name__)
        self.output_dir = output_dir
        self.create_files = create_files

        # History for tests to verify
        self.started: List[CaptureHandle] = []
        self.stopped: List[CaptureHandle] = []

        # Configuration for test scenarios
        self._should_fail_start = False
        self._should_fail_stop = False
        self._tool_missing = False

        self.logger.info("Mock Capture initialized")

    @property
    def start_count(self) -> int:
        return len(self.started)

    @property
    def stop_count(self) -> int:
        return len(self.stopped)

    def start(self, region: str) -> CaptureHandle:
        if self._tool_missing:
            raise CaptureToolNotFoundError("[MOCK] gpu-screen-recorder not installed")
        if self._should_fail_start:
            self.logger.error("[MOCK] Simulated start failure")
            raise CaptureProcessError("[MOCK] Simulated capture failure")

        output_dir = ensure_output_dir(self.output_dir)
        output_file = generate_filename(output_dir)
        if self.create_files:
            output_file.touch()

        handle = CaptureHandle(
            process=MockProcess(),
            output_file=str(output_file),
            region=region,
        )
        self.started.append(handle)

        self.logger.info(f"[MOCK] Capture started: {output_file} ({region})")
        return handle

    def stop(self, handle: CaptureHandle) -> None:
        self.stopped.append(handle)

        if self._should_fail_stop:
            self.logger.error("[MOCK] Simulated stop failure")
            raise CaptureProcessError("[MOCK] Failed to send SIGINT")

        handle.process.send_signal(signal.SIGINT)
        handle.process.wait()
        self.logger.info(f"[MOCK] Capture stopped: {handle.output_file}")

    def is_available(self) -> bool:
        """Mock capture is available unless told otherwise"""
        return not self._tool_missing

    # =========================================================================
    # TESTING HELPER METHODS (not part of VideoCaptureInterface)
    # =========================================================================

    def simulate_start_failure(self) -> None:
        """Configure mock to raise CaptureProcessError on start()."""
        self._should_fail_start = True

    def simulate_stop_failure(self) -> None:
        """Configure mock to raise CaptureProcessError on stop()."""
        self._should_fail_stop = True

    def simulate_tool_missing(self) -> None:
        """Configure mock to behave as if the capture tool isn't installed."""
        self._tool_missing = True

    def reset_test_config(self) -> None:
        """Reset test configuration to normal operation."""
        self._should_fail_start = False
        self._should_fail_stop = False
        self._tool_missing = False


class MockRegionSelector(RegionSelectorInterface):
    """
    Mock region selector returning a fixed geometry.

    Usage:
        selector = MockRegionSelector("800x600+10+10")
        selector.simulate_cancel()
        selector.select_region()  # raises RegionSelectionError
    """

    def __init__(self, region: str = "1920x1080+0+0"):
        self.logger = logging.getLogger(__name__)
        self.region = region
        self.call_count = 0
        self._cancel = False
        self._tool_missing = False

    def select_region(self) -> str:
        self.call_count += 1

        if self._tool_missing:
            raise CaptureToolNotFoundError("[MOCK] slurp not installed")
        if self._cancel:
            raise RegionSelectionError("Region selection cancelled: selection cancelled")
        if not self.region:
            raise RegionSelectionError("No region selected")

        self.logger.info(f"[MOCK] Region selected: {self.region}")
        return self.region

    def is_available(self) -> bool:
        return not self._tool_missing

    def simulate_cancel(self) -> None:
        """Configure mock to behave as if the user pressed Escape."""
        self._cancel = True

    def simulate_tool_missing(self) -> None:
        self._tool_missing = True

    def reset_test_config(self) -> None:
        self._cancel = False
        self._tool_missing = False
