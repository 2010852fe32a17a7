"""
gpu-screen-recorder Capture Implementation

Real screen capture using the gpu-screen-recorder subprocess.
Records a screen region straight to a file on disk.

This wraps gpu-screen-recorder to match our VideoCaptureInterface.
"""

import logging
import shutil
import signal
import subprocess
from pathlib import Path
from typing import Optional

from config.settings import CAPTURE_COMMAND, get_codec, get_container, get_fps
from recording.constants import format_duration, get_capture_command
from recording.interfaces.video_capture_interface import (
    CaptureHandle,
    CaptureProcessError,
    CaptureToolNotFoundError,
    VideoCaptureInterface,
)
from recording.utils.recording_utils import ensure_output_dir, generate_filename


class GpuScreenCapture(VideoCaptureInterface):
    """
    Screen capture using gpu-screen-recorder.

    Non-blocking start: the capture tool runs in a background process and
    is owned by the returned CaptureHandle. Stop sends SIGINT and waits,
    which lets the tool write the container trailer.

    Usage:
        capture = GpuScreenCapture()
        handle = capture.start("1920x1080+0+0")
        # ... recording happens in background ...
        capture.stop(handle)
    """

    def __init__(self, output_dir: Optional[Path] = None):
        """
        Initialize capture.

        Args:
            output_dir: Directory for recordings, or None to resolve it from
                configuration on every start
        """
        self.logger = logging.getLogger(__name__)
        self.output_dir = output_dir

    def start(self, region: str) -> CaptureHandle:
        output_dir = ensure_output_dir(self.output_dir)
        container = get_container()
        output_file = generate_filename(output_dir, extension=container)

        command = get_capture_command(
            region=region,
            output_file=str(output_file),
            container=container,
            fps=get_fps(),
            codec=get_codec(),
        )

        self.logger.info(f"Starting capture of {region} to: {output_file}")
        self.logger.debug(f"Capture command: {' '.join(command)}")

        # stdout/stderr are inherited so the tool's output ends up in the
        # daemon's log stream; a pipe nobody reads would eventually block it
        try:
            process = subprocess.Popen(command, stdin=subprocess.DEVNULL)
        except FileNotFoundError as e:
            raise CaptureToolNotFoundError(
                f"Failed to start {CAPTURE_COMMAND}: {e}",
            ) from e
        except OSError as e:
            raise CaptureProcessError(
                f"Failed to start {CAPTURE_COMMAND}: {e}",
            ) from e

        self.logger.info(f"Capture started (PID: {process.pid})")
        return CaptureHandle(
            process=process,
            output_file=str(output_file),
            region=region,
        )

    def stop(self, handle: CaptureHandle) -> None:
        """
        Stop capture gracefully.

        Sends SIGINT (never SIGKILL: a killed capture leaves an unplayable
        container), then blocks until the process has exited.
        """
        process = handle.process

        returncode = process.poll()
        if returncode is not None:
            self.logger.warning(
                f"Capture process {handle.pid} already exited (code {returncode})",
            )
            return

        self.logger.info(f"Stopping capture (PID: {handle.pid})...")

        try:
            process.send_signal(signal.SIGINT)
        except OSError as e:
            raise CaptureProcessError(f"Failed to send SIGINT: {e}") from e

        try:
            returncode = process.wait()
        except OSError as e:
            raise CaptureProcessError(f"Failed to wait for process: {e}") from e

        if returncode != 0:
            self.logger.warning(f"{CAPTURE_COMMAND} exited with code {returncode}")

        output_file = Path(handle.output_file)
        if output_file.exists():
            file_size_mb = output_file.stat().st_size / (1024 * 1024)
            self.logger.info(
                f"Recording saved: {output_file} ({file_size_mb:.1f} MB, "
                f"{format_duration(handle.duration())})",
            )
        else:
            self.logger.error(f"Output file was not created: {output_file}")

    def is_available(self) -> bool:
        if not shutil.which(CAPTURE_COMMAND):
            self.logger.warning(f"{CAPTURE_COMMAND} not found in PATH")
            return False
        return True
