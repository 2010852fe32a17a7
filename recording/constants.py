"""
Recording Constants

Enums, command builders and small helpers for the recording system.

Configuration values (command names, defaults, environment keys) live in
config/settings.py. This file only turns them into the concrete command
lines the implementations spawn.
"""

from enum import Enum
from typing import Optional

from config.settings import (
    CAPTURE_COMMAND,
    REGION_SELECTOR_COMMAND,
    REGION_SELECTOR_FORMAT,
)

# =============================================================================
# RECORDING STATE TRACKING
# =============================================================================


class RecordingState(Enum):
    """
    States the recording session can be in.

    Lifecycle: IDLE -> RECORDING -> IDLE
    Every other requested transition is a no-op.
    """

    IDLE = "idle"  # No capture process owned
    RECORDING = "recording"  # Capture process alive and owned by the session


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def get_region_selector_command() -> list[str]:
    """
    Generate the region selector command.

    Returns:
        List of command arguments for subprocess

    Example:
        get_region_selector_command() -> ["slurp", "-f", "%wx%h+%x+%y"]
    """
    return [REGION_SELECTOR_COMMAND, "-f", REGION_SELECTOR_FORMAT]


def get_capture_command(
    region: str,
    output_file: str,
    container: str,
    fps: str,
    codec: Optional[str] = None,
) -> list[str]:
    """
    Generate the capture command for a screen region.

    Args:
        region: Geometry string "WxH+X+Y"
        output_file: Output filename with path
        container: Container format (mp4, mkv, webm, ...)
        fps: Frame rate
        codec: Optional video codec (h264, hevc, av1, ...)

    Returns:
        List of command arguments for subprocess

    Example:
        cmd = get_capture_command("1920x1080+0+0", "out.mp4", "mp4", "60")
        subprocess.Popen(cmd)
    """
    command = [
        CAPTURE_COMMAND,
        "-w",
        region,  # Region to capture
        "-c",
        container,  # Container format
        "-f",
        fps,  # Frame rate
        "-o",
        output_file,
    ]

    # Without -k the capture tool picks a codec itself
    if codec:
        command.extend(["-k", codec])

    return command


def format_duration(seconds: float) -> str:
    """
    Format duration in seconds to human-readable string.

    Example:
        format_duration(630) -> "10:30"
    """
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes}:{secs:02d}"
