"""
Recording Interfaces Package

Exposes abstract interfaces for recording components.
"""

from recording.interfaces.region_selector_interface import RegionSelectorInterface
from recording.interfaces.signal_emitter_interface import (
    LoggingSignalEmitter,
    SignalEmitterInterface,
)
from recording.interfaces.video_capture_interface import (
    CaptureError,
    CaptureHandle,
    CaptureProcessError,
    CaptureToolNotFoundError,
    OutputDirectoryError,
    RegionSelectionError,
    VideoCaptureInterface,
)

# Public API
__all__ = [
    # Exceptions
    "CaptureError",
    "CaptureProcessError",
    "CaptureToolNotFoundError",
    "OutputDirectoryError",
    "RegionSelectionError",
    # Data
    "CaptureHandle",
    # Interfaces
    "LoggingSignalEmitter",
    "RegionSelectorInterface",
    "SignalEmitterInterface",
    "VideoCaptureInterface",
]
