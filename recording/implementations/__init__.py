"""
Recording Implementations Package

Exposes concrete implementations of recording interfaces.
"""

from recording.implementations.gpu_screen_capture import GpuScreenCapture
from recording.implementations.mock_capture import (
    MockCapture,
    MockProcess,
    MockRegionSelector,
)
from recording.implementations.slurp_selector import SlurpRegionSelector

# Public API
__all__ = [
    "GpuScreenCapture",
    "MockCapture",
    "MockProcess",
    "MockRegionSelector",
    "SlurpRegionSelector",
]
