"""
Recording Factory

Factory pattern for creating recording implementations.
Automatically selects real or mock tools based on availability.

Single place to decide between gpu-screen-recorder/slurp and the mocks.
"""

import logging
from pathlib import Path
from typing import Literal, Optional

from recording.implementations.gpu_screen_capture import GpuScreenCapture
from recording.implementations.mock_capture import MockCapture, MockRegionSelector
from recording.implementations.slurp_selector import SlurpRegionSelector
from recording.interfaces.region_selector_interface import RegionSelectorInterface
from recording.interfaces.video_capture_interface import VideoCaptureInterface

# Type alias for better type hints
CaptureMode = Literal["auto", "real", "mock"]


class RecordingFactory:
    """
    Factory for creating capture and region selector implementations.

    Usage:
        # Auto-detect (real tools if installed, mock otherwise)
        capture = RecordingFactory.create_capture()

        # Force mock mode (useful for testing)
        selector = RecordingFactory.create_region_selector(mode="mock")

        # Force real tools (raises error if not installed)
        capture = RecordingFactory.create_capture(mode="real")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_capture(
        cls,
        mode: CaptureMode = "auto",
        output_dir: Optional[Path] = None,
    ) -> VideoCaptureInterface:
        """
        Create a capture instance.

        Args:
            mode: "auto" (detect), "real" (force), "mock" (force mock)
            output_dir: Optional fixed output directory

        Returns:
            VideoCaptureInterface implementation

        Raises:
            RuntimeError: If mode="real" but the capture tool isn't installed
        """
        if mode == "mock":
            cls._logger.info("Creating Mock Capture")
            return MockCapture(output_dir=output_dir)

        capture = GpuScreenCapture(output_dir=output_dir)

        if mode == "real":
            if not capture.is_available():
                raise RuntimeError("Real capture requested but gpu-screen-recorder not available")
            cls._logger.info("Creating gpu-screen-recorder Capture (forced)")
            return capture

        # mode == "auto" - try real first, fall back to mock
        if capture.is_available():
            cls._logger.info("Creating gpu-screen-recorder Capture (auto-detected)")
            return capture

        cls._logger.warning("gpu-screen-recorder not available, using Mock Capture")
        return MockCapture(output_dir=output_dir)

    @classmethod
    def create_region_selector(
        cls,
        mode: CaptureMode = "auto",
    ) -> RegionSelectorInterface:
        """
        Create a region selector instance.

        Args:
            mode: "auto" (detect), "real" (force slurp), "mock" (force mock)

        Returns:
            RegionSelectorInterface implementation

        Raises:
            RuntimeError: If mode="real" but slurp isn't installed
        """
        if mode == "mock":
            cls._logger.info("Creating Mock Region Selector")
            return MockRegionSelector()

        selector = SlurpRegionSelector()

        if mode == "real":
            if not selector.is_available():
                raise RuntimeError("Real region selector requested but slurp not available")
            return selector

        if selector.is_available():
            cls._logger.info("Creating slurp Region Selector (auto-detected)")
            return selector

        cls._logger.warning("slurp not available, using Mock Region Selector")
        return MockRegionSelector()

    @classmethod
    def is_real_capture_available(cls) -> dict[str, bool]:
        """
        Check which external tools are installed.

        Returns:
            {'gpu-screen-recorder': bool, 'slurp': bool}
        """
        return {
            "gpu-screen-recorder": GpuScreenCapture().is_available(),
            "slurp": SlurpRegionSelector().is_available(),
        }
