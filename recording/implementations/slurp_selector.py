"""
slurp Region Selector Implementation

Interactive region selection using slurp. Blocks until the user has drawn
a region or cancelled with Escape.
"""

import logging
import shutil
import subprocess
from typing import Optional

from config.settings import REGION_SELECTOR_COMMAND
from recording.constants import get_region_selector_command
from recording.interfaces.region_selector_interface import RegionSelectorInterface
from recording.interfaces.video_capture_interface import (
    CaptureProcessError,
    CaptureToolNotFoundError,
    RegionSelectionError,
)
from recording.utils.recording_utils import build_selector_env


class SlurpRegionSelector(RegionSelectorInterface):
    """
    Region selector backed by slurp.

    slurp prints the geometry on stdout and exits 0; cancelling exits
    non-zero with nothing on stdout.

    Usage:
        selector = SlurpRegionSelector()
        region = selector.select_region()  # "1920x1080+0+0"
    """

    def __init__(self, timeout: Optional[float] = None):
        """
        Args:
            timeout: Seconds to wait for a selection, or None to wait forever
        """
        self.logger = logging.getLogger(__name__)
        self.timeout = timeout

    def select_region(self) -> str:
        command = get_region_selector_command()
        self.logger.debug(f"Region selector command: {' '.join(command)}")

        try:
            result = subprocess.run(
                command,
                env=build_selector_env(),
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise CaptureToolNotFoundError(
                f"Failed to run {REGION_SELECTOR_COMMAND}: {e}",
            ) from e
        except subprocess.TimeoutExpired as e:
            raise RegionSelectionError(
                f"Region selection timed out after {self.timeout}s",
            ) from e
        except OSError as e:
            raise CaptureProcessError(
                f"Failed to run {REGION_SELECTOR_COMMAND}: {e}",
            ) from e

        if result.returncode != 0:
            raise RegionSelectionError(
                f"Region selection cancelled: {result.stderr.strip()}",
            )

        region = result.stdout.strip()
        if not region:
            raise RegionSelectionError("No region selected")

        self.logger.info(f"Region selected: {region}")
        return region

    def is_available(self) -> bool:
        if not shutil.which(REGION_SELECTOR_COMMAND):
            self.logger.warning(f"{REGION_SELECTOR_COMMAND} not found in PATH")
            return False
        return True
