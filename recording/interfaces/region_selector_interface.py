"""
Region Selector Interface

Abstract interface for interactive screen region selection.
The real implementation shells out to slurp; tests use MockRegionSelector.
"""

from abc import ABC, abstractmethod


class RegionSelectorInterface(ABC):
    """
    Abstract base class for region selectors.

    Selection is BLOCKING: the call returns once the user has drawn a
    region or cancelled.
    """

    @abstractmethod
    def select_region(self) -> str:
        """
        Ask the user to select a screen region.

        Returns:
            Geometry string "WxH+X+Y"

        Raises:
            RegionSelectionError: If cancelled, failed, or empty
            CaptureToolNotFoundError: If the selector isn't installed
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the selector is installed.

        Returns:
            True if selection can be used, False otherwise
        """
