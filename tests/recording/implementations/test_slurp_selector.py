"""
slurp Region Selector Tests

Tests for SlurpRegionSelector with subprocess.run patched out.

To run:
    pytest tests/recording/implementations/test_slurp_selector.py -v
"""

import subprocess
from unittest.mock import patch

import pytest

from recording.implementations.slurp_selector import SlurpRegionSelector
from recording.interfaces.video_capture_interface import (
    CaptureToolNotFoundError,
    RegionSelectionError,
)

RUN = "recording.implementations.slurp_selector.subprocess.run"


def completed(returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(["slurp"], returncode, stdout=stdout, stderr=stderr)


@pytest.mark.unit
def test_select_region_returns_trimmed_geometry(clean_env):
    """Test stdout is trimmed and returned."""
    with patch(RUN, return_value=completed(stdout="1920x1080+0+0\n")) as run:
        region = SlurpRegionSelector().select_region()

    assert region == "1920x1080+0+0"
    assert run.call_args.args[0] == ["slurp", "-f", "%wx%h+%x+%y"]


@pytest.mark.unit
def test_select_region_passes_cursor_env(clean_env):
    """Test the selector gets XCURSOR_SIZE even when unset."""
    with patch(RUN, return_value=completed(stdout="1x1+0+0")) as run:
        SlurpRegionSelector().select_region()

    env = run.call_args.kwargs["env"]
    assert env["XCURSOR_SIZE"] == "24"


@pytest.mark.unit
def test_select_region_cancelled(clean_env):
    """Test nonzero exit means the user cancelled."""
    with patch(RUN, return_value=completed(returncode=1, stderr="selection cancelled\n")):
        with pytest.raises(RegionSelectionError, match="selection cancelled"):
            SlurpRegionSelector().select_region()


@pytest.mark.unit
def test_select_region_empty_output(clean_env):
    """Test exit 0 with nothing on stdout is still no selection."""
    with patch(RUN, return_value=completed(stdout="  \n")):
        with pytest.raises(RegionSelectionError, match="No region selected"):
            SlurpRegionSelector().select_region()


@pytest.mark.unit
def test_select_region_tool_missing(clean_env):
    """Test a missing slurp binary."""
    with patch(RUN, side_effect=FileNotFoundError("slurp")):
        with pytest.raises(CaptureToolNotFoundError):
            SlurpRegionSelector().select_region()


@pytest.mark.unit
def test_select_region_timeout(clean_env):
    """Test an optional timeout turns into RegionSelectionError."""
    with patch(RUN, side_effect=subprocess.TimeoutExpired("slurp", 5)):
        with pytest.raises(RegionSelectionError, match="timed out"):
            SlurpRegionSelector(timeout=5).select_region()
