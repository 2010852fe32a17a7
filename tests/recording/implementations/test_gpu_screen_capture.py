"""
gpu-screen-recorder Capture Tests

Tests for GpuScreenCapture with subprocess.Popen patched out.

To run:
    pytest tests/recording/implementations/test_gpu_screen_capture.py -v
"""

import signal
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from recording.implementations.gpu_screen_capture import GpuScreenCapture
from recording.interfaces.video_capture_interface import (
    CaptureHandle,
    CaptureProcessError,
    CaptureToolNotFoundError,
    OutputDirectoryError,
)

POPEN = "recording.implementations.gpu_screen_capture.subprocess.Popen"


def fake_process(returncode=None, exit_code=0):
    process = MagicMock()
    process.pid = 4242
    process.poll.return_value = returncode
    process.wait.return_value = exit_code
    return process


# =============================================================================
# START TESTS
# =============================================================================


@pytest.mark.unit
def test_start_builds_command(temp_recording_dir, clean_env):
    """Test default command line and output path."""
    capture = GpuScreenCapture(output_dir=temp_recording_dir)

    with patch(POPEN, return_value=fake_process()) as popen:
        handle = capture.start("1920x1080+0+0")

    command = popen.call_args.args[0]
    assert command[:9] == [
        "gpu-screen-recorder",
        "-w",
        "1920x1080+0+0",
        "-c",
        "mp4",
        "-f",
        "60",
        "-o",
        handle.output_file,
    ]
    assert "-k" not in command
    assert Path(handle.output_file).parent == temp_recording_dir
    assert handle.output_file.endswith(".mp4")
    assert handle.pid == 4242


@pytest.mark.unit
def test_start_uses_environment_settings(temp_recording_dir, clean_env, monkeypatch):
    """Test container, fps and codec come from the environment."""
    monkeypatch.setenv("NIRI_SCREEN_RECORDER_CONTAINER", "mkv")
    monkeypatch.setenv("NIRI_SCREEN_RECORDER_FPS", "30")
    monkeypatch.setenv("NIRI_SCREEN_RECORDER_CODEC", "hevc")
    capture = GpuScreenCapture(output_dir=temp_recording_dir)

    with patch(POPEN, return_value=fake_process()) as popen:
        handle = capture.start("800x600+0+0")

    command = popen.call_args.args[0]
    assert command[command.index("-c") + 1] == "mkv"
    assert command[command.index("-f") + 1] == "30"
    assert command[-2:] == ["-k", "hevc"]
    assert handle.output_file.endswith(".mkv")


@pytest.mark.unit
def test_start_creates_output_dir(tmp_path, clean_env):
    """Test the output directory is created with parents."""
    output_dir = tmp_path / "a" / "b" / "Screencasts"
    capture = GpuScreenCapture(output_dir=output_dir)

    with patch(POPEN, return_value=fake_process()):
        capture.start("800x600+0+0")

    assert output_dir.is_dir()


@pytest.mark.unit
def test_start_output_dir_failure(tmp_path, clean_env):
    """Test an uncreatable directory raises OutputDirectoryError."""
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")
    capture = GpuScreenCapture(output_dir=blocker / "Screencasts")

    with patch(POPEN) as popen:
        with pytest.raises(OutputDirectoryError):
            capture.start("800x600+0+0")

    popen.assert_not_called()


@pytest.mark.unit
def test_start_tool_missing(temp_recording_dir, clean_env):
    """Test a missing binary raises CaptureToolNotFoundError."""
    capture = GpuScreenCapture(output_dir=temp_recording_dir)

    with patch(POPEN, side_effect=FileNotFoundError("gpu-screen-recorder")):
        with pytest.raises(CaptureToolNotFoundError):
            capture.start("800x600+0+0")


@pytest.mark.unit
def test_start_spawn_failure(temp_recording_dir, clean_env):
    """Test other spawn errors raise CaptureProcessError."""
    capture = GpuScreenCapture(output_dir=temp_recording_dir)

    with patch(POPEN, side_effect=PermissionError("denied")):
        with pytest.raises(CaptureProcessError):
            capture.start("800x600+0+0")


# =============================================================================
# STOP TESTS
# =============================================================================


@pytest.mark.unit
def test_stop_sends_sigint_and_waits(temp_recording_dir):
    """Test stop is SIGINT followed by wait."""
    process = fake_process()
    handle = CaptureHandle(process, str(temp_recording_dir / "a.mp4"), "800x600+0+0")

    GpuScreenCapture().stop(handle)

    process.send_signal.assert_called_once_with(signal.SIGINT)
    process.wait.assert_called_once_with()
    process.kill.assert_not_called()


@pytest.mark.unit
def test_stop_already_exited(temp_recording_dir):
    """Test a process that already exited isn't signalled."""
    process = fake_process(returncode=1)
    handle = CaptureHandle(process, str(temp_recording_dir / "a.mp4"), "800x600+0+0")

    GpuScreenCapture().stop(handle)

    process.send_signal.assert_not_called()


@pytest.mark.unit
def test_stop_signal_failure(temp_recording_dir):
    """Test a failing kill is reported as CaptureProcessError."""
    process = fake_process()
    process.send_signal.side_effect = ProcessLookupError("gone")
    handle = CaptureHandle(process, str(temp_recording_dir / "a.mp4"), "800x600+0+0")

    with pytest.raises(CaptureProcessError, match="SIGINT"):
        GpuScreenCapture().stop(handle)


@pytest.mark.unit
def test_stop_wait_failure(temp_recording_dir):
    """Test a failing wait is reported as CaptureProcessError."""
    process = fake_process()
    process.wait.side_effect = ChildProcessError("no child")
    handle = CaptureHandle(process, str(temp_recording_dir / "a.mp4"), "800x600+0+0")

    with pytest.raises(CaptureProcessError, match="wait"):
        GpuScreenCapture().stop(handle)


@pytest.mark.unit
def test_is_available(monkeypatch):
    """Test availability follows PATH lookup."""
    monkeypatch.setattr(
        "recording.implementations.gpu_screen_capture.shutil.which",
        lambda name: None,
    )
    assert GpuScreenCapture().is_available() is False

    monkeypatch.setattr(
        "recording.implementations.gpu_screen_capture.shutil.which",
        lambda name: f"/usr/bin/{name}",
    )
    assert GpuScreenCapture().is_available() is True
