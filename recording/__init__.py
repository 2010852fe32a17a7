"""
Recording Module

Region selection, capture process supervision and the recording
session state machine.

Provides automatic detection and graceful fallback between the real
tools (slurp, gpu-screen-recorder) and mock implementations for testing.

Public API:
    - RecordingFactory: Factory for creating capture and selector implementations
    - SessionController: Start/stop/toggle state machine
    - SessionStore: Lock-guarded session record
    - VideoCaptureInterface: Capture contract
    - RegionSelectorInterface: Region selection contract
    - SignalEmitterInterface: Recording started/stopped announcements
    - CaptureError: Custom exceptions
    - RecordingState: State enumeration

Usage:
    from recording import RecordingFactory, SessionController, SessionStore

    controller = SessionController(
        SessionStore(),
        RecordingFactory.create_region_selector(),
        RecordingFactory.create_capture(),
        notification_manager,
    )
    controller.toggle_recording()
"""

from recording.constants import RecordingState
from recording.controllers.session_controller import SessionController
from recording.controllers.session_store import SessionRecord, SessionStore
from recording.factory import RecordingFactory
from recording.interfaces.region_selector_interface import RegionSelectorInterface
from recording.interfaces.signal_emitter_interface import SignalEmitterInterface
from recording.interfaces.video_capture_interface import (
    CaptureError,
    CaptureHandle,
    VideoCaptureInterface,
)
from recording.utils.recording_utils import generate_filename, get_output_dir

__all__ = [
    "CaptureError",
    "CaptureHandle",
    "RecordingFactory",
    "RecordingState",
    "RegionSelectorInterface",
    "SessionController",
    "SessionRecord",
    "SessionStore",
    "SignalEmitterInterface",
    "VideoCaptureInterface",
    "generate_filename",
    "get_output_dir",
]
