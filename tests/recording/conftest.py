"""
Recording Test Configuration and Fixtures

Shared fixtures for recording module tests.
"""

import pytest

from core.task_spawner import DeferredTaskSpawner
from notifications.controllers.notification_manager import NotificationManager
from notifications.implementations.mock_notifier import MockNotifier
from recording.controllers.session_controller import SessionController
from recording.controllers.session_store import SessionStore
from recording.implementations.mock_capture import MockCapture, MockRegionSelector
from recording.interfaces.signal_emitter_interface import SignalEmitterInterface

# =============================================================================
# ENVIRONMENT FIXTURES
# =============================================================================


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """
    Isolate tests from the user's environment.

    HOME points at an empty temp directory and every recorder variable
    is unset.

    Usage:
        def test_paths(clean_env):
            assert get_output_dir() == clean_env / "Screencasts"
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in (
        "XDG_CONFIG_HOME",
        "XCURSOR_THEME",
        "XCURSOR_SIZE",
        "NIRI_SCREEN_RECORDER_OUTPUT_DIR",
        "NIRI_SCREEN_RECORDER_CONTAINER",
        "NIRI_SCREEN_RECORDER_FPS",
        "NIRI_SCREEN_RECORDER_CODEC",
    ):
        monkeypatch.delenv(key, raising=False)
    return home


@pytest.fixture
def temp_recording_dir(tmp_path):
    """
    Provide temporary directory for recordings.

    Usage:
        def test_multiple(temp_recording_dir):
            capture = MockCapture(output_dir=temp_recording_dir)
    """
    directory = tmp_path / "recordings"
    directory.mkdir()
    return directory


# =============================================================================
# MOCK FIXTURES
# =============================================================================


@pytest.fixture
def mock_capture(temp_recording_dir):
    """Provide MockCapture writing into a temp directory."""
    return MockCapture(output_dir=temp_recording_dir)


@pytest.fixture
def mock_selector():
    """Provide MockRegionSelector returning 1920x1080+0+0."""
    return MockRegionSelector()


@pytest.fixture
def mock_notifier():
    return MockNotifier()


@pytest.fixture
def spawner():
    """
    Provide DeferredTaskSpawner so tests can see what was spawned.

    Usage:
        def test_spawn(controller, spawner):
            controller.stop_recording()
            assert spawner.pending_names() == ["NotificationActionListener"]
    """
    return DeferredTaskSpawner()


# =============================================================================
# SIGNAL TRACKING FIXTURES
# =============================================================================


@pytest.fixture
def signal_tracker():
    """
    Provide a SignalEmitterInterface that records every emission.

    Usage:
        def test_signals(controller, signal_tracker):
            controller.start_recording()
            assert signal_tracker.names() == ["RecordingStarted"]
    """

    class SignalTracker(SignalEmitterInterface):
        def __init__(self):
            self.emitted = []

        def recording_started(self) -> None:
            self.emitted.append(("RecordingStarted", None))

        def recording_stopped(self, file_path: str) -> None:
            self.emitted.append(("RecordingStopped", file_path))

        def names(self):
            """Get signal names in emission order"""
            return [name for name, _ in self.emitted]

        def reset(self):
            self.emitted.clear()

    return SignalTracker()


# =============================================================================
# CONTROLLER FIXTURES
# =============================================================================


@pytest.fixture
def session_store():
    return SessionStore()


@pytest.fixture
def controller(session_store, mock_selector, mock_capture, mock_notifier, signal_tracker, spawner):
    """
    Provide SessionController wired to mocks.

    Usage:
        def test_start(controller):
            assert controller.start_recording() is True
    """
    return SessionController(
        session_store,
        mock_selector,
        mock_capture,
        NotificationManager(mock_notifier, action_timeout=0.01),
        signals=signal_tracker,
        spawner=spawner,
    )


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """
    Configure pytest with custom markers for recording tests.
    """
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "unit_integration: Integration tests")
