"""
Service Test Configuration and Fixtures

Shared fixtures for the bus interface and CLI tests.
"""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

import pytest

from core.task_spawner import DeferredTaskSpawner
from notifications.controllers.notification_manager import NotificationManager
from notifications.implementations.mock_notifier import MockNotifier
from recording.controllers.session_controller import SessionController
from recording.controllers.session_store import SessionStore
from recording.implementations.mock_capture import MockCapture, MockRegionSelector
from service.client import RecorderClient

# =============================================================================
# CONTROLLER FIXTURES
# =============================================================================


@pytest.fixture
def mock_selector():
    return MockRegionSelector()


@pytest.fixture
def controller(tmp_path, mock_selector):
    """Provide SessionController backed entirely by mocks."""
    return SessionController(
        SessionStore(),
        mock_selector,
        MockCapture(output_dir=tmp_path),
        NotificationManager(MockNotifier()),
        spawner=DeferredTaskSpawner(),
    )


@pytest.fixture
def executor():
    """Provide a small thread pool, shut down after the test."""
    pool = ThreadPoolExecutor(max_workers=2)
    yield pool
    pool.shutdown(wait=True)


# =============================================================================
# CLIENT FIXTURES
# =============================================================================


@pytest.fixture
def fake_client():
    """
    Provide a RecorderClient stand-in.

    Usage:
        def test_cli(fake_client):
            fake_client.start_recording.return_value = True
            run_client_command("start", fake_client)
    """
    return MagicMock(spec=RecorderClient)


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """
    Configure pytest with custom markers for service tests.
    """
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "unit_integration: Integration tests")
