"""
Task Spawner

Fire-and-forget work submission for background tasks (notifications,
notification action listeners).

Controllers receive a TaskSpawner instead of creating threads themselves,
so tests can swap in a synchronous or inspectable spawner.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Tuple


class TaskSpawner(ABC):
    """
    Abstract base class for background task submission.

    Spawned tasks are detached: the caller never waits for them and never
    sees their exceptions. Implementations must log failures instead.
    """

    @abstractmethod
    def spawn(
        self,
        task: Callable[..., Any],
        *args: Any,
        name: Optional[str] = None,
    ) -> None:
        """
        Submit a task to run in the background.

        Args:
            task: Callable to run
            *args: Positional arguments for the callable
            name: Optional task name (used for thread names and logs)
        """


def _run_logged(logger: logging.Logger, task: Callable[..., Any], args: tuple) -> None:
    """Run a task, logging (never raising) any exception it throws."""
    try:
        task(*args)
    except Exception as e:
        logger.error(f"Background task {getattr(task, '__name__', task)} failed: {e}", exc_info=True)


class ThreadTaskSpawner(TaskSpawner):
    """
    Runs each task on its own daemon thread.

    Daemon threads never keep the process alive, so a listener still
    waiting for a notification action does not block shutdown.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def spawn(self, task, *args, name=None) -> None:
        thread = threading.Thread(
            target=_run_logged,
            args=(self.logger, task, args),
            daemon=True,
            name=name or f"Task-{getattr(task, '__name__', 'anonymous')}",
        )
        thread.start()
        self.logger.debug(f"Spawned background task: {thread.name}")


class InlineTaskSpawner(TaskSpawner):
    """Runs tasks immediately on the calling thread. For tests."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def spawn(self, task, *args, name=None) -> None:
        _run_logged(self.logger, task, args)


class DeferredTaskSpawner(TaskSpawner):
    """
    Collects tasks without running them until run_pending() is called.

    Lets tests inspect what was spawned and control when it runs.

    Usage:
        spawner = DeferredTaskSpawner()
        controller = SessionController(..., spawner=spawner)
        controller.stop_recording()
        assert spawner.pending_count() == 1
        spawner.run_pending()
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self._pending: List[Tuple[Callable[..., Any], tuple, Optional[str]]] = []
        self._lock = threading.Lock()

    def spawn(self, task, *args, name=None) -> None:
        with self._lock:
            self._pending.append((task, args, name))

    def pending_count(self) -> int:
        with self._lock:
            return len(self._pending)

    def pending_names(self) -> List[Optional[str]]:
        with self._lock:
            return [name for _, _, name in self._pending]

    def run_pending(self) -> int:
        """
        Run every queued task in submission order.

        Returns:
            Number of tasks run
        """
        with self._lock:
            pending, self._pending = self._pending, []

        for task, args, _ in pending:
            _run_logged(self.logger, task, args)
        return len(pending)
