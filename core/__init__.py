"""
Core utilities shared by every package.

Public API:
    - TaskSpawner: Fire-and-forget background task contract
    - ThreadTaskSpawner: Daemon-thread implementation (production)
    - InlineTaskSpawner: Synchronous implementation (tests)
    - DeferredTaskSpawner: Queue-until-asked implementation (tests)

Usage:
    from core import ThreadTaskSpawner

    spawner = ThreadTaskSpawner()
    spawner.spawn(send_notification, "Recording saved", name="Notify")
"""

from core.task_spawner import (
    DeferredTaskSpawner,
    InlineTaskSpawner,
    TaskSpawner,
    ThreadTaskSpawner,
)

__all__ = [
    "DeferredTaskSpawner",
    "InlineTaskSpawner",
    "TaskSpawner",
    "ThreadTaskSpawner",
]
