"""
Recording Controllers Package

The session state machine and the record it guards.
"""

from recording.controllers.session_controller import SessionController
from recording.controllers.session_store import SessionRecord, SessionStore

# Public API
__all__ = [
    "SessionController",
    "SessionRecord",
    "SessionStore",
]
