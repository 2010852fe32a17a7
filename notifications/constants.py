"""
Notification Constants

Action keys, notification builders and listener outcomes.
"""

from enum import Enum

from notifications.interfaces.notifier_interface import Notification

# =============================================================================
# ACTIONS
# =============================================================================

ACTION_COPY_PATH = "copy-path"
ACTION_OPEN_FILE = "open-file"

SAVED_ACTIONS = (
    (ACTION_COPY_PATH, "Copy Path"),
    (ACTION_OPEN_FILE, "Open File"),
)

# =============================================================================
# ICONS / TEXT
# =============================================================================

SAVED_ICON = "video-x-generic"
SAVED_SUMMARY = "Recording Saved"

ERROR_ICON = "dialog-error"
ERROR_SUMMARY = "Screen Recorder Error"


class ListenerOutcome(Enum):
    """How a notification action listener finished."""

    DISPATCHED = "dispatched"  # Matching action handled
    IGNORED_ACTION = "ignored_action"  # Matching id, unknown action key
    TIMED_OUT = "timed_out"  # No matching event within the window
    STREAM_CLOSED = "stream_closed"  # Event stream ended
    FAILED = "failed"  # Subscription or action failed


def build_saved_notification(file_path: str) -> Notification:
    """
    Notification shown when a recording has been written.

    Example:
        build_saved_notification("/home/me/Videos/Screencasts/a.mp4").body
        -> "Saved to: /home/me/Videos/Screencasts/a.mp4"
    """
    return Notification(
        summary=SAVED_SUMMARY,
        body=f"Saved to: {file_path}",
        icon=SAVED_ICON,
        actions=SAVED_ACTIONS,
    )


def build_error_notification(message: str) -> Notification:
    """Notification shown when starting a recording failed."""
    return Notification(
        summary=ERROR_SUMMARY,
        body=message,
        icon=ERROR_ICON,
    )
