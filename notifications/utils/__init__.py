"""
Notification Utilities Package
"""

from notifications.utils.file_actions import (
    FileActions,
    OpenCommand,
    copy_to_clipboard,
    get_opener_candidates,
    open_file,
)

__all__ = [
    "FileActions",
    "OpenCommand",
    "copy_to_clipboard",
    "get_opener_candidates",
    "open_file",
]
