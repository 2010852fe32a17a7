"""
Recording Utilities Package

Exposes shared utility functions for recording operations.
"""

from recording.utils.recording_utils import (
    build_selector_env,
    detect_cursor_theme,
    ensure_output_dir,
    generate_filename,
    get_output_dir,
    get_videos_dir,
)

# Public API
__all__ = [
    "build_selector_env",
    "detect_cursor_theme",
    "ensure_output_dir",
    "generate_filename",
    "get_output_dir",
    "get_videos_dir",
]
