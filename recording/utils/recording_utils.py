"""
Recording Utilities

Shared helpers for picking output paths and preparing the region
selector's environment.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Mapping, Optional

from config.settings import (
    DEFAULT_XCURSOR_SIZE,
    FILENAME_FORMAT,
    NIRI_CONFIG_FILE,
    SCREENCASTS_DIR_NAME,
    get_config_home,
    get_container,
    get_output_dir_override,
)
from recording.interfaces.video_capture_interface import OutputDirectoryError

logger = logging.getLogger(__name__)


def generate_filename(
    base_path: Path,
    format_string: str = FILENAME_FORMAT,
    extension: Optional[str] = None,
) -> Path:
    """
    Generate timestamped filename for recording.

    Args:
        base_path: Directory where file will be saved
        format_string: strftime format for filename
        extension: File extension (default: configured container)

    Returns:
        Complete file path with timestamp

    Example:
        path = generate_filename(Path("/home/me/Videos/Screencasts"))
        # Returns: .../screen-record-2025-01-15_14-30-22.mp4
    """
    timestamp = datetime.now().strftime(format_string)
    return base_path / f"{timestamp}.{extension or get_container()}"


def get_videos_dir() -> Optional[Path]:
    """
    Look up the user's XDG videos directory.

    Reads XDG_VIDEOS_DIR from user-dirs.dirs, then falls back to ~/Videos
    if it exists.

    Returns:
        Videos directory, or None if the platform doesn't define one
    """
    user_dirs_file = get_config_home() / "user-dirs.dirs"
    try:
        if user_dirs_file.exists():
            for line in user_dirs_file.read_text(encoding="utf-8").splitlines():
                line = line.strip()
                if line.startswith("XDG_VIDEOS_DIR="):
                    value = line.split("=", 1)[1].strip().strip('"')
                    path = Path(os.path.expandvars(value)).expanduser()
                    # "$HOME/" alone means the user disabled the directory
                    if path != Path.home():
                        return path
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read {user_dirs_file}: {e}")

    videos = Path.home() / "Videos"
    if videos.is_dir():
        return videos
    return None


def get_output_dir() -> Path:
    """
    Resolve the directory recordings are written to.

    Uses the configured override, else <videos dir>/Screencasts, else
    ~/Screencasts.
    """
    override = get_output_dir_override()
    if override is not None:
        return override

    base = get_videos_dir() or Path.home()
    return base / SCREENCASTS_DIR_NAME


def ensure_output_dir(path: Optional[Path] = None) -> Path:
    """
    Create the output directory if it doesn't exist.

    Args:
        path: Directory to create (default: get_output_dir())

    Returns:
        The existing or newly created directory

    Raises:
        OutputDirectoryError: If the directory can't be created
    """
    directory = path or get_output_dir()
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirectoryError(
            f"Failed to create output directory: {e}",
        ) from e
    return directory


def detect_cursor_theme(config_file: Optional[Path] = None) -> Optional[str]:
    """
    Read the cursor theme from niri's config.

    Looks for a line like: xcursor-theme "Adwaita"

    Args:
        config_file: niri config path (default: ~/.config/niri/config.kdl)

    Returns:
        Theme name, or None if not configured or unreadable
    """
    path = config_file or get_config_home() / NIRI_CONFIG_FILE
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None

    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed.startswith("xcursor-theme"):
            continue
        value = trimmed[len("xcursor-theme"):].strip()
        if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
            return value[1:-1]
        return None

    return None


def build_selector_env(base_env: Optional[Mapping[str, str]] = None) -> dict:
    """
    Build the environment for the region selector.

    Cursor theme and size are only filled in when the caller's environment
    doesn't already set them.

    Args:
        base_env: Starting environment (default: os.environ)

    Returns:
        New environment dictionary
    """
    env = dict(os.environ if base_env is None else base_env)

    if "XCURSOR_THEME" not in env:
        theme = detect_cursor_theme()
        if theme:
            env["XCURSOR_THEME"] = theme

    env.setdefault("XCURSOR_SIZE", DEFAULT_XCURSOR_SIZE)
    return env
