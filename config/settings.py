"""
Central Configuration File

ALL configuration values live here. This is the single source of truth.

Guidelines:
- Fixed values (command names, bus names, timeouts) are plain constants
- User-tunable values come from the environment (or a .env file) and are
  read through the get_* functions below, so they are resolved at call time
- Import these settings in modules: from config.settings import get_fps
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# =============================================================================
# APPLICATION
# =============================================================================

APP_NAME = "niri-screen-recorder"

# Prefix shared by every environment variable this daemon reads
ENV_PREFIX = "NIRI_SCREEN_RECORDER_"

ENV_OUTPUT_DIR = f"{ENV_PREFIX}OUTPUT_DIR"
ENV_CONTAINER = f"{ENV_PREFIX}CONTAINER"
ENV_FPS = f"{ENV_PREFIX}FPS"
ENV_CODEC = f"{ENV_PREFIX}CODEC"
ENV_OPEN_CMD = f"{ENV_PREFIX}OPEN_CMD"
ENV_LOG_LEVEL = f"{ENV_PREFIX}LOG_LEVEL"
ENV_LOG_FILE = f"{ENV_PREFIX}LOG_FILE"

# =============================================================================
# D-BUS SERVICE
# =============================================================================

BUS_NAME = "org.niri_screen_recorder.Recorder"
OBJECT_PATH = "/org/niri_screen_recorder/Recorder"
INTERFACE_NAME = "org.niri_screen_recorder.Recorder"

# Worker threads that run blocking controller calls for D-Bus handlers
SERVICE_WORKER_THREADS = 4

# =============================================================================
# RECORDING CONFIGURATION
# =============================================================================

# Region selector (blocking, prints a geometry string on stdout)
REGION_SELECTOR_COMMAND = "slurp"
REGION_SELECTOR_FORMAT = "%wx%h+%x+%y"  # WxH+X+Y, what the capture tool expects

# Capture tool (long running, exits cleanly on SIGINT)
CAPTURE_COMMAND = "gpu-screen-recorder"

DEFAULT_CONTAINER = "mp4"
DEFAULT_FPS = "60"

# Output files: <output_dir>/screen-record-2025-01-15_14-30-22.mp4
SCREENCASTS_DIR_NAME = "Screencasts"
FILENAME_FORMAT = "screen-record-%Y-%m-%d_%H-%M-%S"

# Cursor settings passed to the region selector when not already set
DEFAULT_XCURSOR_SIZE = "24"
NIRI_CONFIG_FILE = Path("niri") / "config.kdl"  # relative to XDG config dir

# =============================================================================
# NOTIFICATION CONFIGURATION
# =============================================================================

NOTIFICATIONS_SERVICE = "org.freedesktop.Notifications"
NOTIFICATIONS_PATH = "/org/freedesktop/Notifications"
NOTIFICATIONS_INTERFACE = "org.freedesktop.Notifications"

NOTIFICATION_EXPIRE_TIMEOUT_MS = 5000

# Seconds the action listener waits for each ActionInvoked event
ACTION_TIMEOUT_SECONDS = 6.0

# Seconds a worker thread waits for a bus round trip before giving up
BUS_CALL_TIMEOUT_SECONDS = 10.0

# File openers tried in order after the user override
OPENER_PROGRAMS = ("xdg-open", "gio")
OPENER_FALLBACK_DIRS = (
    Path("/run/current-system/sw/bin"),
    Path("/usr/bin"),
    Path("/bin"),
)

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(message)s | %(name)s"
LOG_FALLBACK_FILE = Path.home() / ".cache" / APP_NAME / "service.log"
LOG_BACKUP_COUNT = 7


# =============================================================================
# ENVIRONMENT ACCESSORS
# =============================================================================


def _env(key: str) -> Optional[str]:
    """Return a stripped environment value, treating blank as unset."""
    value = os.getenv(key)
    if value is None or not value.strip():
        return None
    return value.strip()


def get_output_dir_override() -> Optional[Path]:
    """Output directory set by the user, if any."""
    value = _env(ENV_OUTPUT_DIR)
    return Path(value).expanduser() if value else None


def get_container() -> str:
    """Container format, which doubles as the file extension."""
    return _env(ENV_CONTAINER) or DEFAULT_CONTAINER


def get_fps() -> str:
    return _env(ENV_FPS) or DEFAULT_FPS


def get_codec() -> Optional[str]:
    """Video codec, or None to let the capture tool pick one."""
    return _env(ENV_CODEC)


def get_open_command() -> Optional[str]:
    return _env(ENV_OPEN_CMD)


def get_log_level() -> str:
    return (_env(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()


def get_log_file() -> Optional[Path]:
    value = _env(ENV_LOG_FILE)
    return Path(value).expanduser() if value else None


def get_config_home() -> Path:
    """XDG config directory (~/.config unless XDG_CONFIG_HOME is set)."""
    value = _env("XDG_CONFIG_HOME")
    return Path(value) if value else Path.home() / ".config"
