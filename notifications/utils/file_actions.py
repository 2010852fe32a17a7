"""
File Actions

What the "Copy Path" and "Open File" notification buttons actually do.
"""

import logging
import os
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Tuple

import pyperclip

from config.settings import OPENER_FALLBACK_DIRS, OPENER_PROGRAMS, get_open_command
from notifications.interfaces.notifier_interface import FileActionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpenCommand:
    """A file opener candidate: program plus its arguments."""

    program: str
    args: Tuple[str, ...]

    def argv(self) -> List[str]:
        return [self.program, *self.args]


def _opener_args(program: str, file_path: str) -> Tuple[str, ...]:
    # gio needs the "open" subcommand, everything else takes the path directly
    if Path(program).name == "gio":
        return ("open", file_path)
    return (file_path,)


def get_opener_candidates(
    file_path: str,
    open_command: Optional[str] = None,
    which: Callable[[str], Optional[str]] = shutil.which,
    exists: Callable[[str], bool] = os.path.exists,
) -> List[OpenCommand]:
    """
    List file openers to try, in order.

    Order: the user's override command, well-known openers found on PATH,
    then well-known absolute fallback paths. Duplicates are dropped.

    Args:
        file_path: File to open
        open_command: Override command line (default: configured one)
        which: PATH lookup (injectable for tests)
        exists: File existence check (injectable for tests)

    Returns:
        Candidate commands, best first

    Raises:
        FileActionError: If the override command can't be parsed
    """
    candidates: List[OpenCommand] = []
    seen = set()

    def add(program: str, args: Tuple[str, ...]) -> None:
        if program in seen:
            return
        seen.add(program)
        candidates.append(OpenCommand(program, args))

    custom = open_command if open_command is not None else get_open_command()
    if custom and custom.strip():
        try:
            parts = shlex.split(custom.strip())
        except ValueError as e:
            raise FileActionError(f"Invalid open command {custom!r}: {e}") from e
        if parts:
            add(parts[0], (*parts[1:], file_path))

    for program in OPENER_PROGRAMS:
        resolved = which(program)
        if resolved:
            add(resolved, _opener_args(program, file_path))

    for directory in OPENER_FALLBACK_DIRS:
        for program in OPENER_PROGRAMS:
            path = str(directory / program)
            if exists(path):
                add(path, _opener_args(program, file_path))

    return candidates


def open_file(file_path: str, candidates: Optional[List[OpenCommand]] = None) -> OpenCommand:
    """
    Open a file with the first opener that launches.

    The opener is not waited on. A missing binary moves on to the next
    candidate; any other launch error stops the search.

    Args:
        file_path: File to open
        candidates: Openers to try (default: get_opener_candidates())

    Returns:
        The command that was launched

    Raises:
        FileActionError: If the file is gone, no opener exists, or the
            chosen opener fails to launch
    """
    if not Path(file_path).exists():
        raise FileActionError(f"File does not exist: {file_path}")

    if candidates is None:
        candidates = get_opener_candidates(file_path)

    for candidate in candidates:
        try:
            subprocess.Popen(
                candidate.argv(),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except FileNotFoundError:
            logger.debug(f"Opener not found, trying next: {candidate.program}")
            continue
        except OSError as e:
            raise FileActionError(f"Failed to run {candidate.program}: {e}") from e

        return candidate

    names = " and ".join(OPENER_PROGRAMS)
    raise FileActionError(f"Could not find a file opener (tried {names})")


def copy_to_clipboard(text: str) -> None:
    """
    Put text on the system clipboard.

    Raises:
        FileActionError: If no clipboard mechanism is available
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise FileActionError(f"Failed to copy to clipboard: {e}") from e


class FileActions:
    """
    Handlers for notification action buttons.

    Usage:
        actions = FileActions()
        actions.copy_path("/home/me/Videos/Screencasts/a.mp4")
        actions.open_file("/home/me/Videos/Screencasts/a.mp4")
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def copy_path(self, file_path: str) -> None:
        copy_to_clipboard(file_path)
        self.logger.info(f"Copied path to clipboard: {file_path}")

    def open_file(self, file_path: str) -> None:
        command = open_file(file_path)
        self.logger.info(f"Opened file with {command.program}: {file_path}")
