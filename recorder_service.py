"""
Recorder Service

Command-line entry point for niri-screen-recorder.

    niri-screen-recorder daemon      # Run the bus service (blocks)
    niri-screen-recorder start       # Select a region and start recording
    niri-screen-recorder stop        # Stop the current recording
    niri-screen-recorder toggle      # Start or stop
    niri-screen-recorder status      # Show recording status

The daemon owns all state. Every other subcommand is a thin client that
calls the daemon over the session bus and exits 1 if it can't reach it.
"""

import argparse
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List, Optional

from config.settings import (
    APP_NAME,
    LOG_BACKUP_COUNT,
    LOG_FALLBACK_FILE,
    LOG_FORMAT,
    get_log_file,
    get_log_level,
)
from service.client import DaemonUnreachableError, RecorderClient
from service.dbus_service import run_daemon

COMMANDS = ["daemon", "start", "stop", "toggle", "status"]

UNREACHABLE_MESSAGE = f"Error: Could not connect to daemon. Is it running? ({APP_NAME} daemon)"


def _file_handler(log_file: Path, formatter: logging.Formatter) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.TimedRotatingFileHandler(
        str(log_file),
        when="midnight",
        interval=1,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    return handler


def setup_logging(level: Optional[str] = None, log_file: Optional[Path] = None) -> None:
    """
    Setup logging.

    Logs to the console, and to a daily rotated file (7 days kept) when
    a log file is configured.
    """
    level_name = level or get_log_level()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logger = logging.getLogger()
    logger.setLevel(log_level)

    formatter = logging.Formatter(LOG_FORMAT)

    # Console handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_file = log_file or get_log_file()
    if log_file is None:
        return

    try:
        logger.addHandler(_file_handler(log_file, formatter))
    except OSError:
        # Fallback to the cache directory if the configured path isn't writable
        logger.warning(f"Cannot write to {log_file}, using fallback: {LOG_FALLBACK_FILE}")
        logger.addHandler(_file_handler(LOG_FALLBACK_FILE, formatter))


def run_client_command(command: str, client: Optional[RecorderClient] = None) -> int:
    """
    Run one client subcommand against the daemon.

    Args:
        command: start, stop, toggle or status
        client: Client to use (default: new RecorderClient)

    Returns:
        Process exit code (1 only if the daemon was unreachable)
    """
    client = client or RecorderClient()

    try:
        if command == "start":
            if client.start_recording():
                print("Recording started")
            else:
                print(
                    "Failed to start recording (already recording or region selection failed)",
                    file=sys.stderr,
                )

        elif command == "stop":
            if client.stop_recording():
                print("Recording stopped")
            else:
                print("No recording in progress", file=sys.stderr)

        elif command == "toggle":
            client.toggle_recording()

        elif command == "status":
            recording, file_path = client.get_status()
            if recording:
                print("Recording: yes")
                print(f"File: {file_path}")
            else:
                print("Recording: no")

        else:
            raise ValueError(f"Unknown command: {command}")

    except DaemonUnreachableError as e:
        print(UNREACHABLE_MESSAGE, file=sys.stderr)
        print(f"Details: {e}", file=sys.stderr)
        return 1

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Screen recorder daemon for niri",
        epilog="""
Examples:
  %(prog)s daemon     # Run the daemon (e.g. from niri's spawn-at-startup)
  %(prog)s toggle     # Bind this to a key
  %(prog)s status     # Show whether a recording is running
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "command",
        choices=COMMANDS,
        help="Run the daemon or send it a command",
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Daemon only: use mock capture, selector and notifications",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point.

    Sets up logging and runs the daemon or a client command.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.mock and args.command != "daemon":
        parser.error("--mock only applies to the daemon command")

    setup_logging()
    logger = logging.getLogger(__name__)

    if args.command != "daemon":
        sys.exit(run_client_command(args.command))

    logger.info("=" * 60)
    logger.info("Niri Screen Recorder Daemon Starting")
    logger.info("=" * 60)

    try:
        exit_code = run_daemon(mode="mock" if args.mock else "real")
    except Exception as e:
        logger.critical(f"Fatal error in main: {e}", exc_info=True)
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
