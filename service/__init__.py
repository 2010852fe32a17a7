"""
Service Module

The session-bus face of the recorder: the daemon that exports the
controller and the client the CLI uses to call it.

Public API:
    - RecorderDaemon / run_daemon: Run the bus service
    - RecorderInterface: Exported bus interface
    - DbusSignalEmitter: Thread-safe signal emission
    - RecorderClient: Blocking client
    - DaemonUnreachableError: Client-side failure
"""

from service.client import DaemonUnreachableError, RecorderClient
from service.dbus_service import DbusSignalEmitter, RecorderDaemon, RecorderInterface, run_daemon

__all__ = [
    "DaemonUnreachableError",
    "DbusSignalEmitter",
    "RecorderClient",
    "RecorderDaemon",
    "RecorderInterface",
    "run_daemon",
]
